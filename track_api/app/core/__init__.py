"""Configuration, logging, database and error handling helpers."""
