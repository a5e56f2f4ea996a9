"""
Pydantic schema definitions for API payloads.

Schemas are shared by all layers: the routers validate request bodies
against them, the service builds ``Track`` records from them and the
repositories persist and return ``Track`` instances.
"""
