"""
Application package initializer.

The service is split into the usual layers: ``api`` holds the HTTP
routers, ``services`` the business rules, ``repositories`` the
persistence backends and ``schemas`` the Pydantic models exchanged
between them.  ``core`` contains configuration, logging, database
helpers and error handling shared by all layers.
"""
