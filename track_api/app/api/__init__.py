"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``dependencies`` exposes the
FastAPI dependencies that hand services to the endpoints.
"""
