"""
Service layer abstraction.

Services encapsulate the business rules for a domain and talk to a
repository injected at construction time, so API handlers never touch
persistence directly and tests can swap in an in‑memory store.
"""
