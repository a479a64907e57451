"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on an
injected seat store, so API handlers stay independent of the backend.
"""
