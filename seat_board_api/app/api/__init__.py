"""
API package containing the HTTP routes.

``router`` bundles the seat endpoints served under ``/api``.  The
liveness probe lives in ``endpoints.health`` and is mounted at the
application root.
"""
