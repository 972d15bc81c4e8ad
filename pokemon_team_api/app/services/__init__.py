"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call into services and never touch shared state directly.
"""
