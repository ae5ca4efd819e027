"""
Feature modules for the Taskdesk backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API and storage
- models.py: Pydantic models for entities and data transfer
- service.py / admin_service.py: Business logic implementation
- repository.py: Supabase-backed storage
- routes.py / admin_routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
