"""API module for tunebridge.

Structure:
- routers/: API endpoints (music, health)
- schemas/: Pydantic models for responses
- dependencies.py: Dependency injection (clients, services, use cases)
- exception_handlers.py: Global error handlers
"""
