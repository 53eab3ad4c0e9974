"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the stub. Handles requests and responses and
    delegates to Application Layer handlers. No business logic.

Contains:
    - main: create_app() factory, exception handlers, health check
    - routers: /job endpoints
    - middleware: request id, timeout, request logging
    - schemas: shared response models
    - server: uvicorn entry point
"""
