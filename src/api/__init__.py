"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application intake bridge. Handles requests and
    responses. No business logic.

Contains:
    - FastAPI routers (apply, cohort, payment method, guarantee, debug)
    - Request/Response models (Pydantic, camelCase on the wire)
    - Dependency injection setup
    - Middleware configuration (CORS, logging, request deadline)

Does NOT contain:
    - Business logic (belongs to Domain layer)
    - Orchestration (belongs to Application layer)
    - ClickUp / PDF details (belongs to Infrastructure layer)
"""
