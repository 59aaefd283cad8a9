"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API and Domain layers.
    Talks to the task tracker, renderer and file system only through ports.

Contains:
    - ports: protocols implemented by Infrastructure Layer
    - services: use cases (apply, cohort, payment method, guarantee)
    - models: shared application models

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""
