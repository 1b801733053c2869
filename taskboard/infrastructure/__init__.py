"""
Infrastructure layer for the task board.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy async engine, SQLite or PostgreSQL)
- Authentication (bcrypt password hashing, JWT bearer tokens)
- Web (FastAPI routers and middleware)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
