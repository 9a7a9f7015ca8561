"""Infrastructure layer — SQLite persistence for goals and logs.

This layer depends on stdlib and SQLAlchemy.
It must never import from services, commands, or output.
The service layer bridges between domain math and stored rows.
"""
