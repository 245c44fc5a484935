"""SQLAlchemy plumbing shared by the database-backed adapters."""
