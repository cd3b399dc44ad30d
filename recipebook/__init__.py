"""Ice cream recipe book: FastAPI + htmx CRUD app backed by SQLite."""
