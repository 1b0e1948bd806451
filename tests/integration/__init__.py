"""Integration tests for forked.

These tests run the SQL document store against a real database.
By default a throwaway SQLite file is used; set TEST_DATABASE_URL to
an async URL (e.g. postgresql+asyncpg://...) to target PostgreSQL.

Run with: pytest tests/integration/ -v
Skip with: pytest -m "not integration"
"""
