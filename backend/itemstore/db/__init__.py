"""Database Infrastructure — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)

Design Decisions:
    - aiosqlite driver by default, asyncpg for PostgreSQL deployments
"""
