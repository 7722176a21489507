"""Database Layer — declarative base and parameterized order statements.

Invariants:
    - Every statement takes the AsyncSession it runs on (no module-level connections)
    - Statements never commit; transaction boundaries belong to services

Design Decisions:
    - SQLAlchemy Core constructs over the ORM tables: one statement per operation,
      affected-row counts available for existence checks
"""
