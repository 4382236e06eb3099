"""
province_registry.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, query construction and repositories.
"""

# Package marker.
