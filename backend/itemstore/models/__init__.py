"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all or autogenerate
"""

from itemstore.models.item import ItemRow  # noqa: F401
