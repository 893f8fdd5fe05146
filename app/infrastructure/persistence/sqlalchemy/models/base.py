"""Base SQLAlchemy models module.

This module defines the declarative base class (Base) used for all ORM
models in this application, plus the common columns every table carries.
"""

import uuid
from datetime import datetime

from sqlalchemy import MetaData, String
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.domain.utils.datetime_utils import now_utc
from app.infrastructure.persistence.sqlalchemy.types import GUID, UTCDateTime

# Deterministic constraint names keep migrations diffable across backends
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy 2.0 declarative base with async support."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UserOwnedMixin:
    """Columns shared by every user-scoped record: id, owner and creation time."""

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=now_utc, index=True)


__all__ = [
    "Base",
    "UserOwnedMixin",
]
