"""
User model, used only for authentication.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reservation_shared.config.constants import FieldLengths

from .base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    API user. Not part of the restaurant domain graph.
    """

    # "user" is a reserved SQL keyword in PostgreSQL
    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(
        String(FieldLengths.USERNAME), nullable=False, unique=True, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(FieldLengths.PASSWORD_HASH), nullable=False)
