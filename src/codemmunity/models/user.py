# src/codemmunity/models/user.py
"""SQLAlchemy model for the user directory."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from codemmunity.db.session import Base


class User(Base):
    """Display name registered for an external identity.

    ``user_id`` is issued by whatever identity provider the client uses and is
    never changed here; only ``user_name`` is mutable.
    """

    __tablename__ = "user"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
