"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from record_service.infrastructure.database.base import Base


class UserModel(Base):
    """ORM mapping of the 'users' table."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
