"""Shared base entity for all database models."""
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column

# sqlite only autoincrements columns declared exactly as INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer(), "sqlite")

# Signed 64-bit range of the id columns
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class BaseEntity(DeclarativeBase):
    """Base class for all database entities."""

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """Generate table name from class name."""
        return cls.__name__.lower()

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )

    def __repr__(self) -> str:
        """String representation of the entity."""
        return f"<{self.__class__.__name__}(id={self.id})>"
