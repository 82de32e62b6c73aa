"""Question entity: top-level forum post."""
from typing import List, TYPE_CHECKING

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.shared.entities.base import BaseEntity

if TYPE_CHECKING:
    from api.features.conversation.entities.reply import Reply


class Question(BaseEntity):
    """Question with its replies in insertion order."""

    content: Mapped[str] = mapped_column(Text, nullable=False)

    replies: Mapped[List["Reply"]] = relationship(
        back_populates="question",
        order_by="Reply.id",
        lazy="selectin",
    )
