"""Reply entity: response attached to exactly one question."""
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.shared.entities.base import BaseEntity, IdType

if TYPE_CHECKING:
    from api.features.conversation.entities.question import Question


class Reply(BaseEntity):
    """Reply bound to its parent question at creation time."""

    content: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("question.id"), nullable=False, index=True
    )

    question: Mapped["Question"] = relationship(back_populates="replies", lazy="raise")
