"""Models for the Conversation feature."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from api.features.conversation.entities import Question as QuestionEntity
from api.features.conversation.entities import Reply as ReplyEntity


class ReplyModel(BaseModel):
    """Domain model for Reply."""

    id: int = Field(description="Reply identifier")
    question_id: int = Field(description="Parent question identifier")
    content: str = Field(description="Reply content")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")

    class Config:
        from_attributes = True

    @classmethod
    def from_entity(cls, entity: ReplyEntity) -> "ReplyModel":
        """Create model from database entity."""
        return cls(
            id=entity.id,
            question_id=entity.question_id,
            content=entity.content,
            created_at=entity.created_at,
        )


class QuestionModel(BaseModel):
    """Domain model for Question."""

    id: int = Field(description="Question identifier")
    content: str = Field(description="Question content")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    replies: List[ReplyModel] = Field(
        default_factory=list, description="Replies in creation order"
    )

    class Config:
        from_attributes = True

    @classmethod
    def from_entity(
        cls, entity: QuestionEntity, *, with_replies: bool = True
    ) -> "QuestionModel":
        """Create model from database entity.

        ``with_replies=False`` skips the relationship, which is not loaded on
        a freshly inserted question.
        """
        replies = (
            [ReplyModel.from_entity(reply) for reply in entity.replies]
            if with_replies
            else []
        )
        return cls(
            id=entity.id,
            content=entity.content,
            created_at=entity.created_at,
            replies=replies,
        )
