"""DTOs for the Conversation feature."""
from typing import List

from pydantic import Field

from api.features.conversation.models import QuestionModel, ReplyModel
from api.shared.dtos import BaseDTO


class MessageDTO(BaseDTO):
    """Content submitted to create a question or a reply."""

    content: str = Field(description="Message content")


class ReplyShortDTO(BaseDTO):
    """Reply short view."""

    id: int = Field(description="Reply identifier")
    content: str = Field(description="Reply content")

    @classmethod
    def from_model(cls, model: ReplyModel) -> "ReplyShortDTO":
        return cls(id=model.id, content=model.content)


class QuestionShortDTO(BaseDTO):
    """Question short view, without replies."""

    id: int = Field(description="Question identifier")
    content: str = Field(description="Question content")

    @classmethod
    def from_model(cls, model: QuestionModel) -> "QuestionShortDTO":
        return cls(id=model.id, content=model.content)


class QuestionDTO(BaseDTO):
    """Full question with its replies."""

    id: int = Field(description="Question identifier")
    content: str = Field(description="Question content")
    replies: List[ReplyShortDTO] = Field(
        default_factory=list, description="Replies in creation order"
    )

    @classmethod
    def from_model(cls, model: QuestionModel) -> "QuestionDTO":
        return cls(
            id=model.id,
            content=model.content,
            replies=[ReplyShortDTO.from_model(reply) for reply in model.replies],
        )
