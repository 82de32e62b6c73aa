"""Question repository using base repository pattern."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from api.features.conversation.entities import Question
from api.shared.base import BaseRepository


class QuestionRepository(BaseRepository[Question]):
    """Repository for question entities."""

    model = Question

    async def list_all(self) -> List[Question]:
        """All questions in insertion order, replies loaded."""
        stmt = (
            select(Question)
            .options(selectinload(Question.replies))
            .execution_options(populate_existing=True)
            .order_by(Question.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_with_replies(self, question_id: int) -> Optional[Question]:
        stmt = (
            select(Question)
            .options(selectinload(Question.replies))
            .execution_options(populate_existing=True)
            .where(Question.id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
