"""Reply repository using base repository pattern."""
from typing import List

from api.features.conversation.entities import Reply
from api.shared.base import BaseRepository


class ReplyRepository(BaseRepository[Reply]):
    """Repository for reply entities."""

    model = Reply

    async def list_for_question(self, question_id: int) -> List[Reply]:
        """Replies of a question in insertion order."""
        return await self.get_by_field("question_id", question_id)
