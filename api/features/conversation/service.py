"""Service layer for the Conversation feature using the repository pattern.

Driver errors never leave this module as-is: they roll the session back and
surface as ``StorageError``, so a failed write leaves no partial record.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversation.dtos import MessageDTO
from api.features.conversation.entities import Question as QuestionEntity
from api.features.conversation.entities import Reply as ReplyEntity
from api.features.conversation.models import QuestionModel, ReplyModel
from api.features.conversation.repositories.question_repository import (
    QuestionRepository,
)
from api.features.conversation.repositories.reply_repository import ReplyRepository
from api.shared.entities.base import MAX_ID, MIN_ID
from api.shared.exceptions import StorageError

logger = logging.getLogger("forum.conversation.service")


@asynccontextmanager
async def storage_errors(db_session: AsyncSession, action: str) -> AsyncIterator[None]:
    """Translate SQLAlchemy failures inside the block into ``StorageError``."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure while trying to {action}: {e}")
        await db_session.rollback()
        raise StorageError(f"Failed to {action}", {"error": str(e)}) from e


class ConversationService:
    """Service for question and reply operations."""

    async def list_questions(self, *, db_session: AsyncSession) -> List[QuestionModel]:
        """List all questions in insertion order."""
        repository = QuestionRepository(db_session)
        async with storage_errors(db_session, "list questions"):
            entities = await repository.list_all()
        return [QuestionModel.from_entity(entity) for entity in entities]

    async def find_question(
        self, question_id: int, *, db_session: AsyncSession
    ) -> Optional[QuestionModel]:
        """Get a question with its replies; ``None`` when the id is unknown."""
        if not MIN_ID <= question_id <= MAX_ID:
            # Out of column range, so no row can carry it
            return None

        repository = QuestionRepository(db_session)
        async with storage_errors(db_session, f"find question {question_id}"):
            entity = await repository.get_with_replies(question_id)
        return QuestionModel.from_entity(entity) if entity else None

    async def create_question(
        self, message: MessageDTO, *, db_session: AsyncSession
    ) -> QuestionModel:
        """Persist a new question."""
        repository = QuestionRepository(db_session)
        async with storage_errors(db_session, "create question"):
            entity = await repository.create(QuestionEntity(content=message.content))
            await db_session.commit()

        logger.info(f"Question created: {entity.id}")
        return QuestionModel.from_entity(entity, with_replies=False)

    async def create_reply_for_question(
        self,
        question: QuestionModel,
        message: MessageDTO,
        *,
        db_session: AsyncSession,
    ) -> ReplyModel:
        """Persist a new reply attached to ``question``."""
        repository = ReplyRepository(db_session)
        async with storage_errors(db_session, f"create reply for question {question.id}"):
            entity = await repository.create(
                ReplyEntity(content=message.content, question_id=question.id)
            )
            await db_session.commit()

        logger.info(f"Reply created: {entity.id} (question {question.id})")
        return ReplyModel.from_entity(entity)
