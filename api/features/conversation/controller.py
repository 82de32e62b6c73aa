"""Controller for the Conversation feature.

Maps service outcomes to HTTP responses:

* unknown question id -> 400 with ``RECORD_NOT_FOUND``
* storage failure while reading -> 500 without a message
* storage failure while creating -> 500 with ``FAILED_TO_CREATE_RECORD``
"""
from typing import List

import structlog
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversation.dtos import (
    MessageDTO,
    QuestionDTO,
    QuestionShortDTO,
    ReplyShortDTO,
)
from api.features.conversation.models import QuestionModel
from api.features.conversation.service import ConversationService
from api.shared.exceptions import StorageError
from api.shared.messages import FAILED_TO_CREATE_RECORD, RECORD_NOT_FOUND

logger = structlog.get_logger("forum.conversation.controller")


class ConversationController:
    """Controller handling question and reply endpoints."""

    def __init__(self, conversation_service: ConversationService):
        self.conversation_service = conversation_service

    async def list_questions(self, *, db_session: AsyncSession) -> List[QuestionShortDTO]:
        operation = "conversation.list_questions"
        try:
            questions = await self.conversation_service.list_questions(
                db_session=db_session
            )
        except StorageError as e:
            logger.error(
                "questions_list_failed",
                operation=operation,
                error=e.message,
                details=e.details,
            )
            raise HTTPException(status_code=500)

        items = [QuestionShortDTO.from_model(q) for q in questions]
        logger.info("questions_listed", operation=operation, count=len(items))
        return items

    async def get_question(
        self, question_id: int, *, db_session: AsyncSession
    ) -> QuestionDTO:
        operation = "conversation.get_question"
        question = await self._resolve_question(
            question_id, operation=operation, db_session=db_session
        )
        logger.info(
            "question_fetched",
            operation=operation,
            question_id=question_id,
            reply_count=len(question.replies),
        )
        return QuestionDTO.from_model(question)

    async def create_question(
        self, message: MessageDTO, *, db_session: AsyncSession
    ) -> QuestionShortDTO:
        operation = "conversation.create_question"
        try:
            question = await self.conversation_service.create_question(
                message, db_session=db_session
            )
        except StorageError as e:
            logger.error(
                "question_create_failed",
                operation=operation,
                content=message.content,
                error=e.message,
                details=e.details,
            )
            raise HTTPException(status_code=500, detail=FAILED_TO_CREATE_RECORD)

        logger.info(
            "question_created",
            operation=operation,
            content=message.content,
            question_id=question.id,
        )
        return QuestionShortDTO.from_model(question)

    async def create_reply_for_question(
        self, question_id: int, message: MessageDTO, *, db_session: AsyncSession
    ) -> ReplyShortDTO:
        operation = "conversation.create_reply_for_question"
        # The parent must resolve before any write is attempted
        question = await self._resolve_question(
            question_id, operation=operation, db_session=db_session
        )
        logger.info("parent_question_found", operation=operation, question_id=question_id)

        try:
            reply = await self.conversation_service.create_reply_for_question(
                question, message, db_session=db_session
            )
        except StorageError as e:
            logger.error(
                "reply_create_failed",
                operation=operation,
                question_id=question_id,
                content=message.content,
                error=e.message,
                details=e.details,
            )
            raise HTTPException(status_code=500, detail=FAILED_TO_CREATE_RECORD)

        logger.info(
            "reply_created",
            operation=operation,
            question_id=question_id,
            content=message.content,
            reply_id=reply.id,
        )
        return ReplyShortDTO.from_model(reply)

    async def _resolve_question(
        self, question_id: int, *, operation: str, db_session: AsyncSession
    ) -> QuestionModel:
        try:
            question = await self.conversation_service.find_question(
                question_id, db_session=db_session
            )
        except StorageError as e:
            logger.error(
                "question_lookup_failed",
                operation=operation,
                question_id=question_id,
                error=e.message,
                details=e.details,
            )
            raise HTTPException(status_code=500)

        if question is None:
            logger.error("question_not_found", operation=operation, question_id=question_id)
            raise HTTPException(status_code=400, detail=RECORD_NOT_FOUND)
        return question
