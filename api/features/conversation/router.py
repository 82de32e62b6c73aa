"""Router for the Conversation feature."""
from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from di.container import ApplicationContainer as DependencyContainer
from api.features.conversation.controller import ConversationController
from api.features.conversation.dtos import (
    MessageDTO,
    QuestionDTO,
    QuestionShortDTO,
    ReplyShortDTO,
)
from api.shared.db import get_db_session

router = APIRouter()


@router.get("", response_model=List[QuestionShortDTO])
@inject
async def list_questions(
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """List all questions (short view)."""
    return await controller.list_questions(db_session=db_session)


@router.get("/{question_id}", response_model=QuestionDTO)
@inject
async def get_question(
    question_id: int,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Get a question with all its replies."""
    return await controller.get_question(question_id, db_session=db_session)


@router.post("", response_model=QuestionShortDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_question(
    message: MessageDTO,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Create a question."""
    return await controller.create_question(message, db_session=db_session)


@router.post(
    "/{question_id}/reply",
    response_model=ReplyShortDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_reply_for_question(
    question_id: int,
    message: MessageDTO,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Add a reply to an existing question."""
    return await controller.create_reply_for_question(
        question_id, message, db_session=db_session
    )
