"""Entity registry to ensure SQLAlchemy loads all table metadata.

Import all entity modules here so schema creation and Alembic can discover them.
"""
# Import base first to expose BaseEntity.metadata
from api.shared.entities.base import BaseEntity  # noqa: F401

# Feature: Conversation
from api.features.conversation.entities.question import Question  # noqa: F401
from api.features.conversation.entities.reply import Reply  # noqa: F401
