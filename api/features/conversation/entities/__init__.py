from api.features.conversation.entities.question import Question
from api.features.conversation.entities.reply import Reply

__all__ = ["Question", "Reply"]
