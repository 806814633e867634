from .category import AnswerKeyCategorySerializer
from .response import (
    AnswerKeyResponseSerializer,
    AnswerKeyResponseInputSerializer,
    AnswerKeyResponsesUpsertSerializer,
)
from .template import (
    AnswerKeyTemplateSerializer,
    AnswerKeyTemplateDetailSerializer,
    AnswerKeyTemplateWriteSerializer,
)

__all__ = [
    "AnswerKeyCategorySerializer",
    "AnswerKeyResponseSerializer",
    "AnswerKeyResponseInputSerializer",
    "AnswerKeyResponsesUpsertSerializer",
    "AnswerKeyTemplateSerializer",
    "AnswerKeyTemplateDetailSerializer",
    "AnswerKeyTemplateWriteSerializer",
]
