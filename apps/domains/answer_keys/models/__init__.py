# apps/domains/answer_keys/models/__init__.py
from .choices import (
    Subject,
    ExamKind,
    QuestionType,
    Difficulty,
    matching_key_kinds,
    performance_kind,
)
from .category import AnswerKeyCategory
from .template import AnswerKeyTemplate
from .response import AnswerKeyResponse

__all__ = [
    "Subject",
    "ExamKind",
    "QuestionType",
    "Difficulty",
    "matching_key_kinds",
    "performance_kind",
    "AnswerKeyCategory",
    "AnswerKeyTemplate",
    "AnswerKeyResponse",
]
