from .response import (
    AnswerSheetResponseSerializer,
    AnswerSaveSerializer,
    SubmitSerializer,
)
from .sheet import (
    AnswerSheetSerializer,
    AnswerSheetDetailSerializer,
    AnswerSheetCreateSerializer,
    AnswerSheetUpdateSerializer,
)

__all__ = [
    "AnswerSheetResponseSerializer",
    "AnswerSaveSerializer",
    "SubmitSerializer",
    "AnswerSheetSerializer",
    "AnswerSheetDetailSerializer",
    "AnswerSheetCreateSerializer",
    "AnswerSheetUpdateSerializer",
]
