from .sheet import AnswerSheet
from .response import AnswerSheetResponse

__all__ = [
    "AnswerSheet",
    "AnswerSheetResponse",
]
