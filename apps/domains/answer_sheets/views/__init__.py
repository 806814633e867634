from .sheet_views import AnswerSheetViewSet

__all__ = ["AnswerSheetViewSet"]
