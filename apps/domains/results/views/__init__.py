from .grading_views import (
    GradeSheetView,
    GradeHistoryView,
    MyTestResultsView,
)

__all__ = [
    "GradeSheetView",
    "GradeHistoryView",
    "MyTestResultsView",
]
