from .grading import (
    GradeSheetSerializer,
    GradeHistoryQuerySerializer,
    GradeUsageLogSerializer,
    TestResultRecordSerializer,
)

__all__ = [
    "GradeSheetSerializer",
    "GradeHistoryQuerySerializer",
    "GradeUsageLogSerializer",
    "TestResultRecordSerializer",
]
