# apps/domains/results/models/__init__.py

from .test_record import TestRecord
from .test_result import TestResultRecord
from .grade_usage_log import GradeUsageLog

__all__ = [
    "TestRecord",
    "TestResultRecord",
    "GradeUsageLog",
]
