# apps/domains/answer_keys/models/choices.py
from django.db import models


class Subject(models.TextChoices):
    KOREAN = "korean", "Korean"
    MATHEMATICS = "mathematics", "Mathematics"
    ENGLISH = "english", "English"
    OTHERS = "others", "Others"


class ExamKind(models.TextChoices):
    PRACTICE = "practice", "Practice"
    MOCK = "mock", "Mock"
    MIDTERM = "midterm", "Midterm"
    FINAL = "final", "Final"


class QuestionType(models.TextChoices):
    MCQ = "mcq", "Multiple choice"
    TEXT = "text", "Free text"


class Difficulty(models.TextChoices):
    EASY = "easy", "Easy"
    MEDIUM = "medium", "Medium"
    HARD = "hard", "Hard"


def matching_key_kinds(sheet_kind: str) -> list[str]:
    """
    답안지 종류 -> 채점에 쓸 수 있는 answer key 종류.
    practice 답안지는 mock 키로도 채점한다.
    """
    kinds = [str(sheet_kind)]
    if sheet_kind == ExamKind.PRACTICE:
        kinds.append(ExamKind.MOCK.value)
    return kinds


def performance_kind(sheet_kind: str) -> str:
    """성적 이력(TestRecord)은 mock/midterm/final 만 쓴다."""
    if sheet_kind == ExamKind.PRACTICE:
        return ExamKind.MOCK.value
    return str(sheet_kind)
