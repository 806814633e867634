import pytest
from django.utils import timezone

from apps.api.common.errors import Forbidden, NotFound, ValidationError
from apps.domains.answer_sheets.models import AnswerSheet
from apps.domains.answer_sheets.services import sheet_service
from apps.domains.answer_sheets.services.submission import submit_sheet
from apps.domains.results.models import GradeUsageLog, TestRecord, TestResultRecord
from apps.domains.results.services import grading_service


pytestmark = pytest.mark.django_db


@pytest.fixture
def submitted_sheet(english_sheet):
    """매칭 정답지가 없을 때 제출 -> submitted 상태로 남음"""
    submit_sheet(english_sheet.id, [
        {"question_number": 1, "question_type": "mcq", "mcq_option": 2},
        {"question_number": 2, "question_type": "mcq", "mcq_option": 4},
        {"question_number": 3, "question_type": "text", "text_answer": "red"},
    ])
    english_sheet.refresh_from_db()
    return english_sheet


def test_manual_grading(admin_user, submitted_sheet, english_key):
    sheet, result = grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)

    assert sheet.status == AnswerSheet.Status.GRADED
    assert sheet.score == 2.0
    assert result.correct_count == 2
    assert result.max_score == 3.0

    log = GradeUsageLog.objects.get()
    assert log.graded_by_id == admin_user.id
    assert (log.score, log.max_score, log.correct_count) == (2.0, 3.0, 2)


def test_regrading_is_deterministic_and_idempotent(admin_user, submitted_sheet, english_key):
    _, first = grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)
    _, second = grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)

    assert first == second
    assert TestRecord.objects.count() == 1
    assert TestResultRecord.objects.count() == 1
    assert GradeUsageLog.objects.count() == 2


def test_practice_sheet_recorded_as_mock(admin_user, submitted_sheet, english_key):
    grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)

    record = TestRecord.objects.get()
    assert record.exam_kind == "mock"
    assert record.subject == "english"
    assert record.test_date == timezone.localdate(submitted_sheet.submitted_at)


def test_learner_cannot_grade(learner, submitted_sheet, english_key):
    with pytest.raises(Forbidden):
        grading_service.grade_sheet(learner, submitted_sheet.id, english_key.id)

    assert not GradeUsageLog.objects.exists()


def test_missing_sheet_or_template(admin_user, submitted_sheet, english_key):
    with pytest.raises(NotFound):
        grading_service.grade_sheet(admin_user, 999999, english_key.id)
    with pytest.raises(NotFound):
        grading_service.grade_sheet(admin_user, submitted_sheet.id, 999999)


def test_draft_sheet_cannot_be_graded(admin_user, english_sheet, english_key):
    with pytest.raises(ValidationError):
        grading_service.grade_sheet(admin_user, english_sheet.id, english_key.id)

    english_sheet.refresh_from_db()
    assert english_sheet.is_draft


def test_history_scoping_and_paging(admin_user, learner, other_learner, submitted_sheet, english_key):
    other_sheet = sheet_service.create_sheet(
        other_learner,
        subject="english",
        sheet_name="다른 학생",
        total_questions=3,
        mcq_count=2,
        text_count=1,
    )
    submit_sheet(other_sheet.id, [])

    for _ in range(3):
        grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)

    assert GradeUsageLog.objects.count() == 4

    everything = grading_service.get_grade_history(admin_user)
    assert len(everything) == 4
    assert [log.id for log in everything] == sorted((log.id for log in everything), reverse=True)

    mine = grading_service.get_grade_history(learner)
    assert len(mine) == 3
    assert {log.sheet_id for log in mine} == {submitted_sheet.id}

    assert grading_service.get_grade_history(other_learner, sheet_id=submitted_sheet.id) == []

    page = grading_service.get_grade_history(admin_user, limit=2, offset=1)
    assert [log.id for log in page] == [log.id for log in everything[1:3]]

    by_template = grading_service.get_grade_history(admin_user, template_id=english_key.id)
    assert len(by_template) == 4


def test_list_my_test_results(admin_user, learner, submitted_sheet, english_key):
    assert grading_service.list_my_test_results(learner) == []

    grading_service.grade_sheet(admin_user, submitted_sheet.id, english_key.id)

    rows = grading_service.list_my_test_results(learner)
    assert len(rows) == 1
    assert rows[0].raw_score == 2.0
    assert rows[0].test.test_name == "6월 모의고사"
