import logging

import pytest

from apps.api.common.errors import AlreadySubmitted, NotFound, ValidationError
from apps.domains.answer_sheets.models import AnswerSheet, AnswerSheetResponse
from apps.domains.answer_sheets.services import sheet_service


pytestmark = pytest.mark.django_db


# ==================================================
# counts
# ==================================================

def test_create_reconciles_counts_text_authoritative(learner, caplog):
    with caplog.at_level(logging.WARNING):
        sheet = sheet_service.create_sheet(
            learner,
            subject="mathematics",
            exam_kind="mock",
            sheet_name="inconsistent",
            total_questions=20,
            mcq_count=20,
            text_count=5,
        )

    assert (sheet.total_questions, sheet.mcq_count, sheet.text_count) == (20, 15, 5)
    assert sheet.status == AnswerSheet.Status.DRAFT
    assert "Reconciling" in caplog.text


@pytest.mark.parametrize("total,mcq,text,expected", [
    (10, 7, 3, (10, 7, 3)),
    (10, 0, 3, (10, 7, 3)),
    (10, 10, 10, (10, 0, 10)),
    (1, 5, 0, (1, 1, 0)),
])
def test_reconcile_counts(total, mcq, text, expected):
    assert sheet_service.reconcile_counts(total, mcq, text) == expected


@pytest.mark.parametrize("total,mcq,text", [(0, 0, 0), (201, 1, 0), (5, -1, 1), (5, 0, 6)])
def test_reconcile_counts_rejects_invalid(total, mcq, text):
    with pytest.raises(ValidationError):
        sheet_service.reconcile_counts(total, mcq, text)


# ==================================================
# responses
# ==================================================

def test_save_response_upserts(english_sheet):
    sheet_service.save_response(english_sheet.id, 1, "mcq", 3)
    sheet_service.save_response(english_sheet.id, 1, "mcq", 4)

    rows = AnswerSheetResponse.objects.filter(sheet=english_sheet)
    assert rows.count() == 1
    assert rows.get().mcq_option == 4


@pytest.mark.parametrize("number,qtype,value,message", [
    (1, "mcq", None, "MCQ option is required for MCQ questions"),
    (1, "mcq", 6, "MCQ option must be between 1 and 5"),
    (3, "text", "   ", "Text answer is required for text questions"),
    (3, "text", None, "Text answer is required for text questions"),
    (9, "mcq", 1, "out of range"),
])
def test_save_response_validation(english_sheet, number, qtype, value, message):
    with pytest.raises(ValidationError) as exc:
        sheet_service.save_response(english_sheet.id, number, qtype, value)

    assert message in exc.value.message
    assert not AnswerSheetResponse.objects.exists()


def test_save_response_requires_draft(english_sheet):
    AnswerSheet.objects.filter(id=english_sheet.id).update(status=AnswerSheet.Status.SUBMITTED)

    with pytest.raises(AlreadySubmitted):
        sheet_service.save_response(english_sheet.id, 1, "mcq", 1)


def test_delete_response(english_sheet):
    sheet_service.save_response(english_sheet.id, 3, "text", "blue")

    sheet_service.delete_response(english_sheet.id, 3)
    assert not AnswerSheetResponse.objects.exists()

    with pytest.raises(NotFound):
        sheet_service.delete_response(english_sheet.id, 3)


# ==================================================
# stats
# ==================================================

def test_get_stats(english_sheet):
    sheet_service.save_response(english_sheet.id, 1, "mcq", 2)
    sheet_service.save_response(english_sheet.id, 3, "text", "blue")

    stats = sheet_service.get_stats(english_sheet.id)

    assert stats["total_answered"] == 2
    assert stats["mcq_answered"] == 1
    assert stats["text_answered"] == 1
    assert stats["completion_percentage"] == 66.67


def test_refresh_sheet_stats_writes_cached_columns(english_sheet):
    sheet_service.save_response(english_sheet.id, 1, "mcq", 2)

    sheet_service.refresh_sheet_stats(english_sheet.id)

    english_sheet.refresh_from_db()
    assert english_sheet.answered_count == 1
    assert english_sheet.mcq_answered == 1
    assert english_sheet.completion_percentage == 33.33


def test_refresh_runs_after_commit(english_sheet, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        sheet_service.save_response(english_sheet.id, 2, "mcq", 4)

    assert len(callbacks) == 1
    english_sheet.refresh_from_db()
    assert english_sheet.answered_count == 1


def test_refresh_for_deleted_sheet_is_noop():
    assert sheet_service.refresh_sheet_stats(123456) is None


# ==================================================
# update / delete
# ==================================================

def test_update_merges_partial_counts(english_sheet):
    sheet = sheet_service.update_sheet(english_sheet.id, {"total_questions": 10})

    assert (sheet.total_questions, sheet.mcq_count, sheet.text_count) == (10, 9, 1)


def test_update_shrink_drops_answers_beyond_total(english_sheet):
    sheet_service.save_response(english_sheet.id, 3, "text", "blue")

    sheet_service.update_sheet(english_sheet.id, {"total_questions": 2, "text_count": 0})

    assert not AnswerSheetResponse.objects.filter(sheet=english_sheet).exists()


def test_update_dynamic_config(english_sheet):
    sheet = sheet_service.update_sheet(english_sheet.id, {"question_config": [
        {"question_number": 1, "type": "text"},
        {"question_number": 2, "type": "text"},
    ]})
    assert (sheet.total_questions, sheet.mcq_count, sheet.text_count) == (2, 0, 2)

    sheet = sheet_service.update_sheet(english_sheet.id, {"total_questions": 3})
    assert sheet.get_question_config().to_list()[-1] == {"question_number": 3, "type": "mcq"}
    assert (sheet.mcq_count, sheet.text_count) == (1, 2)


def test_update_layout_after_submit_is_rejected(english_sheet):
    AnswerSheet.objects.filter(id=english_sheet.id).update(status=AnswerSheet.Status.SUBMITTED)

    with pytest.raises(AlreadySubmitted):
        sheet_service.update_sheet(english_sheet.id, {"total_questions": 5})

    sheet = sheet_service.update_sheet(english_sheet.id, {"sheet_name": "renamed", "grade": "A"})
    assert sheet.sheet_name == "renamed"
    assert sheet.grade == "A"


def test_update_cannot_change_status(english_sheet):
    with pytest.raises(ValidationError):
        sheet_service.update_sheet(english_sheet.id, {"status": "graded"})


def test_delete_sheet_cascades(english_sheet):
    sheet_service.save_response(english_sheet.id, 1, "mcq", 1)

    sheet_service.delete_sheet(english_sheet.id)

    assert not AnswerSheet.objects.exists()
    assert not AnswerSheetResponse.objects.exists()


def test_list_sheets_scoped_to_owner(english_sheet, other_learner, admin_user):
    sheet_service.create_sheet(
        other_learner, subject="english", sheet_name="other", total_questions=1,
    )

    assert [s.id for s in sheet_service.list_sheets(english_sheet.owner)] == [english_sheet.id]
    assert sheet_service.list_sheets(admin_user).count() == 2
