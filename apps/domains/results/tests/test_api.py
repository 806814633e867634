import pytest

from apps.domains.answer_sheets.services.submission import submit_sheet


pytestmark = pytest.mark.django_db

GRADE_URL = "/api/v1/results/grade/"
HISTORY_URL = "/api/v1/results/grade-history/"
MY_TESTS_URL = "/api/v1/results/me/tests/"


@pytest.fixture
def submitted_sheet(english_sheet):
    submit_sheet(english_sheet.id, [
        {"question_number": 1, "question_type": "mcq", "mcq_option": 2},
        {"question_number": 3, "question_type": "text", "text_answer": "Blue"},
    ])
    return english_sheet


def test_admin_grades_sheet(admin_client, submitted_sheet, english_key):
    res = admin_client.post(
        GRADE_URL,
        {"sheet_id": submitted_sheet.id, "template_id": english_key.id},
        format="json",
    )

    assert res.status_code == 200
    assert res.data["sheet"]["status"] == "graded"
    assert res.data["result"]["score"] == 2.0
    assert res.data["result"]["correct_count"] == 2


def test_learner_cannot_grade(learner_client, submitted_sheet, english_key):
    res = learner_client.post(
        GRADE_URL,
        {"sheet_id": submitted_sheet.id, "template_id": english_key.id},
        format="json",
    )
    assert res.status_code == 403


def test_grade_unknown_template(admin_client, submitted_sheet):
    res = admin_client.post(GRADE_URL, {"sheet_id": submitted_sheet.id, "template_id": 424242}, format="json")

    assert res.status_code == 404
    assert res.data["code"] == "not_found"


def test_grade_history(admin_client, learner_client, other_client, submitted_sheet, english_key):
    admin_client.post(GRADE_URL, {"sheet_id": submitted_sheet.id, "template_id": english_key.id}, format="json")

    res = learner_client.get(HISTORY_URL, {"sheet_id": submitted_sheet.id})
    assert res.status_code == 200
    assert len(res.data) == 1
    assert res.data[0]["template_name"] == english_key.template_name
    assert res.data[0]["sheet_name"] == submitted_sheet.sheet_name

    assert other_client.get(HISTORY_URL).data == []
    assert len(admin_client.get(HISTORY_URL).data) == 1


def test_grade_history_rejects_bad_limit(admin_client):
    res = admin_client.get(HISTORY_URL, {"limit": 0})
    assert res.status_code == 400


def test_my_tests(admin_client, learner_client, submitted_sheet, english_key):
    admin_client.post(GRADE_URL, {"sheet_id": submitted_sheet.id, "template_id": english_key.id}, format="json")

    res = learner_client.get(MY_TESTS_URL)

    assert res.status_code == 200
    assert len(res.data) == 1
    row = res.data[0]
    assert row["exam_kind"] == "mock"
    assert row["test_name"] == "6월 모의고사"
    assert row["raw_score"] == 2.0
