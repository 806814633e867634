import pytest

from apps.domains.answer_sheets.models import AnswerSheet


pytestmark = pytest.mark.django_db

SHEETS_URL = "/api/v1/answer-sheets/sheets/"


def _create(client, **overrides):
    payload = {
        "subject": "english",
        "exam_kind": "practice",
        "sheet_name": "모의고사 풀이",
        "total_questions": 3,
        "mcq_count": 2,
        "text_count": 1,
    }
    payload.update(overrides)
    return client.post(SHEETS_URL, payload, format="json")


def test_requires_authentication(api_client):
    res = api_client.get(SHEETS_URL)
    assert res.status_code in (401, 403)


def test_create_reconciles_counts(learner_client):
    res = _create(learner_client, total_questions=20, mcq_count=20, text_count=5)

    assert res.status_code == 201
    assert res.data["mcq_count"] == 15
    assert res.data["text_count"] == 5
    assert res.data["status"] == "draft"


def test_owner_scoping(learner_client, other_client):
    sheet_id = _create(learner_client).data["id"]

    assert other_client.get(f"{SHEETS_URL}{sheet_id}/").status_code == 404
    assert other_client.get(SHEETS_URL).data["results"] == []
    assert learner_client.get(f"{SHEETS_URL}{sheet_id}/").status_code == 200


def test_save_and_delete_response(learner_client):
    sheet_id = _create(learner_client).data["id"]

    res = learner_client.put(
        f"{SHEETS_URL}{sheet_id}/responses/",
        {"question_number": 3, "question_type": "text", "text_answer": "blue"},
        format="json",
    )
    assert res.status_code == 200
    assert res.data["text_answer"] == "blue"

    res = learner_client.get(f"{SHEETS_URL}{sheet_id}/stats/")
    assert res.data["total_answered"] == 1
    assert res.data["text_answered"] == 1

    res = learner_client.delete(f"{SHEETS_URL}{sheet_id}/responses/3/")
    assert res.status_code == 204

    res = learner_client.delete(f"{SHEETS_URL}{sheet_id}/responses/3/")
    assert res.status_code == 404
    assert res.data["code"] == "not_found"


def test_save_response_validation_message(learner_client):
    sheet_id = _create(learner_client).data["id"]

    res = learner_client.put(
        f"{SHEETS_URL}{sheet_id}/responses/",
        {"question_number": 1, "question_type": "mcq"},
        format="json",
    )

    assert res.status_code == 400
    assert res.data == {
        "detail": "MCQ option is required for MCQ questions",
        "code": "validation_error",
    }


def test_submit_flow(learner_client, english_key):
    sheet_id = _create(learner_client).data["id"]

    res = learner_client.post(
        f"{SHEETS_URL}{sheet_id}/submit/",
        {"answers": [
            {"question_number": 1, "question_type": "mcq", "mcq_option": 2},
            {"question_number": 2, "question_type": "mcq", "mcq_option": 4},
            {"question_number": 3, "question_type": "text", "text_answer": " Blue "},
        ]},
        format="json",
    )

    assert res.status_code == 200
    assert res.data["outcome"] == "graded"
    assert res.data["result"]["score"] == 3.0
    assert res.data["sheet"]["status"] == "graded"

    res = learner_client.post(f"{SHEETS_URL}{sheet_id}/submit/", {"answers": []}, format="json")
    assert res.status_code == 409
    assert res.data == {
        "detail": "Answer sheet has already been submitted",
        "code": "already_submitted",
    }


def test_submit_without_key_stays_submitted(learner_client):
    sheet_id = _create(learner_client).data["id"]

    res = learner_client.post(f"{SHEETS_URL}{sheet_id}/submit/", {}, format="json")

    assert res.status_code == 200
    assert res.data["outcome"] == "submitted"
    assert AnswerSheet.objects.get(id=sheet_id).status == AnswerSheet.Status.SUBMITTED


def test_patch_and_delete(learner_client):
    sheet_id = _create(learner_client).data["id"]

    res = learner_client.patch(f"{SHEETS_URL}{sheet_id}/", {"sheet_name": "새 이름", "text_count": 2}, format="json")
    assert res.status_code == 200
    assert res.data["sheet_name"] == "새 이름"
    assert (res.data["mcq_count"], res.data["text_count"]) == (1, 2)

    assert learner_client.delete(f"{SHEETS_URL}{sheet_id}/").status_code == 204
    assert not AnswerSheet.objects.filter(id=sheet_id).exists()
