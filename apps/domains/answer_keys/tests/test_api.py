import pytest


pytestmark = pytest.mark.django_db

TEMPLATES_URL = "/api/v1/answer-keys/templates/"
CATEGORIES_URL = "/api/v1/answer-keys/categories/"


def _payload(**overrides):
    payload = {
        "template_name": "국어 기말",
        "subject": "korean",
        "exam_kind": "final",
        "total_questions": 4,
        "mcq_count": 3,
        "text_count": 1,
    }
    payload.update(overrides)
    return payload


def test_list_is_public(api_client, english_key):
    res = api_client.get(TEMPLATES_URL)

    assert res.status_code == 200
    assert [row["id"] for row in res.data["results"]] == [english_key.id]


def test_list_filters_and_stats(api_client, english_key, admin_user):
    res = api_client.get(TEMPLATES_URL, {"subject": "korean"})
    assert res.data["results"] == []

    res = api_client.get(TEMPLATES_URL, {"search": "영어", "include_stats": "true"})
    assert res.data["results"][0]["response_count"] == 3


def test_retrieve_includes_ordered_responses(api_client, english_key):
    res = api_client.get(f"{TEMPLATES_URL}{english_key.id}/")

    assert res.status_code == 200
    assert [r["question_number"] for r in res.data["responses"]] == [1, 2, 3]
    assert res.data["responses"][2]["correct_text_answers"] == ["blue", "Blue"]


def test_retrieve_missing_template(api_client):
    res = api_client.get(f"{TEMPLATES_URL}999/")

    assert res.status_code == 404
    assert res.data["code"] == "not_found"


def test_anonymous_cannot_create(api_client):
    res = api_client.post(TEMPLATES_URL, _payload(), format="json")
    assert res.status_code in (401, 403)


def test_learner_create_is_forbidden(learner_client):
    res = learner_client.post(TEMPLATES_URL, _payload(), format="json")

    assert res.status_code == 403
    assert res.data["code"] == "forbidden"


def test_admin_full_flow(admin_client):
    res = admin_client.post(TEMPLATES_URL, _payload(), format="json")
    assert res.status_code == 201
    template_id = res.data["id"]

    res = admin_client.post(
        f"{TEMPLATES_URL}{template_id}/responses/",
        {"responses": [
            {"question_number": 1, "question_type": "mcq", "correct_option": 3},
            {"question_number": 4, "question_type": "text", "correct_text_answers": ["서울"]},
        ]},
        format="json",
    )
    assert res.status_code == 200
    assert len(res.data) == 2

    res = admin_client.patch(f"{TEMPLATES_URL}{template_id}/", {"is_active": False}, format="json")
    assert res.status_code == 200
    assert res.data["is_active"] is False

    res = admin_client.delete(f"{TEMPLATES_URL}{template_id}/responses/1/")
    assert res.status_code == 204

    res = admin_client.get(f"{TEMPLATES_URL}{template_id}/stats/")
    assert res.status_code == 200
    assert res.data["response_count"] == 1

    res = admin_client.delete(f"{TEMPLATES_URL}{template_id}/")
    assert res.status_code == 204


def test_missing_truth_field_is_rejected(admin_client, english_key):
    res = admin_client.post(
        f"{TEMPLATES_URL}{english_key.id}/responses/",
        {"responses": [{"question_number": 1, "question_type": "mcq"}]},
        format="json",
    )

    assert res.status_code == 400
    assert res.data["code"] == "validation_error"


def test_categories(admin_client, learner_client):
    res = admin_client.post(CATEGORIES_URL, {"name": "단원평가", "color": "#FF0000"}, format="json")
    assert res.status_code == 201

    res = learner_client.post(CATEGORIES_URL, {"name": "기타"}, format="json")
    assert res.status_code == 403

    res = learner_client.get(CATEGORIES_URL)
    assert [c["name"] for c in res.data] == ["단원평가"]
