# conftest.py
import pytest
from rest_framework.test import APIClient

from apps.core.models import User


# ==================================================
# Users
# ==================================================

@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username="admin",
        password="pw-admin-1234",
        name="관리자",
        role=User.Role.ADMIN,
    )


@pytest.fixture
def learner(db):
    return User.objects.create_user(
        username="learner",
        password="pw-learner-1234",
        name="학생",
        role=User.Role.LEARNER,
    )


@pytest.fixture
def other_learner(db):
    return User.objects.create_user(
        username="other",
        password="pw-other-1234",
        role=User.Role.LEARNER,
    )


# ==================================================
# API clients
# ==================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def learner_client(learner):
    client = APIClient()
    client.force_authenticate(user=learner)
    return client


@pytest.fixture
def other_client(other_learner):
    client = APIClient()
    client.force_authenticate(user=other_learner)
    return client


# ==================================================
# Domain factories
# ==================================================

@pytest.fixture
def english_key(admin_user):
    """
    total 3 (mcq 2 + text 1)
      Q1 mcq -> 2
      Q2 mcq -> 4
      Q3 text -> ["blue", "Blue"]
    """
    from apps.domains.answer_keys.services import answer_key_service

    template = answer_key_service.create_template(admin_user, {
        "template_name": "영어 모의고사 1회",
        "subject": "english",
        "exam_kind": "mock",
        "total_questions": 3,
        "mcq_count": 2,
        "text_count": 1,
    })
    answer_key_service.upsert_responses(admin_user, template.id, [
        {"question_number": 1, "question_type": "mcq", "correct_option": 2},
        {"question_number": 2, "question_type": "mcq", "correct_option": 4},
        {"question_number": 3, "question_type": "text", "correct_text_answers": ["blue", "Blue"]},
    ])
    return template


@pytest.fixture
def english_sheet(learner):
    from apps.domains.answer_sheets.services import sheet_service

    return sheet_service.create_sheet(
        learner,
        subject="english",
        exam_kind="practice",
        sheet_name="6월 모의고사",
        total_questions=3,
        mcq_count=2,
        text_count=1,
    )
