from types import SimpleNamespace

import pytest

from apps.api.common.errors import Forbidden
from apps.core.authorization import is_admin, require_admin


def _principal(**kw):
    base = {"is_authenticated": True, "is_superuser": False, "role": "learner"}
    base.update(kw)
    return SimpleNamespace(**base)


def test_is_admin_by_role():
    assert is_admin(_principal(role="admin"))
    assert is_admin(_principal(role="ADMIN"))
    assert not is_admin(_principal())


def test_superuser_is_admin():
    assert is_admin(_principal(is_superuser=True))


def test_anonymous_is_never_admin():
    assert not is_admin(None)
    assert not is_admin(_principal(is_authenticated=False, role="admin"))


def test_require_admin_raises_forbidden():
    with pytest.raises(Forbidden) as exc:
        require_admin(_principal(), "create answer keys")

    assert exc.value.code == "forbidden"
    assert exc.value.http_status == 403
    assert "create answer keys" in exc.value.message

    require_admin(_principal(role="admin"), "create answer keys")


@pytest.mark.django_db
def test_me_endpoint(learner_client, admin_client):
    res = learner_client.get("/api/v1/core/me/")
    assert res.status_code == 200
    assert res.data["role"] == "learner"
    assert res.data["is_admin"] is False

    assert admin_client.get("/api/v1/core/me/").data["is_admin"] is True
