# PATH: apps/core/authorization.py
"""
Authorization collaborator

채점 도메인이 아는 권한은 하나뿐이다: "이 호출자가 관리자인가".
answer key 변경 / 수동 채점 전에 서비스가 직접 호출한다.
"""
from __future__ import annotations

from typing import Any

from apps.api.common.errors import Forbidden


def is_admin(principal: Any) -> bool:
    if principal is None or not getattr(principal, "is_authenticated", False):
        return False
    if getattr(principal, "is_superuser", False):
        return True
    role = str(getattr(principal, "role", "") or "").lower()
    return role == "admin"


def require_admin(principal: Any, action: str = "") -> None:
    if is_admin(principal):
        return
    msg = "Forbidden: admin role required"
    if action:
        msg = f"{msg} to {action}"
    raise Forbidden(msg)
