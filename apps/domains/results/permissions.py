# PATH: apps/domains/results/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission

from apps.core.authorization import is_admin


class IsGradingAdmin(BasePermission):
    """
    수동 채점 / 전체 이력은 관리자만.
    판단은 core.authorization.is_admin 단일 진실.
    """
    message = "Forbidden: admin role required to grade answer sheets"

    def has_permission(self, request, view):
        return is_admin(getattr(request, "user", None))
