# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Core
    # =========================
    path("core/", include("apps.core.urls")),

    # =========================
    # Grading Domain APIs
    # =========================
    path("answer-keys/", include("apps.domains.answer_keys.urls")),
    path("answer-sheets/", include("apps.domains.answer_sheets.urls")),
    path("results/", include("apps.domains.results.urls")),
]
