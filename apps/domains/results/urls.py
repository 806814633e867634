# PATH: apps/domains/results/urls.py

from django.urls import path

from .views import (
    GradeSheetView,
    GradeHistoryView,
    MyTestResultsView,
)

urlpatterns = [
    # ======================================================
    # Admin
    # ======================================================
    path("grade/", GradeSheetView.as_view(), name="results-grade"),

    # ======================================================
    # History
    # ======================================================
    path("grade-history/", GradeHistoryView.as_view(), name="results-grade-history"),
    path("me/tests/", MyTestResultsView.as_view(), name="results-my-tests"),
]
