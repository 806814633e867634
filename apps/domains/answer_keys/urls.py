from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    AnswerKeyTemplateViewSet,
    AnswerKeyCategoryViewSet,
)

router = DefaultRouter()

# =========================
# Answer Key Store
# =========================
router.register(r"templates", AnswerKeyTemplateViewSet, basename="answer-key-templates")
router.register(r"categories", AnswerKeyCategoryViewSet, basename="answer-key-categories")

urlpatterns = [
    path("", include(router.urls)),
]
