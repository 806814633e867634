from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import AnswerSheetViewSet

router = DefaultRouter()

# =========================
# Answer Sheet Store
# =========================
router.register(r"sheets", AnswerSheetViewSet, basename="answer-sheets")

urlpatterns = [
    path("", include(router.urls)),
]
