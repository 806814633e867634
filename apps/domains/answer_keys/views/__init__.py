from .template_views import AnswerKeyTemplateViewSet
from .category_views import AnswerKeyCategoryViewSet

__all__ = [
    "AnswerKeyTemplateViewSet",
    "AnswerKeyCategoryViewSet",
]
