from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.core"

    # AUTH_USER_MODEL = "core.User" 이 이 라벨을 참조 (변경 금지)
    label = "core"
