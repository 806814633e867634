from django.apps import AppConfig


class AnswerKeysConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.answer_keys"

    # migration / FK 참조용 앱 라벨 (변경 금지)
    label = "answer_keys"
