# PATH: apps/domains/answer_sheets/apps.py
# 역할: 답안지 도메인 앱 설정(AppConfig)

from django.apps import AppConfig


class AnswerSheetsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.answer_sheets"
    label = "answer_sheets"
