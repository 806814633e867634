# apps/api/config/settings/worker.py
#
# celery -A apps.api worker -Q default
#   DJANGO_SETTINGS_MODULE=apps.api.config.settings.worker
#
# 워커가 하는 일은 답안지 진행 통계 캐시 갱신(answer_sheets.refresh_sheet_stats) 하나.

from .base import *  # noqa: F401,F403
import os

# 워커는 URLConf 불필요
ROOT_URLCONF = None

# 워커는 broker 가 반드시 주입돼야 한다 (localhost 기본값 금지)
CELERY_BROKER_URL = os.environ["CELERY_BROKER_URL"]

# 통계 갱신 결과는 아무도 읽지 않는다
CELERY_TASK_IGNORE_RESULT = True
