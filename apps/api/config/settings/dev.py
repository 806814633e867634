# apps/api/config/settings/dev.py
from .base import *  # noqa: F401,F403
import os

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬 DB 가 없으면 SQLite 로
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

# 로컬은 브라우저로 API 를 직접 눌러본다
REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
]

# broker 없이도 답 저장이 되도록 (통계 갱신은 요청 안에서 실행)
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER", True)

LOGGING["root"]["level"] = "DEBUG"
