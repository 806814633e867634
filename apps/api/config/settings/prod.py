# PATH: apps/api/config/settings/prod.py
from .base import *  # noqa: F401,F403
import os

# ==================================================
# PROD
# ==================================================

DEBUG = False
SECRET_KEY = os.environ["SECRET_KEY"]

# 프록시(nginx/ALB) 뒤
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

ALLOWED_HOSTS = env_list("ALLOWED_HOSTS", "localhost,127.0.0.1")

# 학습 앱 origin 만
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = env_list("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

STATIC_ROOT = BASE_DIR / "staticfiles"

# 운영 채점은 INFO 이상만
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOGGING["root"]["level"] = LOG_LEVEL

assert "*" not in ALLOWED_HOSTS, "ALLOWED_HOSTS must not contain '*' in prod"
