# apps/api/config/asgi.py
import os

from django.core.asgi import get_asgi_application

# 배포 기본값. 로컬은 DJANGO_SETTINGS_MODULE=apps.api.config.settings.dev
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.prod")

application = get_asgi_application()
