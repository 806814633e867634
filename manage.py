#!/usr/bin/env python
"""
grading backend 관리 명령

  python manage.py migrate
  python manage.py runserver
  python manage.py createsuperuser   # answer key 작성 관리자

기본 settings 는 dev (DB_NAME 없으면 SQLite).
"""
import os
import sys


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.dev")

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
