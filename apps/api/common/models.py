# PATH: apps/api/common/models.py
from django.db import models
from django.utils import timezone


class TimestampQuerySet(models.QuerySet):
    def touch(self, *, now=None, **fields) -> int:
        """
        QuerySet.update + updated_at 갱신.

        update() 는 auto_now 를 거치지 않는다.
        조건부 전이(draft -> submitted 등)는 반드시 이걸로 쓴다.
        반환값은 영향받은 row 수 (0 이면 조건 불일치).
        """
        fields.setdefault("updated_at", now or timezone.now())
        return self.update(**fields)


class TimestampModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TimestampQuerySet.as_manager()

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    answer key / answer sheet / 성적 이력 공통 베이스
    """
    class Meta:
        abstract = True
