# PATH: apps/api/common/errors.py
"""
채점 도메인 공통 오류 (순수 파이썬, Django import 금지)

서비스 계층은 이 예외만 던진다.
HTTP 변환은 apps.api.common.exception_handler 가 담당한다.

code:
  - validation_error
  - out_of_range
  - forbidden
  - not_found
  - already_submitted
  - store_error
"""
from __future__ import annotations


class DomainError(Exception):
    code = "error"
    http_status = 400

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        http_status: int | None = None,
    ):
        super().__init__(message)
        self.message = str(message)
        if code is not None:
            self.code = str(code)
        if http_status is not None:
            self.http_status = int(http_status)

    def to_dict(self) -> dict:
        return {"detail": self.message, "code": self.code}


class ValidationError(DomainError):
    """잘못된 입력. 어떤 write 보다도 먼저 거절된다."""

    code = "validation_error"
    http_status = 400


class OutOfRange(ValidationError):
    """문항 번호가 현재 question config 범위 밖."""

    code = "out_of_range"


class Forbidden(DomainError):
    """관리자 권한이 필요한 answer key 변경."""

    code = "forbidden"
    http_status = 403


class NotFound(DomainError):
    code = "not_found"
    http_status = 404


class AlreadySubmitted(DomainError):
    """draft 가 아닌 답안지에 대한 제출/수정."""

    code = "already_submitted"
    http_status = 409


class StoreError(DomainError):
    """DB 실패. 원본 메시지를 그대로 담는다."""

    code = "store_error"
    http_status = 503
