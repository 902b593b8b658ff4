# app/core/exceptions.py

"""
도메인 예외 분류를 정의하는 모듈입니다.

모든 예외는 fastapi.HTTPException을 상속하므로, CRUD 계층에서 그대로 raise 하면
FastAPI가 해당 상태 코드와 detail 메시지로 응답을 만들어 줍니다.

- InvalidInputError: 형식 오류/필수값 누락 (쓰기 전에 검출) -> 400
- MissingReferenceError: 외래 키 대상이 존재하지 않음 (메소드/리비전, 고객 등) -> 400
- ConstraintViolationError: 저장소가 데이터 불변식을 거부함 (측정 유형, 날짜 순서 등) -> 400
- NotFoundError: 존재하지 않는 집합체(보고서)를 대상으로 한 요청 -> 404
- TransientError: 연결/인프라 장애. 트랜잭션은 롤백되며 자동 재시도는 하지 않습니다 -> 503
"""

from fastapi import HTTPException, status


class DomainError(HTTPException):
    """모든 도메인 예외의 기본 클래스입니다."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class InvalidInputError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class MissingReferenceError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConstraintViolationError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND


class TransientError(DomainError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class DatabaseConfigurationError(RuntimeError):
    """지원하지 않는 데이터베이스 방언으로 엔진을 만들려 할 때 발생합니다. (HTTP 응답으로 변환되지 않음)"""
