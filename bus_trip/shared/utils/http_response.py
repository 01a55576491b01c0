import json

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import ValidationError

from bus_trip.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidInputException,
    OptimisticLockException,
    ResourceNotFoundException,
)

_STATUS_CODES: tuple[tuple[type[DomainException], int], ...] = (
    (InvalidInputException, 400),
    (ResourceNotFoundException, 404),
    (DuplicateResourceException, 409),
    (OptimisticLockException, 409),
    (BusinessRuleViolationException, 422),
)


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(error: Exception, extra: dict | None = None) -> dict:
    """ドメイン例外 / バリデーションエラーを HTTP レスポンスに変換する

    それ以外の例外は呼び出し側でログを出して 500 を返すこと。
    """
    if isinstance(error, ValidationError):
        return api_response(
            400,
            {
                "message": "Invalid request",
                "details": error.errors(include_url=False, include_context=False),
            },
        )

    for exception_type, status_code in _STATUS_CODES:
        if isinstance(error, exception_type):
            return api_response(status_code, {"message": str(error), **(extra or {})})

    return api_response(500, {"message": "Internal server error"})


def internal_error_response() -> dict:
    return api_response(500, {"message": "Internal server error"})


def parse_json_body(event: APIGatewayProxyEventV2) -> dict:
    """リクエストボディを JSON オブジェクトとして取り出す（空なら {}）

    Raises:
        InvalidInputException: JSON として解釈できない、またはオブジェクトでない場合
    """
    if not event.body:
        return {}
    try:
        body = event.json_body
    except ValueError as e:
        raise InvalidInputException("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise InvalidInputException("Request body must be a JSON object")
    return body
