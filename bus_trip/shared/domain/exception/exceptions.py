from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidInputException(DomainException):
    """入力値が不正な場合（状態を変更する前に検出される）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class BookingAlreadyExistsException(DuplicateResourceException):
    """同じ日付の予約が既に存在する場合

    既存の予約を保持し、呼び出し側がレスポンスに含められるようにする。
    """

    def __init__(self, message: str, existing: Any = None) -> None:
        super().__init__(message)
        self.existing = existing


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    pass
