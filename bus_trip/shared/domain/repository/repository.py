from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """予約・従業員レポジトリ共通の読み取りインターフェース

    返す集約はスナップショットであり、呼び出し側で変更しても保存済みの状態は変わらない。
    書き込み操作は集約ごとに異なるため各レポジトリで定義する。
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する（存在しなければ None）"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[T]:
        """保存済みの全ての集約を返す"""
        raise NotImplementedError
