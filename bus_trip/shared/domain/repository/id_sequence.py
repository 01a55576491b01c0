from abc import ABC, abstractmethod


class IdSequence(ABC):
    """単調増加する整数IDの採番器

    採番済みの値は再利用しない（欠番は許容する）。
    """

    @abstractmethod
    def next_values(self, count: int) -> list[int]:
        """count 個の連続しない可能性のある昇順IDを採番する"""
        raise NotImplementedError

    def next_value(self) -> int:
        """IDを1つ採番する"""
        return self.next_values(1)[0]
