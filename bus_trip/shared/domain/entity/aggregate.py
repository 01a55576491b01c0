from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """集約ルート（Booking, Employee）

    座席は必ず Booking を通して変更し、レポジトリも集約単位で読み書きする。
    """
