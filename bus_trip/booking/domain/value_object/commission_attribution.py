from dataclasses import dataclass

from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain import CommissionPercent


@dataclass(frozen=True)
class EmployeeAttribution:
    """従業員を選択して手数料を帰属させる

    書き込み時に従業員の名前と手数料率を座席にコピーする。
    """

    employee_id: EmployeeId


@dataclass(frozen=True)
class ManualAttribution:
    """販売担当者名を手入力する（従業員の紐付けは解除される）

    agent_name が None の場合は帰属先をクリアする。
    """

    agent_name: str | None
    commission_percent: CommissionPercent | None = None


CommissionAttribution = EmployeeAttribution | ManualAttribution
