import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from bus_trip.employee.domain.entity import Employee, EmployeeChanges
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.shared.domain import CommissionPercent, EmailAddress, IdSequence
from bus_trip.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from bus_trip.shared.infrastructure import DynamoDBIdSequence
from bus_trip.shared.utils import get_logger

logger = get_logger("employee")

MAX_UPDATE_ATTEMPTS = 3


class DynamoDBEmployeeRepository(EmployeeRepository):
    """DynamoDBを使用したEmployeeRepository の具象実装"""

    def __init__(
        self,
        table_name: str | None = None,
        table=None,
        sequence: IdSequence | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            table = boto3.resource("dynamodb").Table(self.table_name)
        self.table = table
        self._sequence = sequence or DynamoDBIdSequence("employee", table=self.table)

    def next_id(self) -> EmployeeId:
        return EmployeeId(value=self._sequence.next_value())

    def save(self, employee: Employee) -> None:
        """従業員をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(employee, version=1),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Employee already exists: {employee.id}"
                ) from e
            raise

    def update(self, employee_id: EmployeeId, changes: EmployeeChanges) -> Employee:
        """従業員を部分更新する（version による楽観ロック、競合時は再読込してやり直す）"""
        for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
            item = self._get_item(employee_id)
            if item is None:
                raise ResourceNotFoundException(
                    f"Employee with ID {employee_id} not found"
                )

            employee = self._to_entity(item)
            employee.apply(changes)

            version = int(item["version"])
            try:
                self.table.put_item(
                    Item=self._to_item(employee, version=version + 1),
                    ConditionExpression=Attr("version").eq(version),
                )
            except ClientError as e:
                if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                    raise
                logger.warning(
                    "Employee update conflicted, retrying",
                    extra={"employee_id": employee_id.value, "attempt": attempt},
                )
                continue

            logger.info("Employee updated", extra={"employee_id": employee_id.value})
            return employee

        raise OptimisticLockException(
            f"Employee was modified concurrently: employee_id={employee_id}"
        )

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        """従業員IDで検索"""
        item = self._get_item(employee_id)
        if item is None:
            return None
        return self._to_entity(item)

    def list_all(self) -> list[Employee]:
        """GSI1 から全ての従業員を取得する"""
        items: list[dict] = []
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("EMPLOYEES"),
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            if "LastEvaluatedKey" not in response:
                break
            kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        return [self._to_entity(item) for item in items]

    def _get_item(self, employee_id: EmployeeId) -> dict | None:
        response = self.table.get_item(
            Key={"PK": f"EMPLOYEE#{employee_id}", "SK": "EMPLOYEE"},
            ConsistentRead=True,
        )
        return response.get("Item") or None

    def _to_item(self, employee: Employee, version: int) -> dict:
        return {
            "PK": f"EMPLOYEE#{employee.id}",
            "SK": "EMPLOYEE",
            "entity_type": "EMPLOYEE",
            "employee_id": employee.id.value,
            "name": str(employee.name),
            "email": str(employee.email) if employee.email else None,
            "phone": employee.phone,
            "role": employee.role,
            "commission_percent": str(employee.commission_percent),
            "active": employee.active,
            "version": version,
            "GSI1PK": "EMPLOYEES",
            "GSI1SK": f"EMPLOYEE#{employee.id.value:010d}",
        }

    def _to_entity(self, item: dict) -> Employee:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        email = item.get("email")
        return Employee(
            id=EmployeeId(value=int(item["employee_id"])),
            name=EmployeeName(value=item["name"]),
            email=EmailAddress(email) if email is not None else None,
            phone=item.get("phone"),
            role=item["role"],
            commission_percent=CommissionPercent(Decimal(item["commission_percent"])),
            active=bool(item["active"]),
        )
