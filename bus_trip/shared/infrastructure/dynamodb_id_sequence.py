import os

import boto3

from bus_trip.shared.domain import IdSequence


class DynamoDBIdSequence(IdSequence):
    """DynamoDB のアトミックカウンタによる採番

    カウンタアイテム: PK=SEQUENCE#<name>, SK=SEQUENCE
    """

    def __init__(self, name: str, table=None, table_name: str | None = None) -> None:
        self.name = name
        if table is None:
            table = boto3.resource("dynamodb").Table(
                table_name or os.getenv("TABLE_NAME")
            )
        self.table = table

    def next_values(self, count: int) -> list[int]:
        if count < 1:
            raise ValueError(f"count must be positive: {count}")
        response = self.table.update_item(
            Key={"PK": f"SEQUENCE#{self.name}", "SK": "SEQUENCE"},
            UpdateExpression="ADD current_value :count",
            ExpressionAttributeValues={":count": count},
            ReturnValues="UPDATED_NEW",
        )
        last = int(response["Attributes"]["current_value"])
        return list(range(last - count + 1, last + 1))
