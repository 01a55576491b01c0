import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from bus_trip.booking.domain.entity import Booking, Seat, SeatChanges
from bus_trip.booking.domain.factory import SeatInventoryFactory
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain import (
    CommissionPercent,
    Currency,
    EmailAddress,
    IdSequence,
    IsoDateTime,
    Money,
    TripDate,
)
from bus_trip.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from bus_trip.shared.infrastructure import DynamoDBIdSequence
from bus_trip.shared.utils import get_logger

logger = get_logger("booking")

MAX_UPDATE_ATTEMPTS = 3


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約1件を1アイテム（座席はリスト属性）として保存する。
    PK を運行日にすることで、条件付き書き込みが「1日1予約」を保証する。
    """

    def __init__(
        self,
        factory: SeatInventoryFactory,
        table_name: str | None = None,
        table=None,
        booking_sequence: IdSequence | None = None,
        seat_sequence: IdSequence | None = None,
    ) -> None:
        super().__init__(factory)
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            table = boto3.resource("dynamodb").Table(self.table_name)
        self.table = table
        self._booking_sequence = booking_sequence or DynamoDBIdSequence(
            "booking", table=self.table
        )
        self._seat_sequence = seat_sequence or DynamoDBIdSequence(
            "seat", table=self.table
        )

    def next_booking_id(self) -> BookingId:
        return BookingId(value=self._booking_sequence.next_value())

    def next_seat_ids(self, count: int) -> list[SeatId]:
        return [SeatId(value=v) for v in self._seat_sequence.next_values(count)]

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking, version=1),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"A booking for {booking.trip_date} already exists"
                ) from e
            raise

        logger.info(
            "Booking saved",
            extra={"booking_id": booking.id.value, "trip_date": str(booking.trip_date)},
        )

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索（GSI2 で運行日を引いてから本体を強い整合性で読む）"""
        key = self._find_key_by_id(booking_id)
        if key is None:
            return None
        item = self._get_item(key)
        if item is None:
            return None
        return self._to_entity(item)

    def find_by_date(self, trip_date: TripDate) -> Booking | None:
        """運行日で検索"""
        item = self._get_item({"PK": f"DATE#{trip_date}", "SK": "BOOKING"})
        if item is None:
            return None
        return self._to_entity(item)

    def list_all(self) -> list[Booking]:
        """GSI1 から全ての予約を取得する"""
        items: list[dict] = []
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("BOOKINGS"),
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            if "LastEvaluatedKey" not in response:
                break
            kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        return [self._to_entity(item) for item in items]

    def update_seat(
        self, booking_id: BookingId, seat_id: SeatId, changes: SeatChanges
    ) -> Seat:
        """座席を部分更新する（version による楽観ロック、競合時は再読込してやり直す）"""
        key = self._find_key_by_id(booking_id)
        for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
            item = self._get_item(key) if key is not None else None
            if item is None:
                raise ResourceNotFoundException(
                    f"Booking with ID {booking_id} not found"
                )

            booking = self._to_entity(item)
            seat = booking.find_seat(seat_id)
            if seat is None:
                raise ResourceNotFoundException(
                    f"Seat with ID {seat_id} not found in booking {booking_id}"
                )

            updated = seat.merged(changes)
            booking.replace_seat(updated)

            version = int(item["version"])
            try:
                self.table.put_item(
                    Item=self._to_item(booking, version=version + 1),
                    ConditionExpression=Attr("version").eq(version),
                )
            except ClientError as e:
                if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                    raise
                logger.warning(
                    "Seat update conflicted, retrying",
                    extra={"booking_id": booking_id.value, "attempt": attempt},
                )
                continue

            logger.info(
                "Seat updated",
                extra={"booking_id": booking_id.value, "seat_id": seat_id.value},
            )
            return updated

        raise OptimisticLockException(
            f"Booking was modified concurrently: booking_id={booking_id}"
        )

    def _find_key_by_id(self, booking_id: BookingId) -> dict | None:
        """GSI2 から予約アイテムの主キーを引く（運行日は変わらないので一度だけ）"""
        response = self.table.query(
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"BOOKING#{booking_id}"),
            ProjectionExpression="PK, SK",
            Limit=1,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return {"PK": items[0]["PK"], "SK": items[0]["SK"]}

    def _get_item(self, key: dict) -> dict | None:
        response = self.table.get_item(Key=key, ConsistentRead=True)
        return response.get("Item") or None

    def _to_item(self, booking: Booking, version: int) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"DATE#{booking.trip_date}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": booking.id.value,
            "date": str(booking.date),
            "version": version,
            "seats": [self._seat_to_record(seat) for seat in booking.seats],
            "GSI1PK": "BOOKINGS",
            "GSI1SK": f"DATE#{booking.trip_date}",
            "GSI2PK": f"BOOKING#{booking.id}",
            "GSI2SK": "BOOKING",
        }

    def _seat_to_record(self, seat: Seat) -> dict:
        return {
            "seat_id": seat.id.value,
            "seat_number": seat.seat_number,
            "price_amount": str(seat.price.amount),
            "price_currency": str(seat.price.currency),
            "customer_name": seat.customer_name,
            "customer_phone": seat.customer_phone,
            "customer_email": str(seat.customer_email) if seat.customer_email else None,
            "employee_id": seat.employee_id.value if seat.employee_id else None,
            "agent_name": seat.agent_name,
            "commission_percent": str(seat.commission_percent),
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        booking_id = BookingId(value=int(item["booking_id"]))
        return Booking(
            id=booking_id,
            date=IsoDateTime.from_string(item["date"]),
            seats=[self._record_to_seat(booking_id, r) for r in item["seats"]],
        )

    def _record_to_seat(self, booking_id: BookingId, record: dict) -> Seat:
        email = record.get("customer_email")
        employee_id = record.get("employee_id")
        return Seat(
            id=SeatId(value=int(record["seat_id"])),
            booking_id=booking_id,
            seat_number=int(record["seat_number"]),
            price=Money(
                amount=Decimal(record["price_amount"]),
                currency=Currency(record["price_currency"]),
            ),
            customer_name=record.get("customer_name"),
            customer_phone=record.get("customer_phone"),
            customer_email=EmailAddress(email) if email is not None else None,
            employee_id=(
                EmployeeId(int(employee_id)) if employee_id is not None else None
            ),
            agent_name=record.get("agent_name"),
            commission_percent=CommissionPercent(Decimal(record["commission_percent"])),
        )
