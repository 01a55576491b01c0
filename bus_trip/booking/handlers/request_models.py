from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field, field_validator

from bus_trip.shared.utils import to_decimal


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    date: str = Field(
        ...,
        min_length=1,
        description="運行日（ISO 8601形式、時刻は無視して日単位で扱う）",
        examples=["2025-03-01", "2025-03-01T09:00:00Z"],
    )


class UpdateSeatRequest(BaseModel):
    """座席更新リクエストスキーマ

    送られた項目だけを更新する。null は値のクリアを意味する
    （price と commission_percent はクリアできない）。
    employee_id と agent_name は手数料の帰属先として扱う。
    """

    price: Decimal | None = Field(default=None, ge=0, description="座席価格")
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_email: EmailStr | None = None
    commission_percent: Decimal | None = Field(
        default=None, ge=0, le=100, description="手数料率（%）"
    )
    employee_id: int | None = Field(default=None, gt=0)
    agent_name: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Alice",
                    "customer_email": "alice@example.com",
                    "employee_id": 1,
                }
            ]
        }
    }

    @field_validator("price", "commission_percent", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    @field_validator("price", "commission_percent")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("This field cannot be null")
        return v
