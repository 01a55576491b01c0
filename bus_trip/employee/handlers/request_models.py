from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field, field_validator

from bus_trip.shared.utils import to_decimal


class CreateEmployeeRequest(BaseModel):
    """従業員登録リクエストスキーマ"""

    name: str = Field(..., min_length=1, max_length=100, examples=["Alice Smith"])
    email: EmailStr | None = None
    phone: str | None = None
    role: str | None = Field(default=None, min_length=1, examples=["agent"])
    commission_percent: Decimal | None = Field(
        default=None, ge=0, le=100, description="手数料率（%）", examples=[10]
    )
    active: bool | None = None

    @field_validator("commission_percent", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)


class UpdateEmployeeRequest(BaseModel):
    """従業員更新リクエストスキーマ（送られた項目だけ更新する）"""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = None
    role: str | None = Field(default=None, min_length=1)
    commission_percent: Decimal | None = Field(default=None, ge=0, le=100)
    active: bool | None = None

    @field_validator("commission_percent", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    @field_validator("name", "role", "commission_percent", "active")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("This field cannot be null")
        return v
