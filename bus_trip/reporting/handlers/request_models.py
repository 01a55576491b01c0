from pydantic import BaseModel, Field


class MonthlyProfitQuery(BaseModel):
    """月次利益レポートのクエリパラメータ

    month の範囲（1〜12）はサービス側で検証する。
    """

    year: int = Field(..., ge=1, le=9999, examples=[2025])
    month: int = Field(..., examples=[3])
