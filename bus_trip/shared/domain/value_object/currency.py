from __future__ import annotations

import re
from dataclasses import dataclass

_ALPHA_CODE = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class Currency:
    """座席価格・手数料を表す通貨（ISO 4217 の英字3文字コード）

    運行会社ごとに CURRENCY で切り替えるため、コードの形式のみ検証する。
    """

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper() if isinstance(self.code, str) else ""
        if not _ALPHA_CODE.match(normalized):
            raise ValueError(f"Invalid ISO 4217 currency code: {self.code!r}")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> Currency:
        """既定の通貨（米ドル）"""
        return cls("USD")
