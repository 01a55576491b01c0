from dataclasses import dataclass

from pydantic import EmailStr, TypeAdapter, ValidationError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス（顧客・従業員の連絡先）

    API の EmailStr と同じ email-validator の規則で検証する。
    ドメイン部は正規化（小文字化）した値を保持する。
    例: alice@example.com
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid email address: {self.value!r}")
        try:
            normalized = _EMAIL_ADAPTER.validate_python(self.value.strip())
        except ValidationError as e:
            raise ValueError(f"Invalid email address: {self.value}") from e
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
