from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeName:
    """従業員名（手数料の帰属先として座席にコピーされる）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value.strip()) == 0:
            raise ValueError("Employee name cannot be empty")
        if len(self.value) > 100:
            raise ValueError("Employee name is too long (max 100 characters)")

    def __str__(self) -> str:
        return self.value
