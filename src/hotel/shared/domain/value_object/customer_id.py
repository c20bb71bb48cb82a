from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """顧客ID"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Customer ID must be an integer")
        if self.value <= 0:
            raise ValueError("Customer ID must be positive")

    def __str__(self) -> str:
        return str(self.value)
