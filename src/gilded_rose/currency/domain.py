"""Currency context: converter interface (no dependency on the rest of the package)."""
from typing import Protocol


class ICurrencyConverter(Protocol):
    def convert(self, amount: float, currency: str) -> float:
        ...
