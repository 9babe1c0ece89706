"""ValueObject — value without identity; equality by fields, immutable once built."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """Value object base: subclasses are frozen dataclasses compared field by field."""
    pass
