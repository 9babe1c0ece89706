"""Generic context: currency conversion."""
from gilded_rose.currency.domain import ICurrencyConverter
from gilded_rose.currency.infrastructure import IdentityCurrencyConverter

__all__ = ["ICurrencyConverter", "IdentityCurrencyConverter"]
