"""Currency bounded context: converter via .bind()."""
from gilded_rose.ddd import DomainModule

from .domain import ICurrencyConverter
from .infrastructure import IdentityCurrencyConverter


currency_module = (
    DomainModule("currency")
    .bind(ICurrencyConverter, IdentityCurrencyConverter)
)
