"""Pricing bounded context: price calculator via .bind(); the currency converter comes from DI."""
from gilded_rose.ddd import DomainModule

from .domain import IPriceCalculator
from .infrastructure import PriceCalculator


pricing_module = (
    DomainModule("pricing")
    .bind(IPriceCalculator, PriceCalculator)
)
