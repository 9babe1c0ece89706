"""Currency: implementations of the converter."""
import logging

logger = logging.getLogger(__name__)


class IdentityCurrencyConverter:
    """
    Stand-in for an external exchange-rate service: every amount converts 1:1
    and the currency code is not validated.
    """

    def convert(self, amount: float, currency: str) -> float:
        logger.debug("Converting %s to %s at 1:1", amount, currency)
        return amount
