"""Single config object: passed when creating the app; available via DI."""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

ENV_PREFIX = "GILDED_ROSE_"
DEFAULT_CURRENCY = "EUR"


@dataclass(frozen=True)
class Config:
    """
    Application config. Pass an instance to Application(config=...);
    it is then available via container.resolve(Config).
    """

    currency: str = DEFAULT_CURRENCY
    log_level: str = "WARNING"

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """
        Load from os.environ with prefix and defaults.
        GILDED_ROSE_CURRENCY=USD -> {"currency": "USD"}. Returns a dict for Config(**...).
        """
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value.strip()
        return result


def load_config_from_env(prefix: str = ENV_PREFIX, **defaults: Any) -> Config:
    """Build a Config from the environment; unknown prefixed variables are ignored."""
    known = {f.name for f in dataclasses.fields(Config)}
    values = Config.load_from_env(prefix, **defaults)
    return Config(**{k: v for k, v in values.items() if k in known and v})
