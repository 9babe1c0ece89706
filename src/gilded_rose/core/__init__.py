from gilded_rose.core.app import Application
from gilded_rose.core.container import Container
from gilded_rose.core.module import Module
from gilded_rose.core.config import Config, load_config_from_env
from gilded_rose.core.log import setup_logging

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "load_config_from_env",
    "setup_logging",
]
