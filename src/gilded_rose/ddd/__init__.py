from gilded_rose.ddd.commands import Command, MessageHandler, Query
from gilded_rose.ddd.domain_module import DomainModule

__all__ = ["Command", "MessageHandler", "Query", "DomainModule"]
