"""One object = full bounded context «catalog»."""
from gilded_rose.ddd import DomainModule

from .application import (
    AddCatalogItem,
    AddCatalogItemHandler,
    AdvanceDay,
    AdvanceDayHandler,
    GetCatalogItem,
    GetCatalogItemHandler,
    ListCatalogItems,
    ListCatalogItemsHandler,
    RemoveCatalogItem,
    RemoveCatalogItemHandler,
)
from .domain import Catalog


catalog_module = (
    DomainModule("catalog")
    .bind(Catalog, Catalog)
    .command(AddCatalogItem, AddCatalogItemHandler)
    .command(RemoveCatalogItem, RemoveCatalogItemHandler)
    .command(AdvanceDay, AdvanceDayHandler)
    .query(ListCatalogItems, ListCatalogItemsHandler)
    .query(GetCatalogItem, GetCatalogItemHandler)
)
