"""FastAPI dependencies for the catalog store gateway."""

from fastapi import Depends

from app.core.database import Database, get_database
from app.features.catalog.gateway import CatalogGateway


def get_catalog_gateway(database: Database = Depends(get_database)) -> CatalogGateway:
    """Build a gateway over the database opened at startup."""
    return CatalogGateway(database)
