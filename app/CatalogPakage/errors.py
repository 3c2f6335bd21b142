# app/CatalogPakage/errors.py


class CatalogError(Exception):
    """Base error of the product catalog."""
    pass


class StoreError(CatalogError):
    """Raised when the record store cannot complete a query."""
    pass
