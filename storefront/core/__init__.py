from .errors import (
    StorefrontError,
    NotFound,
    ValidationFailure,
    UnsupportedBlockType,
    PersistenceFailure,
    RevalidationFailure,
)
from .clock import utcnow, as_utc
from .schemas import (
    PageStatus,
    ProductStatus,
    Product,
    Page,
    PageCreate,
    PageUpdate,
    require_title,
    Pagination,
    Paginated,
)

__all__ = [
    "StorefrontError", "NotFound", "ValidationFailure", "UnsupportedBlockType",
    "PersistenceFailure", "RevalidationFailure",
    "utcnow", "as_utc",
    "PageStatus", "ProductStatus", "Product",
    "Page", "PageCreate", "PageUpdate", "require_title",
    "Pagination", "Paginated",
]
