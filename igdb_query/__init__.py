"""igdb-query: typed query options and an HTTP client for the IGDB API."""

from . import errors as errors  # noqa: F401
from . import models as models  # noqa: F401
from .builder import RequestBuilder  # noqa: F401
from .client import Client, Endpoint  # noqa: F401
from .config import ClientConfig, ClientPresets, Credentials  # noqa: F401
from .errors import (  # noqa: F401
    AmbiguousResult,
    EntityNotFound,
    IGDBError,
    MalformedResponse,
    NotFound,
    ProtocolError,
    QueryValidationError,
    RateLimited,
    ResourceNotFound,
    ServerError,
    Unauthorized,
)
from .filters import FILTER_STRATEGIES, FilterEngine  # noqa: F401
from .images import Image, ImageSize, sized_image_url  # noqa: F401
from .models import (  # noqa: F401
    Filter,
    FilterOperator,
    OperationKind,
    Query,
    SortingOrder,
    SortingQuery,
    SubFilter,
)
from .options import (  # noqa: F401
    QueryOption,
    compose_options,
    set_fields,
    set_filter,
    set_limit,
    set_offset,
    set_order,
    set_search,
)
from .pagination import PaginationEngine  # noqa: F401
from .presets import CommonOptions  # noqa: F401
from .resources import RESOURCES, Resource  # noqa: F401
from .sorting import SortEngine  # noqa: F401

__all__ = [
    # Main classes
    "Client",
    "Endpoint",
    "RequestBuilder",
    # Engines
    "FilterEngine",
    "SortEngine",
    "PaginationEngine",
    # Strategy registry
    "FILTER_STRATEGIES",
    # Options
    "QueryOption",
    "set_fields",
    "set_filter",
    "set_order",
    "set_limit",
    "set_offset",
    "set_search",
    "compose_options",
    # Configuration
    "Credentials",
    "ClientConfig",
    "ClientPresets",
    # Presets
    "CommonOptions",
    # Resources and images
    "RESOURCES",
    "Resource",
    "Image",
    "ImageSize",
    "sized_image_url",
    # Models
    "Filter",
    "FilterOperator",
    "OperationKind",
    "Query",
    "SortingOrder",
    "SortingQuery",
    "SubFilter",
    # Errors
    "IGDBError",
    "QueryValidationError",
    "ProtocolError",
    "NotFound",
    "Unauthorized",
    "ResourceNotFound",
    "RateLimited",
    "ServerError",
    "MalformedResponse",
    "EntityNotFound",
    "AmbiguousResult",
    # Modules
    "models",
    "errors",
]
