"""
URL Builder Package

Builds absolute, relative and cross-origin URLs from path segments and typed
query parameters, percent-encoding keys and values along the way.

This package provides:
- absolute / relative / cross_origin / custom: URL assembly
- string / non_empty_string / int_ / float_ / bool_: value encoders
- maybe / list_ / bracketed_list: encoder combinators
- to_query: query string serialization
- UrlEndpoint: reusable endpoint with base path and parameters
- EndpointConfigLoader: endpoints from YAML/environment settings

Usage:
    from url_builder import absolute, bool_, int_, list_, string

    absolute(["products"], [string("search", "hat"), list_(int_, "sizes", [1, 2, 3])])
    # '/products?search=hat&sizes=1%2C2%2C3'

    # Reusable endpoint
    api = UrlEndpoint(CrossOrigin("https://shop.example.com"), ["api", "v2"])
    api.build(["products"], [bool_("discounted", True)])
    # 'https://shop.example.com/api/v2/products?discounted=true'
"""

from .builder import (
    Absolute,
    CrossOrigin,
    Relative,
    Root,
    absolute,
    cross_origin,
    custom,
    relative,
    root_prefix,
)
from .config import EndpointConfig, RootKind
from .encoding import percent_encode
from .endpoint import UrlEndpoint
from .endpoint_loader import EndpointConfigLoader, TemplateResolver
from .exceptions import (
    UrlBuilderException,
    UrlConfigError,
    UrlConfigNotFoundError,
    UrlConfigValidationError,
    UrlEncodeError,
)
from .query import (
    ABSENT,
    Absent,
    Encoder,
    Present,
    QueryParameter,
    bool_,
    bracketed_list,
    encoder_for,
    float_,
    int_,
    list_,
    maybe,
    non_empty_string,
    param,
    string,
    to_query,
)
from .settings import UrlBuilderSettings, get_settings

__version__ = "1.0.0"

__all__ = [
    # Builders
    "absolute",
    "relative",
    "cross_origin",
    "custom",
    "root_prefix",
    "Root",
    "Absolute",
    "Relative",
    "CrossOrigin",
    # Query parameters
    "QueryParameter",
    "Present",
    "Absent",
    "ABSENT",
    "Encoder",
    "string",
    "non_empty_string",
    "int_",
    "float_",
    "bool_",
    "maybe",
    "list_",
    "bracketed_list",
    "encoder_for",
    "param",
    "to_query",
    "percent_encode",
    # Endpoints and configuration
    "UrlEndpoint",
    "EndpointConfig",
    "RootKind",
    "EndpointConfigLoader",
    "TemplateResolver",
    "UrlBuilderSettings",
    "get_settings",
    # Exceptions
    "UrlBuilderException",
    "UrlEncodeError",
    "UrlConfigError",
    "UrlConfigValidationError",
    "UrlConfigNotFoundError",
    # Package metadata
    "__version__",
]


def create_endpoint(name, context=None, settings=None):
    """Create a UrlEndpoint from a named configuration.

    Convenience wrapper around EndpointConfigLoader.

    Args:
        name: Endpoint name in settings
        context: Variables for ${...} placeholders
        settings: Settings instance (defaults to global settings)

    Returns:
        UrlEndpoint: Configured endpoint

    Example:
        products = create_endpoint("products", context={"region": "eu"})
        products.build(["42"])
    """
    return EndpointConfigLoader(settings).build_endpoint(name, context)
