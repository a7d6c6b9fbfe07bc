from .expiration import ExpirationData, add_months, compute_expiration
from .query_params import empty_string_as_none, parse_query
from .storage_query import (
    apply_expiration_filters,
    build_storage_query,
    get_storage_response,
    parse_storage_filter,
    project_rows,
    search_storage,
    validate_filter,
)

__all__ = [
    "ExpirationData",
    "add_months",
    "compute_expiration",
    "empty_string_as_none",
    "parse_query",
    "apply_expiration_filters",
    "build_storage_query",
    "get_storage_response",
    "parse_storage_filter",
    "project_rows",
    "search_storage",
    "validate_filter",
]
