"""Configuration module for the PG filter engine.

All filter defaults are empty: an empty facet means no constraint.
"""

from .settings import config, FilterConfig, Config
from .config_loader import (
    ConfigurationError,
    FacetOptions,
    load_filter_options,
    clear_config_cache,
    get_facet_options,
    get_date_formats,
)
from .constants import (
    # Status codes
    STATUS_ACTIVE,
    STATUS_DUES,
    STATUS_ADVANCE_BOOKING,
    STATUS_UNDER_NOTICE,
    STATUS_BOOKING_EXPIRED,
    STATUS_BOOKING_CANCELLED,
    STATUS_INTERIM,
    STATUS_NAMES,
    ADVANCE_BOOKING_STATUSES,
    DUE_STATUS_PENDING,
    # Domain keys
    DOMAIN_ROOMS,
    DOMAIN_TENANTS,
    DOMAIN_ADVANCE_BOOKING,
    DOMAIN_EXPENSES,
    DOMAIN_DUES,
    DOMAIN_INTERIM,
    DOMAIN_KEYS,
    # Derived labels
    APP_DOWNLOADED,
    APP_NOT_DOWNLOADED,
    DUE_URGENCY_ORDER,
    INTERIM_STATUS_ORDER,
    # Helper functions
    get_status_name,
    app_download_label,
)

__all__ = [
    # Settings
    "config",
    "FilterConfig",
    "Config",
    # Loader
    "ConfigurationError",
    "FacetOptions",
    "load_filter_options",
    "clear_config_cache",
    "get_facet_options",
    "get_date_formats",
    # Constants
    "STATUS_ACTIVE",
    "STATUS_DUES",
    "STATUS_ADVANCE_BOOKING",
    "STATUS_UNDER_NOTICE",
    "STATUS_BOOKING_EXPIRED",
    "STATUS_BOOKING_CANCELLED",
    "STATUS_INTERIM",
    "STATUS_NAMES",
    "ADVANCE_BOOKING_STATUSES",
    "DUE_STATUS_PENDING",
    "DOMAIN_ROOMS",
    "DOMAIN_TENANTS",
    "DOMAIN_ADVANCE_BOOKING",
    "DOMAIN_EXPENSES",
    "DOMAIN_DUES",
    "DOMAIN_INTERIM",
    "DOMAIN_KEYS",
    "APP_DOWNLOADED",
    "APP_NOT_DOWNLOADED",
    "DUE_URGENCY_ORDER",
    "INTERIM_STATUS_ORDER",
    # Helper functions
    "get_status_name",
    "app_download_label",
]
