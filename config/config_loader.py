"""YAML configuration loader for the PG filter engine.

Loads and caches filter sheet options from YAML with fallback to defaults.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from functools import lru_cache
import yaml

# Get config directory
CONFIG_DIR = Path(__file__).parent

FILTER_OPTIONS_FILE = "filter_options.yaml"

DEFAULT_DATE_FORMATS = [
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%Y/%m/%d",
    "%d %b %Y",
    "%d %B %Y",
]


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


def _load_yaml_file(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of YAML file in config directory

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filename}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filename}: {e}")


def _sharing_range() -> Dict[str, Any]:
    return {"label": "Sharing", "range": {"start": 1, "stop": 10, "label": "{n} Sharing"}}


@lru_cache(maxsize=1)
def load_filter_options() -> Dict[str, Any]:
    """Load filter_options.yaml configuration."""
    try:
        return _load_yaml_file(FILTER_OPTIONS_FILE)
    except ConfigurationError:
        # Minimal fallback: every facet present, option lists kept short
        return {
            "date_formats": list(DEFAULT_DATE_FORMATS),
            "rooms": {
                "status": {
                    "label": "Room Status",
                    "options": [
                        {"label": s, "value": s} for s in ("Available", "Partial", "Filled")
                    ],
                },
                "sharing": _sharing_range(),
                "floor": {"label": "Floor", "options": [{"label": "Ground Floor", "value": "GF"}]},
                "facilities": {
                    "label": "Facilities",
                    "options": [
                        {"label": f, "value": f}
                        for f in ("AC", "Geyser", "WM", "WiFi", "TV", "Furnished")
                    ],
                },
            },
            "tenants": {
                "sharing": _sharing_range(),
                "status": {
                    "label": "Status",
                    "options": [
                        {"label": s, "value": s} for s in ("Active", "Dues", "Under Notice")
                    ],
                },
                "join_date": {"label": "Joining Date", "allow_future": False},
                "downloaded_app": {
                    "label": "Download Status",
                    "options": [
                        {"label": s, "value": s}
                        for s in ("App Downloaded", "App Not Downloaded")
                    ],
                },
            },
            "advance_booking": {
                "status": {
                    "label": "Booking Status",
                    "options": [
                        {"label": "Active Booking", "value": 3},
                        {"label": "Expired", "value": 5},
                        {"label": "Cancelled", "value": 6},
                    ],
                },
                "booking_date": {"label": "Booking Date", "allow_future": False},
                "joining_date": {"label": "Joining Date", "allow_future": True},
            },
            "expenses": {"date_range": {"label": "Date Range", "allow_future": False}},
            "dues": {"due_date": {"label": "Due Date", "allow_future": True}},
            "interim": {
                "status": {
                    "label": "Status",
                    "options": [
                        {"label": s.title(), "value": s}
                        for s in ("active", "upcoming", "expired")
                    ],
                },
                "joining_date": {"label": "From-To (Joining Date)", "allow_future": True},
                "booking_date": {"label": "From-To (Booking Date)", "allow_future": False},
            },
        }


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    load_filter_options.cache_clear()


@dataclass
class FacetOptions:
    """Accessor for one domain's facet configuration."""

    domain: str
    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._data = load_filter_options().get(self.domain, {}) or {}

    @property
    def facet_keys(self) -> List[str]:
        """Facet keys configured for this domain, in file order."""
        return list(self._data.keys())

    def get_label(self, facet_key: str, default: Optional[str] = None) -> str:
        """Get the display label for a facet."""
        facet = self._data.get(facet_key, {})
        return facet.get("label", default or facet_key)

    def get_options(self, facet_key: str) -> List[Dict[str, Any]]:
        """
        Get checkbox options for a facet as ``{label, value}`` dicts.

        A ``range`` entry expands to integer options, e.g. sharing 1..10.
        """
        facet = self._data.get(facet_key, {})
        if "range" in facet:
            bounds = facet["range"]
            template = bounds.get("label", "{n}")
            return [
                {"label": template.format(n=n), "value": n}
                for n in range(int(bounds.get("start", 1)), int(bounds.get("stop", 1)) + 1)
            ]
        return list(facet.get("options", []))

    def get_date_config(self, facet_key: str) -> Dict[str, Any]:
        """Get date picker settings for a date facet."""
        facet = self._data.get(facet_key, {})
        return {
            "allow_future": bool(facet.get("allow_future", False)),
            "from_label": facet.get("from_label", "From"),
            "to_label": facet.get("to_label", "To"),
        }


def get_facet_options(domain: str) -> FacetOptions:
    """Get facet configuration for a domain."""
    return FacetOptions(domain=domain)


def get_date_formats() -> List[str]:
    """Get the accepted non-ISO date formats, tried in order."""
    return list(load_filter_options().get("date_formats") or DEFAULT_DATE_FORMATS)
