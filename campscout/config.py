"""
campscout/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = _project_root()
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_optional_float_env(name: str) -> float | None:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return float(raw_value)
    except ValueError:
        return None


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _resolve_path(raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (_project_root() / candidate).resolve()


@dataclass(frozen=True)
class StoreSettings:
    """
    Locations of the persisted JSON documents.
    """

    data_dir: Path
    campsites_file: str = "campsites.json"
    dates_file: str = "dates.json"
    results_file: str = "results.json"
    supplier_cache_file: str = "supplierCache.json"

    @property
    def campsites_path(self) -> Path:
        return self.data_dir / self.campsites_file

    @property
    def dates_path(self) -> Path:
        return self.data_dir / self.dates_file

    @property
    def results_path(self) -> Path:
        return self.data_dir / self.results_file

    @property
    def supplier_cache_path(self) -> Path:
        return self.data_dir / self.supplier_cache_file


@dataclass(frozen=True)
class ScrapeSettings:
    """
    Runtime settings for the campsite scrape pipeline.

    Delay values are in seconds. ``timeout_seconds=None`` leaves outbound
    calls without a deadline.
    """

    search_url: str = "https://www.allcamps.de/api/twenty/v2/allcamps/de/search/accommodations"
    supplier_url: str = "https://www.allcamps.de/api/twenty/v2/allcamps/de/accommodation/card"
    source_label: str = "ALLCAMPS"
    user_agent: str = "CampScout/1.0"
    timeout_seconds: float | None = None
    refresh_interval_hours: float = 48.0
    stay_duration_nights: int = 7
    adults: int = 2
    accommodation_category: str = "mobile-home"
    result_limit: int = 10
    supplier_max_attempts: int = 3
    supplier_jitter_max_seconds: float = 0.2
    supplier_retry_delay_seconds: float = 1.0
    listing_jitter_max_seconds: float = 0.1
    date_delay_min_seconds: float = 1.0
    date_delay_max_seconds: float = 2.0
    schedule_minutes: int = 0


@dataclass(frozen=True)
class AppSettings:
    """
    Top-level application settings.
    """

    maintenance_mode: bool
    log_level: str
    stores: StoreSettings
    scrape: ScrapeSettings


@lru_cache(maxsize=1)
def get_scrape_settings() -> ScrapeSettings:
    """
    Return cached scrape pipeline settings from environment variables.
    """

    defaults = ScrapeSettings()
    date_delay_min = max(0.0, _get_float_env("SCRAPE_DATE_DELAY_MIN_SECONDS", defaults.date_delay_min_seconds))
    return ScrapeSettings(
        search_url=_get_str_env("SCRAPE_SEARCH_URL", defaults.search_url),
        supplier_url=_get_str_env("SCRAPE_SUPPLIER_URL", defaults.supplier_url).rstrip("/"),
        source_label=_get_str_env("SCRAPE_SOURCE_LABEL", defaults.source_label),
        user_agent=_get_str_env("SCRAPE_USER_AGENT", defaults.user_agent),
        timeout_seconds=_get_optional_float_env("SCRAPE_HTTP_TIMEOUT_SECONDS"),
        refresh_interval_hours=max(
            0.0,
            _get_float_env("SCRAPE_REFRESH_INTERVAL_HOURS", defaults.refresh_interval_hours),
        ),
        supplier_max_attempts=max(1, _get_int_env("SCRAPE_SUPPLIER_MAX_ATTEMPTS", defaults.supplier_max_attempts)),
        supplier_jitter_max_seconds=max(
            0.0,
            _get_float_env("SCRAPE_SUPPLIER_JITTER_MAX_SECONDS", defaults.supplier_jitter_max_seconds),
        ),
        supplier_retry_delay_seconds=max(
            0.0,
            _get_float_env("SCRAPE_SUPPLIER_RETRY_DELAY_SECONDS", defaults.supplier_retry_delay_seconds),
        ),
        listing_jitter_max_seconds=max(
            0.0,
            _get_float_env("SCRAPE_LISTING_JITTER_MAX_SECONDS", defaults.listing_jitter_max_seconds),
        ),
        date_delay_min_seconds=date_delay_min,
        date_delay_max_seconds=max(
            date_delay_min,
            _get_float_env("SCRAPE_DATE_DELAY_MAX_SECONDS", defaults.date_delay_max_seconds),
        ),
        schedule_minutes=max(0, _get_int_env("SCRAPE_SCHEDULE_MINUTES", defaults.schedule_minutes)),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """
    Return cached JSON store locations.
    """

    return StoreSettings(data_dir=_resolve_path(_get_str_env("SCRAPE_DATA_DIR", "data")))


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """
    Return cached application settings.
    """

    return AppSettings(
        maintenance_mode=_get_bool_env("MAINTENANCE_MODE", False),
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
        stores=get_store_settings(),
        scrape=get_scrape_settings(),
    )
