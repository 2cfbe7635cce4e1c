"""
Timezone lookup - IANA rules via zoneinfo, loaded once and shared read-only.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from transform_api.core.errors import EnvironmentFailure


@lru_cache
def load_location(name: str) -> ZoneInfo:
    """Resolve an IANA zone name. Failures are not cached, so a later call retries."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise EnvironmentFailure(f"Error loading timezone {name!r}: {exc}") from exc
