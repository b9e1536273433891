"""Shared utilities: datetime and generators."""

from fallback_store.shared.utils.datetime import (
    from_timestamp_ms_utc,
    to_epoch_ms,
    utc_now,
    utc_now_iso,
)
from fallback_store.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "utc_now_iso",
    "to_epoch_ms",
    "from_timestamp_ms_utc",
]
