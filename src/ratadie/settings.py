"""
ratadie.settings
================

Environment-driven configuration, read once at import time.

RATADIE_UTC_OFFSET_MINUTES
    Fixed UTC offset (minutes east of UTC) used by ``SystemClock`` instead of
    the host's local offset.  Unset means "use the host".
"""

from __future__ import annotations

import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer number of minutes; got {raw!r}") from exc


# Clock settings
# ---------------------------------------------------------------------------
UTC_OFFSET_MINUTES: Optional[int] = _optional_int("RATADIE_UTC_OFFSET_MINUTES")
