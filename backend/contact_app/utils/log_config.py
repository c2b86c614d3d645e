import logging, os
from typing import Optional

def resolve_level(value: Optional[str]=None) -> int:
    """LOG_LEVEL as a name ("debug") or a number ("10"); anything else means INFO."""
    value=(value if value is not None else os.environ.get("LOG_LEVEL", "INFO")).strip().upper()
    if value.isdigit(): return int(value)
    level=logging.getLevelName(value)
    return level if isinstance(level, int) else logging.INFO
