import json
from pathlib import Path
from typing import Any, Dict

def load_settings(path: Path) -> Dict[str, Any]:
    """
    Load settings JSON. If the file doesn't exist, return sensible defaults.
    """
    defaults: Dict[str, Any] = {
        "PAGE_SIZE": 50,
        "REQUEST_TIMEOUT": 15,
        "LOG_LEVEL": "INFO",
        "USER_AGENT": "Mozilla/5.0",
        "DATA_SOURCE": None,
    }
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        defaults.update(data or {})

    try:
        page_size = int(defaults["PAGE_SIZE"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"PAGE_SIZE must be an integer, got {defaults['PAGE_SIZE']!r}") from e
    if page_size < 1:
        raise ValueError(f"PAGE_SIZE must be >= 1, got {page_size}")
    defaults["PAGE_SIZE"] = page_size
    return defaults
