from typing import Dict, Any

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[app]} | {name}:{function} | {message}"


LOGGING_PRESETS: Dict[str, Dict[str, Any]] = {
    "default": {
        "level": "WARNING",
        "console": False,
        "fmt": LOG_FORMAT,
    },
    "debug": {
        "level": "DEBUG",
        "console": True,
        "fmt": LOG_FORMAT,
    },
}

DEFAULT_PRESET = "default"
DEBUG_PRESET = "debug"

__all__ = ["LOGGING_PRESETS", "DEFAULT_PRESET", "DEBUG_PRESET", "LOG_FORMAT"]
