import sys
from typing import Optional, Any
from loguru import logger as _logger
from constants.cli import DEFAULT_PROG_NAME
from constants.logging import LOGGING_PRESETS, DEFAULT_PRESET, LOG_FORMAT


def get_logger(
    name: Optional[str] = None,
    use_case: Optional[str] = None,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    fmt: Optional[str] = None,
) -> Any:
    preset_name = use_case or DEFAULT_PRESET
    preset = LOGGING_PRESETS.get(preset_name, LOGGING_PRESETS.get(DEFAULT_PRESET, {}))

    final_level = level if level is not None else preset.get("level", "WARNING")
    final_console = console if console is not None else preset.get("console", False)
    final_fmt = fmt if fmt is not None else preset.get("fmt", LOG_FORMAT)

    # stdout belongs to the conversion output, so loguru's default stderr
    # handler is always dropped and only re-added on request.
    _logger.remove()

    if final_console:
        _logger.add(lambda msg: sys.stderr.write(msg), level=str(final_level), format=final_fmt)

    _logger.configure(extra={"app": name or DEFAULT_PROG_NAME})

    return _logger
