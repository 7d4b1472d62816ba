"""Command-line flags, diagnostics, usage text and exit codes."""
from typing import Final

RESULT_ONLY_FLAG: Final[str] = "-ro"
VERBOSE_FLAG: Final[str] = "-v"

DEGREES_ARGUMENT: Final[str] = "degrees"
ORIGIN_ARGUMENT: Final[str] = "origin"
RESULT_ARGUMENT: Final[str] = "result"

MISSING_DEGREES_MESSAGE: Final[str] = "Didn't get a degrees value"
MISSING_ORIGIN_MESSAGE: Final[str] = "Didn't get the origin temperature scale"
MISSING_RESULT_MESSAGE: Final[str] = "Didn't get the result temperature scale"
INVALID_ORIGIN_MESSAGE: Final[str] = "Invalid origin temperature scale"
INVALID_RESULT_MESSAGE: Final[str] = "Invalid result temperature scale"

ARGUMENTS_ERROR_PREFIX: Final[str] = "Arguments error: "
APPLICATION_ERROR_PREFIX: Final[str] = "Application error: "

DEFAULT_PROG_NAME: Final[str] = "temper"

USAGE_HEADER: Final[str] = "Usage: {prog} <degrees> (origin scale) (result scale) [options]"
USAGE_SCALE_LINE: Final[str] = "{title}, '{short}' for short."
USAGE_OPTIONS: Final[str] = (
    "Options:\n"
    f"{RESULT_ONLY_FLAG}: Result Only.\n"
    f"{VERBOSE_FLAG}: Verbose (debug logging to stderr).\n"
)

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

__all__ = [
    "RESULT_ONLY_FLAG",
    "VERBOSE_FLAG",
    "DEGREES_ARGUMENT",
    "ORIGIN_ARGUMENT",
    "RESULT_ARGUMENT",
    "MISSING_DEGREES_MESSAGE",
    "MISSING_ORIGIN_MESSAGE",
    "MISSING_RESULT_MESSAGE",
    "INVALID_ORIGIN_MESSAGE",
    "INVALID_RESULT_MESSAGE",
    "ARGUMENTS_ERROR_PREFIX",
    "APPLICATION_ERROR_PREFIX",
    "DEFAULT_PROG_NAME",
    "USAGE_HEADER",
    "USAGE_SCALE_LINE",
    "USAGE_OPTIONS",
    "EXIT_OK",
    "EXIT_FAILURE",
]
