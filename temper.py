#!/usr/bin/env python3
"""Convert a temperature value between Celsius, Fahrenheit, Kelvin and Rankine.

Usage:
  python temper.py <degrees> <origin scale> <result scale> [-ro] [-v]

Scale names may be shortened to any prefix, e.g. ``c`` or ``Fahr``.
Prints the full sentence by default, or only the converted value with ``-ro``.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from constants.cli import (
    APPLICATION_ERROR_PREFIX,
    ARGUMENTS_ERROR_PREFIX,
    DEFAULT_PROG_NAME,
    DEGREES_ARGUMENT,
    EXIT_FAILURE,
    EXIT_OK,
    INVALID_ORIGIN_MESSAGE,
    INVALID_RESULT_MESSAGE,
    MISSING_DEGREES_MESSAGE,
    MISSING_ORIGIN_MESSAGE,
    MISSING_RESULT_MESSAGE,
    ORIGIN_ARGUMENT,
    RESULT_ARGUMENT,
    RESULT_ONLY_FLAG,
    USAGE_HEADER,
    USAGE_OPTIONS,
    USAGE_SCALE_LINE,
    VERBOSE_FLAG,
)
from constants.error import DegreesParseError, InvalidScale, MissingArgument, TemperError
from constants.logging import DEBUG_PRESET, DEFAULT_PRESET
from utils.conversion import Conversion
from utils.logger import get_logger
from utils.scales import Scale


def _next_argument(args: Iterator[str], argument: str, message: str) -> str:
    value = next(args, None)
    if value is None:
        raise MissingArgument(argument, message)
    return value


def _parse_degrees(value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise DegreesParseError(value, original=exc) from exc


def _parse_scale(value: str, message: str) -> Scale:
    try:
        return Scale.parse(value)
    except InvalidScale as exc:
        raise InvalidScale(message) from exc


@dataclass(frozen=True)
class Config:
    conversion: Conversion
    result_only: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Config":
        """Build a config from the argument vector, program name excluded.

        All three positionals are checked for presence before any of them
        is parsed. Flags are only recognised after the positionals.
        """
        remaining = iter(args)
        degrees = _next_argument(remaining, DEGREES_ARGUMENT, MISSING_DEGREES_MESSAGE)
        origin = _next_argument(remaining, ORIGIN_ARGUMENT, MISSING_ORIGIN_MESSAGE)
        result = _next_argument(remaining, RESULT_ARGUMENT, MISSING_RESULT_MESSAGE)
        options = list(remaining)

        conversion = Conversion(
            _parse_degrees(degrees),
            _parse_scale(origin, INVALID_ORIGIN_MESSAGE),
            _parse_scale(result, INVALID_RESULT_MESSAGE),
        )
        return cls(
            conversion=conversion,
            result_only=RESULT_ONLY_FLAG in options,
            verbose=VERBOSE_FLAG in options,
        )


def usage(prog_name: str) -> None:
    lines: List[str] = [USAGE_HEADER.format(prog=prog_name), "", "Temperature scales:"]
    for scale in Scale:
        lines.append(USAGE_SCALE_LINE.format(title=scale.value.capitalize(), short=scale.shorthand))
    lines.append("")
    print("\n".join(lines), file=sys.stderr)
    print(USAGE_OPTIONS, file=sys.stderr)


def run(config: Config) -> None:
    if config.result_only:
        print(config.conversion.render_result())
    else:
        print(config.conversion)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    prog_name = argv[0] if argv else DEFAULT_PROG_NAME
    args = list(argv[1:])

    logger = get_logger(name=DEFAULT_PROG_NAME, use_case=DEFAULT_PRESET)

    try:
        config = Config.from_args(args)
    except TemperError as error:
        usage(prog_name)
        print(f"{ARGUMENTS_ERROR_PREFIX}{error.message}", file=sys.stderr)
        return EXIT_FAILURE

    if config.verbose:
        logger = get_logger(name=DEFAULT_PROG_NAME, use_case=DEBUG_PRESET)
    conversion = config.conversion
    logger.debug(f"Arguments: {args}")
    logger.debug(
        f"Converted {conversion.degrees!r} {conversion.from_scale} -> "
        f"{conversion.result!r} {conversion.to_scale}"
    )

    try:
        run(config)
    except OSError as error:
        usage(prog_name)
        print(f"{APPLICATION_ERROR_PREFIX}{error}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
