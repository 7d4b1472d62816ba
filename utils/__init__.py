"""Scale parsing, conversion and logging helpers."""
