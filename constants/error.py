from typing import Optional


class TemperError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingArgument(TemperError):
    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class DegreesParseError(TemperError):
    def __init__(self, value: str, message: str = "Couldn't parse the degrees", original: Optional[Exception] = None):
        super().__init__(message)
        self.value = value
        self.original = original


class InvalidScale(TemperError):
    def __init__(self, message: str = "Invalid temperature scale"):
        super().__init__(message)


__all__ = ["TemperError", "MissingArgument", "DegreesParseError", "InvalidScale"]
