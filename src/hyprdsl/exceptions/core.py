"""
Exception classes for hyprdsl converters.

This module defines the exception types raised by converters that reject
malformed input and by the converter registry. Converters that follow the
accept-and-default policy never raise these; they substitute defaults instead.
"""


class HyprDSLError(Exception):
    """Base exception for all hyprdsl errors."""

    pass


class ConverterParseError(HyprDSLError, ValueError):
    """Raised when a reject-with-signal converter cannot parse its input."""

    def __init__(self, type_name: str, text: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            type_name: Name of the type that rejected the input
            text: The text that failed to parse
            reason: Optional explanation of what was wrong
        """
        self.type_name = type_name
        self.text = text
        self.reason = reason
        message = f"Cannot parse {type_name} from '{text}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownConverterError(HyprDSLError, KeyError):
    """Raised when the registry is asked for a converter it does not know."""

    def __init__(self, name: str, available: list[str]):
        """
        Initialize the exception.

        Params:
            name: The converter name that was requested
            available: Names registered at the time of the lookup
        """
        self.name = name
        self.available = available
        super().__init__(
            f"Converter {name} is not registered. Available converters: {available}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message
        return self.args[0]
