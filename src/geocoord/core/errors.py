"""
Exception hierarchy for geocoord.

Parsers never raise for bad input: they return one of these exceptions as a
value so callers on hot paths (keystroke validation, bulk imports) can branch
on ``isinstance`` without paying for stack unwinding. The facade in
:mod:`geocoord.core.coordinate` raises them.
"""

from typing import Any, Dict, List, Optional


class GeocoordException(Exception):
    """
    Base exception for all geocoord errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-facing error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeocoordException.

        Args:
            message: User-facing error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a plain dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class ParseError(GeocoordException):
    """
    Raised (or returned) when a coordinate string cannot be parsed.

    The raw input, when known, is appended to the message as
    ``; input: "<raw>"`` and kept in ``details["input"]``.
    """

    def __init__(
        self,
        message: str,
        raw: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ParseError.

        Args:
            message: Description of what is wrong with the input
            raw: The raw input string that failed to parse
            details: Technical details about the failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if raw is not None:
            error_details["input"] = raw
            message = f'{message}; input: "{raw}"'

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            details=error_details,
            suggestions=suggestions,
        )
        self.raw = raw


class EmptyInputError(ParseError):
    """Returned when the input is empty, blank, or not a string."""

    def __init__(self, raw: Any = None):
        super().__init__(
            "Input must be a non-empty string",
            details={"input": raw},
            suggestions=["Provide a coordinate such as '31U EQ 48251 11932'"],
        )
        self.raw = raw
        self.error_code = "EMPTY_INPUT"


class ProjectionError(GeocoordException):
    """
    Raised when the reference projection (PROJ) cross-check fails.

    The series projection itself never raises; this covers transformer
    construction and transformation failures inside pyproj.
    """

    def __init__(
        self,
        message: str,
        source_crs: Optional[str] = None,
        target_crs: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ProjectionError.

        Args:
            message: User-facing error message
            source_crs: Source coordinate reference system
            target_crs: Target coordinate reference system
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if source_crs:
            error_details["source_crs"] = source_crs
        if target_crs:
            error_details["target_crs"] = target_crs

        super().__init__(
            message=message,
            error_code="PROJECTION_ERROR",
            details=error_details,
            suggestions=suggestions
            or ["Check that the point lies inside the UTM latitude range (-80 to 84)"],
        )


class ConfigurationError(GeocoordException):
    """
    Raised when configuration is invalid.

    Used for invalid environment variables or unsupported option values.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-facing error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions
            or ["Check GEOCOORD_* environment variables are set correctly"],
        )
