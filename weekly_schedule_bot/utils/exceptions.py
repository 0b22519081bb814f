"""Custom exceptions for the Weekly Schedule Bot application."""

from typing import Dict, Any, Optional

from fastapi import HTTPException, status


class CustomException(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message
        status_code: HTTP status code
        headers: Optional HTTP headers
    """

    def __init__(
        self,
        message: Dict[str, Any],
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class ReferenceAnchorError(CustomException):
    """The configured reference date cannot be converted.

    This is a configuration problem, not bad user input: the week parity
    engine cannot work without its anchor.
    """

    def __init__(self, anchor: Any) -> None:
        super().__init__(
            {"error": "invalid_reference_anchor", "anchor": str(anchor)},
        )
        self.anchor = anchor

    def __str__(self) -> str:
        return f"Reference anchor {self.anchor} does not convert to a Gregorian date"


class CustomHTTPException(HTTPException):
    """HTTP exception with custom message and headers.

    Attributes:
        message: The error message
        status_code: HTTP status code
        headers: Optional HTTP headers
    """

    def __init__(
        self,
        status_code: int,
        message: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.message = message
        super().__init__(status_code=status_code, detail=message, headers=headers)

    @classmethod
    def from_exception(cls, exc: CustomException) -> "CustomHTTPException":
        """Expose a domain error as an HTTP error with its status and headers."""
        return cls(status_code=exc.status_code, message=exc.message, headers=exc.headers)
