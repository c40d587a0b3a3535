"""
Error taxonomy for the portfolio core.

Every error raised by the core inherits from PortfolioError and carries a
stable ``code`` that the REST and MCP layers put on the wire.
Arithmetic edge cases (zero cost basis, zero market value) are not errors:
they resolve to 0 inside the calculations.
"""


class PortfolioError(Exception):
    """Base class for all portfolio core errors."""

    code = "ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class NotFound(PortfolioError):
    """Raised when a referenced entity id does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, kind: str, key: str | None = None):
        label = kind.replace("_", " ").capitalize()
        super().__init__(f"{label} not found" if key is None else f"{label} {key} not found")
        self.kind = kind
        self.key = key


class InvalidInput(PortfolioError):
    """Raised for missing or inconsistent input on create/update operations."""

    code = "INVALID_INPUT"
    status_code = 400

    def __init__(self, message: str, reasons: list[str] | None = None):
        super().__init__(message)
        self.reasons = list(reasons or [])

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.reasons:
            payload["details"] = self.reasons
        return payload
