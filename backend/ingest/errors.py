"""
Errors raised along the ingestion path.

Each carries the HTTP status it maps to; main.create_app registers a single
handler that turns them into plain-text responses.
"""


class MetricsIngestError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(MetricsIngestError):
    status_code = 401

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason    # "missing header" | "malformed header" | "invalid key"


class PayloadReadError(MetricsIngestError):
    status_code = 400

    def __init__(self, message: str = "Failed to read payload") -> None:
        super().__init__(message)


class PayloadParseError(MetricsIngestError):
    status_code = 400

    def __init__(self, diagnostic: str) -> None:
        super().__init__(f"Failed to parse payload: {diagnostic}")
        self.diagnostic = diagnostic


class PersistenceError(MetricsIngestError):
    status_code = 500

    def __init__(self, detail: str) -> None:
        # The response body stays generic; detail is for the logs only
        super().__init__("Failed to save payload")
        self.detail = detail
