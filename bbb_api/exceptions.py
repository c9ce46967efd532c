from typing import Optional


class BBBError(Exception):
    """Base class for errors raised by the BBB API client."""

    def __init__(self, status_code: Optional[int] = None, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class BBBTransportError(BBBError):
    """The BBB server answered with a non-200 HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(status_code=status_code, detail=f"HTTP {status_code}")


class BBBApiError(BBBError):
    """The BBB server answered 200 but returncode was not SUCCESS."""

    def __init__(self, message: Optional[str] = None, message_key: Optional[str] = None):
        self.message = message
        self.message_key = message_key
        super().__init__(status_code=200, detail=f"API call failed: {message}")
