from typing import Optional


class TransportError(IOError):
    """
    Raised when a request never produced a usable response: the connection
    failed or the body could not be parsed as JSON.
    """

    def __init__(self, message: str, url: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause
