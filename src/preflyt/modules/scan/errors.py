"""Error type raised by the scan dispatcher."""


class ScanError(Exception):
    """A scan or report request that could not complete.

    Transport, timeout, HTTP status and parse failures all surface as this
    single type; ``kind`` is informational only.
    """

    def __init__(self, message: str, kind: str = "transport"):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        return self.message
