class BreedhubError(Exception):
    pass


class NotFoundError(BreedhubError):
    pass


class NetworkError(BreedhubError):
    """The breed API could not be reached or never answered."""


class UpstreamError(BreedhubError):
    """The breed API answered with a non-2xx status or an unusable body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
