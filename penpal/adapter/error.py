"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class RemoteServiceUnconfigured(ProviderError):
    """Remote account service credentials are missing.

    Raised before any network call is attempted.
    """

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Remote account service not configured (missing: {', '.join(missing)})"
        )


class RemoteRequestFailed(ProviderError):
    """Remote account service answered with a non-2xx status."""

    def __init__(self, status: int, body: str, operation: str | None = None):
        self.status = status
        self.body = body
        self.operation = operation
        prefix = f"{operation} failed" if operation else "Remote request failed"
        super().__init__(f"{prefix}: {status}")


class RemoteServiceUnavailable(ProviderError):
    """Remote account service could not be reached."""

    pass


class RemoteResponseInvalid(ProviderError):
    """Remote account service returned a body of unexpected shape."""

    pass
