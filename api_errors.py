# Error types raised by the API adapters and the fly-over orchestrator.


class FlyoverError(Exception):
    """Base class for every failure of an orchestration run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def with_prefix(self, prefix: str) -> "FlyoverError":
        """Returns a copy of this error, same kind and fields, with a prefixed message."""
        # copy.copy would call cls(*args), which subclasses with extra fields reject.
        cls = type(self)
        prefixed = cls.__new__(cls)
        prefixed.__dict__.update(self.__dict__)
        prefixed.message = f"{prefix} {self.message}"
        prefixed.args = (prefixed.message,)
        return prefixed


class TransportError(FlyoverError):
    """The request never produced an HTTP response (DNS, connection, timeout)."""


class RemoteStatusError(FlyoverError):
    """The service answered with a status other than 200."""

    def __init__(self, status_code: int, body: str, what: str):
        super().__init__(
            f"Status Code {status_code} when fetching {what}. Response: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(FlyoverError):
    """The body was not valid JSON or lacked an expected field."""


class UpstreamRejectedError(FlyoverError):
    """The service returned 200 but reported a failure in the body."""

    def __init__(self, message: str, upstream_message: str | None = None):
        super().__init__(message)
        self.upstream_message = upstream_message
