from __future__ import annotations

import httpx


class AddressClientError(Exception):
    """Base client error."""


class ConfigurationError(AddressClientError):
    """Unknown route or missing path id. Indicates misuse of the library."""


class RequestFailed(AddressClientError):
    def __init__(
            self,
            method: str,
            path: str,
            cause: BaseException | None = None,
            *,
            status_code: int | None = None,
            details: str | None = None,
    ):
        if status_code is not None:
            msg = f"{method} {path} failed with {status_code}"
        else:
            msg = f"{method} {path} failed: {cause}"
        super().__init__(msg)
        self.method = method
        self.path = path
        self.cause = cause
        self.status_code = status_code
        self.details = details

    @property
    def timed_out(self) -> bool:
        return isinstance(self.cause, httpx.TimeoutException)


class ResponseDecodeError(AddressClientError):
    def __init__(self, method: str, path: str, status_code: int, body: str):
        super().__init__(f"{method} {path} returned non-JSON body ({status_code})")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
