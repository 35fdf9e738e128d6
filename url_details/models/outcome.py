from typing import NamedTuple, Optional, Union

from url_details.models.options import FetchOptions

# Status reported when no HTTP response was obtained at all
NO_RESPONSE_STATUS = 404


class FetchSuccess(NamedTuple):
    status_code: int
    body: bytes
    options: FetchOptions
    # Charset declared in the Content-Type header, if any
    encoding: Optional[str] = None


class FetchRemoteError(NamedTuple):
    status_code: int
    reason: str
    options: FetchOptions


class FetchEmptyBody(NamedTuple):
    status_code: int
    options: FetchOptions


FetchOutcome = Union[FetchSuccess, FetchRemoteError, FetchEmptyBody]
