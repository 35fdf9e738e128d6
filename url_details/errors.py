"""Errors surfaced to callers of the URL details endpoint.

Every failure the endpoint can report is an :class:`ApiError` subclass with a
stable machine-readable ``code``.  The application renders them as
``{"code": ..., "message": ..., "data": {"status": ...}}``.
"""

from typing import Dict, Optional


class ApiError(Exception):
    code = "rest_error"
    message = "An error occurred."
    status_code = 500

    def __init__(
        self,
        message: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        if message is not None:
            self.message = message
        self.params = params or {}
        super().__init__(self.message)


class InvalidParamError(ApiError):
    """The ``url`` parameter is missing, not a string, or not an http(s) URL."""

    code = "rest_invalid_param"
    status_code = 400

    def __init__(self, params: Dict[str, str]) -> None:
        super().__init__(f"Invalid parameter(s): {', '.join(params)}", params)


class ForbiddenError(ApiError):
    code = "rest_user_cannot_view"
    message = "Sorry, you are not allowed to process remote urls."
    status_code = 403


class RemoteUnavailableError(ApiError):
    """The remote URL could not be reached or answered with a non-2xx status."""

    code = "no_response"
    message = "Not found"
    status_code = 404


class RemoteEmptyBodyError(ApiError):
    code = "no_content"
    message = "Unable to retrieve body from response at this URL"
    status_code = 404
