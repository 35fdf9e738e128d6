"""Orchestrates a URL details lookup: permission → validate → fetch → extract."""

import logging
from typing import Any, Callable, Mapping, Optional, Union

from url_details.config import Settings
from url_details.errors import (
    ForbiddenError,
    RemoteEmptyBodyError,
    RemoteUnavailableError,
)
from url_details.models.metadata import PageMetadata
from url_details.models.options import FetchOptions
from url_details.models.outcome import FetchEmptyBody, FetchRemoteError
from url_details.services.extractor import extract_metadata
from url_details.services.fetcher import RemoteFetcher
from url_details.services.validator import validate_url

logger = logging.getLogger(__name__)

OptionsHook = Callable[[FetchOptions, str], Union[FetchOptions, Mapping[str, Any]]]


def default_options_hook(options: FetchOptions, url: str) -> FetchOptions:
    return options


class UrlDetailsHandler:
    """Turns one caller request into :class:`PageMetadata` or an :class:`ApiError`.

    Collaborators are fixed at construction time:

    * ``permission`` – predicate called with the caller context.
    * ``fetcher`` – performs the outbound request.
    * ``options_hook`` – receives the default :class:`FetchOptions` and the
      validated URL and returns the options actually used.  A plain mapping
      is accepted and validated into :class:`FetchOptions`.

    The handler keeps no per-request state, so one instance serves concurrent
    requests.
    """

    def __init__(
        self,
        settings: Settings,
        permission: Callable[[Any], bool],
        fetcher: RemoteFetcher,
        options_hook: Optional[OptionsHook] = None,
    ) -> None:
        self.settings = settings
        self.permission = permission
        self.fetcher = fetcher
        self.options_hook = options_hook or default_options_hook

    def _effective_options(self, url: str) -> FetchOptions:
        options = self.options_hook(FetchOptions.from_settings(self.settings), url)
        if not isinstance(options, FetchOptions):
            options = FetchOptions.model_validate(options)
        return options

    async def handle(self, context: Any, raw_url: Any) -> PageMetadata:
        if not self.permission(context):
            raise ForbiddenError()

        url = validate_url(raw_url)
        options = self._effective_options(url)

        outcome = await self.fetcher.fetch(url, options)
        if isinstance(outcome, FetchRemoteError):
            raise RemoteUnavailableError()
        if isinstance(outcome, FetchEmptyBody):
            raise RemoteEmptyBodyError()

        metadata = extract_metadata(outcome.body, outcome.encoding)
        logger.info("Extracted metadata for %s", url, extra={"title": metadata.title})
        return metadata
