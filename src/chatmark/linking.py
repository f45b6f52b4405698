"""Link activation: open a URL with the system browser and report the outcome."""

from __future__ import annotations

import logging
import webbrowser
from enum import StrEnum
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = frozenset({"http", "https", "mailto"})


class LinkOutcome(StrEnum):
    OPENED = "opened"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


_NOTICES: dict[LinkOutcome, str] = {
    LinkOutcome.UNSUPPORTED: "Unable to open this link",
    LinkOutcome.FAILED: "Failed to open link",
}


def activate_link(url: str, opener: Callable[[str], bool] = webbrowser.open) -> LinkOutcome:
    """Open *url*; never raises.

    UNSUPPORTED when the scheme is not one we hand to a browser or the
    opener reports it could not open the URL, FAILED when the opener raises.
    """
    scheme = urlsplit(url).scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        logger.debug("Refusing to open %s: unsupported scheme %r", url, scheme)
        return LinkOutcome.UNSUPPORTED

    try:
        opened = opener(url)
    except (webbrowser.Error, OSError):
        logger.warning("Failed to open %s", url, exc_info=True)
        return LinkOutcome.FAILED

    if not opened:
        logger.debug("No browser accepted %s", url)
        return LinkOutcome.UNSUPPORTED
    return LinkOutcome.OPENED


def notice_for(outcome: LinkOutcome) -> str | None:
    """Return the user-visible notice for *outcome*, or None when it opened."""
    return _NOTICES.get(outcome)
