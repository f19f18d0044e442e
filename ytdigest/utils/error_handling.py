"""
Centralized error handling for the application.

Every error that reaches the presentation layer is one of the classes below;
each carries a message that can be shown to the user as-is.
"""

import re
import json
from typing import Any, Dict, Optional, Type

from ytdigest.config import config
from ytdigest.utils.logger import logging


class YTDigestError(Exception):
    """Base class for classified application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInputError(YTDigestError):
    """Required user input is absent."""

    status_code = 400


class MissingQueryError(MissingInputError):
    """A search was requested without a query."""


class InvalidURLError(YTDigestError, ValueError):
    """The URL does not resolve to a recognizable video ID."""

    status_code = 400


class NoTranscriptAvailableError(YTDigestError):
    """Captions are disabled or absent for the video."""

    status_code = 404


class UpstreamError(YTDigestError):
    """An upstream service failed for a reason other than caption absence."""

    status_code = 502


class TranscriptFetchFailedError(UpstreamError):
    """Every transcript source failed and none reported missing captions."""


class ModelUnavailableError(YTDigestError):
    """The completion endpoint rate limited or rejected the selected model."""

    status_code = 503


class ConfigurationError(YTDigestError):
    """A required credential is not configured."""

    status_code = 500


NO_TRANSCRIPT_MESSAGE = (
    "No transcript is available for this video. "
    "Please choose a video that has subtitles/captions enabled."
)
MODEL_UNAVAILABLE_MESSAGE = (
    "Selected model is currently rate limited or unavailable. Please try a different model."
)

# Wording used by the caption libraries when a video has no usable captions
_NO_TRANSCRIPT_SIGNATURE = re.compile(
    r"transcripts? (is|are) disabled"
    r"|subtitles are disabled"
    r"|no transcripts? (were )?found"
    r"|no captions? (are )?available"
    r"|transcript (is )?not available",
    re.IGNORECASE,
)


def is_no_transcript_message(text: Optional[str]) -> bool:
    """Check whether an error message reports disabled or missing captions."""
    if not text:
        return False
    return bool(_NO_TRANSCRIPT_SIGNATURE.search(text))


def require_text(value: Optional[str], message: str,
                 error_cls: Type[MissingInputError] = MissingInputError) -> str:
    """
    Return the stripped value, or raise when it is blank.

    Args:
        value: User supplied text
        message: Message for the raised error
        error_cls: Error class to raise

    Returns:
        The stripped text
    """
    if value is None or not value.strip():
        raise error_cls(message)
    return value.strip()


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
