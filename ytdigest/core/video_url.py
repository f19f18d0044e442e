"""
Helpers for turning user supplied YouTube URLs into canonical watch URLs and video IDs.
"""

from typing import Optional
from urllib.parse import urlparse, parse_qs

from ytdigest.models.schemas import VIDEO_ID_PATTERN, VideoReference
from ytdigest.utils.error_handling import InvalidURLError

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"
SHORT_LINK_HOSTS = {"youtu.be", "www.youtu.be"}


def _is_standard_host(host: str) -> bool:
    return host == "youtube.com" or host.endswith(".youtube.com")


def _find_video_id(url: str) -> Optional[str]:
    """Return the video ID carried by a short or standard link, if any."""
    try:
        parsed = urlparse(url.strip())
        host = (parsed.hostname or "").lower()
    except ValueError:
        return None

    if not parsed.scheme or not host:
        return None

    if host in SHORT_LINK_HOSTS:
        candidate = parsed.path.lstrip("/").split("/")[0]
    elif _is_standard_host(host):
        candidate = parse_qs(parsed.query).get("v", [""])[0]
    else:
        return None

    if VIDEO_ID_PATTERN.fullmatch(candidate):
        return candidate
    return None


def normalize_url(url: str) -> str:
    """
    Canonicalize a YouTube URL to the ``watch?v=<id>`` form.

    Short links (``youtu.be/<id>``) and standard links with a ``v`` query
    parameter map to the same canonical URL. Anything else is returned unchanged.
    """
    video_id = _find_video_id(url)
    if video_id is None:
        return url
    return WATCH_URL_TEMPLATE.format(video_id=video_id)


def extract_video_id(url: str) -> str:
    """Extract the 11 character video ID, raising InvalidURLError when there is none."""
    video_id = _find_video_id(url)
    if video_id is None:
        raise InvalidURLError("Invalid YouTube URL")
    return video_id


def build_video_reference(url: str) -> VideoReference:
    """Create a VideoReference for a user supplied URL."""
    video_id = extract_video_id(url)
    return VideoReference(
        url=url,
        canonical_url=WATCH_URL_TEMPLATE.format(video_id=video_id),
        video_id=video_id,
    )
