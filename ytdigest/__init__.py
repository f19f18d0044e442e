"""
YouTube Transcript Digest.

Fetches the transcript of a YouTube video and turns it into an AI summary or an
answer to a question about the video. Also searches YouTube for videos that
carry captions.
"""

from ytdigest.config import config

__version__ = config.APP_VERSION
