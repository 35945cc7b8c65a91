"""Extract a YouTube video ID from a URL or a bare ID."""

from __future__ import annotations

import re

# Watch, short-link and embed URLs: the ID runs until the next query/fragment delimiter.
_URL_RE = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)")
# A bare 11-character video ID.
_BARE_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")


def extract_video_id(value: str) -> str | None:
    """Return the video ID contained in *value*, or ``None`` if none is recognized.

    Recognized inputs, tried in order:

    - ``https://www.youtube.com/watch?v=<id>&...``
    - ``https://youtu.be/<id>?...``
    - ``https://www.youtube.com/embed/<id>#...``
    - the bare 11-character ID itself (``[a-zA-Z0-9_-]``)
    """
    match = _URL_RE.search(value)
    if match:
        return match.group(1)

    if _BARE_ID_RE.fullmatch(value):
        return value

    return None
