# sparc_scaffolder/processing/sanitizer.py
"""Strip tag-like markup from untrusted text."""

import re

_SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")


def sanitize(text: str) -> str:
    """Remove script blocks and any other tags, then trim whitespace.

    Total over any string and idempotent: after one pass no '<' is followed
    by a '>' anywhere later in the text.
    """
    text = _SCRIPT_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    return text.strip()
