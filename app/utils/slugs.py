import re
import threading
import time

# Anything outside ASCII letters/digits, Hiragana, Katakana and CJK ideographs
_DISALLOWED = re.compile(r"[^a-z0-9\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf]+")

MAX_SLUG_BASE_LENGTH = 50
FALLBACK_SLUG_BASE = "post"

_suffix_lock = threading.Lock()
_last_suffix = 0


def slugify(title: str) -> str:
    slug = _DISALLOWED.sub("-", title.lower()).strip("-")
    # Truncation can expose a hyphen at the cut
    return slug[:MAX_SLUG_BASE_LENGTH].rstrip("-")


def slug_suffix() -> int:
    """Millisecond timestamp, strictly increasing within this process."""
    global _last_suffix
    with _suffix_lock:
        now = int(time.time() * 1000)
        _last_suffix = max(now, _last_suffix + 1)
        return _last_suffix


def generate_slug(title: str) -> str:
    base = slugify(title) or FALLBACK_SLUG_BASE
    return f"{base}-{slug_suffix()}"
