import re
from urllib.parse import urlparse

from batch_shot.models import MAX_TRIM, MIN_TRIM

MAX_FILENAME_LENGTH = 255
EXTENSION = ".png"

_whitespace = re.compile(r"\s+")
_unsafe = re.compile(r"[^A-Za-z0-9]")


def clamp_trim(trim: int) -> int:
    return max(MIN_TRIM, min(MAX_TRIM, trim))


def trim_label(label: str, max_length: int) -> str:
    """Shorten a title or url to ``max_length`` characters.

    Long urls are reduced to their host name (without ``www.``) when that
    fits, anything else is cut at ``max_length``.
    """
    if len(label) <= max_length:
        return label

    if label.startswith("http"):
        try:
            host = urlparse(label).hostname
        except ValueError:
            host = None
        if host:
            host = host.removeprefix("www.")
            if len(host) <= max_length:
                return host

    return label[:max_length]


def sanitize(label: str) -> str:
    label = _whitespace.sub("_", label)
    return _unsafe.sub("_", label)


def build_filename(label: str, trim: int, index: int, width: int, height: int) -> str:
    """Compose ``0001_<label>_<width>px_<height>px.png`` for a captured page.

    The result never exceeds 255 characters; when it would, the label is
    shortened and the index prefix and extension are kept intact.
    """
    label = sanitize(trim_label(label, clamp_trim(trim)))
    prefix = f"{index:04d}_"
    suffix = f"_{width}px_{height}px"

    budget = MAX_FILENAME_LENGTH - len(prefix) - len(EXTENSION)
    if len(label) + len(suffix) > budget:
        label = label[: max(budget - len(suffix), 0)]
    middle = (label + suffix)[:budget]

    return f"{prefix}{middle}{EXTENSION}"
