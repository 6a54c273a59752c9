from pathlib import Path

COMMENT_MARKER = "#"


class SourceError(Exception):
    """The url list could not be read."""


def read_urls(path: Path) -> list[str]:
    """Read urls from ``path``, one per line, skipping blanks and ``#`` comments."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Error reading URL file {path}: {e}") from e

    urls = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        urls.append(line)
    return urls
