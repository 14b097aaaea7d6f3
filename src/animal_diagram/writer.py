"""Persistence of rendered documents."""

from pathlib import Path


def write_document(path: Path, content: str) -> None:
    """Write rendered content to path, replacing any existing file.

    Parent directories are created as needed. Write failures propagate to
    the caller.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(content)
