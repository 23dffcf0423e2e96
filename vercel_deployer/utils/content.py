"""HTML content resolution and scratch directories."""

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from vercel_deployer.core.exceptions import EmptyContentError
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_html_content(value: str, base_dir: Path | None = None) -> str:
    """Return the HTML to deploy from inline markup or a file path.

    Relative paths are resolved against *base_dir* (the working directory
    by default). A string that is not a readable regular file is taken
    as literal HTML.

    Raises:
        EmptyContentError: The file or the literal text is blank.
    """
    path = _as_file(value, base_dir)
    if path is not None:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("content.file_unreadable", path=str(path), error=str(e))
        else:
            if not content.strip():
                raise EmptyContentError(f"file {path}")
            logger.debug("content.read_file", path=str(path), size=len(content))
            return content

    if not value or not value.strip():
        raise EmptyContentError("inline text")
    return value


def _as_file(value: str, base_dir: Path | None) -> Path | None:
    if not value or not value.strip():
        return None
    try:
        path = Path(value)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        if path.is_file():
            return path
    except (OSError, ValueError):
        # Markup is rarely a valid path: too long, NUL bytes, ...
        pass
    return None


@contextmanager
def ephemeral_workspace(prefix: str = "vercel-") -> Iterator[Path]:
    """Create a scratch directory that is removed on every exit path."""
    workdir = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        yield workdir
    finally:
        try:
            shutil.rmtree(workdir)
        except OSError as e:
            logger.warning("workspace.cleanup_failed", path=str(workdir), error=str(e))
