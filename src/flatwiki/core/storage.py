"""Storage abstraction for wiki pages."""

import contextlib
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, StoreError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    def load(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if absent."""
        ...

    @abstractmethod
    def save(self, page: Page) -> None:
        """Save a page, replacing any previous body. Raises StoreError."""
        ...

    @abstractmethod
    def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is a flat file holding the raw body bytes, with no header
    or metadata. File naming: Title.txt
    """

    def __init__(self, base_path: Path, suffix: str = ".txt", file_mode: int = 0o600):
        self.base_path = base_path
        self.suffix = suffix
        self.file_mode = file_mode
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return title + self.suffix

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / self._title_to_filename(title)

    def load(self, title: str) -> Page:
        """Read the whole page file or fail."""
        path = self._get_path(title)
        logger.info("load %s", path)
        try:
            body = path.read_bytes()
        except OSError as exc:
            raise PageNotFoundError(title) from exc
        return Page(title=title, body=body, exists=True)

    def save(self, page: Page) -> None:
        """Write the page body through a temp file renamed over the target.

        The rename replaces the old file in one step, so concurrent saves
        to the same title leave exactly one writer's body on disk.
        """
        path = self._get_path(page.title)
        logger.info("save %s", path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{page.title}.", suffix=".tmp", dir=self.base_path
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(page.body)
            os.chmod(tmp_name, self.file_mode)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StoreError(str(exc)) from exc

    def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        return self._get_path(title).is_file()
