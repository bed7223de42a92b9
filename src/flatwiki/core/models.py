"""Data models for FlatWiki."""

from pydantic import BaseModel, Field

TITLE_PATTERN = r"^[A-Za-z0-9]+$"


class Page(BaseModel):
    """Represents a wiki page.

    The title doubles as the storage key. A page built for an edit form
    that was never persisted carries ``exists=False``.
    """

    title: str = Field(pattern=TITLE_PATTERN)
    body: bytes = b""
    exists: bool = True

    @property
    def text(self) -> str:
        """Return the body decoded for display."""
        return self.body.decode("utf-8", errors="replace")
