"""Exception hierarchy for FlatWiki."""


class WikiError(Exception):
    """Base class for all FlatWiki errors."""


class ConfigurationError(WikiError):
    """A startup precondition failed (bad pattern, missing template)."""


class InvalidPathError(WikiError):
    """Request path does not have the ``/<action>/<title>`` shape."""

    def __init__(self, path: str):
        super().__init__(f"Invalid page path: {path!r}")
        self.path = path


class PageNotFoundError(WikiError):
    """No page is stored under the requested title."""

    def __init__(self, title: str):
        super().__init__(f"Page not found: {title}")
        self.title = title


class StoreError(WikiError):
    """Writing a page to the backing store failed."""


class RenderError(WikiError):
    """A template could not be rendered."""
