"""Request path validation.

Every page route runs the ``page_title`` dependency before its handler.
It matches the raw request path against an anchored
``/<action>/<title>`` pattern and answers 404 on any mismatch, so no
handler ever sees a title that could escape the page directory.
"""

import logging
import re
from typing import Annotated, NamedTuple

from fastapi import Depends, HTTPException, Request

from flatwiki.core.errors import ConfigurationError, InvalidPathError

logger = logging.getLogger(__name__)

ACTIONS = ("view", "edit", "save")
TITLE_CHARS = "[A-Za-z0-9]+"


class PageRoute(NamedTuple):
    action: str
    title: str


class PathValidator:
    """Compiled ``/<action>/<title>`` matcher."""

    def __init__(self, actions: tuple[str, ...] = ACTIONS, title_pattern: str = TITLE_CHARS):
        if not actions:
            raise ConfigurationError("At least one page action is required")
        alternatives = "|".join(re.escape(a) for a in actions)
        try:
            # Anchored by fullmatch() in parse().
            self._path_re = re.compile(rf"/({alternatives})/({title_pattern})")
            self._title_re = re.compile(title_pattern)
        except re.error as exc:
            raise ConfigurationError(f"Invalid title pattern {title_pattern!r}: {exc}") from exc
        self._actions = tuple(actions)

    @property
    def actions(self) -> tuple[str, ...]:
        return self._actions

    def parse(self, path: str) -> PageRoute:
        """Split a request path into action and title, or raise InvalidPathError."""
        match = self._path_re.fullmatch(path)
        if match is None:
            raise InvalidPathError(path)
        return PageRoute(action=match.group(1), title=match.group(2))

    def is_valid_title(self, title: str) -> bool:
        return self._title_re.fullmatch(title) is not None


def page_title(request: Request) -> str:
    """Validate the request path and return the page title it names."""
    validator: PathValidator = request.app.state.validator
    try:
        # The path the router matched; request.url re-parses it and drops
        # tab, CR and LF.
        route = validator.parse(request.scope["path"])
    except InvalidPathError as exc:
        logger.debug("Rejected %s", exc.path)
        raise HTTPException(status_code=404, detail="Not Found") from exc
    return route.title


PageTitle = Annotated[str, Depends(page_title)]
