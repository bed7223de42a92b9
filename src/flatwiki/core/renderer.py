"""HTML rendering of wiki pages."""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from flatwiki.core.errors import ConfigurationError, RenderError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)

TEMPLATE_NAMES = ("view", "edit")


class PageRenderer:
    """Renders pages through a fixed set of Jinja2 templates.

    All templates are loaded up front so a missing or broken template is a
    startup failure rather than a per-request one.
    """

    def __init__(
        self,
        templates_dir: Path,
        template_names: tuple[str, ...] = TEMPLATE_NAMES,
        app_title: str = "FlatWiki",
    ):
        if not templates_dir.is_dir():
            raise ConfigurationError(f"Templates directory not found: {templates_dir}")
        self.templates = Jinja2Templates(directory=str(templates_dir))
        self.app_title = app_title
        for name in template_names:
            try:
                self.templates.get_template(f"{name}.html")
            except TemplateError as exc:
                raise ConfigurationError(f"Cannot load template {name}.html: {exc}") from exc
        self.template_names = tuple(template_names)

    def render(self, request: Request, name: str, page: Page) -> HTMLResponse:
        """Render ``<name>.html`` for a page, fully, before responding.

        The page may be a stored one or an empty page built for the edit
        form.
        """
        try:
            # TemplateResponse renders the whole body on construction.
            return self.templates.TemplateResponse(
                request,
                f"{name}.html",
                {"page": page, "app_title": self.app_title},
            )
        except Exception as exc:
            raise RenderError(f"Failed to render {name}.html: {exc}") from exc
