"""FlatWiki FastAPI application."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from flatwiki.config import Settings
from flatwiki.core.errors import (
    ConfigurationError,
    PageNotFoundError,
    RenderError,
    StoreError,
    WikiError,
)
from flatwiki.core.models import Page
from flatwiki.core.renderer import PageRenderer
from flatwiki.core.routing import PageTitle, PathValidator
from flatwiki.core.storage import FileStorage, Storage

logger = logging.getLogger(__name__)

router = APIRouter(redirect_slashes=False)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


PageStore = Annotated[Storage, Depends(get_storage)]
Renderer = Annotated[PageRenderer, Depends(get_renderer)]


# Path parameters are only there for routing; handlers take the title from
# the validated PageTitle dependency.


@router.api_route("/view/{name}", methods=["GET", "POST"], response_class=HTMLResponse)
def view_page(request: Request, title: PageTitle, storage: PageStore, renderer: Renderer) -> Response:
    """View a wiki page."""
    logger.info("view: %s", request.url.path)
    try:
        page = storage.load(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)
    return renderer.render(request, "view", page)


@router.get("/edit/{name}", response_class=HTMLResponse)
def edit_page(request: Request, title: PageTitle, storage: PageStore, renderer: Renderer) -> Response:
    """Edit page form."""
    try:
        page = storage.load(title)
    except PageNotFoundError:
        # New page, never written until saved
        page = Page(title=title, exists=False)
    return renderer.render(request, "edit", page)


@router.post("/save/{name}")
def save_page(request: Request, title: PageTitle, storage: PageStore, body: str = Form("")) -> Response:
    """Save page content."""
    logger.info("save: %s", request.url.path)
    storage.save(Page(title=title, body=body.encode("utf-8")))
    return RedirectResponse(url=f"/view/{title}", status_code=302)


async def wiki_error_handler(request: Request, exc: WikiError) -> PlainTextResponse:
    """Answer store and render failures with a 500 carrying the message."""
    logger.error("%s failed: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and its collaborators.

    Raises ConfigurationError when the page directory cannot be created or
    the templates cannot be loaded, before any request is served.
    """
    if settings is None:
        settings = Settings()

    try:
        storage = FileStorage(
            settings.data_dir,
            suffix=settings.page_suffix,
            file_mode=settings.file_mode,
        )
    except OSError as exc:
        raise ConfigurationError(f"Cannot use data directory {settings.data_dir}: {exc}") from exc
    validator = PathValidator()
    renderer = PageRenderer(settings.templates_dir, app_title=settings.app_title)

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.validator = validator
    app.state.renderer = renderer

    app.add_exception_handler(StoreError, wiki_error_handler)
    app.add_exception_handler(RenderError, wiki_error_handler)
    app.include_router(router)

    logger.info("Serving pages from %s", settings.data_dir.resolve())
    return app
