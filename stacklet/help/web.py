# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
HTTP pages for the help knowledge base.

Routes:

    GET /, /index         topic listing, with `tagged`, `skip` and `limit` parameters
    GET /css/{path}       site stylesheets
    GET /{name}           a single topic
    GET /{topic}/{asset}  files in a topic folder
"""

from typing import Callable
from urllib.parse import urlencode

import jinja2
import uvicorn

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response
from fastmcp.utilities.logging import get_logger

from . import __version__
from .settings import SETTINGS, Settings
from .topics.errors import TopicError, TopicNotFound
from .topics.index import IndexCache
from .topics.models import Pagination
from .topics.pagination import filter_to_tags, paginate
from .topics.store import TopicStore


INDEX_TITLE = "Knowledgebase"
INDEX_DESCRIPTION = "Everything you need to know"

# called with the request, status code, message for the client and the error
ErrorHandler = Callable[[Request, int, str, Exception], Response]

logger = get_logger("stacklet.help")


def default_error_handler(request: Request, code: int, message: str, error: Exception) -> Response:
    """Log the error and send the short message to the client."""
    logger.warning(f"Sending error response: {code}, {message}, {request.url}, {error!r}")
    return PlainTextResponse(message, status_code=code)


def query_string(params: list[tuple[str, str | int]]) -> str:
    return "?" + urlencode(params)


def make_templates(store: TopicStore) -> jinja2.Environment:
    """Template environment, preferring views in the content root over packaged ones."""
    env = jinja2.Environment(
        loader=jinja2.ChoiceLoader(
            [
                jinja2.FileSystemLoader(store.views_dir),
                jinja2.PackageLoader("stacklet.help", "views"),
            ]
        ),
        autoescape=jinja2.select_autoescape(),
    )
    env.filters["query_string"] = query_string
    return env


def make_app(settings: Settings | None = None, error_handler: ErrorHandler | None = None) -> FastAPI:
    """Create the help site application."""
    settings = settings or SETTINGS
    handle_error = error_handler or default_error_handler

    store = TopicStore.from_settings(settings)
    index = IndexCache.for_store(store)
    templates = make_templates(store)

    app = FastAPI(
        title="Stacklet Help",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store
    app.state.index = index

    def render(template: str, **context) -> HTMLResponse:
        return HTMLResponse(templates.get_template(template).render(**context))

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index", response_class=HTMLResponse)
    def help_index(request: Request) -> Response:
        try:
            return serve_help_index(request)
        except (TopicError, jinja2.TemplateError) as e:
            return handle_error(request, 500, "Problem serving help index", e)

    def serve_help_index(request: Request) -> Response:
        pagination = Pagination.from_query(
            request.query_params, settings.default_page_size, settings.max_page_size
        )
        tagged = [tag for tag in request.query_params.getlist("tagged") if tag]
        page = paginate(
            filter_to_tags(index.get(), tagged),
            pagination,
            strict_page_size=settings.strict_page_size,
        )
        return render(
            "index.html",
            title=INDEX_TITLE,
            description=INDEX_DESCRIPTION,
            index=page,
            active_filters=tagged,
            pagination=pagination,
            next_query=_page_query(tagged, pagination.next_page()),
            previous_query=_page_query(tagged, pagination.previous_page()),
        )

    @app.get("/css/{path:path}")
    def help_asset(request: Request, path: str) -> Response:
        try:
            return FileResponse(store.site_asset_path(f"css/{path}"))
        except TopicError as e:
            return _error_response(handle_error, request, e, "Problem serving help asset")

    @app.get("/{name}", response_class=HTMLResponse)
    def topic_page(request: Request, name: str) -> Response:
        try:
            return render("topic.html", topic=store.hydrate(name))
        except (TopicError, jinja2.TemplateError) as e:
            return _error_response(handle_error, request, e, "Problem serving help topic")

    @app.get("/{topic}/{asset}")
    def topic_asset(request: Request, topic: str, asset: str) -> Response:
        try:
            return FileResponse(store.asset_path(topic, asset))
        except TopicError as e:
            return _error_response(handle_error, request, e, "Problem serving help topic asset")

    return app


def _error_response(
    handle_error: ErrorHandler, request: Request, error: Exception, message: str
) -> Response:
    if isinstance(error, TopicNotFound):
        return handle_error(request, 404, "Not found", error)
    return handle_error(request, 500, message, error)


def _page_query(
    tagged: list[str], pagination: Pagination | None
) -> list[tuple[str, str | int]] | None:
    if pagination is None:
        return None
    params: list[tuple[str, str | int]] = [("tagged", tag) for tag in tagged]
    params += [("skip", pagination.skip), ("limit", pagination.limit)]
    return params


def run_server(settings: Settings | None = None) -> None:
    """Serve the help site over HTTP."""
    settings = settings or SETTINGS
    uvicorn.run(make_app(settings), host=settings.host, port=settings.port)
