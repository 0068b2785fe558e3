import importlib
import inspect
import logging
import os

from typing import Any, Callable, Mapping, Union

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.responses import HTMLResponse, Response
from starlette.routing import Route

from .html import Element, Elements, is_render, render

logger = logging.getLogger(__name__)

APP_ENV = 'SHAPELESS_APP'

Page = Union[Element, Elements, Callable[..., Any]]


class MarkupResponse(HTMLResponse):
    """``HTMLResponse`` taking an element, a sequence of elements or any renderable as content."""

    def render(self, content: Any) -> bytes:
        if content is None:
            return b''
        if isinstance(content, (bytes, memoryview)):
            return content
        return render(content).encode(self.charset)


def create_endpoint(_f: Page):
    # Elements are callable too, so a renderable is always served as is
    if is_render(_f):
        page = _f

        def _f():
            return page

    takes_request = any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        for p in inspect.signature(_f).parameters.values()
    )

    async def _e(request):
        args = (request, ) if takes_request else ()
        if inspect.iscoroutinefunction(_f):
            result = await _f(*args)
        else:
            result = await run_in_threadpool(_f, *args)
        if isinstance(result, Response):
            return result
        return MarkupResponse(result)
    return _e


def create_app(pages: Mapping[str, Page], debug: bool = False) -> Starlette:
    routes = []
    for path, page in pages.items():
        logger.debug('Adding page route %s -> %r', path, page)
        routes.append(Route(path, create_endpoint(page), methods=['GET']))
    return Starlette(debug=debug, routes=routes)


def import_target(target: str):
    """Resolve a ``module:attribute`` string, e.g. ``myapp.pages:index``."""
    module_name, _, attribute = target.partition(':')
    if not module_name or not attribute:
        raise ValueError(f'Target {target!r} must be in the form "module:attribute"')

    obj = importlib.import_module(module_name)
    for name in attribute.split('.'):
        obj = getattr(obj, name)
    return obj


def create_app_from_env() -> Starlette:
    """App factory for uvicorn: serves the ``$SHAPELESS_APP`` target at ``/``."""
    target = os.environ[APP_ENV]
    return create_app({'/': import_target(target)})
