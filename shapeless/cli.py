import os
import sys

from typing import Optional

import click

from .config import get_config
from .html import is_render, render
from .serve import APP_ENV, import_target


def load_target(target: str):
    # Add working directory to path
    if '' not in sys.path:
        sys.path = [''] + sys.path
    try:
        return import_target(target)
    except (ValueError, ImportError, AttributeError) as exc:
        raise click.BadParameter(str(exc), param_hint='TARGET') from exc


@click.group()
def cli():
    pass


@cli.command('render')
@click.argument('target')
def render_page(target: str):
    """Print the markup of a page, e.g. ``shapeless render myapp.pages:index``."""
    page = load_target(target)
    if callable(page) and not is_render(page):
        page = page()
    click.echo(render(page))


@cli.command()
@click.argument('target', required=False)
@click.option('--host', default=None, help='Bind server to this host')
@click.option('--port', default=None, type=int, help='Bind server to this port')
@click.option('--reload', default=False, is_flag=True, help='Enable auto-reload')
def serve(target: Optional[str], host: Optional[str], port: Optional[int], reload: bool):
    """Serve a page at ``/``; TARGET defaults to ``app`` in ``[tool.shapeless]``."""
    import uvicorn

    config = get_config()
    target = target or config['app']
    if not target:
        raise click.UsageError('No TARGET given and no `app` in [tool.shapeless]')
    load_target(target)

    os.environ[APP_ENV] = target
    uvicorn.run(
        'shapeless.serve:create_app_from_env',
        factory=True,
        host=host if host is not None else config['host'],
        port=port if port is not None else config['port'],
        reload=reload or config['reload'],
        app_dir='.',
        log_level='info')
