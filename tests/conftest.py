import sys
import types

import pytest

from shapeless import html as H


@pytest.fixture
def pages(monkeypatch):
    """An importable ``demo_pages`` module holding a static page and a page builder."""
    module = types.ModuleType('demo_pages')
    module.index = H.div().class_('card').child('index')
    module.build = lambda: H.ul()(H.li()('a'), H.li()('b'))
    monkeypatch.setitem(sys.modules, 'demo_pages', module)
    return module


@pytest.fixture(autouse=True)
def restore_sys_path(monkeypatch):
    # the CLI puts the working directory on sys.path
    monkeypatch.setattr(sys, 'path', list(sys.path))
