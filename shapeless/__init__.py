from . import html
from .html import Element, Elements, Render, Variant, render

__version__ = '0.1.0'
