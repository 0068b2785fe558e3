from __future__ import annotations

import copy

from enum import Enum
from functools import partial
from typing import ClassVar, Iterator, Protocol, Type, TypeVar, runtime_checkable

from .attributes import Attributes, html_name, python_name
from .htmx import Htmx

TAGS = (
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio',
    'b', 'base', 'bdi', 'bdo', 'blockquote', 'body', 'br', 'button',
    'canvas', 'caption', 'cite', 'code', 'col', 'colgroup',
    'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt',
    'em', 'embed',
    'fieldset', 'figcaption', 'figure', 'footer', 'form',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup', 'hr', 'html',
    'i', 'iframe', 'img', 'input', 'ins',
    'kbd',
    'label', 'legend', 'li', 'link',
    'main', 'map', 'mark', 'math', 'menu', 'meta', 'meter',
    'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output',
    'p', 'param', 'picture', 'pre', 'progress',
    'q',
    'rp', 'rt', 'ruby',
    's', 'samp', 'script', 'section', 'select', 'slot', 'small', 'source', 'span',
    'strong', 'style', 'sub', 'summary', 'sup', 'svg',
    'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead',
    'time', 'title', 'tr', 'track',
    'u', 'ul',
    'var', 'video',
    'wbr',
)

SLASH_TAGS = (
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
)

DOCTYPE_TAGS = ('html', )


TElement = TypeVar('TElement', bound='Element')


@runtime_checkable
class Render(Protocol):
    def render(self) -> str:
        ...


def is_render(value) -> bool:
    # element classes carry an unbound ``render`` too
    return isinstance(value, Render) and not isinstance(value, type)


def render(value) -> str:
    """Project ``value`` to markup text.

    Anything with a ``render()`` method renders itself, everything else
    (strings, numbers) goes through ``str`` untouched. Nothing is escaped.
    """
    if is_render(value):
        return value.render()
    return str(value)


class Variant(Enum):
    NORMAL = 'normal'
    ORPHAN = 'orphan'
    SLASH = 'slash'
    DOCTYPE = 'doctype'


class Element(Attributes, Htmx):
    """A single HTML tag built up through chained calls.

    Every builder method returns a new element and leaves the receiver
    untouched, so an intermediate handle keeps rendering what it rendered
    when it was taken. Children are rendered as soon as they are attached.
    """

    default_variant: ClassVar[Variant] = Variant.NORMAL

    tag_name: str
    classes: list[str]
    attrs: list[str]
    content: str
    variant: Variant

    @classmethod
    def __class_getitem__(cls: Type[TElement], _class: str) -> Type[TElement]:
        return partial(cls, _class=_class)

    def __init__(self, tag_name: str, *children, _class='', **attrs) -> None:
        self.tag_name = tag_name
        self.classes = _class.split()
        class_ = attrs.pop('class_', None)
        if class_ is not None:
            self.classes += str(class_).split()
        self.attrs = []
        self.content = ''
        self.variant = self.default_variant

        for child in children:
            self.content += render(child)
        for key, value in attrs.items():
            key = html_name(key)
            if value is None:
                self.attrs.append(key)
            else:
                self.attrs.append(f'{key}="{render(value)}"')

    def __call__(self: TElement, *children) -> TElement:
        el = self._copy()
        for child in children:
            el.content += render(child)
        return el

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.render()!r}>'

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def _copy(self: TElement) -> TElement:
        el = copy.copy(self)
        el.classes = list(self.classes)
        el.attrs = list(self.attrs)
        return el

    def to_elements(self) -> Elements:
        return Elements(self)

    def class_(self: TElement, token) -> TElement:
        el = self._copy()
        el.classes.append(str(token))
        return el

    def tw(self: TElement, token) -> TElement:
        # Tailwind utilities are plain classes
        return self.class_(token)

    def attr(self: TElement, key, value) -> TElement:
        el = self._copy()
        el.attrs.append(f'{render(key)}="{render(value)}"')
        return el

    def orphan_attr(self: TElement, key) -> TElement:
        el = self._copy()
        el.attrs.append(str(key))
        return el

    def child(self: TElement, child) -> TElement:
        el = self._copy()
        el.content += render(child)
        return el

    def _with_variant(self: TElement, variant: Variant) -> TElement:
        el = self._copy()
        el.variant = variant
        return el

    def orphan(self: TElement) -> TElement:
        return self._with_variant(Variant.ORPHAN)

    def slash(self: TElement) -> TElement:
        return self._with_variant(Variant.SLASH)

    def doctype(self: TElement) -> TElement:
        return self._with_variant(Variant.DOCTYPE)

    def render(self) -> str:
        tag = self.tag_name
        if self.attrs:
            tag += ' ' + ' '.join(self.attrs)
        if self.classes:
            tag += f' class="{" ".join(self.classes)}"'

        if self.variant is Variant.ORPHAN:
            return f'<{tag}>'
        if self.variant is Variant.SLASH:
            return f'<{tag} />'
        html = f'<{tag}>{self.content}</{self.tag_name}>'
        if self.variant is Variant.DOCTYPE:
            return '<!DOCTYPE html>' + html
        return html


class Tag(Element):
    """Base of the generated tag classes; the tag name comes from the class."""

    tag: ClassVar[str] = ''

    def __init__(self, *children, _class='', **attrs) -> None:
        super().__init__(self.tag, *children, _class=_class, **attrs)


class Elements:
    """Sibling elements rendered back to back with no wrapping tag."""

    def __init__(self, *elements: Element) -> None:
        self.elements = list(elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __repr__(self) -> str:
        return f'<Elements {self.render()!r}>'

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def push(self, element: Element) -> Elements:
        return Elements(*self.elements, element)

    def append(self, other: Elements) -> Elements:
        """Move every element of ``other`` to the end of a new sequence, leaving ``other`` empty."""
        elements = Elements(*self.elements, *other.elements)
        other.elements.clear()
        return elements

    def render(self) -> str:
        return ''.join(el.render() for el in self.elements)


for t in TAGS:
    if t in SLASH_TAGS:
        default_variant = Variant.SLASH
    elif t in DOCTYPE_TAGS:
        default_variant = Variant.DOCTYPE
    else:
        default_variant = Variant.NORMAL
    locals()[python_name(t)] = type(python_name(t), (Tag, ), {
        'tag': t,
        'default_variant': default_variant,
    })

del t, default_variant
