import keyword

# builtins that read badly as method names on an element
SHADOWED_NAMES = ('type', )

ATTRIBUTES = (
    'accept', 'accesskey', 'action', 'alt', 'async', 'autocomplete',
    'autofocus', 'autoplay',
    'checked', 'contenteditable', 'controls',
    'data', 'datetime', 'defer', 'dir', 'disabled', 'download', 'draggable',
    'enctype',
    'for', 'form',
    'headers', 'height', 'hidden', 'href',
    'id', 'ismap', 'itemprop',
    'lang', 'list',
    'max', 'maxlength', 'media', 'method', 'min', 'multiple',
    'name', 'novalidate',
    'pattern', 'placeholder',
    'readonly', 'rel', 'required', 'rows',
    'selected', 'src', 'step', 'style',
    'tabindex', 'target', 'title', 'type',
    'value',
    'width',
)


def python_name(name: str) -> str:
    """HTML name -> Python identifier: ``hx-swap-oob`` -> ``hx_swap_oob``, ``for`` -> ``for_``."""
    name = name.replace('-', '_')
    if keyword.iskeyword(name) or name in SHADOWED_NAMES:
        name += '_'
    return name


def html_name(name: str) -> str:
    """Python identifier -> HTML name, the inverse of :func:`python_name`."""
    if name.endswith('_'):
        name = name[:-1]
    return name.replace('_', '-')


def attr_setter(key: str):
    def setter(self, value):
        return self.attr(key, value)

    setter.__name__ = setter.__qualname__ = python_name(key)
    setter.__doc__ = f'Set the ``{key}`` attribute.'
    return setter


def install(cls, keys):
    for key in keys:
        setattr(cls, python_name(key), attr_setter(key))
    return cls


class Attributes:
    """Fluent setters for the standard HTML attributes.

    Every setter is a one-line delegation to ``attr(key, value)`` and is
    generated from :data:`ATTRIBUTES`; names clashing with Python keywords
    get a trailing underscore (``for_``, ``async_``).
    """


install(Attributes, ATTRIBUTES)
