from .attributes import install

HTMX_ATTRIBUTES = (
    'hx-get', 'hx-post', 'hx-patch', 'hx-delete', 'hx-put',
    'hx-trigger', 'hx-target', 'hx-swap', 'hx-swap-oob', 'hx-indicator',
    'hx-confirm', 'hx-headers', 'hx-params', 'hx-timeout',
    'hx-ws', 'hx-ws-reconnect', 'hx-ws-elt',
)


class Htmx:
    """``hx_*`` setters for the htmx attribute set, e.g. ``H.button().hx_post('/save')``."""


install(Htmx, HTMX_ATTRIBUTES)
