from pathlib import Path
from typing import Any, Union

import tomli

DEFAULTS = {
    'host': '127.0.0.1',
    'port': 5000,
    'reload': False,
    'app': None,
}


def get_config(path: Union[str, Path] = 'pyproject.toml', section='tool.shapeless') -> dict[str, Any]:
    """Read ``section`` of ``path`` on top of :data:`DEFAULTS`.

    A missing file or a missing section leaves the defaults in place.
    """
    config = dict(DEFAULTS)
    path = Path(path)
    if not path.is_file():
        return config

    with open(path, 'rb') as fp:
        data = tomli.load(fp)

    for key in section.split('.'):
        if key not in data:
            return config
        data = data[key]
        if not isinstance(data, dict):
            raise RuntimeError(f'`{section}` in {path} must be a table')

    unknown = set(data) - set(DEFAULTS)
    if unknown:
        raise RuntimeError(f'Unknown `{section}` keys: {", ".join(sorted(unknown))}')

    config.update(data)
    return config
