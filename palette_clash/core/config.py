"""Language file loading and run settings.

The languages file is YAML in the GitHub linguist layout:

    Python:
      type: programming
      color: "#3572A5"
    Text:
      type: prose          # no color key -- ignored

Settings come from the environment (PALETTE_CLASH_YAML,
PALETTE_CLASH_THRESHOLD); CLI flags override them.
"""

import logging
import os
from dataclasses import dataclass

import yaml

_log = logging.getLogger('palette_clash.core.config')

DEFAULT_YAML = 'languages.yml'
DEFAULT_THRESHOLD = 10.0


class ConfigError(Exception):
    """Languages file or settings could not be loaded."""


@dataclass(frozen=True)
class Settings:
    yaml_path: str = DEFAULT_YAML
    threshold: float = DEFAULT_THRESHOLD

    @classmethod
    def from_env(cls) -> 'Settings':
        yaml_path = os.environ.get('PALETTE_CLASH_YAML') or DEFAULT_YAML
        raw = os.environ.get('PALETTE_CLASH_THRESHOLD')
        if raw is None or not raw.strip():
            return cls(yaml_path=yaml_path)
        try:
            threshold = float(raw)
        except ValueError as e:
            raise ConfigError(f'PALETTE_CLASH_THRESHOLD is not a number: {raw!r}') from e
        return cls(yaml_path=yaml_path, threshold=threshold)


def load_languages(path: str) -> dict[str, str]:
    """Read a languages file from disk and return name -> colour."""
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise ConfigError(f'cannot read {path}: {e}') from e
    return parse_languages(text, source=path)


def parse_languages(text: str, source: str = '<string>') -> dict[str, str]:
    """Parse languages YAML. Entries without a color key are ignored."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f'invalid YAML in {source}: {e}') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'{source}: expected a mapping of language -> attributes, got {type(data).__name__}')

    colours: dict[str, str] = {}
    for name, attrs in data.items():
        if not isinstance(attrs, dict) or attrs.get('color') is None:
            _log.debug('no color for %s', name)
            continue
        colours[str(name)] = str(attrs['color'])
    _log.debug('loaded %d colours from %s', len(colours), source)
    return colours
