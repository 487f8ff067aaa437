"""Renderer auto-discovery and registration.

Scans palette_clash/renderers/ for modules that define a `renderer` object
of type Renderer. Collects them into a dict keyed by name.

Falls back to the explicit module list when pkgutil.iter_modules finds
nothing (frozen binaries).
"""

import importlib
import pkgutil

from palette_clash.core.types import Renderer

_registry: dict[str, Renderer] = {}
_modules: dict[str, object] = {}

# Known renderer module names — fallback for frozen binaries
_RENDERER_MODULES = [
    'html',
    'json_report',
    'swatch',
    'text',
]


def discover() -> dict[str, Renderer]:
    """Import all renderer modules and return the registry."""
    if _registry:
        return _registry

    import palette_clash.renderers as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _RENDERER_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'palette_clash.renderers.{modname}')
        rend = getattr(module, 'renderer', None)
        if isinstance(rend, Renderer):
            _registry[rend.name] = rend
            _modules[rend.name] = module

    return _registry


def module_for(name: str) -> object:
    """Return the module that defines renderer `name` (for docstring access)."""
    get(name)
    return _modules[name]


def get(name: str) -> Renderer:
    """Get a renderer by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown renderer: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_renderers() -> dict[str, Renderer]:
    """Return all registered renderers."""
    return discover()
