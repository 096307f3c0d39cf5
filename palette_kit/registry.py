"""Exporter auto-discovery and registration.

Scans palette_kit/exporters/ for modules that define an `exporter` object
of type Exporter and collects them into a dict keyed by name.

Frozen binaries (PyInstaller) make pkgutil.iter_modules return nothing, so
the known module list below is used instead.
"""

import importlib
import pkgutil

from palette_kit.core.types import Exporter

_registry: dict[str, Exporter] = {}

_EXPORTER_MODULES = ['css', 'tailwind']


def discover() -> dict[str, Exporter]:
    """Import all exporter modules and return the registry."""
    if _registry:
        return _registry

    import palette_kit.exporters as pkg

    found = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    for modname in found or _EXPORTER_MODULES:
        module = importlib.import_module(f'palette_kit.exporters.{modname}')
        exp = getattr(module, 'exporter', None)
        if isinstance(exp, Exporter):
            _registry[exp.name] = exp

    return _registry


def get(name: str) -> Exporter:
    """Get an exporter by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown exporter: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_exporters() -> dict[str, Exporter]:
    """Return all registered exporters."""
    return discover()


def module_for(name: str) -> object:
    """The raw module behind an exporter (for its docstring)."""
    return importlib.import_module(f'palette_kit.exporters.{name}')
