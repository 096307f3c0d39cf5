"""Auto-discovery of exporter modules.

Every .py file in this package that defines an `exporter` object is
auto-registered by palette_kit.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in a frozen binary, where pkgutil.iter_modules finds nothing.
"""

# PyInstaller hidden imports — keep this list in sync with exporter modules
import palette_kit.exporters.css as _css  # noqa: F401
import palette_kit.exporters.tailwind as _tailwind  # noqa: F401
