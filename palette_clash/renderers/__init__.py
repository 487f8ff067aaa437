"""Auto-discovery of renderer modules.

Every .py file in this package that defines a `renderer` object is
auto-registered by palette_clash.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports — keep this list in sync with renderer modules
import palette_clash.renderers.html as _html  # noqa: F401
import palette_clash.renderers.json_report as _json_report  # noqa: F401
import palette_clash.renderers.swatch as _swatch  # noqa: F401
import palette_clash.renderers.text as _text  # noqa: F401
