import importlib

# Use targeted warning configuration
from extremekit.warnings import configure_warnings

configure_warnings()

__version__ = "0.1.0"

__license__ = "Revised BSD License"


def __getattr__(name):
    """Lazy import subpackages."""
    known_modules = [
        "loads",
        "utils",
        "errors",
    ]

    if name in known_modules:
        return importlib.import_module(f"extremekit.{name}")

    raise AttributeError(f"module 'extremekit' has no attribute '{name}'")
