"""Users API application package.

Exposes the installed distribution version as ``__version__``.
"""
from importlib.metadata import PackageNotFoundError, version

try:  # Resolves once installed with pip; source checkouts fall back.
    __version__ = version("users-api-scaffold")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
