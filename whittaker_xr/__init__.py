"""Whittaker-Eilers smoothing for numpy and xarray."""
# isort: skip_file
from ._version import __version__

from .accessors import MissingDimensionError, WhittakerEilers
from .ops import smooth

__all__ = (
    "MissingDimensionError",
    "WhittakerEilers",
    "smooth",
    "__version__",
)
