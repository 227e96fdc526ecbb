from importlib.metadata import PackageNotFoundError, version

from smokechart.chart import Smokechart
from smokechart.exceptions import InvalidQuantileError, MalformedMatrixError

try:
    __version__ = version("smokechart")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["InvalidQuantileError", "MalformedMatrixError", "Smokechart", "__version__"]
