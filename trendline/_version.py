from importlib.metadata import version
from importlib.metadata import PackageNotFoundError


def _detect_version() -> str:
    """
    Detect the installed trendline version.

    Falls back to a development placeholder when the distribution
    metadata is not available (e.g. running from a source checkout).
    """
    try:
        return version("trendline")
    except PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _detect_version()
