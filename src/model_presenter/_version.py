"""Installed version of model-presenter."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed distribution version, or 0.0.0 from a bare checkout."""
    try:
        return version("model-presenter")
    except PackageNotFoundError:
        return "0.0.0"
