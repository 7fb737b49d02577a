"""Get txt2link package version (cached)."""

import importlib.metadata

# Package version - cached for performance
_VERSION_CACHE: str | None = None


def get_package_version() -> str:
    """Get txt2link package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version("txt2link")
        except importlib.metadata.PackageNotFoundError:
            _VERSION_CACHE = "unknown"
    return _VERSION_CACHE
