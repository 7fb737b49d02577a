"""Check whether file content can name a symlink target."""


def is_symlinkable(link: str) -> bool:
    """Return False for content no symlink can point at (empty or NUL-bearing)."""
    return bool(link) and "\x00" not in link
