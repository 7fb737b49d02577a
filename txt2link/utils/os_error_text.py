"""Human-readable text for an OS-level error."""


def os_error_text(exc: OSError) -> str:
    """Return the OS error message without errno or filename decoration."""
    return exc.strerror or str(exc)
