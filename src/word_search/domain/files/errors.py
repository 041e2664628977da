class ApiError(RuntimeError):
    """Raised when an HTTP/API error occurs, with a human-readable message."""
