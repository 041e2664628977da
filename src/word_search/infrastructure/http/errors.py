from __future__ import annotations

import functools

import httpx
from httpx_sse import SSEError

from word_search.domain.files.errors import ApiError


def unwrap_error(e: Exception) -> str:
    """Extract a human-readable error message from httpx exceptions."""
    if isinstance(e, httpx.HTTPStatusError):
        # The request reached the server, but the response had an error code
        try:
            data = e.response.json()
            detail = data.get("detail") if isinstance(data, dict) else data
            return f"{e.response.status_code} {e.response.reason_phrase}: {detail}"
        except Exception:
            return f"{e.response.status_code} {e.response.reason_phrase}"

    elif isinstance(e, httpx.TimeoutException):
        return "Request timed out."

    elif isinstance(e, httpx.ConnectError):
        return "Failed to connect to server. Is it running?"

    elif isinstance(e, SSEError):
        return f"Invalid event stream: {e}"

    elif isinstance(e, httpx.RequestError):
        # Connection drops, protocol errors, DNS failures, etc.
        return f"Request failed: {e.__class__.__name__}: {e}"

    else:
        # Anything unexpected
        return str(e)


def handle_httpx_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ApiError:
            raise
        except (httpx.HTTPError, ValueError) as e:
            # Wrap transport and payload errors into a consistent ApiError
            raise ApiError(unwrap_error(e)) from e

    return wrapper
