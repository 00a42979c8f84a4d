"""
Authorization Utilities

Formatting of the per-request bearer credential.
"""

import logging
from typing import Optional

from publish.constants import BEARER_PREFIX
from publish.errors import InvalidCredential

logger = logging.getLogger(__name__)


def format_access_token(
    access_token: Optional[str],
    operation: str = "request",
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Normalize a token into an Authorization header value.

    The result carries the "Bearer " prefix exactly once, whether or not
    the caller already included it.

    Args:
        access_token: Raw token or "Bearer <token>"
        operation: Operation name for the debug log line
        log: Logger to use (defaults to module logger)

    Returns:
        "Bearer <token>"

    Raises:
        InvalidCredential: If the token is empty

    Example:
        format_access_token("abc123")         # "Bearer abc123"
        format_access_token("Bearer abc123")  # "Bearer abc123"
    """
    token = strip_bearer_prefix(access_token)
    if not token:
        raise InvalidCredential()

    formatted = f"{BEARER_PREFIX}{token}"
    (log or logger).debug(
        f"Prepared credential for {operation} (prefix: {formatted[:15]}...)",
    )
    return formatted


def strip_bearer_prefix(access_token: Optional[str]) -> str:
    """
    Remove a leading "Bearer " prefix (and surrounding whitespace).

    Args:
        access_token: Raw token or "Bearer <token>"

    Returns:
        Bare token, or "" if nothing usable was given
    """
    if not isinstance(access_token, str):
        return ""

    token = access_token.strip()
    # "Bearer " with nothing after it is stripped down to "Bearer"
    if token.startswith(BEARER_PREFIX) or token == BEARER_PREFIX.rstrip():
        token = token[len(BEARER_PREFIX):].strip()
    return token
