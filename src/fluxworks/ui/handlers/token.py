"""API token persistence handlers.

The token is stored in the browser's local storage through a
``gr.BrowserState``; nothing is written on the server.
"""

import logging

logger = logging.getLogger(__name__)


def load_saved_token(stored: str | None) -> str:
    """Fill the token field from browser storage on page load.

    Args:
        stored: Value held in browser storage (None or "" if absent)

    Returns:
        Token to put in the token field
    """
    if stored:
        logger.info("Loaded saved API token from browser storage")
        return stored
    return ""


def remember_token(token: str | None, confirmed: bool, stored: str | None) -> str:
    """Persist the token if the user confirmed saving it.

    Args:
        token: Current value of the token field
        confirmed: Answer of the browser confirmation dialog
        stored: Value currently in browser storage

    Returns:
        New value for browser storage
    """
    token = (token or "").strip()
    if token and confirmed:
        logger.info("Saving API token to browser storage")
        return token
    return stored or ""
