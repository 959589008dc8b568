"""Browser launches for documentation, changelog and repository links."""

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_url(url: str) -> bool:
    """Open ``url`` in the user's browser without waiting for it.

    Returns:
        True if a browser accepted the URL.
    """
    logger.info(f"Opening {url}")
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.error(f"Could not open browser for {url}: {e}")
        return False
    if not opened:
        logger.warning(f"No browser available to open {url}")
    return opened
