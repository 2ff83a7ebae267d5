import logging
import sys

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> None:
    """Attach a stream handler to the package logger, once."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if any(getattr(h, "_authhelper", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    handler._authhelper = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
