import sys
from typing import Any, Optional

from loguru import logger

# Timestamps to the millisecond, frame-rate logs land within the same second
SCOPE_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO", sink: Any = None, colorize: Optional[bool] = None
) -> int:
    """
    Send pyscope logs to a single sink.

    Any previously added loguru handler is removed first, so calling this twice
    does not duplicate messages.

    Parameters
    ----------
    log_level : str, default="INFO"
        Minimum level: TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL.
    sink : Any, default=None
        Anything ``logger.add`` accepts (file-like object, path, callable).
        Defaults to stderr.
    colorize : Optional[bool], default=None
        Force ANSI colors on or off. ``None`` lets loguru decide from the sink.

    Returns
    -------
    int
        Handler id, usable with ``logger.remove``.
    """
    logger.remove()
    return logger.add(
        sys.stderr if sink is None else sink,
        level=log_level.upper(),
        format=SCOPE_LOG_FORMAT,
        colorize=colorize,
    )
