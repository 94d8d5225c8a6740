"""
Centralized logging using Loguru, gated by request verbosity.

LOG() checks the verbosity of the ResolveState connected to the current
context, so resolver modules can trace without having the state passed
to them. The state lives in a ContextVar, so concurrent requests running
as separate asyncio tasks each see their own verbosity.

Usage:
    from .log import LOG, state_connectToLogger

    # At the start of a resolution:
    state_connectToLogger(state)

    # Anywhere below it:
    LOG("Resolved ./app.css", level=2)
    LOG("Line 12 matched .submit-btn", level=3)

Verbosity 0 (the library default) keeps everything quiet.
"""

import sys
from contextvars import ContextVar
from typing import Any, Optional, TextIO

from loguru import logger

# Context variable holding the state of the request being resolved
_resolve_state: ContextVar[Optional[Any]] = ContextVar('resolve_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:<cyan>{function: <22}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def logger_redirect(sink: TextIO, colorize: Optional[bool] = None) -> None:
    """
    Send log output to another sink (e.g., a host's own stderr wrapper).

    Args:
        sink: Writable text stream
        colorize: Force colour on/off; None lets loguru decide
    """
    logger.remove()
    logger.add(sink, format=logger_format, level="DEBUG", colorize=colorize)


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ResolveState to the logging context.

    Args:
        state: ResolveState (or anything with a verbosity attribute)
    """
    _resolve_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata
    """
    state = _resolve_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
