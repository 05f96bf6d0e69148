import logging
import sys
from datetime import datetime
from typing import Optional

DEFAULT_LOG_FORMAT = '[%(asctime)s] %(name)s - %(levelname)s - %(message)s'


def create_isolated_logger(
    name: str,
    level: int = logging.ERROR,
    log_format: Optional[str] = None,
    add_console_handler: bool = True,
    add_file_handler: bool = False,
    file_path: Optional[str] = None,
) -> logging.Logger:
    """
    Create a logger whose records never reach the root logger.

    The telemetry client logs while spans are exported. A TraceListenerHandler
    attached to the root logger must not see those records, so the logger does
    not propagate and its handlers are replaced on every call.

    Args:
        name: Logger name, usually below the `traceforward` namespace
        level: Logging level (default: logging.ERROR)
        log_format: Custom log format string
        add_console_handler: Write records to stderr (default: True)
        add_file_handler: Append records to a file (default: False)
        file_path: Path for the log file, defaults to `<name>_<date>.log`

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = []

    if add_console_handler:
        handlers.append(logging.StreamHandler(sys.stderr))

    if add_file_handler:
        if file_path is None:
            file_path = f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
        handlers.append(logging.FileHandler(file_path))

    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def create_null_logger(name: str, level: int = logging.ERROR) -> logging.Logger:
    """Create an isolated logger that discards every record."""
    return create_isolated_logger(
        name=name, level=level, add_console_handler=False, add_file_handler=False
    )
