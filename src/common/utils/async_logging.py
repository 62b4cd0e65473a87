import logging
import logging.handlers
import queue
import atexit
import sys
from typing import List, Optional

# The running listener; None until setup_async_logging() is called
_queue_listener: Optional[logging.handlers.QueueListener] = None
_shutdown_registered = False

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """File handler whose rollover failure is reported instead of raised.

    When the log file cannot be renamed, the collection keeps appending to
    the oversized file until the next rollover succeeds.
    """

    def doRollover(self):
        try:
            super().doRollover()
        except PermissionError as e:
            print(f"Warning: Could not rotate log file (file in use): {e}", file=sys.stderr)


def _build_handlers(
    log_file_path: Optional[str], max_bytes: int, backup_count: int, console: bool
) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_file_path:
        handlers.append(
            SafeRotatingFileHandler(log_file_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_async_logging(
    log_level=logging.INFO,
    log_file_path: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
    console: bool = False,
) -> None:
    """
    Point the root logger at a queue drained by a background listener.

    The collection window only pays for putting a record on the queue; file
    and console output happen on the listener thread. Calling this again
    replaces the previous listener.

    Args:
        log_level: Level for the root logger
        log_file_path: Rotating log file to write; None skips the file
        max_bytes: Size at which the log file is rotated
        backup_count: Rotated files kept next to the current one
        console: Mirror every record to stderr
    """
    global _queue_listener, _shutdown_registered

    if _queue_listener is not None:
        shutdown_async_logging()

    log_queue: queue.Queue = queue.Queue(-1)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(logging.handlers.QueueHandler(log_queue))

    handlers = _build_handlers(log_file_path, max_bytes, backup_count, console)
    _queue_listener = logging.handlers.QueueListener(log_queue, *handlers, respect_handler_level=True)
    _queue_listener.start()

    if not _shutdown_registered:
        atexit.register(shutdown_async_logging)
        _shutdown_registered = True

    logging.getLogger(__name__).info("Asynchronous logging setup completed")


def shutdown_async_logging():
    """Drain pending records, then flush and close the output handlers. Safe to call twice."""
    global _queue_listener

    listener, _queue_listener = _queue_listener, None
    if listener is None:
        return

    listener.stop()
    for handler in listener.handlers:
        handler.flush()
        handler.close()
