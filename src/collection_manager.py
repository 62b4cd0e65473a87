import sys
import os
import logging
import argparse
import traceback
from typing import Optional, Tuple, Any

# Import only the minimal constants needed for early execution
from common.constants import APP_NAME, APP_DESCRIPTION, APP_LOG_FILENAME
from utils.version import get_version

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def show_error_dialog(title, message, details=None):
    """Show error dialog for critical startup failures (even before Qt is initialized)"""
    try:
        from PySide6.QtWidgets import QApplication, QMessageBox

        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)

        msg_box = QMessageBox()
        msg_box.setIcon(QMessageBox.Icon.Critical)
        msg_box.setWindowTitle(title)
        msg_box.setText(message)
        if details:
            msg_box.setDetailedText(details)
        msg_box.exec()
    except Exception:
        # If GUI fails, print to stderr (visible if run from console)
        print(f"\n{'=' * 60}", file=sys.stderr)
        print(f"CRITICAL ERROR: {title}", file=sys.stderr)
        print(f"{'=' * 60}", file=sys.stderr)
        print(message, file=sys.stderr)
        if details:
            print(f"\nDetails:\n{details}", file=sys.stderr)
        print(f"{'=' * 60}\n", file=sys.stderr)


def parse_arguments(argv=None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(description=f"{APP_NAME} - {APP_DESCRIPTION}")

    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    parser.add_argument("--demo", action="store_true", help="Start with a collection of demo albums")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        metavar="LEVEL",
        help="Override the log level from config.ini (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument("--config", type=str, metavar="PATH", help="Use this config.ini instead of the default")

    return parser.parse_args(argv)


def print_version_info():
    """Print version and dependency information"""
    print(f"{APP_NAME} {get_version()}")
    print(f"Python: {sys.version.split()[0]}")

    try:
        from PySide6 import __version__ as pyside_version

        print(f"PySide6: {pyside_version}")
    except ImportError:
        print("PySide6: not available")


def _create_config(args: argparse.Namespace) -> Any:
    """Load config.ini, applying command-line overrides that are not persisted."""
    from common.config import Config

    config = Config(args.config)
    if args.log_level:
        config.override_log_level(args.log_level)
    return config


def _setup_logging_early(config: Any) -> Tuple[str, logging.Logger]:
    """Setup async logging and return (log_file_path, logger)."""
    from common.utils.async_logging import setup_async_logging

    log_dir = os.path.dirname(os.path.abspath(config.config_path))
    log_file_path = os.path.join(log_dir, APP_LOG_FILENAME)
    setup_async_logging(
        log_level=config.log_level,
        log_file_path=log_file_path,
        max_bytes=10 * 1024 * 1024,
        backup_count=3,
        console=config.log_level <= logging.DEBUG,
    )

    logger = logging.getLogger(__name__)
    logger.info(f"{APP_NAME} {get_version()} started with log level: {logging.getLevelName(config.log_level)}")
    config.log_config_location()
    return log_file_path, logger


def _run_gui(config: Any, log_file_path: str, demo: bool) -> int:
    """Start the main window and return the GUI exit code."""
    from ui.main_window import create_and_run_gui

    return create_and_run_gui(config, log_file_path, demo=demo)


def main(argv=None):
    """Main entry point for Music Collection Manager"""
    log_file_path: Optional[str] = None
    exception_handler = None

    try:
        args = parse_arguments(argv)

        if args.version:
            print_version_info()
            sys.exit(0)

        config = _create_config(args)
        log_file_path, logger = _setup_logging_early(config)

        # Install global exception handler AFTER logging is configured
        from utils.exception_handler import install_global_exception_handler

        exception_handler = install_global_exception_handler(log_file_path)

        sys.exit(_run_gui(config, log_file_path, args.demo))

    except Exception as e:
        # Critical startup failure - show error dialog and log
        error_msg = f"A critical error occurred during application startup:\n\n{str(e)}"
        error_details = traceback.format_exc()
        logging.getLogger(__name__).critical("CRITICAL STARTUP ERROR\n%s", error_details)
        if log_file_path:
            error_msg += f"\n\nError details have been logged to:\n{log_file_path}"

        show_error_dialog("Critical Startup Error", error_msg, error_details)

        from common.utils.async_logging import shutdown_async_logging

        if exception_handler:
            exception_handler.uninstall()
        shutdown_async_logging()

        sys.exit(1)


if __name__ == "__main__":
    main()
