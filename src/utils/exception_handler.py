"""
Global exception handler for Music Collection Manager.

Catches unhandled exceptions raised from Qt slots and the interpreter,
logs them and shows an error dialog instead of letting the app die silently.
"""

import sys
import logging
import traceback
import os
import faulthandler
from typing import Optional
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QObject, qInstallMessageHandler, QtMsgType

logger = logging.getLogger(__name__)

SUPPRESS_DIALOGS_ENV = "COLLECTION_SUPPRESS_ERROR_DIALOGS"

_original_excepthook = sys.excepthook


def _show_error_dialog(message: str, details: str, log_file_path: Optional[str] = None):
    """Show the unexpected-error dialog, or print to stderr without a QApplication."""
    if os.environ.get(SUPPRESS_DIALOGS_ENV) == "1":
        return

    if QApplication.instance() is None:
        print(f"\nERROR: {message}", file=sys.stderr)
        print(f"\nDetails:\n{details}", file=sys.stderr)
        return

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle("Unexpected Error")
    msg_box.setText(
        "An unexpected error occurred, but the application will try to continue.\n\n"
        f"{message}"
    )
    msg_box.setDetailedText(details)
    if log_file_path:
        msg_box.setInformativeText(f"Error details have been logged to:\n{log_file_path}")
    msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg_box.exec()


class GlobalExceptionHandler(QObject):
    """Installs sys.excepthook, a Qt message handler and faulthandler."""

    _QT_LEVELS = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.CRITICAL,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def __init__(self, log_file_path: Optional[str] = None):
        super().__init__()
        self.log_file_path = log_file_path
        self._fault_handler_file = None

    def install(self):
        sys.excepthook = self._handle_exception
        qInstallMessageHandler(self._qt_message_handler)
        self._enable_faulthandler()
        logger.info("Global exception handler installed")

    def uninstall(self):
        sys.excepthook = _original_excepthook
        qInstallMessageHandler(None)
        faulthandler.disable()
        if self._fault_handler_file:
            self._fault_handler_file.close()
            self._fault_handler_file = None
        logger.info("Global exception handler uninstalled")

    def _enable_faulthandler(self):
        if not self.log_file_path:
            faulthandler.enable(all_threads=True)
            return
        try:
            # Handle stays open so faulthandler can write to it on a hard crash
            self._fault_handler_file = open(self.log_file_path, "a", encoding="utf-8")
            faulthandler.enable(file=self._fault_handler_file, all_threads=True)
        except OSError as e:
            logger.error(f"Failed to configure faulthandler file logging: {e}")
            faulthandler.enable(all_threads=True)

    def _qt_message_handler(self, mode: QtMsgType, context, message: str):
        """Forward Qt's own diagnostics into logging."""
        level = self._QT_LEVELS.get(mode, logging.DEBUG)
        logger.log(level, f"[QT] {message} (Context: {context.file}:{context.line}, {context.function})")

    def _handle_exception(self, exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            _original_excepthook(exc_type, exc_value, exc_traceback)
            return

        error_msg = f"{exc_type.__name__}: {exc_value}"
        error_details = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
        logger.critical("UNHANDLED EXCEPTION %s\n%s", error_msg, error_details)

        _show_error_dialog(error_msg, error_details, self.log_file_path)


def install_global_exception_handler(log_file_path: Optional[str] = None) -> GlobalExceptionHandler:
    """
    Install global exception handler.

    Args:
        log_file_path: Optional path to log file for crash dumps

    Returns:
        GlobalExceptionHandler instance
    """
    handler = GlobalExceptionHandler(log_file_path)
    handler.install()
    return handler
