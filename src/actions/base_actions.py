import logging
from PySide6.QtCore import QObject
from app.app_data import AppData

logger = logging.getLogger(__name__)


class BaseActions(QObject):
    """Base class for all action modules"""

    def __init__(self, data: AppData):
        """
        Initialize with application data

        Args:
            data: Application data instance
        """
        super().__init__()
        self.data = data
        self.config = data.config

    @property
    def items(self):
        return self.data.items

    def _status(self, message: str):
        """Publish a status bar message; the count suffix is added by the view."""
        logger.info(message)
        self.data.status_message.emit(message)
