import logging
from typing import Optional
from PySide6.QtCore import QObject, Signal
from common.config import Config
from model.collection_item import CollectionItem
from model.collection_items import CollectionItems
from model.sorting import StrategyRegistry, create_registry

logger = logging.getLogger(__name__)


class AppData(QObject):

    selected_item_changed = Signal(object)
    status_message = Signal(str)  # Transient status bar text

    # Lazy-loaded so importing this module never writes a config.ini
    _config_instance: Optional[Config] = None

    @property
    def config(self) -> Config:
        if AppData._config_instance is None:
            AppData._config_instance = Config()
        return AppData._config_instance

    @config.setter
    def config(self, value: Config):
        AppData._config_instance = value

    def __init__(self, config: Optional[Config] = None):
        super().__init__()
        if config is not None:
            self.config = config

        self.strategies: StrategyRegistry = create_registry()
        strategy = self.strategies.find(self.config.default_sort)
        if strategy is None:
            logger.warning("Unknown default_sort '%s' in config, using %s",
                           self.config.default_sort, self.strategies.default.name)
            strategy = self.strategies.default

        self.items = CollectionItems(strategy)
        self.items.filter_text = self.config.filter_text
        self._selected_item: Optional[CollectionItem] = None

    @property
    def selected_item(self) -> Optional[CollectionItem]:
        return self._selected_item

    @selected_item.setter
    def selected_item(self, value: Optional[CollectionItem]):
        if self._selected_item is not value:
            self._selected_item = value
            self.selected_item_changed.emit(value)
