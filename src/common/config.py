import os
import configparser
import logging
from PySide6.QtCore import QObject
from common.constants import APP_CONFIG_FILENAME, CONDITION_GRADES
from utils.files import get_localappdata_dir

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")


class Config(QObject):
    def __init__(self, custom_config_path: str | None = None):
        """Initialize Config from file.

        Args:
            custom_config_path: Optional path to custom config file.
                               If None, uses the per-user data directory.
        """
        super().__init__()

        if custom_config_path:
            self.config_path = custom_config_path
            logger.debug(f"Using custom config: {self.config_path}")
        else:
            # pytest sets PYTEST_CURRENT_TEST; keep test runs away from the user's real config
            if "PYTEST_CURRENT_TEST" in os.environ:
                import tempfile

                test_config_dir = os.path.join(tempfile.gettempdir(), "collection_manager_test")
                os.makedirs(test_config_dir, exist_ok=True)
                self.config_path = os.path.join(test_config_dir, APP_CONFIG_FILENAME)
                logger.debug(f"Test mode detected, using temp config: {self.config_path}")
            else:
                self.config_path = os.path.join(get_localappdata_dir(), APP_CONFIG_FILENAME)

        self._config = configparser.ConfigParser(interpolation=None)
        if os.path.exists(self.config_path):
            logger.debug(f"Loading existing config from: {self.config_path}")
            self._config.read(self.config_path, encoding="utf-8-sig")
        else:
            logger.info(f"Config file not found. Creating default config at: {self.config_path}")
            self._set_defaults()
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                self._config.write(configfile)

        self._initialize_properties()

    def _get_defaults(self):
        """Get default configuration values as a dictionary structure."""
        return {
            "General": {
                "log_level": "INFO",
                "theme": "dark",
                "default_sort": "Artist",
            },
            "Form": {
                "default_year": 2025,
                "default_condition": "VG+",
                "default_media_type": "Vinyl Record",
            },
            "Window": {
                "width": 900,
                "height": 600,
                "x": -1,
                "y": -1,
                "maximized": False,
                "filter_text": "",
            },
        }

    def _set_defaults(self):
        """Set default configuration values in the ConfigParser object."""
        self._populate(self._config, self._get_defaults())

    @staticmethod
    def _populate(parser: configparser.ConfigParser, defaults: dict):
        for section, values in defaults.items():
            parser[section] = {}
            for key, value in values.items():
                # ConfigParser stores strings only
                if isinstance(value, bool):
                    parser[section][key] = "true" if value else "false"
                else:
                    parser[section][key] = str(value)

    def _initialize_properties(self):
        """Initialize class properties from config values with fallbacks."""
        defaults = self._get_defaults()

        self._init_general(defaults)
        self._init_form(defaults)
        self._init_window(defaults)

        logger.debug("Configuration loaded: %s", self.config_path)

    def _init_general(self, defaults: dict):
        """Initialize General section properties."""
        g = defaults["General"]
        self.log_level_str = self._config.get("General", "log_level", fallback=g["log_level"])
        self.log_level = self._get_log_level(self.log_level_str)
        self.session_log_level: str | None = None
        theme = self._config.get("General", "theme", fallback=g["theme"]).strip().lower()
        if theme not in THEMES:
            logger.warning(f"Unknown theme '{theme}' in config, using '{g['theme']}'")
            theme = g["theme"]
        self.theme = theme
        self.default_sort = self._config.get("General", "default_sort", fallback=g["default_sort"])

    def _init_form(self, defaults: dict):
        """Initialize Form section properties (initial values of the add dialog)."""
        f = defaults["Form"]
        self.default_year = self._config.getint("Form", "default_year", fallback=f["default_year"])
        condition = self._config.get("Form", "default_condition", fallback=f["default_condition"])
        if condition not in CONDITION_GRADES:
            logger.warning(f"Unknown condition '{condition}' in config, using '{f['default_condition']}'")
            condition = f["default_condition"]
        self.default_condition = condition
        self.default_media_type = self._config.get("Form", "default_media_type", fallback=f["default_media_type"])

    def _init_window(self, defaults: dict):
        """Initialize Window section properties."""
        w = defaults["Window"]
        self.window_width = self._config.getint("Window", "width", fallback=w["width"])
        self.window_height = self._config.getint("Window", "height", fallback=w["height"])
        self.window_x = self._config.getint("Window", "x", fallback=w["x"])
        self.window_y = self._config.getint("Window", "y", fallback=w["y"])
        self.window_maximized = self._config.getboolean("Window", "maximized", fallback=w["maximized"])
        self.filter_text = self._config.get("Window", "filter_text", fallback=w["filter_text"])

    def get(self, section: str, key: str, fallback: str | None = None) -> str:
        """Get a string value from the config."""
        return self._config.get(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int | None = None) -> int:
        """Get an integer value from the config."""
        return self._config.getint(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool | None = None) -> bool:
        """Get a boolean value from the config."""
        return self._config.getboolean(section, key, fallback=fallback)

    def override_log_level(self, level_str: str):
        """Use another log level for this run only; save() keeps writing log_level_str."""
        self.session_log_level = level_str.upper()
        self.log_level = self._get_log_level(self.session_log_level)

    def _get_log_level(self, level_str):
        """Convert string log level to logging level constant"""
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return levels.get(level_str.upper(), logging.INFO)  # Default to INFO if invalid

    def _update_general_section(self, config: configparser.ConfigParser):
        if not config.has_section("General"):
            config.add_section("General")
        config["General"]["log_level"] = self.log_level_str
        config["General"]["theme"] = self.theme
        config["General"]["default_sort"] = self.default_sort

    def _update_form_section(self, config: configparser.ConfigParser):
        if not config.has_section("Form"):
            config.add_section("Form")
        config["Form"]["default_year"] = str(self.default_year)
        config["Form"]["default_condition"] = self.default_condition
        config["Form"]["default_media_type"] = self.default_media_type

    def _update_window_section(self, config: configparser.ConfigParser):
        if not config.has_section("Window"):
            config.add_section("Window")
        config["Window"]["width"] = str(self.window_width)
        config["Window"]["height"] = str(self.window_height)
        config["Window"]["x"] = str(self.window_x)
        config["Window"]["y"] = str(self.window_y)
        config["Window"]["maximized"] = "true" if self.window_maximized else "false"
        config["Window"]["filter_text"] = self.filter_text

    def _create_backup(self):
        """Create backup of config file before modifying."""
        import shutil

        if os.path.exists(self.config_path):
            backup_path = self.config_path + ".bak"
            try:
                shutil.copy2(self.config_path, backup_path)
                logger.debug(f"Created backup at {backup_path}")
            except OSError as e:
                logger.warning(f"Failed to create backup: {e}")

    def save(self):
        """Save current configuration to file with minimal mutation.

        Re-reads the existing config file, updates ONLY managed keys,
        creates a backup, and preserves all unrelated sections/keys.
        """
        current = configparser.ConfigParser(interpolation=None)
        config_loaded = False

        if os.path.exists(self.config_path):
            try:
                current.read(self.config_path, encoding="utf-8-sig")
                config_loaded = True
            except configparser.Error as e:
                logger.warning(f"Failed to re-read config file: {e}. Will create fresh config.")
                current = configparser.ConfigParser(interpolation=None)

        if not config_loaded:
            logger.debug("Populating config with defaults before save")
            self._populate(current, self._get_defaults())

        self._create_backup()

        self._update_general_section(current)
        self._update_form_section(current)
        self._update_window_section(current)

        try:
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                current.write(configfile)
            logger.debug(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")
            raise

    def log_config_location(self):
        """Log the configuration file location (call after logging is set up)"""
        logger.info(f"Configuration loaded from: {self.config_path}")
