import os
import sys
import logging

logger = logging.getLogger(__name__)


def is_portable_mode():
    """
    Detect if running as a portable build (PyInstaller directory build).

    Returns:
        bool: True if an _internal folder sits next to the frozen executable
    """
    if not getattr(sys, "frozen", False):
        return False

    app_dir = os.path.dirname(sys.executable)
    return os.path.isdir(os.path.join(app_dir, "_internal"))


def get_localappdata_dir():
    """
    Get platform-appropriate application data directory (config and log file).

    Platform paths:
        Windows: %LOCALAPPDATA%/MusicCollectionManager/
        Linux:   ~/.local/share/MusicCollectionManager/ (respects XDG_DATA_HOME)
        macOS:   ~/Library/Application Support/MusicCollectionManager/
        Portable: <app_directory>/
    """
    if is_portable_mode():
        app_dir = get_app_dir()
        logger.info(f"Portable mode detected, using app directory: {app_dir}")
        return app_dir

    from common.constants import APP_FOLDER_NAME

    if sys.platform == "win32":
        local_app_data = os.getenv("LOCALAPPDATA")
        if local_app_data:
            app_data_dir = os.path.join(local_app_data, APP_FOLDER_NAME)
            os.makedirs(app_data_dir, exist_ok=True)
            return app_data_dir
        logger.warning("LOCALAPPDATA not found, using app directory")
        return get_app_dir()

    elif sys.platform == "darwin":
        app_support = os.path.expanduser(f"~/Library/Application Support/{APP_FOLDER_NAME}")
        os.makedirs(app_support, exist_ok=True)
        return app_support

    else:
        xdg_data = os.getenv("XDG_DATA_HOME")
        if xdg_data:
            app_data_dir = os.path.join(xdg_data, APP_FOLDER_NAME)
        else:
            app_data_dir = os.path.expanduser(f"~/.local/share/{APP_FOLDER_NAME}")
        os.makedirs(app_data_dir, exist_ok=True)
        return app_data_dir


def get_app_dir():
    """Get the directory of the executable or script."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(sys.argv[0]))


def resource_path(relative_path):
    """Get the absolute path to a bundled resource, works for dev and PyInstaller."""
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return os.path.join(meipass, relative_path)

    app_path = os.path.join(get_app_dir(), relative_path)
    if os.path.exists(app_path):
        return app_path

    return os.path.join(os.path.abspath("."), relative_path)
