"""
Application-wide constants for Music Collection Manager.

Centralizes app name, file names and the fixed value sets offered by the item forms.
"""

# Application display name (user-facing)
APP_NAME = "Music Collection Manager"

# Application full description
APP_DESCRIPTION = "Catalogue vinyl records, CDs and cassettes"

# Technical identifiers (for paths, files - DO NOT change without migration)
APP_FOLDER_NAME = "MusicCollectionManager"  # Used in %LOCALAPPDATA%\MusicCollectionManager\
APP_LOG_FILENAME = "collection_manager.log"
APP_CONFIG_FILENAME = "config.ini"

# Goldmine grading scale, best to worst
CONDITION_GRADES = ("M", "NM", "EX", "VG+", "VG", "G+", "G", "F", "P")

RECORD_SIZES = ('12"', '10"', '7"')
RECORD_SPEEDS = ("33", "45", "78")
TAPE_TYPES = ("Normal", "Chrome", "Metal")

# Input ranges enforced by the form widgets (not by the model)
YEAR_MIN = 1900
YEAR_MAX = 2030
TRACK_COUNT_MIN = 1
TRACK_COUNT_MAX = 50
TAPE_LENGTH_MIN = 30
TAPE_LENGTH_MAX = 120
TAPE_LENGTH_STEP = 10

# Table columns, in display order
TABLE_COLUMNS = ("Artist", "Title", "Year", "Condition", "Format", "Details")
