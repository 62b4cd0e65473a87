"""
Item form widget shared by the add and edit dialogs.

Common fields on top, a stacked panel below that swaps with the selected
media type. The form validates required text before handing values out.
"""

import logging
from typing import Dict, Tuple

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from common.constants import (
    CONDITION_GRADES,
    RECORD_SIZES,
    RECORD_SPEEDS,
    TAPE_LENGTH_MAX,
    TAPE_LENGTH_MIN,
    TAPE_LENGTH_STEP,
    TAPE_TYPES,
    TRACK_COUNT_MAX,
    TRACK_COUNT_MIN,
    YEAR_MAX,
    YEAR_MIN,
)
from common.errors import ValidationFailed
from model.collection_item import (
    CassetteDetails,
    CDDetails,
    CollectionItem,
    MediaDetails,
    MediaType,
    RecordDetails,
)
from services import item_factory

logger = logging.getLogger(__name__)

MEDIA_TYPES = list(MediaType)


def _select(combo: QComboBox, text: str):
    index = combo.findText(text)
    if index >= 0:
        combo.setCurrentIndex(index)
    else:
        logger.warning("Value %r not offered by %s, keeping %r", text, combo.objectName(), combo.currentText())


def _select_or_add(combo: QComboBox, text: str):
    """Select text, appending it first when it is off the combo's scale."""
    if combo.findText(text) < 0:
        logger.info("Keeping value %r outside the %s choices", text, combo.objectName())
        combo.addItem(text)
    combo.setCurrentIndex(combo.findText(text))


class ItemForm(QWidget):

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)

        common_box = QGroupBox("Item")
        common = QFormLayout(common_box)

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Album title")
        common.addRow("Title:", self.title_edit)

        self.artist_edit = QLineEdit()
        self.artist_edit.setPlaceholderText("Artist or band")
        common.addRow("Artist:", self.artist_edit)

        self.year_spin = QSpinBox()
        self.year_spin.setRange(YEAR_MIN, YEAR_MAX)
        common.addRow("Year:", self.year_spin)

        self.condition_combo = QComboBox()
        self.condition_combo.setObjectName("condition")
        self.condition_combo.addItems(CONDITION_GRADES)
        common.addRow("Condition:", self.condition_combo)

        self.media_type_combo = QComboBox()
        self.media_type_combo.setObjectName("media_type")
        self.media_type_combo.addItems([media_type.display_name for media_type in MEDIA_TYPES])
        common.addRow("Format:", self.media_type_combo)

        layout.addWidget(common_box)

        self.details_stack = QStackedWidget()
        self.details_stack.addWidget(self._create_record_panel())
        self.details_stack.addWidget(self._create_cd_panel())
        self.details_stack.addWidget(self._create_cassette_panel())
        layout.addWidget(self.details_stack)

        self.media_type_combo.currentIndexChanged.connect(self.details_stack.setCurrentIndex)

    def _create_record_panel(self) -> QWidget:
        panel = QGroupBox("Vinyl details")
        form = QFormLayout(panel)
        self.size_combo = QComboBox()
        self.size_combo.setObjectName("size")
        self.size_combo.addItems(RECORD_SIZES)
        form.addRow("Size:", self.size_combo)
        self.speed_combo = QComboBox()
        self.speed_combo.setObjectName("speed")
        self.speed_combo.addItems(RECORD_SPEEDS)
        form.addRow("Speed (RPM):", self.speed_combo)
        return panel

    def _create_cd_panel(self) -> QWidget:
        panel = QGroupBox("CD details")
        form = QFormLayout(panel)
        self.track_count_spin = QSpinBox()
        self.track_count_spin.setRange(TRACK_COUNT_MIN, TRACK_COUNT_MAX)
        self.track_count_spin.setValue(10)
        form.addRow("Tracks:", self.track_count_spin)
        self.booklet_check = QCheckBox("Includes booklet")
        form.addRow("", self.booklet_check)
        return panel

    def _create_cassette_panel(self) -> QWidget:
        panel = QGroupBox("Cassette details")
        form = QFormLayout(panel)
        self.tape_type_combo = QComboBox()
        self.tape_type_combo.setObjectName("tape_type")
        self.tape_type_combo.addItems(TAPE_TYPES)
        form.addRow("Tape type:", self.tape_type_combo)
        self.length_spin = QSpinBox()
        self.length_spin.setRange(TAPE_LENGTH_MIN, TAPE_LENGTH_MAX)
        self.length_spin.setSingleStep(TAPE_LENGTH_STEP)
        self.length_spin.setValue(60)
        self.length_spin.setSuffix(" min")
        form.addRow("Length:", self.length_spin)
        return panel

    @property
    def media_type(self) -> MediaType:
        return MEDIA_TYPES[self.media_type_combo.currentIndex()]

    def apply_defaults(self, config):
        """Initial values for a new item, taken from the [Form] config section."""
        self.year_spin.setValue(config.default_year)
        _select(self.condition_combo, config.default_condition)
        try:
            _select(self.media_type_combo, MediaType.parse(config.default_media_type).display_name)
        except ValueError:
            logger.warning("Unknown default_media_type '%s' in config", config.default_media_type)

    def load_item(self, item: CollectionItem):
        """Fill the form from an existing item. The format cannot be changed afterwards."""
        self.title_edit.setText(item.title)
        self.artist_edit.setText(item.artist)
        self.year_spin.setValue(item.year)
        _select_or_add(self.condition_combo, item.condition)
        _select(self.media_type_combo, item.media_type)
        self.media_type_combo.setEnabled(False)

        details = item.details
        if isinstance(details, RecordDetails):
            _select_or_add(self.size_combo, details.size)
            _select_or_add(self.speed_combo, details.speed)
        elif isinstance(details, CDDetails):
            self.track_count_spin.setValue(details.track_count)
            self.booklet_check.setChecked(details.has_booklet)
        elif isinstance(details, CassetteDetails):
            _select_or_add(self.tape_type_combo, details.tape_type)
            self.length_spin.setValue(details.length_minutes)

    def validate(self) -> Tuple[str, str]:
        """Return trimmed (title, artist) or raise ValidationFailed naming the empty fields."""
        title = self.title_edit.text().strip()
        artist = self.artist_edit.text().strip()
        missing = [name for name, value in (("title", title), ("artist", artist)) if not value]
        if missing:
            raise ValidationFailed(missing)
        return title, artist

    def extras(self) -> tuple:
        """Format-specific values in the order the factory expects."""
        media_type = self.media_type
        if media_type is MediaType.RECORD:
            return self.size_combo.currentText(), self.speed_combo.currentText()
        if media_type is MediaType.CD:
            return self.track_count_spin.value(), self.booklet_check.isChecked()
        return self.tape_type_combo.currentText(), self.length_spin.value()

    def details(self) -> MediaDetails:
        media_type = self.media_type
        first, second = self.extras()
        if media_type is MediaType.RECORD:
            return RecordDetails(size=first, speed=second)
        if media_type is MediaType.CD:
            return CDDetails(track_count=first, has_booklet=second)
        return CassetteDetails(tape_type=first, length_minutes=second)

    def build_item(self) -> CollectionItem:
        """Validate and create a new item through the factory."""
        title, artist = self.validate()
        return item_factory.create_item(
            self.media_type,
            title,
            artist,
            self.year_spin.value(),
            self.condition_combo.currentText(),
            *self.extras(),
        )

    def changes(self) -> Dict[str, object]:
        """Validate and return the edit as keyword changes for the store."""
        title, artist = self.validate()
        return {
            "title": title,
            "artist": artist,
            "year": self.year_spin.value(),
            "condition": self.condition_combo.currentText(),
            "details": self.details(),
        }
