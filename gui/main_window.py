"""Main window for the Series Renamer GUI."""
import logging
from datetime import datetime
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QPushButton, QLineEdit, QSpinBox, QTableWidget, QTableWidgetItem,
    QHeaderView, QTextEdit, QLabel, QFileDialog, QGroupBox, QMessageBox,
    QComboBox, QListWidget, QInputDialog, QAbstractItemView
)
from PySide6.QtCore import QObject, QTimer, Signal, Slot
from PySide6.QtGui import QColor

from series_renamer.models import Episode, LocalFile, RenameSuccess
from series_renamer.planner import build_plan
from series_renamer.session import Session
from series_renamer.settings import SettingsManager, load_api_key

from .theme import COLORS

TICK_INTERVAL_MS = 100
UNASSIGNED_TEXT = "(none)"


class LogBridge(QObject):
    """Carries log lines from any thread to the GUI thread."""
    message = Signal(str)


class GuiLogHandler(logging.Handler):
    """Logging handler that forwards records to the log panel."""

    def __init__(self, bridge: LogBridge):
        super().__init__(level=logging.INFO)
        self.bridge = bridge
        self.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.bridge.message.emit(self.format(record))
        except RuntimeError:
            # Bridge already deleted during shutdown
            pass


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()

        self.setWindowTitle("Series Renamer")
        self.setMinimumSize(800, 600)
        self.resize(1000, 720)

        # Settings
        self.settings = SettingsManager()

        # Session (all non-UI state)
        self.session = Session(
            link=self.settings.get("last_link", ""),
            directory=self.settings.get("last_folder", ""),
            season=int(self.settings.get("last_season", 1) or 1),
            api_key=load_api_key(self.settings) or "",
        )

        # Setup UI
        self._setup_ui()
        self._setup_logging()

        # Drives Session.tick(); the session never blocks
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)
        self._timer.start()

        self._check_api_key_on_startup()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def _setup_logging(self):
        self._log_bridge = LogBridge(self)
        self._log_bridge.message.connect(self._log)
        self._log_handler = GuiLogHandler(self._log_bridge)
        logging.getLogger("series_renamer").addHandler(self._log_handler)

    def _check_api_key_on_startup(self):
        """Ask for an OMDb API key if none is configured."""
        if self.session.api_key:
            return

        api_key, ok = QInputDialog.getText(
            self, "OMDb API Key",
            "Enter your OMDb API key\n(get one at https://www.omdbapi.com/apikey.aspx):"
        )
        if ok and api_key.strip():
            self.session.api_key = api_key.strip()
            self.settings.set("api_key", self.session.api_key)
            self.settings.save()
            self._log("OMDb API key saved.")
        self._update_button_states()

    def _setup_ui(self):
        """Setup the user interface."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        layout.addWidget(self._create_controls_group())

        lists = QHBoxLayout()
        lists.addWidget(self._create_episode_table(), stretch=3)
        lists.addWidget(self._create_unassigned_group(), stretch=1)
        layout.addLayout(lists, stretch=1)

        layout.addLayout(self._create_bottom_row())

        self.log_text = QTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumHeight(150)
        layout.addWidget(self.log_text)

        self._update_button_states()

    def _create_controls_group(self) -> QGroupBox:
        """Create the top controls group."""
        group = QGroupBox("Show")
        layout = QGridLayout(group)
        layout.setSpacing(10)

        # Row 0: IMDb link
        self.link_edit = QLineEdit(self.session.link)
        self.link_edit.setPlaceholderText("https://www.imdb.com/title/tt0903747/")
        self.link_edit.textChanged.connect(self._on_link_changed)
        layout.addWidget(QLabel("IMDb link:"), 0, 0)
        layout.addWidget(self.link_edit, 0, 1, 1, 3)

        # Row 1: Folder selection
        self.folder_edit = QLineEdit(self.session.directory)
        self.folder_edit.setPlaceholderText("Select the season folder...")
        self.folder_edit.setReadOnly(True)

        browse_btn = QPushButton("Browse...")
        browse_btn.clicked.connect(self._browse_folder)

        layout.addWidget(QLabel("Folder:"), 1, 0)
        layout.addWidget(self.folder_edit, 1, 1, 1, 2)
        layout.addWidget(browse_btn, 1, 3)

        # Row 2: Season and fetch
        self.season_spin = QSpinBox()
        self.season_spin.setRange(0, 999)
        self.season_spin.setValue(self.session.season)
        self.season_spin.valueChanged.connect(self._on_season_changed)

        self.fetch_btn = QPushButton("Fetch")
        self.fetch_btn.setObjectName("primaryButton")
        self.fetch_btn.clicked.connect(self._start_fetch)

        layout.addWidget(QLabel("Season:"), 2, 0)
        layout.addWidget(self.season_spin, 2, 1)
        layout.addWidget(self.fetch_btn, 2, 3)

        return group

    def _create_episode_table(self) -> QTableWidget:
        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Ep", "Title", "File"])
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        self.table.setAlternatingRowColors(True)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)
        header.setSectionResizeMode(2, QHeaderView.Stretch)
        return self.table

    def _create_unassigned_group(self) -> QGroupBox:
        group = QGroupBox("Unassigned files")
        layout = QVBoxLayout(group)
        self.unassigned_list = QListWidget()
        layout.addWidget(self.unassigned_list)
        return group

    def _create_bottom_row(self) -> QHBoxLayout:
        layout = QHBoxLayout()

        self.status_label = QLabel("Ready")
        self.status_label.setObjectName("statusLabel")
        layout.addWidget(self.status_label, stretch=1)

        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self._clear_assignments)
        layout.addWidget(self.clear_btn)

        self.rename_btn = QPushButton("Rename")
        self.rename_btn.setObjectName("primaryButton")
        self.rename_btn.clicked.connect(self._start_rename)
        layout.addWidget(self.rename_btn)

        return layout

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _on_link_changed(self, text: str):
        self.session.link = text.strip()
        self._update_button_states()

    def _on_season_changed(self, value: int):
        self.session.season = value

    def _browse_folder(self):
        """Open folder browser dialog."""
        start_dir = self.session.directory or str(Path.home())
        folder = QFileDialog.getExistingDirectory(self, "Select Folder", start_dir)
        if folder:
            self.folder_edit.setText(folder)
            self.session.directory = folder
            self.settings.set("last_folder", folder)
            self.settings.save()
            self._update_button_states()

    def _update_button_states(self):
        """Update button enabled states."""
        idle = not self.session.is_fetching
        has_plan = len(self.session.model) > 0

        self.fetch_btn.setEnabled(self.session.can_fetch())
        self.clear_btn.setEnabled(idle and has_plan)
        self.rename_btn.setEnabled(idle and has_plan)

    # ------------------------------------------------------------------
    # Fetch
    # ------------------------------------------------------------------

    def _start_fetch(self):
        """Start the fetch operation."""
        if not self.session.start_fetch():
            self.status_label.setText(self.session.status)
            self._log(f"[ERROR] {self.session.status}")
            return

        self.settings.set("last_link", self.session.link)
        self.settings.set("last_season", self.session.season)
        self.settings.save()

        self.status_label.setText(self.session.status)
        self._update_button_states()

    @Slot()
    def _on_tick(self):
        """Poll the session; runs on every timer tick."""
        if not self.session.tick():
            return

        self.status_label.setText(self.session.status)
        if self.session.error:
            self._log(f"[ERROR] {self.session.error}")
            QMessageBox.warning(self, "Fetch Error", self.session.error)
        else:
            self._log(self.session.status)
        self._refresh()

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def _display_name(self, file: LocalFile) -> str:
        try:
            return str(file.path.relative_to(self.session.directory))
        except ValueError:
            return str(file.path)

    def _refresh(self):
        """Rebuild the episode table and unassigned list from the model."""
        model = self.session.model
        episodes = model.episodes

        self.table.setRowCount(0)
        for row, episode in enumerate(episodes):
            self.table.insertRow(row)
            self.table.setItem(row, 0, QTableWidgetItem(episode.episode_label))
            title_item = QTableWidgetItem(episode.title)
            title_item.setToolTip(episode.external_id)
            self.table.setItem(row, 1, title_item)
            self.table.setCellWidget(row, 2, self._create_file_combo(episode))

        self.unassigned_list.clear()
        for file in model.unassigned:
            self.unassigned_list.addItem(self._display_name(file))

        self._update_button_states()

    def _create_file_combo(self, episode: Episode) -> QComboBox:
        """Selector offering the episode's file plus every unassigned file."""
        model = self.session.model
        current = model.file_for(episode)

        combo = QComboBox()
        combo.addItem(UNASSIGNED_TEXT, None)
        if current is not None:
            combo.addItem(self._display_name(current), current)
        for file in model.unassigned:
            combo.addItem(self._display_name(file), file)
        combo.setCurrentIndex(1 if current is not None else 0)

        combo.currentIndexChanged.connect(
            lambda index, ep=episode, c=combo: self._on_file_selected(ep, c.itemData(index))
        )
        return combo

    def _on_file_selected(self, episode: Episode, file: LocalFile | None):
        model = self.session.model
        if file is None:
            current = model.file_for(episode)
            if current is not None:
                self.session.unassign(current)
        else:
            self.session.assign(file, episode)
        # Rebuilding replaces the combo that sent the signal
        QTimer.singleShot(0, self._refresh)

    def _clear_assignments(self):
        for file in list(self.session.model.confirmed_plan().values()):
            self.session.unassign(file)
        self._refresh()

    # ------------------------------------------------------------------
    # Rename
    # ------------------------------------------------------------------

    def _start_rename(self):
        """Preview the plan, then rename on confirmation."""
        entries, unnamed = build_plan(
            self.session.model.confirmed_plan(), self.session.season
        )
        lines = [f"{e.file.name}  ->  {e.target_name}" for e in entries]
        lines += [f"{file.name}  (skipped: missing extension)" for _e, file in unnamed]

        box = QMessageBox(self)
        box.setWindowTitle("Confirm Rename")
        box.setText(f"Rename {len(entries)} file(s)?")
        box.setDetailedText("\n".join(lines))
        box.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
        box.setDefaultButton(QMessageBox.No)
        if box.exec() != QMessageBox.Yes:
            return

        outcomes = self.session.confirm()
        for outcome in outcomes:
            if isinstance(outcome, RenameSuccess):
                self._log(f"Renamed: {outcome.old_path.name} -> {outcome.new_path.name}",
                          COLORS["success"])
            else:
                self._log(f"[ERROR] {outcome.old_path.name}: {outcome.reason}",
                          COLORS["error"])

        self.status_label.setText(self.session.status)
        self._refresh()

    # ------------------------------------------------------------------
    # Log
    # ------------------------------------------------------------------

    @Slot(str)
    def _log(self, message: str, color: str | None = None):
        """Append a timestamped line to the log panel."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.log_text.setTextColor(QColor(color or COLORS["text"]))
        self.log_text.append(f"[{timestamp}] {message}")

    def closeEvent(self, event):
        self._timer.stop()
        logging.getLogger("series_renamer").removeHandler(self._log_handler)
        self.settings.set("last_link", self.session.link)
        self.settings.set("last_season", self.session.season)
        self.settings.save()
        super().closeEvent(event)
