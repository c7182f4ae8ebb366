"""Main application window for the stats card builder."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

import structlog
from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtWebEngineWidgets import QWebEngineView

from ..core import generator
from ..core.models import LOCALES, Theme, ViewKind
from ..core.state import CardSession, CopyKind
from ..core.storage import SettingsManager

logger = structlog.get_logger(__name__)

APP_TITLE = "GitHub Stats Card Generator"

TAB_LABELS: Dict[ViewKind, str] = {
    ViewKind.STATS: "Stats",
    ViewKind.LANGUAGES: "Top Languages",
    ViewKind.STREAK: "Streak",
}

SOCIAL_LINKS = [
    ("Portfolio", "https://cumakaradash.vercel.app"),
    ("LinkedIn", "https://linkedin.com/in/CumaKaradash"),
    ("GitHub", "https://github.com/CumaKaradash"),
    ("Medium", "https://medium.com/@CumaKaradash"),
]

DARK_STYLESHEET = """
QWidget { background-color: #09090b; color: #fafafa; }
QLineEdit, QComboBox, QPushButton {
    background-color: #18181b; border: 1px solid #27272a; border-radius: 6px; padding: 4px 8px;
}
QPushButton:disabled { color: #52525b; }
QTabBar::tab { background: #18181b; padding: 6px 14px; }
QTabBar::tab:selected { background: #27272a; }
QLabel[role="hint"] { color: #a1a1aa; }
"""

LIGHT_STYLESHEET = """
QLabel[role="hint"] { color: #71717a; }
"""


class CopyButtons(QtWidgets.QWidget):
    """Row of Copy Markdown / Copy URL / Copy HTML buttons."""

    copyRequested = QtCore.pyqtSignal(str)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._buttons: Dict[CopyKind, QtWidgets.QPushButton] = {}
        for kind in CopyKind:
            btn = QtWidgets.QPushButton(self._label(kind), self)
            btn.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda _checked=False, k=kind: self.copyRequested.emit(k.value))
            layout.addWidget(btn, 1)
            self._buttons[kind] = btn

    @staticmethod
    def _label(kind: CopyKind) -> str:
        return f"Copy {kind.value}"

    def set_copied(self, copied: Optional[CopyKind]) -> None:
        for kind, btn in self._buttons.items():
            btn.setText("✓ Copied!" if kind is copied else self._label(kind))


class CardTab(QtWidgets.QWidget):
    """Preview surface plus copy actions for one card view."""

    def __init__(self, view: ViewKind, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.view = view
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        self.preview = QWebEngineView(self)
        self.preview.setMinimumHeight(220)
        self.copy_buttons = CopyButtons(self)

        layout.addWidget(self.preview, 1)
        layout.addWidget(self.copy_buttons)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1120, 640)

        self.settings = settings or SettingsManager()
        self.session = CardSession()
        self._preview_tmp: Optional[str] = None
        self._app_theme = "light"

        self._debounce = QtCore.QTimer(self)
        self._debounce.setInterval(self.settings.get_int("preview_debounce_ms", 300))
        self._debounce.setSingleShot(True)
        self._debounce.timeout.connect(self.update_preview)

        self._copied_reset = QtCore.QTimer(self)
        self._copied_reset.setInterval(self.settings.get_int("copy_feedback_ms", 2000))
        self._copied_reset.setSingleShot(True)
        self._copied_reset.timeout.connect(lambda: self._set_copied(None))

        self._build_ui()
        self._build_menu()
        self._bind_events()

        self.apply_app_theme(self.settings.get("app_theme", "light"))
        self.update_preview()

    # ------------------------------------------------------------------ UI --
    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        root = QtWidgets.QVBoxLayout(central)
        root.setContentsMargins(14, 14, 14, 14)
        root.setSpacing(12)
        self.setCentralWidget(central)

        header = QtWidgets.QLabel(APP_TITLE, central)
        font = header.font()
        font.setPointSize(font.pointSize() + 8)
        font.setBold(True)
        header.setFont(font)
        header.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        subtitle = self._hint("Create customizable GitHub profile stats cards for your README", central)
        subtitle.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        root.addWidget(header)
        root.addWidget(subtitle)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal, central)
        root.addWidget(splitter, 1)

        # Form
        form_panel = QtWidgets.QWidget(splitter)
        form = QtWidgets.QFormLayout(form_panel)
        form.setContentsMargins(6, 6, 6, 6)
        form.setVerticalSpacing(10)

        self.username_edit = QtWidgets.QLineEdit(form_panel)
        self.username_edit.setPlaceholderText("octocat")
        form.addRow("GitHub Username", self._with_hint(self.username_edit, "Enter your GitHub username"))

        self.theme_combo = QtWidgets.QComboBox(form_panel)
        for theme in Theme:
            self.theme_combo.addItem(theme.value, theme)
        form.addRow("Theme", self._with_hint(self.theme_combo, "Choose a visual theme"))

        self.locale_combo = QtWidgets.QComboBox(form_panel)
        for code, label in LOCALES:
            self.locale_combo.addItem(label, code)
        form.addRow("Language", self._with_hint(self.locale_combo, "Select display language"))

        self.hide_border_check = QtWidgets.QCheckBox("Hide border", form_panel)
        form.addRow(self._with_hint(self.hide_border_check, "Remove the card border"))
        self.all_commits_check = QtWidgets.QCheckBox("Count private commits", form_panel)
        form.addRow(self._with_hint(self.all_commits_check, "Include all commits in stats"))

        # Preview tabs
        self.tabs = QtWidgets.QTabWidget(splitter)
        self.tabs.setDocumentMode(True)
        self.card_tabs: Dict[ViewKind, CardTab] = {}
        for view in ViewKind:
            tab = CardTab(view, self.tabs)
            self.tabs.addTab(tab, TAB_LABELS[view])
            self.card_tabs[view] = tab

        splitter.addWidget(form_panel)
        splitter.addWidget(self.tabs)
        splitter.setSizes([420, 700])

        root.addWidget(self._build_footer(central))

        self.status = self.statusBar()

    def _build_footer(self, parent: QtWidgets.QWidget) -> QtWidgets.QWidget:
        footer = QtWidgets.QWidget(parent)
        layout = QtWidgets.QVBoxLayout(footer)
        layout.setContentsMargins(0, 8, 0, 0)
        credits = self._hint("Produced by CumaKaradash for NoneFiles", footer)
        credits.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        links = QtWidgets.QLabel(
            " · ".join(f'<a href="{url}">{label}</a>' for label, url in SOCIAL_LINKS),
            footer,
        )
        links.setTextFormat(QtCore.Qt.TextFormat.RichText)
        links.setOpenExternalLinks(True)
        links.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(credits)
        layout.addWidget(links)
        return footer

    def _build_menu(self) -> None:
        bar = self.menuBar()
        if bar is None:
            bar = QtWidgets.QMenuBar(self)
            self.setMenuBar(bar)

        view_menu = bar.addMenu("&View")
        self.act_dark = QtGui.QAction("Dark Mode", self)
        self.act_dark.setCheckable(True)
        self.act_quit = QtGui.QAction("Quit", self)
        if view_menu is not None:
            view_menu.addAction(self.act_dark)
            view_menu.addSeparator()
            view_menu.addAction(self.act_quit)

        help_menu = bar.addMenu("&Help")
        self.act_about = QtGui.QAction("About", self)
        if help_menu is not None:
            help_menu.addAction(self.act_about)

    def _bind_events(self) -> None:
        self.username_edit.textChanged.connect(self._on_form_changed)
        self.theme_combo.currentIndexChanged.connect(self._on_form_changed)
        self.locale_combo.currentIndexChanged.connect(self._on_form_changed)
        self.hide_border_check.toggled.connect(self._on_form_changed)
        self.all_commits_check.toggled.connect(self._on_form_changed)

        self.tabs.currentChanged.connect(self._on_tab_changed)
        for tab in self.card_tabs.values():
            tab.copy_buttons.copyRequested.connect(self.copy_to_clipboard)

        self.act_dark.toggled.connect(lambda checked: self.apply_app_theme("dark" if checked else "light"))
        self.act_quit.triggered.connect(self.close)
        self.act_about.triggered.connect(self.show_about)

    # ------------------------------------------------------------- Form Ops --
    def _on_form_changed(self, *_args: object) -> None:
        self.session.update(
            identifier=self.username_edit.text(),
            theme=self.theme_combo.currentData() or Theme.DEFAULT,
            locale=self.locale_combo.currentData() or "en",
            hide_border=self.hide_border_check.isChecked(),
            include_all_commits=self.all_commits_check.isChecked(),
        )
        self._refresh_copy_state()
        self._debounce.start()

    def _on_tab_changed(self, index: int) -> None:
        tab = self.tabs.widget(index)
        if not isinstance(tab, CardTab):
            return
        self.session.switch_view(tab.view)
        self._set_copied(None)
        self.update_preview()

    def _refresh_copy_state(self) -> None:
        enabled = self.session.can_render()
        for tab in self.card_tabs.values():
            tab.copy_buttons.setEnabled(enabled)

    # --------------------------------------------------------------- Preview --
    def update_preview(self) -> None:
        self._refresh_copy_state()
        if self._preview_tmp and Path(self._preview_tmp).is_dir():
            shutil.rmtree(self._preview_tmp, ignore_errors=True)
        self._preview_tmp = tempfile.mkdtemp(prefix="statscard_preview_")
        paths = generator.render_previews(self.session, self._preview_tmp, dark=self._is_dark())
        for view, tab in self.card_tabs.items():
            tab.preview.setUrl(QtCore.QUrl.fromLocalFile(str(paths[view])))

    # ------------------------------------------------------------- Clipboard --
    def copy_to_clipboard(self, kind_value: str) -> None:
        if not self.session.can_render():
            return
        kind = CopyKind.parse(kind_value)
        content = self.session.copy_payload(kind)
        clipboard = QtWidgets.QApplication.clipboard()
        if clipboard is None:
            logger.warning("clipboard_unavailable", kind=kind.value)
            if self.status is not None:
                self.status.showMessage("Clipboard is not available", 4000)
            return
        clipboard.setText(content)
        logger.info("copied", kind=kind.value, view=self.session.active_view.value)
        self._set_copied(kind)
        self._copied_reset.start()
        if self.status is not None:
            self.status.showMessage(f"Copied! {kind.value} copied to clipboard", self._copied_reset.interval())

    def _set_copied(self, kind: Optional[CopyKind]) -> None:
        for tab in self.card_tabs.values():
            tab.copy_buttons.set_copied(kind)

    # ---------------------------------------------------------------- Misc --
    def _is_dark(self) -> bool:
        return self._app_theme == "dark"

    def apply_app_theme(self, name: str) -> None:
        name = "dark" if name == "dark" else "light"
        self._app_theme = name
        if self.settings.get("app_theme") != name:
            self.settings.set("app_theme", name)
        self.setStyleSheet(DARK_STYLESHEET if name == "dark" else LIGHT_STYLESHEET)
        self.act_dark.blockSignals(True)
        self.act_dark.setChecked(name == "dark")
        self.act_dark.blockSignals(False)
        if self._preview_tmp is not None:
            self.update_preview()

    def show_about(self) -> None:
        QtWidgets.QMessageBox.information(
            self,
            "About",
            f"{APP_TITLE}\n\nBuild GitHub README stats, top-language and streak cards.\nMade with PyQt6 for developers.",
        )

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802 (Qt override)
        if self._preview_tmp and Path(self._preview_tmp).is_dir():
            shutil.rmtree(self._preview_tmp, ignore_errors=True)
        super().closeEvent(event)

    @staticmethod
    def _hint(text: str, parent: QtWidgets.QWidget) -> QtWidgets.QLabel:
        label = QtWidgets.QLabel(text, parent)
        label.setProperty("role", "hint")
        return label

    def _with_hint(self, field: QtWidgets.QWidget, hint: str) -> QtWidgets.QWidget:
        box = QtWidgets.QWidget(field.parentWidget())
        layout = QtWidgets.QVBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        field.setParent(box)
        layout.addWidget(field)
        layout.addWidget(self._hint(hint, box))
        return box
