"""
MainWindow — 本地化演示主窗口

布局:
    ┌─────────────────────────────────────────────────┐
    │  工具栏: 界面语言 [Deutsch ▾]                      │
    ├─────────────────────────────────────────────────┤
    │  会议摘要各段标题（TranslatedLabel）               │
    ├─────────────────────────────────────────────────┤
    │  状态栏: 偏好保存结果                              │
    └─────────────────────────────────────────────────┘
"""

from __future__ import annotations

import logging
from typing import List

from PySide6.QtCore import Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QMainWindow, QPushButton, QStatusBar, QToolBar,
    QVBoxLayout, QWidget,
)

from gui.widgets import LanguageSelector, TranslatedLabel
from localization import TranslationService

logger = logging.getLogger(__name__)

# 摘要面板中依次显示的 key
SUMMARY_KEYS = (
    "meetingSummaryHeading",
    "keyPointsHeading",
    "actionItemsHeading",
    "decisionsHeading",
    "mainTopicsHeading",
    "fullSummaryHeading",
)

STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """演示窗口：所有文本都经过 TranslationService"""

    def __init__(self, service: TranslationService) -> None:
        super().__init__()
        self.i18n = service
        self._labels: List[TranslatedLabel] = []

        self._init_ui()
        self._init_toolbar()
        self._update_title()

        # 连接语言切换与保存结果信号
        ctx = self.i18n.context
        self.i18n.language_changed.connect(self._on_language_changed)
        ctx.preference_saved.connect(self._on_preference_saved)
        ctx.preference_save_failed.connect(self._on_preference_save_failed)

    def _init_ui(self) -> None:
        """初始化界面布局"""
        self.setMinimumSize(640, 420)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        for index, key in enumerate(SUMMARY_KEYS):
            label = TranslatedLabel(self.i18n, key)
            if index == 0:
                label.setFont(QFont("Segoe UI", 16, QFont.Bold))
                label.setStyleSheet("color: #89b4fa; padding: 8px 0;")
            else:
                label.setStyleSheet("color: #cdd6f4; font-size: 13px;")
            layout.addWidget(label)
            self._labels.append(label)

        layout.addStretch(1)

        self._done_btn = QPushButton(self.i18n.t("done"))
        self._done_btn.clicked.connect(self.close)
        layout.addWidget(self._done_btn)

        self._status_bar = QStatusBar()
        self._status_bar.setStyleSheet("background: #181825; color: #a6adc8;")
        self.setStatusBar(self._status_bar)

    def _init_toolbar(self) -> None:
        toolbar = QToolBar()
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self._language_label = TranslatedLabel(self.i18n, "interfaceLanguage", suffix=" ")
        toolbar.addWidget(self._language_label)

        self._language_selector = LanguageSelector(self.i18n)
        toolbar.addWidget(self._language_selector)

    def _update_title(self) -> None:
        self.setWindowTitle(self.i18n.t("languageSettingsTitle"))

    # ── 事件处理 ────────────────────────────────────────────────

    @Slot(str)
    def _on_language_changed(self, code: str) -> None:
        """TranslatedLabel 自行刷新，这里只处理普通控件"""
        self._update_title()
        self._done_btn.setText(self.i18n.t("done"))

    @Slot(str)
    def _on_preference_saved(self, code: str) -> None:
        t = self.i18n.t
        name = self.i18n.language_name(code)
        self._status_bar.showMessage(
            f"{t('languagePreferenceSavedTitle')}: {name}", STATUS_TIMEOUT_MS
        )

    @Slot(str)
    def _on_preference_save_failed(self, reason: str) -> None:
        self._status_bar.showMessage(
            self.i18n.t("languagePreferenceSaveFailedTitle"), STATUS_TIMEOUT_MS
        )

    def closeEvent(self, event) -> None:
        self.i18n.shutdown()
        super().closeEvent(event)
