"""
LanguageSelector — 界面语言下拉框
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QComboBox, QWidget

from localization import Language, TranslationService

logger = logging.getLogger(__name__)


class LanguageSelector(QComboBox):
    """
    列出所有支持的语言（本地名称），选择即调用 service.set_language()。

    外部切换语言时同步当前项，不会反向触发 set_language()。
    """

    def __init__(self, service: TranslationService, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._service = service
        self.setStyleSheet("""
            QComboBox {
                background: #181825; color: #cdd6f4;
                border: 1px solid #45475a; border-radius: 4px;
                padding: 4px 8px;
            }
        """)

        for language in service.supported_languages():
            self.addItem(service.language_name(language), language.value)

        self._sync(service.active_language.value)

        self.currentIndexChanged.connect(self._on_index_changed)
        service.language_changed.connect(self._sync)

    def selected_language(self) -> Language:
        return Language(self.currentData())

    @Slot(int)
    def _on_index_changed(self, index: int) -> None:
        code = self.itemData(index)
        if code is None:
            return
        logger.debug("Language selected in UI: %s", code)
        self._service.set_language(code)

    @Slot(str)
    def _sync(self, code: str) -> None:
        index = self.findData(code)
        if index < 0 or index == self.currentIndex():
            return
        self.blockSignals(True)
        self.setCurrentIndex(index)
        self.blockSignals(False)
