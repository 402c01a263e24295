"""
TranslatedLabel — 随当前语言自动刷新的 QLabel
"""

from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QLabel, QWidget

from localization import TranslationService


class TranslatedLabel(QLabel):
    """显示 service.t(key)，语言切换后自动重新翻译"""

    def __init__(self, service: TranslationService, key: str,
                 suffix: str = "", parent: QWidget = None) -> None:
        super().__init__(parent)
        self._service = service
        self._key = key
        self._suffix = suffix
        self.retranslate()

        # 接收方销毁时 Qt 自动断开连接
        service.language_changed.connect(self._on_language_changed)

    @property
    def key(self) -> str:
        return self._key

    def set_key(self, key: str) -> None:
        self._key = key
        self.retranslate()

    def retranslate(self) -> None:
        self.setText(self._service.t(self._key) + self._suffix)

    @Slot(str)
    def _on_language_changed(self, code: str) -> None:
        self.retranslate()
