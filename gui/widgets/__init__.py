"""
gui.widgets — 本地化相关的 GUI 组件

提供:
- TranslatedLabel: 随语言刷新的标签
- LanguageSelector: 界面语言下拉框
"""

from gui.widgets.translated_label import TranslatedLabel
from gui.widgets.language_selector import LanguageSelector

__all__ = [
    "TranslatedLabel",
    "LanguageSelector",
]
