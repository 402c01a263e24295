"""
localization — 界面文本本地化

提供:
- Catalog: 只读翻译表（内置 messages.yaml）
- resolve: fallback 链 当前语言 → fallback 语言 → 原始 key
- PreferenceStore: 语言偏好的持久化（失败不抛出）
- PreferenceContext: 当前语言 + language_changed Signal
- TranslationService: UI 使用的 t() / set_language() / subscribe()
"""

from localization.catalog import Catalog, default_catalog
from localization.config import LocalizationConfig, load_config
from localization.errors import (
    CatalogError,
    LocalizationError,
    StorageError,
    UnsupportedLanguageError,
)
from localization.languages import (
    DEFAULT_LANGUAGE,
    FALLBACK_LANGUAGE,
    Language,
    parse_language,
    supported_languages,
)
from localization.preference_context import PreferenceContext
from localization.preference_store import PreferenceStore, SaveResult
from localization.resolver import resolve
from localization.service import TranslationService
from localization.storage import (
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    NullStorage,
    QtSettingsStorage,
)

__all__ = [
    "Catalog",
    "default_catalog",
    "LocalizationConfig",
    "load_config",
    "CatalogError",
    "LocalizationError",
    "StorageError",
    "UnsupportedLanguageError",
    "DEFAULT_LANGUAGE",
    "FALLBACK_LANGUAGE",
    "Language",
    "parse_language",
    "supported_languages",
    "PreferenceContext",
    "PreferenceStore",
    "SaveResult",
    "resolve",
    "TranslationService",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "NullStorage",
    "QtSettingsStorage",
]
