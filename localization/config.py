"""
localization 配置 — 读取 config/settings.yaml 的 i18n 段

    i18n:
      default_language: de
      fallback_language: de
      storage_key: uiLanguage
      storage: qsettings        # qsettings | json | memory | none
      storage_path: ~/.config/ui-localization/preferences.json
      catalog: null
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from localization.languages import DEFAULT_LANGUAGE, FALLBACK_LANGUAGE, Language, parse_language
from localization.preference_store import DEFAULT_STORAGE_KEY
from localization.storage import (
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    NullStorage,
    QtSettingsStorage,
)

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("qsettings", "json", "memory", "none")


def load_config(path: Union[str, Path]) -> dict:
    """加载 YAML 配置文件，不存在时返回空字典"""
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


@dataclass
class LocalizationConfig:
    """i18n 段的强类型视图"""
    default_language: Language = DEFAULT_LANGUAGE
    fallback_language: Language = FALLBACK_LANGUAGE
    storage_key: str = DEFAULT_STORAGE_KEY
    storage: str = "qsettings"
    storage_path: str = "~/.config/ui-localization/preferences.json"
    catalog: Optional[str] = None
    organization: str = "ui-localization"
    application: str = "ui-localization"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "LocalizationConfig":
        """
        从整个配置字典（或直接从 i18n 段）构建。

        非法的语言或存储后端记录 warning 并使用默认值。
        """
        data = dict(data or {})
        section = data.get("i18n", data) or {}

        cfg = cls()
        cfg.default_language = _language_or(
            section.get("default_language"), DEFAULT_LANGUAGE, "default_language")
        cfg.fallback_language = _language_or(
            section.get("fallback_language"), FALLBACK_LANGUAGE, "fallback_language")

        storage = str(section.get("storage", cfg.storage)).lower()
        if storage not in STORAGE_BACKENDS:
            logger.warning("Unknown storage backend '%s', using '%s'", storage, cfg.storage)
        else:
            cfg.storage = storage

        cfg.storage_key = str(section.get("storage_key") or cfg.storage_key)
        cfg.storage_path = str(section.get("storage_path") or cfg.storage_path)
        cfg.catalog = section.get("catalog") or None
        cfg.organization = str(section.get("organization") or cfg.organization)
        cfg.application = str(section.get("application") or cfg.application)
        return cfg

    def build_storage(self) -> KeyValueStorage:
        """按 storage 字段创建持久化后端；"none" 返回 NullStorage（介质不可用）"""
        if self.storage == "json":
            return JsonFileStorage(self.storage_path)
        if self.storage == "memory":
            return MemoryStorage()
        if self.storage == "qsettings":
            return QtSettingsStorage(self.organization, self.application)
        return NullStorage()


def _language_or(value: Any, default: Language, field_name: str) -> Language:
    if value is None:
        return default
    language = parse_language(value)
    if language is None:
        logger.warning("Invalid %s '%s' in config, using '%s'", field_name, value, default.value)
        return default
    return language
