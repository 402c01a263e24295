"""
PreferenceStore — 用户语言偏好的读写（尽力而为）

load/save 都不会向调用方抛出异常:
- 介质不可用、读取失败、存的值不在支持集合内 → load() 返回 None
- 写入失败 → save() 返回 SaveResult(ok=False)，并记录 warning
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from localization.errors import StorageError
from localization.languages import Language, parse_language
from localization.storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "uiLanguage"

# 后端可能抛出的异常，load/save 统一吞掉
_STORAGE_ERRORS = (StorageError, OSError, TypeError, ValueError)


@dataclass(frozen=True)
class SaveResult:
    """一次 save() 的结果"""
    language: Language
    ok: bool
    error: Optional[str] = None


class PreferenceStore:
    """包装 KeyValueStorage，只读写一个固定 key"""

    def __init__(
        self,
        storage: Optional[KeyValueStorage],
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def available(self) -> bool:
        return self._storage is not None

    def load(self) -> Optional[Language]:
        """读取已保存的语言；任何异常情况都返回 None"""
        if self._storage is None:
            return None

        try:
            raw = self._storage.get(self._key)
        except _STORAGE_ERRORS as exc:
            logger.warning("Failed to read language preference: %s", exc)
            return None

        if raw is None:
            return None

        language = parse_language(raw)
        if language is None:
            logger.warning("Discarding invalid stored language preference: %r", raw)
        return language

    def save(self, language: Language) -> SaveResult:
        """写入语言偏好，失败不重试"""
        if self._storage is None:
            logger.warning("Failed to persist language preference: no storage available")
            return SaveResult(language, ok=False, error="no storage available")

        try:
            self._storage.set(self._key, language.value)
        except _STORAGE_ERRORS as exc:
            logger.warning("Failed to persist language preference: %s", exc)
            return SaveResult(language, ok=False, error=str(exc))

        logger.debug("Language preference saved: %s", language.value)
        return SaveResult(language, ok=True)

    def close(self) -> None:
        close = getattr(self._storage, "close", None)
        if callable(close):
            close()
