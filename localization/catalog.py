"""
Catalog — 只读翻译表

结构::

    {
        "done": {"en": "Done", "de": "Fertig"},
        ...
    }

每个条目必须提供 fallback 语言的文本，其余语言可缺省（缺省时由 resolver 回退）。
Catalog 在进程启动时构建一次，之后不再修改。
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Union

import yaml

from localization.errors import CatalogError
from localization.languages import FALLBACK_LANGUAGE, Language, parse_language

logger = logging.getLogger(__name__)

_MODULE_DIR = Path(__file__).resolve().parent
_DEFAULT_CATALOG_FILE = _MODULE_DIR / "messages.yaml"

Entry = Mapping  # Mapping[Language, str]


class Catalog(Mapping):
    """
    key → {Language: text} 的只读映射

    Usage::

        catalog = Catalog.from_dict({"greet": {"en": "Hello", "de": "Hallo"}})
        catalog["greet"][Language.EN]   # -> "Hello"
        "greet" in catalog              # -> True
    """

    def __init__(
        self,
        entries: Mapping,
        fallback: Language = FALLBACK_LANGUAGE,
    ) -> None:
        self._fallback = fallback
        frozen: Dict[str, Entry] = {}
        for key, record in entries.items():
            if not isinstance(record, Mapping):
                raise CatalogError(f"Entry '{key}' must be a mapping, got {type(record).__name__}")
            if not isinstance(record.get(fallback), str):
                raise CatalogError(
                    f"Entry '{key}' has no text for fallback language '{fallback}'"
                )
            frozen[key] = MappingProxyType(dict(record))
        self._entries = MappingProxyType(frozen)

    # ── Mapping 协议 ────────────────────────────────────────────

    def __getitem__(self, key: str) -> Entry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} keys, fallback={self._fallback.value})"

    # ── 查询 ────────────────────────────────────────────────────

    @property
    def fallback(self) -> Language:
        """构建时校验所用的 fallback 语言"""
        return self._fallback

    def missing_translations(self, language: Language) -> List[str]:
        """返回缺少 language 文本的 key（供内容作者补全）"""
        return sorted(k for k, record in self._entries.items() if language not in record)

    # ── 构建 ────────────────────────────────────────────────────

    @classmethod
    def from_dict(
        cls,
        data: Mapping,
        fallback: Language = FALLBACK_LANGUAGE,
    ) -> "Catalog":
        """
        从普通字典构建，语言代码可以是字符串。

        不在支持集合内的语言代码会被跳过并记录 warning，
        这些文本永远不可能被选中。null 文本视为缺失，其它非字符串值抛出 CatalogError。
        """
        entries: Dict[str, Dict[Language, str]] = {}
        for key, record in data.items():
            if not isinstance(record, Mapping):
                raise CatalogError(f"Entry '{key}' must be a mapping, got {type(record).__name__}")
            texts: Dict[Language, str] = {}
            for code, text in record.items():
                language = parse_language(code)
                if language is None:
                    logger.warning("Catalog entry '%s': skipping unsupported language '%s'", key, code)
                    continue
                if text is None:
                    # 空值视为缺失，交给 resolver 回退
                    continue
                if not isinstance(text, str):
                    raise CatalogError(
                        f"Entry '{key}' [{language.value}] must be a string, got {type(text).__name__}"
                    )
                texts[language] = text
            entries[str(key)] = texts
        return cls(entries, fallback=fallback)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        fallback: Language = FALLBACK_LANGUAGE,
    ) -> "Catalog":
        """读取 YAML（.yaml/.yml）或 JSON catalog 文件"""
        filepath = Path(path)
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                if filepath.suffix.lower() in (".yaml", ".yml"):
                    data: Any = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except FileNotFoundError as exc:
            raise CatalogError(f"Catalog file not found: {filepath}") from exc
        except (ValueError, yaml.YAMLError) as exc:
            raise CatalogError(f"Cannot parse catalog {filepath}: {exc}") from exc

        if not isinstance(data, Mapping):
            raise CatalogError(f"Catalog root in {filepath} must be a mapping")

        catalog = cls.from_dict(data, fallback=fallback)
        logger.info("Catalog loaded: %s (%d keys)", filepath.name, len(catalog))
        return catalog


_default_catalogs: Dict[Language, Catalog] = {}


def default_catalog(fallback: Language = FALLBACK_LANGUAGE) -> Catalog:
    """应用自带的 catalog（messages.yaml），按 fallback 语言分别校验并缓存"""
    if fallback not in _default_catalogs:
        _default_catalogs[fallback] = Catalog.from_file(_DEFAULT_CATALOG_FILE, fallback=fallback)
    return _default_catalogs[fallback]
