"""
TranslationService — 面向 UI 的翻译入口

组合 Catalog + resolve + PreferenceContext:

    service = TranslationService.create(storage=MemoryStorage())
    service.t("done")                    # -> "Fertig"
    unsubscribe = service.subscribe(lambda lang: label.setText(service.t("done")))
    service.set_language("en")           # 订阅者在返回前收到通知
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, List, Optional, Tuple, Union

from localization.catalog import Catalog, default_catalog
from localization.config import LocalizationConfig
from localization.languages import (
    FALLBACK_LANGUAGE,
    NATIVE_NAMES,
    Language,
    require_language,
    supported_languages,
)
from localization.preference_context import PreferenceContext
from localization.preference_store import PreferenceStore, SaveResult
from localization.resolver import resolve
from localization.storage import KeyValueStorage

logger = logging.getLogger(__name__)

Subscriber = Callable[[Language], None]


class TranslationService:
    """
    翻译服务

    每个会话（或每个测试）持有自己的实例；instance() 只是应用代码的便捷入口。
    """

    _instance: Optional["TranslationService"] = None

    @classmethod
    def instance(cls) -> "TranslationService":
        """获取或创建进程默认实例"""
        if cls._instance is None:
            cls._instance = cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """重置默认实例（仅用于测试）"""
        if cls._instance is not None:
            cls._instance.shutdown()
        cls._instance = None

    @classmethod
    def create(
        cls,
        config: Optional[LocalizationConfig] = None,
        storage: Optional[KeyValueStorage] = None,
        initial_language: Union[Language, str, None] = None,
        catalog: Optional[Mapping] = None,
        start: bool = True,
        defer_restore: bool = True,
    ) -> "TranslationService":
        """
        按配置组装 store / context / catalog。

        Parameters
        ----------
        config : LocalizationConfig, optional
            缺省时使用 LocalizationConfig() 的默认值
        storage : KeyValueStorage, optional
            显式指定的持久化介质；缺省时由 config.build_storage() 创建
        initial_language : Language or str, optional
            宿主指定的初始语言，优先于 config.default_language
        catalog : Mapping, optional
            缺省时加载 config.catalog 或内置 messages.yaml
        start : bool
            是否立即 start() context
        defer_restore : bool
            传给 PreferenceContext.start()
        """
        config = config or LocalizationConfig()
        if storage is None:
            storage = config.build_storage()

        if catalog is None:
            if config.catalog:
                catalog = Catalog.from_file(config.catalog, fallback=config.fallback_language)
            else:
                catalog = default_catalog(config.fallback_language)

        default = initial_language if initial_language is not None else config.default_language
        store = PreferenceStore(storage, key=config.storage_key)
        context = PreferenceContext(store, default_language=default)

        service = cls(context, catalog, fallback=config.fallback_language)
        if start:
            context.start(defer_restore=defer_restore)
        return service

    def __init__(
        self,
        context: PreferenceContext,
        catalog: Mapping,
        fallback: Optional[Language] = None,
    ) -> None:
        self._context = context
        self._catalog = catalog
        self._fallback = fallback or getattr(catalog, "fallback", None) or FALLBACK_LANGUAGE
        self._subscriptions: List[Callable[[str], None]] = []

    # ── 查询 ────────────────────────────────────────────────────

    @property
    def context(self) -> PreferenceContext:
        return self._context

    @property
    def catalog(self) -> Mapping:
        return self._catalog

    @property
    def fallback_language(self) -> Language:
        return self._fallback

    @property
    def language_changed(self):
        """context 的 Qt Signal，Qt 控件可直接 connect"""
        return self._context.language_changed

    @property
    def active_language(self) -> Language:
        return self._context.get_active_language()

    def get_active_language(self) -> Language:
        return self._context.get_active_language()

    def translate(self, key: str) -> str:
        """按当前语言翻译 key，永不抛出异常"""
        return resolve(key, self._context.get_active_language(), self._catalog, self._fallback)

    t = translate

    @staticmethod
    def supported_languages() -> Tuple[Language, ...]:
        return supported_languages()

    @staticmethod
    def language_name(language: Union[Language, str]) -> str:
        """语言的本地名称，如 "Deutsch" """
        language = require_language(language)
        return NATIVE_NAMES.get(language, language.value)

    # ── 写入 / 订阅 ─────────────────────────────────────────────

    def set_language(self, language: Union[Language, str]) -> SaveResult:
        """切换语言；不支持的值抛出 UnsupportedLanguageError"""
        return self._context.set_active_language(language)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        注册语言变更回调，返回取消订阅函数。

        回调在 set_language() 返回前同步执行，参数为新的 Language。
        """
        def _slot(code: str) -> None:
            callback(Language(code))

        self._context.language_changed.connect(_slot)
        self._subscriptions.append(_slot)

        def _unsubscribe() -> None:
            if _slot not in self._subscriptions:
                return
            self._subscriptions.remove(_slot)
            try:
                self._context.language_changed.disconnect(_slot)
            except (RuntimeError, TypeError) as exc:
                logger.debug("Subscriber already disconnected: %s", exc)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def shutdown(self) -> None:
        for slot in list(self._subscriptions):
            try:
                self._context.language_changed.disconnect(slot)
            except (RuntimeError, TypeError) as exc:
                logger.debug("Subscriber already disconnected: %s", exc)
        self._subscriptions.clear()
        self._context.shutdown()
