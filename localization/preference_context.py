"""
PreferenceContext — 会话内当前语言的唯一持有者

- 继承 QObject 以支持 Signal/Slot
- start(): 以默认语言进入 active 状态，并安排一次（仅一次）从 PreferenceStore 恢复
- set_active_language(): 同步更新内存值 → 发射 language_changed → 写入 PreferenceStore
- 内存值始终权威，持久化只是尽力而为的镜像
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from PySide6.QtCore import QCoreApplication, QObject, QTimer, Signal

from localization.languages import DEFAULT_LANGUAGE, Language, require_language
from localization.preference_store import PreferenceStore, SaveResult

logger = logging.getLogger(__name__)


class PreferenceContext(QObject):
    """
    当前语言状态 + 变更广播

    Usage::

        ctx = PreferenceContext(PreferenceStore(MemoryStorage()))
        ctx.language_changed.connect(on_changed)
        ctx.start()                       # 默认语言，随后恢复已保存的偏好
        ctx.set_active_language("en")     # 同步通知所有订阅者
    """

    # ── Qt Signals ──────────────────────────────────────────────
    language_changed = Signal(str)        # 新的语言代码，如 "en"
    preference_saved = Signal(str)
    preference_save_failed = Signal(str)  # 失败原因

    def __init__(
        self,
        store: PreferenceStore,
        default_language: Union[Language, str] = DEFAULT_LANGUAGE,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._default = require_language(default_language)
        self._language: Optional[Language] = None
        self._restore_attempted = False
        self._restore_timer: Optional[QTimer] = None

    # ── 状态 ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._language is not None

    @property
    def default_language(self) -> Language:
        return self._default

    @property
    def restore_pending(self) -> bool:
        return self._restore_timer is not None and self._restore_timer.isActive()

    def get_active_language(self) -> Language:
        if self._language is None:
            raise RuntimeError("PreferenceContext not started")
        return self._language

    @property
    def active_language(self) -> Language:
        return self.get_active_language()

    # ── 生命周期 ────────────────────────────────────────────────

    def start(self, defer_restore: bool = True) -> None:
        """
        进入 active 状态并安排偏好恢复。

        Parameters
        ----------
        defer_restore : bool
            True 时把 restore() 交给 Qt 事件循环（首帧先用默认语言渲染）；
            没有 QCoreApplication 时没有事件循环可用，直接同步恢复。
        """
        if self._language is not None:
            return

        self._language = self._default
        logger.info("Language initialised: %s", self._default.value)

        if defer_restore and QCoreApplication.instance() is not None:
            self._restore_timer = QTimer(self)
            self._restore_timer.setSingleShot(True)
            self._restore_timer.timeout.connect(self.restore)
            self._restore_timer.start(0)
        else:
            self.restore()

    def restore(self) -> Optional[Language]:
        """
        一次性从 PreferenceStore 读取偏好，有效值覆盖当前语言。

        重复调用无效果；返回读到的语言（没有则 None）。
        """
        if self._restore_attempted:
            return None
        self._restore_attempted = True
        self._restore_timer = None

        if self._language is None:
            self._language = self._default

        stored = self._store.load()
        if stored is None:
            logger.debug("No stored language preference, keeping %s", self._language.value)
            return None

        logger.info("Restoring stored language preference: %s", stored.value)
        self._apply(stored)
        return stored

    def shutdown(self) -> None:
        """会话结束：丢弃未执行的恢复，释放存储句柄"""
        self._cancel_restore()
        self._store.close()

    # ── 写入 ────────────────────────────────────────────────────

    def set_active_language(self, language: Union[Language, str]) -> SaveResult:
        """
        切换语言（唯一写入入口）。

        内存值在通知订阅者之前更新；持久化结果不影响内存值，
        只通过 preference_saved / preference_save_failed 报告。
        """
        language = require_language(language)

        # 用户的显式选择比尚未到达的已保存值更新
        self._cancel_restore()

        self._apply(language)

        result = self._store.save(language)
        if result.ok:
            self.preference_saved.emit(language.value)
        else:
            self.preference_save_failed.emit(result.error or "")
        return result

    # ── 内部方法 ────────────────────────────────────────────────

    def _apply(self, language: Language) -> None:
        if language == self._language:
            return
        previous = self._language
        self._language = language
        logger.info(
            "Language changed: %s -> %s",
            previous.value if previous else None, language.value,
        )
        self.language_changed.emit(language.value)

    def _cancel_restore(self) -> None:
        if self._restore_timer is not None:
            self._restore_timer.stop()
            self._restore_timer = None
        self._restore_attempted = True
