"""
测试 PreferenceContext — 启动恢复、写入顺序、信号广播、一次性恢复
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from localization import (  # noqa: E402
    Language,
    PreferenceContext,
    PreferenceStore,
    UnsupportedLanguageError,
)


@pytest.fixture
def context(storage):
    return PreferenceContext(PreferenceStore(storage), default_language=Language.DE)


@pytest.fixture
def changes(context):
    received = []
    context.language_changed.connect(received.append)
    return received


class TestStartup:

    def test_uninitialized(self, context):
        assert not context.is_active
        with pytest.raises(RuntimeError):
            context.get_active_language()

    def test_default_without_stored_value(self, context, changes):
        context.start(defer_restore=False)
        assert context.get_active_language() == Language.DE
        assert changes == []

    def test_stored_value_overrides_default(self, storage, context, changes):
        storage.data["uiLanguage"] = "en"
        context.start(defer_restore=False)
        assert context.active_language == Language.EN
        assert changes == ["en"]

    def test_stored_equal_to_default_no_signal(self, storage, context, changes):
        storage.data["uiLanguage"] = "de"
        context.start(defer_restore=False)
        assert changes == []

    def test_invalid_stored_value_keeps_default(self, storage, context, changes):
        storage.data["uiLanguage"] = "klingon"
        context.start(defer_restore=False)
        assert context.active_language == Language.DE
        assert changes == []

    def test_unreadable_storage_keeps_default(self, storage, context):
        storage.data["uiLanguage"] = "en"
        storage.fail_reads = True
        context.start(defer_restore=False)
        assert context.active_language == Language.DE

    def test_restore_only_once(self, storage, context):
        context.start(defer_restore=False)
        storage.data["uiLanguage"] = "en"
        assert context.restore() is None
        assert context.active_language == Language.DE

    def test_start_twice_is_noop(self, storage, context):
        context.start(defer_restore=False)
        context.set_active_language(Language.EN)
        context.start(defer_restore=False)
        assert context.active_language == Language.EN

    def test_startup_does_not_write(self, storage, context):
        storage.data["uiLanguage"] = "en"
        context.start(defer_restore=False)
        assert storage.writes == []

    def test_invalid_default_rejected(self, storage):
        with pytest.raises(UnsupportedLanguageError):
            PreferenceContext(PreferenceStore(storage), default_language="fr")


class TestDeferredRestore:
    """有事件循环时，恢复在首帧之后到达"""

    def test_late_value_propagates(self, qapp, spin, storage, context, changes):
        storage.data["uiLanguage"] = "en"
        context.start()
        # 首次渲染使用默认语言
        assert context.active_language == Language.DE
        assert context.restore_pending

        spin()
        assert not context.restore_pending
        assert context.active_language == Language.EN
        assert changes == ["en"]

    def test_explicit_choice_cancels_pending_restore(self, qapp, spin, storage, context):
        storage.data["uiLanguage"] = "en"
        context.start()
        context.set_active_language(Language.DE)
        spin()
        assert context.active_language == Language.DE
        assert storage.data["uiLanguage"] == "de"

    def test_shutdown_discards_pending_restore(self, qapp, spin, storage, context):
        storage.data["uiLanguage"] = "en"
        context.start()
        context.shutdown()
        spin()
        assert context.active_language == Language.DE


class TestSetActiveLanguage:

    def test_updates_and_persists(self, storage, context, changes):
        context.start(defer_restore=False)
        result = context.set_active_language(Language.EN)
        assert result.ok
        assert context.active_language == Language.EN
        assert changes == ["en"]
        assert storage.writes == [("uiLanguage", "en")]

    def test_accepts_code_string(self, context):
        context.start(defer_restore=False)
        context.set_active_language("en")
        assert context.active_language == Language.EN

    def test_notifies_before_persisting(self, storage, context):
        context.start(defer_restore=False)
        seen = []
        context.language_changed.connect(lambda code: seen.append(list(storage.writes)))
        context.set_active_language(Language.EN)
        assert seen == [[]]

    def test_same_value_twice(self, storage, context, changes):
        context.start(defer_restore=False)
        context.set_active_language(Language.EN)
        context.set_active_language(Language.EN)
        assert context.active_language == Language.EN
        # 只有一次内存变更，每次调用写一次
        assert changes == ["en"]
        assert storage.writes == [("uiLanguage", "en"), ("uiLanguage", "en")]

    @pytest.mark.parametrize("bad", ["fr", "", None, 42])
    def test_unsupported_rejected(self, storage, context, changes, bad):
        context.start(defer_restore=False)
        with pytest.raises(UnsupportedLanguageError):
            context.set_active_language(bad)
        assert context.active_language == Language.DE
        assert changes == []
        assert storage.writes == []

    def test_unsupported_is_value_error(self, context):
        context.start(defer_restore=False)
        with pytest.raises(ValueError):
            context.set_active_language("fr")

    def test_save_failure_does_not_block(self, storage, context, changes):
        context.start(defer_restore=False)
        failures = []
        context.preference_save_failed.connect(failures.append)
        storage.fail_writes = True

        result = context.set_active_language(Language.EN)

        assert not result.ok
        assert context.active_language == Language.EN
        assert changes == ["en"]
        assert failures == ["quota exceeded"]

    def test_save_success_signal(self, context):
        context.start(defer_restore=False)
        saved = []
        context.preference_saved.connect(saved.append)
        context.set_active_language(Language.EN)
        assert saved == ["en"]

    def test_set_before_start_activates(self, storage, context):
        storage.data["uiLanguage"] = "de"
        context.set_active_language(Language.EN)
        assert context.is_active
        assert context.active_language == Language.EN
        # 显式选择之后不再恢复
        assert context.restore() is None
        assert context.active_language == Language.EN
