"""
测试 resolve — fallback 链: 请求语言 → fallback 语言 → 原始 key
"""

import sys
from enum import Enum
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from localization import Language, default_catalog, resolve  # noqa: E402


class _Extra(str, Enum):
    """模拟一个 catalog 条目中没有的第三种语言"""
    FR = "fr"


class TestResolve:

    @pytest.mark.parametrize("language", list(Language), ids=lambda lang: lang.value)
    def test_requested_language_wins(self, language):
        catalog = default_catalog()
        for key, record in catalog.items():
            if language in record:
                assert resolve(key, language, catalog) == record[language]

    def test_falls_back_to_fallback_language(self, greet_catalog):
        assert resolve("bye", Language.EN, greet_catalog) == "Tschüss"

    def test_missing_key_returns_key(self, greet_catalog):
        for language in Language:
            assert resolve("missingKey", language, greet_catalog) == "missingKey"

    def test_empty_key(self, greet_catalog):
        assert resolve("", Language.EN, greet_catalog) == ""

    def test_fallback_independent_of_active_language(self):
        catalog = {"greet": {Language.EN: "Hello"}}
        # fallback 固定为 de，条目里没有 de → 原始 key，不会尝试第三种语言
        assert resolve("greet", _Extra.FR, catalog, fallback=Language.DE) == "greet"
        assert resolve("greet", _Extra.FR, catalog, fallback=Language.EN) == "Hello"

    def test_malformed_entry_degrades_to_key(self):
        catalog = {"greet": {}}
        assert resolve("greet", Language.EN, catalog) == "greet"

    def test_non_mapping_entry_degrades_to_key(self):
        catalog = {"greet": "Hello", "count": 3, "empty": None}
        for key in catalog:
            assert resolve(key, Language.EN, catalog) == key

    def test_non_string_text_skipped(self):
        catalog = {"greet": {"en": None, "de": "Hallo"}, "count": {"en": 3, "de": 4}}
        assert resolve("greet", Language.EN, catalog) == "Hallo"
        assert resolve("count", Language.EN, catalog) == "count"

    def test_plain_dict_with_string_codes(self):
        catalog = {"greet": {"en": "Hello", "de": "Hallo"}}
        assert resolve("greet", Language.EN, catalog) == "Hello"

    def test_deterministic(self, greet_catalog):
        results = {resolve("greet", Language.EN, greet_catalog) for _ in range(5)}
        assert results == {"Hello"}


class TestConcreteScenario:
    """greet = {en: Hello, de: Hallo}, fallback = de"""

    @pytest.fixture
    def catalog(self):
        return {"greet": {"en": "Hello", "de": "Hallo"}}

    def test_english(self, catalog):
        assert resolve("greet", Language.EN, catalog, fallback=Language.DE) == "Hello"

    def test_language_missing_from_entry(self, catalog):
        assert resolve("greet", _Extra.FR, catalog, fallback=Language.DE) == "Hallo"

    def test_missing_key(self, catalog):
        assert resolve("missingKey", Language.EN, catalog, fallback=Language.DE) == "missingKey"
