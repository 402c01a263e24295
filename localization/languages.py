"""
Language — 支持的界面语言（封闭枚举）

新增语言只需在 Language 中加一个成员并在 catalog 中补充文本，
其余模块都从枚举本身读取支持集合。
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from localization.errors import UnsupportedLanguageError


class Language(str, Enum):
    """界面语言代码"""

    EN = "en"
    DE = "de"

    def __str__(self) -> str:
        return self.value


# 缺失翻译时第二个尝试的语言，与当前语言无关
FALLBACK_LANGUAGE = Language.DE

# 宿主未指定初始语言时使用
DEFAULT_LANGUAGE = Language.DE

# 语言选择器里显示的本地名称
NATIVE_NAMES: Dict[Language, str] = {
    Language.EN: "English",
    Language.DE: "Deutsch",
}


def supported_languages() -> Tuple[Language, ...]:
    """按声明顺序返回全部支持的语言"""
    return tuple(Language)


def parse_language(value: Union[str, Language, None]) -> Optional[Language]:
    """
    宽松解析：成功返回 Language，无法识别返回 None。

    接受 "en" / "EN" / " de " 以及 Language 成员本身。
    """
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Language(value.strip().lower())
    except ValueError:
        return None


def require_language(value: Union[str, Language, None]) -> Language:
    """严格解析：无法识别时抛出 UnsupportedLanguageError"""
    language = parse_language(value)
    if language is None:
        raise UnsupportedLanguageError(value)
    return language
