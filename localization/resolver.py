"""
resolve — key + 语言 → 显示文本

fallback 链: 请求语言 → fallback 语言 → 原始 key
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from localization.languages import FALLBACK_LANGUAGE, Language

logger = logging.getLogger(__name__)


def resolve(
    key: str,
    language: Language,
    catalog: Mapping,
    fallback: Language = FALLBACK_LANGUAGE,
) -> str:
    """
    翻译函数（纯函数，相同输入总是得到相同输出）。

    Parameters
    ----------
    key : str
        翻译 key，如 "done"
    language : Language
        当前语言
    catalog : Mapping
        key → {Language: text}，通常是 Catalog
    fallback : Language
        当前语言缺失时尝试的固定语言

    Returns
    -------
    str
        找到的文本；条目不存在、条目格式不对或两种语言都缺失时返回原始 key。
    """
    entry = catalog.get(key)

    if isinstance(entry, Mapping):
        # 当前语言
        text = entry.get(language)
        if isinstance(text, str):
            return text

        # fallback 语言
        text = entry.get(fallback)
        if isinstance(text, str):
            return text

    # 仍未找到 → 返回原始 key（界面上可见，便于内容作者发现）
    logger.debug("Missing translation key: '%s' [%s]", key, language)
    return key
