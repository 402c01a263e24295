"""
localization 异常类型

运行期的翻译缺失不是错误（直接返回原始 key），这里只定义边界上的拒绝：
不支持的语言、构建时发现的坏 catalog、存储后端故障。
"""

from __future__ import annotations


class LocalizationError(Exception):
    """localization 包内所有异常的基类"""


class UnsupportedLanguageError(LocalizationError, ValueError):
    """传入的语言代码不在支持集合内"""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported language: {value!r}")
        self.value = value


class CatalogError(LocalizationError):
    """catalog 数据结构不合法（构建时抛出，运行时不会出现）"""


class StorageError(LocalizationError):
    """持久化介质读写失败，由 PreferenceStore 捕获并记录"""
