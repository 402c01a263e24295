"""
持久化介质 — 单个字符串 key/value 的读写能力

所有后端遵循 KeyValueStorage 协议:
- get(key)  → str 或 None（不存在/不可用都返回 None）
- set(key, value) → None，失败时抛出 StorageError / OSError

PreferenceStore 是唯一的调用方，负责吞掉并记录这些异常。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable

from localization.errors import StorageError

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStorage(Protocol):
    """持久化介质接口"""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """进程内字典，用于测试和无界面运行"""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class NullStorage:
    """不可用的介质：读总是 None，写总是失败"""

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        raise StorageError("No persistence medium available")


class JsonFileStorage:
    """
    JSON 偏好文件，整个文件是一个扁平的 {key: value} 对象

    文件不存在视为空；文件损坏时读取返回 None，写入会覆盖为合法内容。
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as exc:
            raise StorageError(f"Cannot write {self._path}: {exc}") from exc

    def _read(self) -> Dict[str, object]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Preferences file %s unreadable: %s", self._path, exc)
            return {}
        return data if isinstance(data, dict) else {}


class QtSettingsStorage:
    """
    QSettings 后端（桌面程序的原生偏好存储）

    在 Windows 上写注册表，在 Linux/macOS 上写 ini/plist。
    """

    def __init__(self, organization: str, application: str) -> None:
        from PySide6.QtCore import QSettings

        self._settings = QSettings(organization, application)

    def get(self, key: str) -> Optional[str]:
        value = self._settings.value(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        from PySide6.QtCore import QSettings

        self._settings.setValue(key, value)
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise StorageError(f"QSettings write failed: {self._settings.status()}")

    def close(self) -> None:
        """释放句柄前把挂起的写入刷到磁盘"""
        self._settings.sync()
