"""
共享 fixture — 无界面 Qt 平台、内存存储
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

# 确保项目根在路径中
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# GUI 测试不需要真实显示器
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from localization import Catalog, Language, StorageError  # noqa: E402


class RecordingStorage:
    """记录每次读写的内存存储，可注入故障"""

    def __init__(self, initial: Optional[dict] = None) -> None:
        self.data = dict(initial or {})
        self.writes: List[Tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError("read failed")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes.append((key, value))
        self.data[key] = value


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def greet_catalog() -> Catalog:
    return Catalog.from_dict({
        "greet": {"en": "Hello", "de": "Hallo"},
        "bye": {"de": "Tschüss"},
    }, fallback=Language.DE)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def spin(qapp):
    """返回一个运行 Qt 事件循环 ms 毫秒的函数，让 0ms 定时器触发"""
    from PySide6.QtCore import QEventLoop, QTimer

    def _spin(ms: int = 50) -> None:
        loop = QEventLoop()
        QTimer.singleShot(ms, loop.quit)
        loop.exec()

    return _spin
