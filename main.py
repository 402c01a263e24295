#!/usr/bin/env python3
"""
ui-localization — 界面本地化演示程序

入口点：配置日志、加载配置、初始化 TranslationService、启动 GUI。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# 确保项目根目录在 sys.path
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

CONFIG_PATH = PROJECT_ROOT / "config" / "settings.yaml"


def setup_logging() -> None:
    """配置日志系统"""
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt="%H:%M:%S",
    )


def main() -> int:
    """主入口"""
    setup_logging()
    logger = logging.getLogger("ui-localization")
    logger.info("Starting ui-localization...")

    from PySide6.QtGui import QFont
    from PySide6.QtWidgets import QApplication

    # QApplication 必须先于 TranslationService 创建，偏好恢复依赖事件循环
    app = QApplication(sys.argv)
    app.setApplicationName("ui-localization")
    app.setApplicationVersion("0.1.0")
    app.setFont(QFont("Segoe UI", 10))
    app.setStyleSheet("""
        QWidget {
            background: #1e1e2e;
            color: #cdd6f4;
        }
    """)

    # 加载配置
    from localization import LocalizationConfig, TranslationService, load_config

    config = LocalizationConfig.from_dict(load_config(CONFIG_PATH))
    logger.info(
        "i18n config: default=%s, fallback=%s, storage=%s",
        config.default_language.value, config.fallback_language.value, config.storage,
    )

    service = TranslationService.create(config)

    from gui.main_window import MainWindow

    window = MainWindow(service)
    window.show()
    logger.info("GUI ready (%s)", service.active_language.value)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
