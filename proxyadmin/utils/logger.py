"""
日志工具

所有模块统一通过 get_log(name) 获取日志器，根日志器名为 proxyadmin。
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "proxyadmin"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: Optional[str] = None, debug: bool = False) -> None:
    """
    配置根日志器

    Args:
        level: 日志级别名称，如 "INFO"
        debug: 为 True 时强制使用 DEBUG 级别
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = True
        _configured = True

    if debug:
        root.setLevel(logging.DEBUG)
    else:
        root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


def get_log(name: str) -> logging.Logger:
    """获取 proxyadmin 命名空间下的日志器"""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
