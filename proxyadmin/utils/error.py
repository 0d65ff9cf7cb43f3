"""
错误类型定义
"""

import logging

from .logger import get_log

LOG = get_log("Error")


class ProxyAdminError(Exception):
    """proxyadmin 基础异常，构造时即写入日志"""

    logger: logging.Logger = LOG

    def __init__(self, info: str, log: bool = True):
        if log:
            self.logger.error(f"{self.__class__.__name__}: {info}")
        self.info = info
        super().__init__(info)


class ConfigError(ProxyAdminError):
    """配置文件读取或校验失败"""


class DuplicateSubcommandError(ProxyAdminError):
    """子命令名称重复（大小写不敏感）"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"子命令 {name!r} 已注册")
