"""proxyadmin：运行中代理的管理命令"""

from proxyadmin.command import (
    AdminCommand,
    CommandInvocation,
    ConsoleCommandSource,
    PermissionedSource,
    create_admin_command,
)
from proxyadmin.utils import admin_config, get_log

__version__ = "1.0.0"

__all__ = [
    "AdminCommand",
    "CommandInvocation",
    "ConsoleCommandSource",
    "PermissionedSource",
    "create_admin_command",
    "admin_config",
    "get_log",
]
