"""
管理根命令

构建方式：
    ```python
    command = create_admin_command(server)
    await command.execute(CommandInvocation.parse(source, "dump"))
    ```
"""

from typing import Optional, TYPE_CHECKING

from proxyadmin.utils import AdminConfig, admin_config, setup_logging
from .permission import (
    Tristate,
    PermissionPath,
    PermissionTable,
    PermissionPredicate,
    strict_allow,
    default_allow,
)
from .invocation import CommandInvocation, split_arguments
from .source import CommandSource, PermissionedSource, ConsoleCommandSource
from .result import OperationResult, Outcome
from .registry import Subcommand, SubcommandKind, SubcommandRegistry
from .router import AdminCommand
from .subcommands import Info, Plugins, Reload, Dump

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer


def create_admin_command(server: "ProxyServer", config: Optional[AdminConfig] = None) -> AdminCommand:
    """按 version / plugins / reload / dump 的顺序构建根命令"""
    config = config or admin_config
    config.validate_config()
    setup_logging(config.log_level, debug=config.debug)
    registry = SubcommandRegistry.build(
        Info(server, config),
        Plugins(server, config),
        Reload(server, config),
        Dump(server, config),
    )
    return AdminCommand(config.root_command, registry)


__all__ = [
    "Tristate",
    "PermissionPath",
    "PermissionTable",
    "PermissionPredicate",
    "strict_allow",
    "default_allow",
    "CommandInvocation",
    "split_arguments",
    "CommandSource",
    "PermissionedSource",
    "ConsoleCommandSource",
    "OperationResult",
    "Outcome",
    "Subcommand",
    "SubcommandKind",
    "SubcommandRegistry",
    "AdminCommand",
    "Info",
    "Plugins",
    "Reload",
    "Dump",
    "create_admin_command",
]
