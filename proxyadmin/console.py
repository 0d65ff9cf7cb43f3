"""
控制台接入

把一行原始输入（如 "/proxy dump"）交给根命令：先判定权限，再执行；
补全时保留行尾空白，以便进入下一级参数。
"""

from typing import Callable, List, Optional, TYPE_CHECKING

from proxyadmin.command import (
    AdminCommand,
    CommandInvocation,
    CommandSource,
    ConsoleCommandSource,
    create_admin_command,
)
from proxyadmin.text import MessageCatalog
from proxyadmin.utils import AdminConfig, admin_config, get_log

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer

LOG = get_log("AdminConsole")


class AdminConsole:
    def __init__(self, command: AdminCommand, source: CommandSource):
        self.command = command
        self.source = source

    def _strip_root(self, line: str) -> Optional[str]:
        """去掉开头的 "/<root>"，不是本命令时返回 None；返回值保留行尾空白"""
        stripped = line.lstrip()
        if stripped.startswith("/"):
            stripped = stripped[1:]
        parts = stripped.split(None, 1)
        if not parts or parts[0].lower() != self.command.root_command:
            return None
        return stripped[len(parts[0]):]

    async def handle(self, line: str) -> bool:
        """
        处理一行输入

        Returns:
            是否由本命令处理（非本命令或无权限时返回 False）
        """
        rest = self._strip_root(line)
        if rest is None:
            return False

        invocation = CommandInvocation.parse(self.source, rest)
        if not self.command.has_permission(invocation):
            LOG.info("%r 无权限执行: %s", self.source, line.strip())
            return False

        await self.command.execute(invocation)
        return True

    def complete(self, line: str) -> List[str]:
        rest = self._strip_root(line)
        if rest is None:
            return []
        return self.command.suggest(CommandInvocation.parse(self.source, rest, for_suggestion=True))


def create_console(
    server: "ProxyServer",
    config: Optional[AdminConfig] = None,
    writer: Callable[[str], None] = print,
) -> AdminConsole:
    """
    构建代理控制台

    Args:
        server: 代理服务器
        config: 管理命令配置，默认使用全局 admin_config
        writer: 渲染后文本的输出函数

    Returns:
        以 config.locale 对应语言输出的控制台
    """
    config = config or admin_config
    catalog = MessageCatalog.load(config.locale)
    LOG.debug("控制台语言: %s", catalog.locale)
    source = ConsoleCommandSource(catalog, writer=writer)
    return AdminConsole(create_admin_command(server, config), source)
