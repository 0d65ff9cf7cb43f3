"""reload 子命令：重载代理配置"""

import asyncio
import inspect
from typing import Sequence, TYPE_CHECKING

from proxyadmin.text import NamedColor, translatable
from proxyadmin.utils import AdminConfig, get_log
from ..permission import strict_allow
from ..registry import Subcommand, SubcommandKind
from ..result import OperationResult

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer
    from ..source import CommandSource

LOG = get_log("Reload")


class Reload(Subcommand):
    kind = SubcommandKind.RELOAD

    def __init__(self, server: "ProxyServer", config: AdminConfig, name: str = "reload"):
        super().__init__(name, config.root_command, strict_allow(config.permission_node(self.kind.value)))
        self._server = server

    async def execute(self, source: "CommandSource", args: Sequence[str]) -> None:
        if self.reject_arguments(source, args):
            return
        result = await self.reload()
        result.report(source, LOG)

    async def reload(self) -> OperationResult:
        failure = translatable("command.reload-failure", color=NamedColor.RED)
        try:
            reloaded = await self._call_reload()
        except Exception as e:
            return OperationResult.failed_with_detail(failure, "无法重载配置", error=e)

        if reloaded:
            LOG.info("配置已重载")
            return OperationResult.ok(translatable("command.reload-success", color=NamedColor.GREEN))
        return OperationResult.failed(failure)

    async def _call_reload(self) -> bool:
        """同步实现放到线程中执行，避免阻塞事件循环"""
        reload_fn = self._server.reload_configuration
        if inspect.iscoroutinefunction(reload_fn):
            return bool(await reload_fn())
        result = await asyncio.to_thread(reload_fn)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)
