"""dump 子命令：采集诊断快照并写入文件"""

import asyncio
from typing import Optional, Sequence, TYPE_CHECKING

from proxyadmin.dump import DumpAggregator, SnapshotWriter
from proxyadmin.text import NamedColor, translatable
from proxyadmin.utils import AdminConfig, get_log
from ..permission import strict_allow
from ..registry import Subcommand, SubcommandKind
from ..result import OperationResult

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer
    from ..source import CommandSource

LOG = get_log("Dump")


class Dump(Subcommand):
    kind = SubcommandKind.DUMP

    def __init__(
        self,
        server: "ProxyServer",
        config: AdminConfig,
        name: str = "dump",
        aggregator: Optional[DumpAggregator] = None,
        writer: Optional[SnapshotWriter] = None,
    ):
        # 与 plugins 共用同一个权限节点
        node = config.permission_node(SubcommandKind.PLUGINS.value)
        super().__init__(name, config.root_command, strict_allow(node))
        self._aggregator = aggregator or DumpAggregator(server)
        self._writer = writer or SnapshotWriter(
            config.product_name.lower(), directory_provider=config.resolve_dump_dir
        )

    async def execute(self, source: "CommandSource", args: Sequence[str]) -> None:
        if self.reject_arguments(source, args):
            return
        result = await self.dump()
        result.report(source, LOG)

    async def dump(self) -> OperationResult:
        """
        采集并写出一次快照

        Returns:
            成功时 value 为快照文件的绝对路径；任何失败都只记录日志，
            用户只看到 command.dump-failure
        """
        failure = translatable("command.dump-failure", color=NamedColor.RED)
        try:
            # 采集会同步访问协作方（平台探测、在线人数），放到线程中执行
            snapshot = await asyncio.to_thread(self._aggregator.collect)
        except Exception as e:
            return OperationResult.failed_with_detail(
                failure, f"采集诊断信息失败: {e}", error=e
            )
        try:
            path = await self._writer.write(snapshot.to_document())
        except (TypeError, ValueError) as e:
            return OperationResult.failed_with_detail(
                failure, f"诊断快照无法序列化为 JSON: {e}", error=e
            )
        except OSError as e:
            return OperationResult.failed_with_detail(
                failure, f"保存诊断快照失败: {e}", error=e
            )
        return OperationResult.ok(
            translatable("command.dump-success", str(path), color=NamedColor.GREEN),
            value=path,
        )
