"""
根命令分发

/<root> <子命令> [参数]：第一个参数选择子命令，其余参数原样交给子命令。
查找和权限判定总在执行之前完成；未知子命令与无参数一样只回显用法。
"""

from typing import List, Sequence

from proxyadmin.text import NamedColor, text
from proxyadmin.utils import get_log
from .invocation import CommandInvocation
from .registry import SubcommandRegistry
from .source import CommandSource

LOG = get_log("AdminCommand")


class AdminCommand:
    """管理根命令"""

    def __init__(self, root_command: str, registry: SubcommandRegistry):
        self.root_command = root_command
        self.registry = registry

    # ==================== 执行 ====================

    async def execute(self, invocation: CommandInvocation) -> None:
        """
        执行一次根命令调用

        无参数或未知子命令时回显用法；否则把剩余参数交给子命令。
        子命令自行处理失败，这里不会抛出。
        """
        source = invocation.source
        if not invocation.arguments:
            self.usage(source)
            return

        command = self.registry.lookup(invocation.first)
        if command is None:
            LOG.debug("未知子命令: %s", invocation.first)
            self.usage(source)
            return

        LOG.debug("%r 执行子命令 %s", source, command.name)
        await command.execute(source, invocation.rest)

    def usage(self, source: CommandSource) -> None:
        """以红色发送用法提示"""
        source.send_message(text(self.usage_text(source), NamedColor.RED))

    def usage_text(self, source: CommandSource) -> str:
        """/<root> <n1|n2|...>，只列出 source 有权限的子命令，按注册顺序"""
        available = "|".join(self.registry.permitted_names(source))
        return f"/{self.root_command} <{available}>"

    # ==================== 补全 ====================

    def suggest(self, invocation: CommandInvocation) -> List[str]:
        """
        补全候选

        Args:
            invocation: 已切分的参数，正在输入的参数位于末尾（可为空串）

        Returns:
            第一级为有权限且前缀匹配的子命令名（大小写不敏感）；
            更深层级交给对应子命令，未知子命令返回空列表
        """
        source = invocation.source
        args = invocation.arguments

        if len(args) == 0:
            return self.registry.permitted_names(source)

        if len(args) == 1:
            prefix = args[0].lower()
            return [
                name
                for name in self.registry.permitted_names(source)
                if name.startswith(prefix)
            ]

        command = self.registry.lookup(args[0])
        if command is None:
            return []
        return list(command.suggest(source, invocation.rest))

    # ==================== 权限 ====================

    def has_permission(self, invocation: CommandInvocation) -> bool:
        """
        根命令是否对调用方可见

        Returns:
            无参数时任一子命令允许即为 True；已知子命令按其判定；
            未知子命令为 True，留到执行时回显用法
        """
        source = invocation.source
        args: Sequence[str] = invocation.arguments

        if not args:
            return any(c.has_permission(source, args) for c in self.registry.values())

        command = self.registry.lookup(args[0])
        if command is None:
            return True
        return command.has_permission(source, invocation.rest)
