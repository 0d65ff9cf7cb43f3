"""
子命令注册表

注册表在启动时一次性构建，之后只读：
- 名称统一转为小写，大小写不敏感地唯一
- 保持注册顺序，用法提示与补全都按此顺序输出
- 禁止 registry[name] = ... / del registry[name]
"""

from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from proxyadmin.text import NamedColor, text
from proxyadmin.utils import get_log, DuplicateSubcommandError
from .permission import PermissionPredicate

if TYPE_CHECKING:
    from .source import CommandSource

LOG = get_log("SubcommandRegistry")


class SubcommandKind(str, Enum):
    INFO = "info"
    PLUGINS = "plugins"
    RELOAD = "reload"
    DUMP = "dump"


class Subcommand(ABC):
    """
    子命令基类

    每个子命令自带权限判定、执行和（可选的）补全逻辑。
    """

    # 权限节点为 <root>.command.<kind>，与子命令名无关（version 对应 info）
    kind: SubcommandKind

    def __init__(self, name: str, root_command: str, permission: PermissionPredicate):
        self.name = name.lower()
        self.root_command = root_command
        self.permission = permission

    @property
    def usage(self) -> str:
        return f"/{self.root_command} {self.name}"

    def has_permission(self, source: "CommandSource", args: Sequence[str] = ()) -> bool:
        return self.permission(source, args)

    @abstractmethod
    async def execute(self, source: "CommandSource", args: Sequence[str]) -> None:
        ...

    def suggest(self, source: "CommandSource", args: Sequence[str]) -> List[str]:
        return []

    def reject_arguments(self, source: "CommandSource", args: Sequence[str]) -> bool:
        """不接受参数的子命令收到参数时回显用法，返回 True 表示已拒绝"""
        if not args:
            return False
        LOG.debug("子命令 %s 收到多余参数: %s", self.name, list(args))
        source.send_message(text(self.usage, NamedColor.RED))
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class SubcommandRegistry(Mapping):
    """只读、有序的 小写名称 -> 子命令 映射"""

    def __init__(self, entries: Iterable[Tuple[str, Subcommand]]):
        commands = {}
        for name, command in entries:
            key = name.lower()
            if key in commands:
                raise DuplicateSubcommandError(name)
            commands[key] = command
        self._commands = MappingProxyType(commands)
        LOG.debug("子命令注册表已构建: %s", list(self._commands))

    @classmethod
    def build(cls, *commands: Subcommand) -> "SubcommandRegistry":
        """按给定顺序，以子命令自身的名称构建注册表"""
        return cls((c.name, c) for c in commands)

    # -------------------------------------------------------------------------
    # Mapping 接口实现（只读操作）
    # -------------------------------------------------------------------------

    def __getitem__(self, name: str) -> Subcommand:
        return self._commands[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def lookup(self, name: str) -> Optional[Subcommand]:
        """大小写不敏感地查找子命令"""
        return self._commands.get(name.lower())

    def permitted_names(self, source: "CommandSource") -> List[str]:
        """调用方有权限使用的子命令名称（注册顺序）"""
        return [n for n, c in self._commands.items() if c.has_permission(source, ())]

    def __repr__(self) -> str:
        return f"SubcommandRegistry({list(self._commands)!r})"

    # -------------------------------------------------------------------------
    # 禁止的操作（抛出 TypeError）
    # -------------------------------------------------------------------------

    def __setitem__(self, name: str, value: Subcommand) -> None:
        raise TypeError(f"SubcommandRegistry 构建后只读，不能设置 {name!r}")

    def __delitem__(self, name: str) -> None:
        raise TypeError(f"SubcommandRegistry 构建后只读，不能删除 {name!r}")
