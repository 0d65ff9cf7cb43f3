"""
命令调用方（身份）

调用方需要同时提供权限查询和消息接收两种能力。
"""

from typing import Callable, List, Mapping, Optional, Protocol

from proxyadmin.text import Component, MessageCatalog
from .permission import PermissionTable, Tristate


class CommandSource(Protocol):  # pragma: no cover
    def get_permission_value(self, permission: str) -> Tristate:
        ...

    def send_message(self, message: Component) -> None:
        ...


class PermissionedSource:
    """
    基于权限表的调用方

    没有 sink 时收到的组件保存在 messages 中；提供 sink 时组件直接交给
    sink 输出，不保留。
    """

    def __init__(
        self,
        name: str,
        permissions: Optional[Mapping[str, bool]] = None,
        sink: Optional[Callable[[Component], None]] = None,
    ):
        self.name = name
        self.permissions = PermissionTable(permissions)
        self.messages: List[Component] = []
        self._sink = sink

    def get_permission_value(self, permission: str) -> Tristate:
        return self.permissions.value_of(permission)

    def send_message(self, message: Component) -> None:
        if self._sink is None:
            self.messages.append(message)
        else:
            self._sink(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class ConsoleCommandSource(PermissionedSource):
    """代理控制台：拥有全部权限，消息渲染为纯文本后输出"""

    def __init__(
        self,
        catalog: MessageCatalog,
        writer: Callable[[str], None] = print,
    ):
        super().__init__("CONSOLE", {"**": True}, sink=self._write)
        self.catalog = catalog
        self._writer = writer

    def _write(self, message: Component) -> None:
        self._writer(message.plain_text(self.catalog))
