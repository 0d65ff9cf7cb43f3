"""
富文本消息组件

命令只构造组件树，具体渲染（颜色、悬浮提示、本地化）由消息接收方完成。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog import MessageCatalog


class NamedColor(str, Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    GRAY = "gray"
    WHITE = "white"


@dataclass
class Component:
    """
    文本组件

    子组件未显式设置的样式沿用父组件。
    """

    text: str = ""
    color: Optional[str] = None
    bold: Optional[bool] = None
    underlined: Optional[bool] = None
    click_url: Optional[str] = None
    hover: Optional["Component"] = None
    children: List["Component"] = field(default_factory=list)

    def append(self, child: "Component") -> "Component":
        self.children.append(child)
        return self

    def plain_text(self, catalog: Optional["MessageCatalog"] = None) -> str:
        """去掉样式后的纯文本，可选地通过 catalog 解析本地化节点"""
        return self._own_text(catalog) + "".join(
            c.plain_text(catalog) for c in self.children
        )

    def _own_text(self, catalog: Optional["MessageCatalog"]) -> str:
        return self.text

    def iter_tree(self):
        """先序遍历组件树"""
        yield self
        for child in self.children:
            yield from child.iter_tree()


@dataclass
class Translatable(Component):
    """本地化组件：按消息键和位置参数渲染"""

    key: str = ""
    args: Tuple[Any, ...] = ()

    def _own_text(self, catalog: Optional["MessageCatalog"]) -> str:
        rendered_args = [
            a.plain_text(catalog) if isinstance(a, Component) else str(a)
            for a in self.args
        ]
        if catalog is None:
            return f"{self.key}({', '.join(rendered_args)})" if rendered_args else self.key
        return catalog.render(self.key, *rendered_args)


def text(content: str, color: Optional[str] = None, **style: Any) -> Component:
    return Component(text=content, color=color, **style)


def newline() -> Component:
    return Component(text="\n")


def translatable(key: str, *args: Any, color: Optional[str] = None) -> Translatable:
    return Translatable(key=key, args=tuple(args), color=color)
