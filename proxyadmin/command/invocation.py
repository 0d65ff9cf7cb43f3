"""命令调用"""

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .source import CommandSource


def split_arguments(line: str, keep_trailing: bool = False) -> Tuple[str, ...]:
    """
    按空白切分参数

    keep_trailing 用于补全：行尾有空白时追加一个空参数，表示正在输入下一个参数。
    """
    tokens = tuple(line.split())
    if keep_trailing and line and line[-1].isspace():
        tokens += ("",)
    return tokens


@dataclass(frozen=True)
class CommandInvocation:
    """一次根命令调用：调用方 + 已切分的参数"""

    source: "CommandSource"
    arguments: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, source: "CommandSource", line: str, for_suggestion: bool = False) -> "CommandInvocation":
        return cls(source, split_arguments(line, keep_trailing=for_suggestion))

    @property
    def first(self) -> str:
        return self.arguments[0] if self.arguments else ""

    @property
    def rest(self) -> Tuple[str, ...]:
        return self.arguments[1:]
