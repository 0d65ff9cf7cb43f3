"""
权限判定

权限值为三态：TRUE（显式授予）、FALSE（显式拒绝）、UNDEFINED（未设置）。
子命令通过 strict_allow / default_allow 构造判定函数：
- strict_allow: 仅 TRUE 通过
- default_allow: 只要不是 FALSE 就通过
"""

from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence, Tuple, Union


class Tristate(Enum):
    TRUE = "true"
    FALSE = "false"
    UNDEFINED = "undefined"

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> "Tristate":
        if value is None:
            return cls.UNDEFINED
        return cls.TRUE if value else cls.FALSE


class PermissionSubject(Protocol):  # pragma: no cover
    def get_permission_value(self, permission: str) -> Tristate:
        ...


# (身份, 剩余参数) -> 是否允许
PermissionPredicate = Callable[[PermissionSubject, Sequence[str]], bool]


def strict_allow(node: str) -> PermissionPredicate:
    """必须显式授予"""

    def predicate(source: PermissionSubject, args: Sequence[str] = ()) -> bool:
        return source.get_permission_value(node) is Tristate.TRUE

    predicate.node = node  # type: ignore[attr-defined]
    return predicate


def default_allow(node: str) -> PermissionPredicate:
    """默认允许，除非显式拒绝"""

    def predicate(source: PermissionSubject, args: Sequence[str] = ()) -> bool:
        return source.get_permission_value(node) is not Tristate.FALSE

    predicate.node = node  # type: ignore[attr-defined]
    return predicate


class PermissionPath:
    """
    权限路径

    以 "." 分隔，支持两种通配：
    - "*"  匹配恰好一段
    - "**" 匹配其后任意多段（至少一段），只能出现在末尾
    """

    def __init__(self, path: str):
        if not path or not path.strip():
            raise ValueError("权限路径不能为空")
        self.row_path = path.strip().lower()
        self.parts: Tuple[str, ...] = tuple(self.row_path.split("."))
        if any(not p for p in self.parts):
            raise ValueError(f"权限路径 {path!r} 含有空段")
        if "**" in self.parts[:-1]:
            raise ValueError(f"权限路径 {path!r} 中 ** 只能出现在末尾")

    @property
    def specificity(self) -> Tuple[int, int]:
        """具体程度：精确段越多越具体，用于多条规则冲突时取最具体者"""
        exact = sum(1 for p in self.parts if p not in ("*", "**"))
        return (exact, len(self.parts))

    def matches(self, target: Union[str, "PermissionPath"]) -> bool:
        target_parts = (
            target.parts if isinstance(target, PermissionPath) else PermissionPath(target).parts
        )
        for i, part in enumerate(self.parts):
            if part == "**":
                return len(target_parts) > i
            if i >= len(target_parts):
                return False
            if part != "*" and part != target_parts[i]:
                return False
        return len(target_parts) == len(self.parts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PermissionPath):
            return self.parts == other.parts
        if isinstance(other, str):
            return self.row_path == other.strip().lower()
        return False

    def __hash__(self) -> int:
        return hash(self.parts)

    def __str__(self) -> str:
        return self.row_path

    def __repr__(self) -> str:
        return f"PermissionPath({self.row_path!r})"


class PermissionTable:
    """
    身份的权限表

    每条规则是 (权限路径模式 -> 是否授予)。查询时取匹配规则中最具体的一条；
    同样具体时显式拒绝优先。没有匹配规则时返回 UNDEFINED。
    """

    def __init__(self, rules: Optional[Mapping[str, bool]] = None):
        self._rules: Dict[PermissionPath, bool] = {}
        for pattern, value in (rules or {}).items():
            self.set(pattern, value)

    def set(self, pattern: str, value: Optional[bool]) -> None:
        """设置规则，value 为 None 时移除"""
        path = PermissionPath(pattern)
        if value is None:
            self._rules.pop(path, None)
        else:
            self._rules[path] = bool(value)

    def value_of(self, permission: str) -> Tristate:
        target = PermissionPath(permission)
        best: Optional[Tuple[Tuple[int, int], bool]] = None
        for path, granted in self._rules.items():
            if not path.matches(target):
                continue
            # 同等具体时 False 排在前面（not granted 为 True 更大）
            rank = (path.specificity, not granted)
            if best is None or rank > (best[0], not best[1]):
                best = (path.specificity, granted)
        if best is None:
            return Tristate.UNDEFINED
        return Tristate.from_bool(best[1])

    def __len__(self) -> int:
        return len(self._rules)
