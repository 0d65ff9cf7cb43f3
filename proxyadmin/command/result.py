"""
子命令执行结果

Reload / Dump 不在执行路径里直接捕获异常并发消息，而是先得到 OperationResult，
再由 report() 分别走用户消息和服务端日志两条通道：
用户只会看到 message，detail 只进入日志。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

from proxyadmin.text import Component

if TYPE_CHECKING:
    from .source import CommandSource


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    LOGGED_FAILURE = "logged_failure"


@dataclass
class OperationResult:
    outcome: Outcome
    message: Component
    detail: Optional[str] = None
    error: Optional[BaseException] = None
    value: Any = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def ok(cls, message: Component, value: Any = None) -> "OperationResult":
        return cls(Outcome.SUCCESS, message, value=value)

    @classmethod
    def failed(cls, message: Component) -> "OperationResult":
        """可恢复的失败，不记录日志"""
        return cls(Outcome.FAILURE, message)

    @classmethod
    def failed_with_detail(
        cls, message: Component, detail: str, error: Optional[BaseException] = None
    ) -> "OperationResult":
        """需要在服务端记录详情的失败"""
        return cls(Outcome.LOGGED_FAILURE, message, detail=detail, error=error)

    def report(self, source: "CommandSource", logger: logging.Logger) -> None:
        if self.outcome is Outcome.LOGGED_FAILURE:
            exc_info = (
                (type(self.error), self.error, self.error.__traceback__)
                if self.error is not None
                else None
            )
            logger.error(self.detail, exc_info=exc_info)
        source.send_message(self.message)
