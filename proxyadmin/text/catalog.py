"""
本地化消息目录

每个语言一个 YAML 文件（resources/messages_<locale>.yaml），模板使用 {0} {1} 位置占位符。
"""

import re
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from proxyadmin.utils import get_log

LOG = get_log("MessageCatalog")

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_LOCALE = "en"

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")


def _normalize_locale(locale: str) -> str:
    return locale.replace("-", "_").lower()


def locale_candidates(locale: Optional[str]) -> List[str]:
    """由近到远的候选语言：zh_cn -> zh -> en"""
    candidates: List[str] = []
    if locale:
        normalized = _normalize_locale(locale)
        candidates.append(normalized)
        if "_" in normalized:
            candidates.append(normalized.split("_", 1)[0])
    if DEFAULT_LOCALE not in candidates:
        candidates.append(DEFAULT_LOCALE)
    return candidates


class MessageCatalog:
    """消息目录，缺失的键渲染为键名本身"""

    def __init__(self, messages: Dict[str, str], locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._messages = dict(messages)

    def __contains__(self, key: str) -> bool:
        return key in self._messages

    def render(self, key: str, *args: str) -> str:
        template = self._messages.get(key)
        if template is None:
            LOG.debug("消息键 %s 在 %s 中不存在", key, self.locale)
            return key

        def _sub(match: "re.Match[str]") -> str:
            index = int(match.group(1))
            return args[index] if index < len(args) else match.group(0)

        return _PLACEHOLDER_RE.sub(_sub, template)

    @classmethod
    def from_file(cls, path: Path, locale: str = DEFAULT_LOCALE) -> "MessageCatalog":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f.read()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"消息文件 {path} 顶层必须是映射")
        return cls({str(k): str(v) for k, v in data.items()}, locale)

    @classmethod
    def load(cls, locale: Optional[str] = None, directory: Path = RESOURCES_DIR) -> "MessageCatalog":
        """加载最接近 locale 的消息文件，并以默认语言补全缺失的键"""
        messages: Dict[str, str] = {}
        matched = DEFAULT_LOCALE
        # 从远到近合并，近的覆盖远的
        for candidate in reversed(locale_candidates(locale)):
            path = directory / f"messages_{candidate}.yaml"
            if path.exists():
                messages.update(cls.from_file(path, candidate)._messages)
                matched = candidate
        if not messages:
            LOG.warning("未找到任何消息文件: %s", directory)
        return cls(messages, matched)
