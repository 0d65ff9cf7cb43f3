"""富文本组件与本地化"""

from .component import (
    Component,
    Translatable,
    NamedColor,
    text,
    newline,
    translatable,
)
from .catalog import MessageCatalog, locale_candidates

__all__ = [
    "Component",
    "Translatable",
    "NamedColor",
    "text",
    "newline",
    "translatable",
    "MessageCatalog",
    "locale_candidates",
]
