"""内置子命令"""

from .info import Info
from .plugins import Plugins
from .reload import Reload
from .dump import Dump

__all__ = ["Info", "Plugins", "Reload", "Dump"]
