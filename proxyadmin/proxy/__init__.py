"""代理协作方接口与数据模型"""

from .models import ProxyVersion, PluginDescriptor, ServerInfo
from .interfaces import (
    PluginManager,
    RegisteredServer,
    ProxyConfiguration,
    ProxyServer,
)

__all__ = [
    "ProxyVersion",
    "PluginDescriptor",
    "ServerInfo",
    "PluginManager",
    "RegisteredServer",
    "ProxyConfiguration",
    "ProxyServer",
]
