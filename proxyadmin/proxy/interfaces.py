"""
外部协作方接口

管理命令只通过这些窄接口读取代理状态，具体实现由宿主代理提供。
"""

from typing import Any, Dict, List, Mapping, Protocol, Sequence, Union, Awaitable

from .models import PluginDescriptor, ProxyVersion, ServerInfo


class PluginManager(Protocol):  # pragma: no cover
    def get_plugins(self) -> Sequence[PluginDescriptor]:
        ...


class RegisteredServer(Protocol):  # pragma: no cover
    server_info: ServerInfo

    @property
    def players(self) -> Sequence[Any]:
        ...


class ProxyConfiguration(Protocol):  # pragma: no cover
    @property
    def attempt_connection_order(self) -> List[str]:
        ...

    @property
    def forced_hosts(self) -> Mapping[str, Sequence[str]]:
        ...

    def to_document(self) -> Dict[str, Any]:
        ...


class ProxyServer(Protocol):  # pragma: no cover
    version: ProxyVersion
    configuration: ProxyConfiguration
    plugin_manager: PluginManager

    def get_all_servers(self) -> Sequence[RegisteredServer]:
        ...

    def reload_configuration(self) -> Union[bool, Awaitable[bool]]:
        """重载配置；可以是同步或异步函数，失败时可能抛出异常"""
        ...
