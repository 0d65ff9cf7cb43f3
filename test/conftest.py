"""
测试公共夹具

用最小的假实现替代代理侧协作方（服务器注册表、插件管理器、配置存储）。
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytest

from proxyadmin.command import AdminCommand, PermissionedSource, create_admin_command
from proxyadmin.proxy import PluginDescriptor, ProxyVersion, ServerInfo
from proxyadmin.text import MessageCatalog
from proxyadmin.utils import AdminConfig


# =============================================================================
# 假协作方
# =============================================================================


class FakePluginManager:
    def __init__(self, plugins: Sequence[PluginDescriptor] = ()):
        self.plugins: List[PluginDescriptor] = list(plugins)

    def get_plugins(self) -> List[PluginDescriptor]:
        return list(self.plugins)


class FakeRegisteredServer:
    def __init__(self, name: str, host: str, port: int = 25565, players: int = 0):
        self.server_info = ServerInfo(name=name, host=host, port=port)
        self.players = [object() for _ in range(players)]


class FakeConfiguration:
    def __init__(
        self,
        document: Optional[Dict[str, Any]] = None,
        connect_order: Sequence[str] = (),
        forced_hosts: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.document = document or {}
        self.attempt_connection_order = list(connect_order)
        self.forced_hosts = dict(forced_hosts or {})

    def to_document(self) -> Dict[str, Any]:
        return self.document


class FakeProxyServer:
    def __init__(self):
        self.version = ProxyVersion(name="Proxy", version="3.4.0", vendor="Proxy Contributors")
        self.configuration = FakeConfiguration()
        self.plugin_manager = FakePluginManager()
        self.servers: List[FakeRegisteredServer] = []
        self.reload_result: bool = True
        self.reload_error: Optional[Exception] = None
        self.reload_calls = 0

    def get_all_servers(self) -> List[FakeRegisteredServer]:
        return list(self.servers)

    def reload_configuration(self) -> bool:
        self.reload_calls += 1
        if self.reload_error is not None:
            raise self.reload_error
        return self.reload_result


# =============================================================================
# Fixtures
# =============================================================================


ALL_PERMISSIONS = {
    "proxy.command.info": True,
    "proxy.command.plugins": True,
    "proxy.command.reload": True,
}


@pytest.fixture
def admin_cfg(tmp_path) -> AdminConfig:
    """根命令为 proxy，dump 写入临时目录"""
    return AdminConfig(
        root_command="proxy",
        product_name="Proxy",
        canonical_name="Proxy",
        dump_dir=str(tmp_path),
    )


@pytest.fixture
def proxy_server() -> FakeProxyServer:
    return FakeProxyServer()


@pytest.fixture
def admin_command(proxy_server, admin_cfg) -> AdminCommand:
    return create_admin_command(proxy_server, admin_cfg)


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog.load("en")


@pytest.fixture
def make_source():
    """按权限表创建调用方"""

    def _make(permissions: Optional[Mapping[str, bool]] = None, name: str = "tester"):
        return PermissionedSource(name, permissions or {})

    return _make


@pytest.fixture
def admin_source(make_source) -> PermissionedSource:
    return make_source(ALL_PERMISSIONS, name="admin")


@pytest.fixture
def render(catalog):
    """把调用方收到的组件渲染为纯文本列表"""

    def _render(source) -> List[str]:
        return [m.plain_text(catalog) for m in source.messages]

    return _render


@pytest.fixture
def configuration_factory():
    return FakeConfiguration


@pytest.fixture
def server_factory():
    return FakeRegisteredServer
