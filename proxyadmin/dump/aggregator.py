"""
诊断快照汇总

每次 dump 都重新采集，快照写出后即丢弃。
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TYPE_CHECKING

from proxyadmin.utils import get_log
from . import collector

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer
    from proxyadmin.proxy.interfaces import RegisteredServer

LOG = get_log("DumpAggregator")

SNAPSHOT_KEYS = ("versionInfo", "platform", "config", "plugins")


@dataclass
class ProxySnapshot:
    version_info: Dict[str, Any] = field(default_factory=dict)
    platform: Dict[str, Any] = field(default_factory=dict)
    config: Dict[str, Any] = field(default_factory=dict)
    plugins: List[Dict[str, Any]] = field(default_factory=list)

    def to_document(self) -> Dict[str, Any]:
        return {
            "versionInfo": self.version_info,
            "platform": self.platform,
            "config": self.config,
            "plugins": self.plugins,
        }


class DumpAggregator:
    """从代理协作方收集版本、平台、配置、服务器和插件信息"""

    def __init__(
        self,
        server: "ProxyServer",
        environment_provider: Callable[[], Dict[str, Any]] = collector.collect_environment_info,
        server_info_provider: Callable[["RegisteredServer"], Dict[str, Any]] = collector.collect_server_info,
    ):
        self._server = server
        self._environment_provider = environment_provider
        self._server_info_provider = server_info_provider

    def collect(self) -> ProxySnapshot:
        """
        采集一次完整快照

        Returns:
            四个顶层段齐全的 ProxySnapshot，没有服务器或插件时对应段为空

        Raises:
            协作方抛出的任何异常都原样向上传递，由 dump 子命令转为失败结果
        """
        configuration = self._server.configuration

        servers: Dict[str, Any] = {}
        for registered in self._server.get_all_servers():
            servers[registered.server_info.name] = self._server_info_provider(registered)

        config = collector.collect_proxy_config(configuration)
        config["servers"] = servers
        config["connectOrder"] = collector.collect_connect_order(configuration)
        config["forcedHosts"] = collector.collect_forced_hosts(configuration)

        snapshot = ProxySnapshot(
            version_info=collector.collect_proxy_info(self._server.version),
            platform=self._environment_provider(),
            config=config,
            plugins=collector.collect_plugin_info(self._server.plugin_manager.get_plugins()),
        )
        LOG.debug(
            "快照已采集: %d 个服务器, %d 个插件", len(servers), len(snapshot.plugins)
        )
        return snapshot
