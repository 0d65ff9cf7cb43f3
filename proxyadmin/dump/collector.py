"""
诊断信息采集

把代理各部分状态转换成可序列化的字典。服务器地址会做匿名化处理，
配置中包含 secret / token / password 的键会被移除。
"""

import copy
import ipaddress
import json
import os
import platform
from typing import Any, Dict, Iterable, List, Mapping

from proxyadmin.proxy import PluginDescriptor, ProxyVersion
from proxyadmin.proxy.interfaces import ProxyConfiguration, RegisteredServer

SENSITIVE_KEY_MARKERS = ("secret", "token", "password")


def collect_proxy_info(version: ProxyVersion) -> Dict[str, Any]:
    return {
        "name": version.name,
        "version": version.version,
        "vendor": version.vendor,
    }


def collect_environment_info() -> Dict[str, Any]:
    return {
        "operatingSystemType": platform.system(),
        "operatingSystemVersion": platform.release(),
        "operatingSystemArchitecture": platform.machine(),
        "pythonImplementation": platform.python_implementation(),
        "pythonVersion": platform.python_version(),
        "cpuCount": os.cpu_count(),
    }


def anonymize_host(host: str) -> str:
    """
    匿名化主机地址

    公网 IPv4 只保留前两段，公网 IPv6 只保留第一段；
    私有、回环、链路本地地址以及域名原样保留。
    """
    try:
        ip = ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return host

    if ip.is_private or ip.is_loopback or ip.is_link_local:
        return str(ip)
    if ip.version == 4:
        octets = str(ip).split(".")
        return f"{octets[0]}.{octets[1]}.x.x"
    return f"{ip.exploded.split(':')[0]}:x:x:x:x:x:x:x"


def collect_server_info(server: RegisteredServer) -> Dict[str, Any]:
    info = server.server_info
    return {
        "currentPlayers": len(server.players),
        "address": {
            "host": anonymize_host(info.host),
            "port": info.port,
        },
    }


def redact(document: Any) -> Any:
    """递归移除敏感键"""
    if isinstance(document, Mapping):
        return {
            k: redact(v)
            for k, v in document.items()
            if not any(marker in str(k).lower() for marker in SENSITIVE_KEY_MARKERS)
        }
    if isinstance(document, (list, tuple)):
        return [redact(v) for v in document]
    return document


def collect_proxy_config(configuration: ProxyConfiguration) -> Dict[str, Any]:
    return redact(copy.deepcopy(configuration.to_document()))


def collect_connect_order(configuration: ProxyConfiguration) -> List[str]:
    return list(configuration.attempt_connection_order)


def collect_forced_hosts(configuration: ProxyConfiguration) -> Dict[str, List[str]]:
    return {host: list(servers) for host, servers in configuration.forced_hosts.items()}


def collect_plugin_info(plugins: Iterable[PluginDescriptor]) -> List[Dict[str, Any]]:
    return [
        plugin.model_dump(include={"id", "name", "version", "authors", "url"}, exclude_none=True)
        for plugin in plugins
    ]


def to_human_readable(document: Mapping[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False, default=str) + "\n"
