"""plugins 子命令：列出已安装插件"""

from typing import Sequence, TYPE_CHECKING

from proxyadmin.proxy import PluginDescriptor
from proxyadmin.text import Component, NamedColor, newline, text, translatable
from proxyadmin.utils import AdminConfig
from ..permission import strict_allow
from ..registry import Subcommand, SubcommandKind

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer
    from ..source import CommandSource

SEPARATOR = ", "


class Plugins(Subcommand):
    kind = SubcommandKind.PLUGINS

    def __init__(self, server: "ProxyServer", config: AdminConfig, name: str = "plugins"):
        super().__init__(name, config.root_command, strict_allow(config.permission_node(self.kind.value)))
        self._server = server

    async def execute(self, source: "CommandSource", args: Sequence[str]) -> None:
        if self.reject_arguments(source, args):
            return

        plugins = list(self._server.plugin_manager.get_plugins())
        if not plugins:
            source.send_message(translatable("command.no-plugins", color=NamedColor.YELLOW))
            return

        source.send_message(
            translatable(
                "command.plugins-list",
                self.plugin_list(plugins),
                color=NamedColor.YELLOW,
            )
        )

    def plugin_list(self, plugins: Sequence[PluginDescriptor]) -> Component:
        listing = Component()
        for i, plugin in enumerate(plugins):
            if i:
                listing.append(text(SEPARATOR))
            listing.append(self.plugin_entry(plugin))
        return listing

    @staticmethod
    def plugin_entry(plugin: PluginDescriptor) -> Component:
        """插件 id（灰色），悬浮显示名称、版本、网站、作者和描述"""
        info = plugin.display_name
        if plugin.version:
            info += f" {plugin.version}"
        hover = text(info)

        if plugin.url:
            hover.append(newline())
            hover.append(translatable("command.plugin-tooltip-website", plugin.url))
        if plugin.authors:
            hover.append(newline())
            if len(plugin.authors) == 1:
                hover.append(translatable("command.plugin-tooltip-author", plugin.authors[0]))
            else:
                hover.append(
                    translatable("command.plugin-tooltip-authors", ", ".join(plugin.authors))
                )
        if plugin.description:
            hover.append(newline())
            hover.append(newline())
            hover.append(text(plugin.description))

        return text(plugin.id, NamedColor.GRAY, hover=hover)
