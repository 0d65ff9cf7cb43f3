"""version 子命令：显示代理名称、版本和版权信息"""

from typing import Sequence, TYPE_CHECKING

from proxyadmin.text import Component, NamedColor, text, translatable
from proxyadmin.utils import AdminConfig
from ..permission import default_allow
from ..registry import Subcommand, SubcommandKind

if TYPE_CHECKING:
    from proxyadmin.proxy import ProxyServer
    from ..source import CommandSource


class Info(Subcommand):
    kind = SubcommandKind.INFO

    def __init__(self, server: "ProxyServer", config: AdminConfig, name: str = "version"):
        super().__init__(name, config.root_command, default_allow(config.permission_node(self.kind.value)))
        self._server = server
        self._config = config

    async def execute(self, source: "CommandSource", args: Sequence[str]) -> None:
        if self.reject_arguments(source, args):
            return

        version = self._server.version
        source.send_message(self.version_line(version.name, version.version))
        source.send_message(
            translatable(
                "command.version-copyright",
                text(version.vendor),
                text(version.name),
            )
        )

        if version.name == self._config.canonical_name:
            source.send_message(self.links_line())

    def version_line(self, name: str, version: str) -> Component:
        return Component(
            text=f"{name} ",
            color=self._config.brand_color,
            bold=True,
            children=[text(version, bold=False)],
        )

    def links_line(self) -> Component:
        cfg = self._config
        return Component(
            children=[
                text(cfg.homepage_label, NamedColor.GREEN, click_url=cfg.homepage_url),
                text(" - "),
                text(cfg.source_label, NamedColor.GREEN, underlined=True, click_url=cfg.source_url),
            ]
        )
