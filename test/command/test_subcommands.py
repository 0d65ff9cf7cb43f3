"""
version / plugins / reload 子命令测试
"""

import logging

import pytest

from proxyadmin.command import CommandInvocation, Outcome
from proxyadmin.proxy import PluginDescriptor, ProxyVersion
from proxyadmin.text import NamedColor, Translatable


async def run(command, source, *args):
    await command.execute(CommandInvocation(source, tuple(args)))


# =============================================================================
# version
# =============================================================================


class TestInfo:
    """version 子命令"""

    @pytest.mark.asyncio
    async def test_canonical_product_shows_links(self, admin_command, admin_source, render):
        await run(admin_command, admin_source, "version")
        lines = render(admin_source)
        assert len(lines) == 3
        assert lines[0] == "Proxy 3.4.0"
        assert "Proxy Contributors" in lines[1]
        assert lines[2] == "proxy.example.org - GitHub"

    @pytest.mark.asyncio
    async def test_version_line_styling(self, admin_command, admin_source, admin_cfg):
        await run(admin_command, admin_source, "version")
        head = admin_source.messages[0]
        assert head.bold is True
        assert head.color == admin_cfg.brand_color
        assert head.children[0].bold is False

    @pytest.mark.asyncio
    async def test_links_are_clickable(self, admin_command, admin_source, admin_cfg):
        await run(admin_command, admin_source, "version")
        homepage, _, repo = admin_source.messages[2].children
        assert homepage.click_url == admin_cfg.homepage_url
        assert repo.click_url == admin_cfg.source_url
        assert repo.underlined is True

    @pytest.mark.asyncio
    async def test_copyright_is_translatable(self, admin_command, admin_source):
        await run(admin_command, admin_source, "version")
        copyright_line = admin_source.messages[1]
        assert isinstance(copyright_line, Translatable)
        assert copyright_line.key == "command.version-copyright"
        assert [a.text for a in copyright_line.args] == ["Proxy Contributors", "Proxy"]

    @pytest.mark.asyncio
    async def test_fork_omits_links(self, admin_command, admin_source, proxy_server):
        proxy_server.version = ProxyVersion(name="ForkProxy", version="1.0", vendor="Fork")
        await run(admin_command, admin_source, "version")
        assert len(admin_source.messages) == 2

    @pytest.mark.asyncio
    async def test_extra_argument_echoes_usage(self, admin_command, admin_source):
        await run(admin_command, admin_source, "version", "extra")
        assert len(admin_source.messages) == 1
        assert admin_source.messages[0].text == "/proxy version"
        assert admin_source.messages[0].color == NamedColor.RED


# =============================================================================
# plugins
# =============================================================================


class TestPlugins:
    """plugins 子命令"""

    @pytest.mark.asyncio
    async def test_no_plugins_message(self, admin_command, admin_source, render):
        await run(admin_command, admin_source, "plugins")
        assert len(admin_source.messages) == 1
        assert admin_source.messages[0].key == "command.no-plugins"
        assert render(admin_source) == ["There are no plugins currently installed."]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [1, 2, 5])
    async def test_entries_joined_by_separator(self, admin_command, admin_source, proxy_server, catalog, count):
        proxy_server.plugin_manager.plugins = [PluginDescriptor(id=f"p{i}") for i in range(count)]
        await run(admin_command, admin_source, "plugins")

        message = admin_source.messages[0]
        assert message.key == "command.plugins-list"
        listing = message.args[0]
        ids = [c.text for c in listing.children if c.text != ", "]
        separators = [c for c in listing.children if c.text == ", "]
        assert ids == [f"p{i}" for i in range(count)]
        assert len(separators) == count - 1
        assert listing.plain_text(catalog) == ", ".join(f"p{i}" for i in range(count))

    def test_tooltip_full(self, admin_command, catalog):
        plugin = PluginDescriptor(
            id="greeter",
            name="Greeter",
            version="2.1",
            authors=["alice", "bob"],
            url="https://example.org/greeter",
            description="Says hello.",
        )
        entry = admin_command.registry["plugins"].plugin_entry(plugin)
        assert entry.text == "greeter"
        assert entry.color == NamedColor.GRAY
        assert entry.hover.plain_text(catalog) == (
            "Greeter 2.1\n"
            "Website: https://example.org/greeter\n"
            "Authors: alice, bob\n"
            "\n"
            "Says hello."
        )

    def test_tooltip_single_author(self, admin_command, catalog):
        plugin = PluginDescriptor(id="greeter", authors=["alice"])
        entry = admin_command.registry["plugins"].plugin_entry(plugin)
        assert entry.hover.plain_text(catalog) == "greeter\nAuthor: alice"

    def test_tooltip_minimal(self, admin_command, catalog):
        entry = admin_command.registry["plugins"].plugin_entry(PluginDescriptor(id="bare"))
        assert entry.hover.plain_text(catalog) == "bare"

    @pytest.mark.asyncio
    async def test_extra_argument_echoes_usage(self, admin_command, admin_source):
        await run(admin_command, admin_source, "plugins", "all")
        assert admin_source.messages[0].text == "/proxy plugins"

    def test_plugin_id_required(self):
        with pytest.raises(ValueError):
            PluginDescriptor(id=" ")


# =============================================================================
# reload
# =============================================================================


class TestReload:
    """reload 子命令"""

    @pytest.mark.asyncio
    async def test_success(self, admin_command, admin_source, render):
        await run(admin_command, admin_source, "reload")
        assert admin_source.messages[0].key == "command.reload-success"
        assert admin_source.messages[0].color == NamedColor.GREEN
        assert render(admin_source) == ["Proxy configuration successfully reloaded."]

    @pytest.mark.asyncio
    async def test_false_and_error_produce_identical_text(
        self, admin_command, make_source, proxy_server, render, caplog
    ):
        returned_false = make_source({"proxy.command.reload": True})
        raised = make_source({"proxy.command.reload": True})

        proxy_server.reload_result = False
        with caplog.at_level(logging.ERROR, logger="proxyadmin"):
            await run(admin_command, returned_false, "reload")
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

        proxy_server.reload_error = RuntimeError("config.toml: bad value at line 3")
        with caplog.at_level(logging.ERROR, logger="proxyadmin"):
            await run(admin_command, raised, "reload")
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].exc_info is not None

        assert render(returned_false) == render(raised)
        assert returned_false.messages[0].color == NamedColor.RED
        assert "line 3" not in render(raised)[0]

    @pytest.mark.asyncio
    async def test_async_reload_supported(self, admin_command, admin_source, proxy_server):
        async def reload_configuration():
            return True

        proxy_server.reload_configuration = reload_configuration
        result = await admin_command.registry["reload"].reload()
        assert result.outcome is Outcome.SUCCESS

    @pytest.mark.asyncio
    async def test_error_result_keeps_detail(self, admin_command, proxy_server):
        proxy_server.reload_error = OSError("disk")
        result = await admin_command.registry["reload"].reload()
        assert result.outcome is Outcome.LOGGED_FAILURE
        assert isinstance(result.error, OSError)

    @pytest.mark.asyncio
    async def test_extra_argument_echoes_usage(self, admin_command, admin_source, proxy_server):
        await run(admin_command, admin_source, "reload", "x")
        assert admin_source.messages[0].text == "/proxy reload"
        assert proxy_server.reload_calls == 0
