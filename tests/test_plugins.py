"""Tests for the plugin system and the registration guard."""

import asyncio

import pytest

from viewfs import App, View
from viewfs.plugins.base import BasePlugin
from viewfs.plugins.file_ops import ViewFsPlugin, view_fs
from viewfs.plugins.registry import (
    clear_plugin_registry,
    create_plugin,
    get_plugin_registry,
    register_plugin,
)


@pytest.fixture
def restore_registry():
    saved = get_plugin_registry()
    yield
    clear_plugin_registry()
    for name, cls in saved.items():
        register_plugin(name)(cls)


def test_view_fs_is_base_plugin():
    """ViewFsPlugin should be a BasePlugin subclass."""
    plugin = ViewFsPlugin()
    assert isinstance(plugin, BasePlugin)


def test_view_fs_name():
    assert ViewFsPlugin().name == "view_fs"


def test_view_fs_description():
    assert len(ViewFsPlugin().description) > 0


def test_view_fs_get_operations():
    ops = ViewFsPlugin().get_operations()
    assert set(ops) == {"read", "write", "delete", "move"}
    assert all(callable(fn) for fn in ops.values())


def test_plugin_registry_has_view_fs():
    """view_fs should be auto-registered."""
    assert get_plugin_registry()["view_fs"] is ViewFsPlugin


def test_create_plugin_applies_config():
    plugin = create_plugin("view_fs", {"options": {"flatten": True}})
    assert isinstance(plugin, ViewFsPlugin)
    assert plugin.defaults == {"flatten": True}


def test_create_unknown_plugin():
    with pytest.raises(KeyError, match="nope"):
        create_plugin("nope")


def test_register_custom_plugin(restore_registry):
    clear_plugin_registry()

    @register_plugin("custom")
    class CustomPlugin(BasePlugin):
        @property
        def name(self):
            return "custom"

        @property
        def description(self):
            return "test"

        def get_operations(self):
            return {"noop": lambda view: None}

    registry = get_plugin_registry()
    assert "custom" in registry
    assert registry["custom"] is CustomPlugin


def test_register_rejects_non_plugin(restore_registry):
    with pytest.raises(TypeError):
        register_plugin("bad")(object)


class TestRegistrationGuard:
    def test_decorates_app_views(self):
        app = App()
        app.use(view_fs())
        view = app.view("fixtures/a.txt")
        for name in ("read", "write", "delete", "move"):
            assert callable(getattr(view, name))

    def test_decorates_collection_views(self):
        app = App()
        app.use(view_fs())
        view = app.create("pages").add_view("fixtures/a.txt")
        for name in ("read", "write", "delete", "move"):
            assert callable(getattr(view, name))

    def test_undecorated_view_has_no_operations(self):
        view = App().view("fixtures/a.txt")
        assert not hasattr(view, "read")

    def test_non_view_returns_plugin(self):
        app = App()
        plugin = view_fs()
        assert plugin(app) is plugin

    def test_non_host_target_returns_plugin(self):
        plugin = view_fs()
        assert plugin(object()) is plugin
        assert plugin(object()) is plugin

    def test_view_returns_none(self):
        assert view_fs()(View("a.txt")) is None

    def test_second_registration_returns_none(self):
        app = App()
        plugin = view_fs()
        assert plugin(app) is plugin
        assert plugin(app) is None

    def test_registering_twice_attaches_once(self):
        app = App()
        app.use(view_fs())
        app.use(view_fs())
        assert len(app.plugins) == 1
        pages = app.create("pages")
        assert len(pages.plugins) == 1

    def test_registering_twice_emits_once(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        app = App()
        app.use(view_fs())
        app.use(view_fs())
        view = app.view("foo.txt", content="this is foo")
        seen = []
        view.on("write", lambda *args: seen.append(args))
        asyncio.run(view.write("actual"))
        assert len(seen) == 1

    def test_view_decorated_once(self):
        view = View("a.txt")
        plugin = view_fs()
        view.use(plugin)
        first = view.read
        view.use(plugin)
        assert view.read == first
        assert view.is_registered("view_fs", register=False)

    def test_configured_defaults_sit_under_view_options(self):
        app = App()
        app.use(view_fs({"options": {"flatten": True, "read": True}}))
        view = app.view("a.txt", options={"read": False})
        assert view.options == {"flatten": True, "read": False}

    def test_plugin_configure_dest(self):
        plugin = ViewFsPlugin()
        plugin.configure({"options": {}, "dest": "dist"})
        assert plugin.defaults == {"dest": "dist"}

    def test_flat_config(self):
        plugin = ViewFsPlugin({"flatten": True})
        assert plugin.defaults == {"flatten": True}
