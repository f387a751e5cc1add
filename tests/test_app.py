"""Tests for the App and Collection hosts."""

import pytest

from viewfs import App, Collection, View


def test_create_collection():
    app = App()
    pages = app.create("pages")
    assert isinstance(pages, Collection)
    assert app.collection("pages") is pages


def test_unknown_collection():
    with pytest.raises(KeyError, match="posts"):
        App().collection("posts")


def test_add_view_stores_by_path():
    pages = App().create("pages")
    view = pages.add_view("a.txt", content="aaa")
    assert isinstance(view, View)
    assert pages.get_view("a.txt") is view
    assert len(pages) == 1


def test_options_cascade_to_views():
    app = App(options={"flatten": True, "encoding": "utf-8"})
    pages = app.create("pages", options={"encoding": "latin-1"})
    view = pages.add_view("a.txt", options={"dest": "out"})
    assert view.options == {"flatten": True, "encoding": "latin-1", "dest": "out"}


def test_plugins_reach_collection_views():
    calls = []

    def plugin(target):
        calls.append(type(target).__name__)
        if isinstance(target, View):
            return None
        return plugin

    app = App()
    app.use(plugin)
    app.create("pages").add_view("a.txt")
    app.view("b.txt")
    assert calls == ["App", "Collection", "View", "View"]


def test_plugin_returning_none_is_not_chained():
    app = App()
    app.use(lambda target: None)
    assert app.plugins == ()


def test_is_registered():
    app = App()
    assert app.is_registered("x") is False
    assert app.is_registered("x") is True
    assert app.is_registered("y", register=False) is False
    assert app.is_registered("y") is False


def test_options_none_is_accepted():
    app = App(options={"flatten": True})
    assert app.view("a.txt", options=None).options == {"flatten": True}
    pages = app.create("pages")
    assert pages.add_view("b.txt", options=None).options == {"flatten": True}
