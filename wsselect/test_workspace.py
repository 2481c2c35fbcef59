from . import Window, Workspace, load_workspaces, workspace_from_json
from .workspace import (
    FULLSCREEN,
    FULLSCREEN_NO_STATE,
    MAXIMIZED,
    NO_FULLSCREEN,
    fullscreen_from_clients,
    window_from_json,
)
from hypothesis import given
from hypothesis.strategies import booleans, builds, lists


WORKSPACES = [
    {"id": 1, "name": "1", "monitor": "DP-1", "windows": 2, "hasfullscreen": False},
    {"id": 2, "name": "web", "monitor": "DP-2", "windows": 1, "hasfullscreen": True},
    {"id": -98, "name": "special:magic", "monitor": "DP-1", "windows": 0},
]

CLIENTS = [
    {
        "address": "0x1",
        "mapped": True,
        "hidden": False,
        "workspace": {"id": 1, "name": "1"},
        "floating": False,
        "fullscreen": 0,
        "fullscreenClient": 0,
        "grouped": [],
    },
    {
        "address": "0x2",
        "mapped": True,
        "hidden": True,
        "workspace": {"id": 1, "name": "1"},
        "floating": True,
        "fullscreen": 0,
        "fullscreenClient": 0,
        "grouped": ["0x2", "0x3"],
    },
    {
        "address": "0x4",
        "mapped": True,
        "hidden": False,
        "workspace": {"id": 2, "name": "web"},
        "floating": False,
        "fullscreen": 2,
        "fullscreenClient": 2,
        "grouped": [],
    },
]


def test_special_and_named_defaults():
    assert Workspace(-98, "special:magic", "DP-1").special
    assert Workspace(5, "special:scratch", "DP-1").special
    assert not Workspace(3, "3", "DP-1").special
    assert Workspace(3, "code", "DP-1").named
    assert not Workspace(3, "3", "DP-1").named
    assert not Workspace(3, "", "DP-1").named


def test_explicit_flags_win():
    ws = Workspace(3, "3", "DP-1", special=True, named=True)
    assert ws.special and ws.named


@given(lists(builds(Window, booleans(), booleans(), booleans())))
def test_window_count(windows):
    ws = Workspace(1, "1", "DP-1", windows=windows)
    assert ws.window_count() == len(windows)
    assert ws.window_count(tiled=True) + ws.window_count(floating=True) == len(windows)
    assert ws.window_count(tiled=True, floating=True) == 0
    assert ws.window_count(groups=True) == sum(w.grouped for w in windows)
    assert ws.window_count(floating=True, visible=True) == sum(
        w.floating and w.visible for w in windows
    )


def test_window_from_json():
    assert window_from_json(CLIENTS[0]) == Window(floating=False, grouped=False, visible=True)
    assert window_from_json(CLIENTS[1]) == Window(floating=True, grouped=True, visible=False)
    assert window_from_json({}) == Window(floating=False, grouped=False, visible=True)
    assert not window_from_json({"mapped": False}).visible


def test_fullscreen_from_clients():
    assert fullscreen_from_clients([]) == NO_FULLSCREEN
    assert fullscreen_from_clients([{"fullscreen": 0}]) == NO_FULLSCREEN
    assert fullscreen_from_clients([{"fullscreen": 1}]) == MAXIMIZED
    assert fullscreen_from_clients([{"fullscreen": 2}]) == FULLSCREEN
    assert fullscreen_from_clients([{"fullscreen": 3, "fullscreenClient": 3}]) == FULLSCREEN
    assert fullscreen_from_clients([{"fullscreen": 2, "fullscreenClient": 0}]) == FULLSCREEN_NO_STATE
    assert fullscreen_from_clients([{"fullscreen": 1}, {"fullscreen": 2}]) == FULLSCREEN
    assert (
        fullscreen_from_clients([{"fullscreen": 2, "fullscreenClient": 1}, {"fullscreen": 1}])
        == FULLSCREEN_NO_STATE
    )


def test_workspace_from_json():
    ws = workspace_from_json(WORKSPACES[0], CLIENTS[:2])
    assert (ws.id, ws.name, ws.monitor) == (1, "1", "DP-1")
    assert not ws.special and not ws.named
    assert ws.fullscreen_state == NO_FULLSCREEN
    assert ws.window_count() == 2
    assert ws.window_count(visible=True) == 1


def test_workspace_from_json_defaults():
    ws = workspace_from_json({"id": 4})
    assert (ws.name, ws.monitor, ws.windows) == ("", "", ())


def test_workspace_from_json_explicit_fullscreen_state():
    ws = workspace_from_json({**WORKSPACES[1], "fullscreenState": 1}, CLIENTS[2:])
    assert ws.fullscreen_state == MAXIMIZED


def test_load_workspaces():
    spaces = load_workspaces(WORKSPACES, CLIENTS)
    assert [ws.id for ws in spaces] == [1, 2, -98]
    assert [ws.window_count() for ws in spaces] == [2, 1, 0]
    assert spaces[1].fullscreen_state == FULLSCREEN
    assert spaces[1].named
    assert spaces[2].special


def test_load_workspaces_client_without_workspace():
    orphan = {**CLIENTS[0], "workspace": None}
    spaces = load_workspaces(WORKSPACES[:1], [orphan, CLIENTS[0]])
    assert spaces[0].window_count() == 1
