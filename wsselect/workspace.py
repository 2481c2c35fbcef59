from collections import defaultdict, namedtuple
import copy

from deep_merge import merge

# Fullscreen state codes used by the f[...] selector.
NO_FULLSCREEN = -1
FULLSCREEN = 0
MAXIMIZED = 1
FULLSCREEN_NO_STATE = 2

WORKSPACE_DEFAULTS = {"id": 0, "name": "", "monitor": ""}
CLIENT_DEFAULTS = {
    "floating": False,
    "grouped": [],
    "mapped": True,
    "hidden": False,
    "fullscreen": 0,
    "workspace": {"id": None},
}

Window = namedtuple("Window", ["floating", "grouped", "visible"])


class Workspace:
    """Read-only snapshot of a compositor workspace."""

    def __init__(
        self,
        id: int,
        name: str,
        monitor: str,
        special: bool = None,
        named: bool = None,
        fullscreen_state: int = NO_FULLSCREEN,
        windows=(),
    ):
        self.id = id
        self.name = name
        self.monitor = monitor
        if special is None:
            special = id < 0 or name.startswith("special:")
        self.special = special
        if named is None:
            named = bool(name) and name != str(id)
        self.named = named
        self.fullscreen_state = fullscreen_state
        self.windows = tuple(windows)

    def window_count(self, tiled=False, floating=False, groups=False, visible=False) -> int:
        """Count windows passing every requested filter.

        Filters left False don't restrict the count. `tiled` and `floating`
        together count nothing.
        """
        count = 0
        for window in self.windows:
            if tiled and window.floating:
                continue
            if floating and not window.floating:
                continue
            if groups and not window.grouped:
                continue
            if visible and not window.visible:
                continue
            count += 1
        return count

    def __repr__(self):
        return f"Workspace(id={self.id!r}, name={self.name!r}, monitor={self.monitor!r})"


def window_from_json(client: dict) -> Window:
    client = merge(copy.deepcopy(CLIENT_DEFAULTS), client)
    return Window(
        floating=bool(client["floating"]),
        grouped=bool(client["grouped"]),
        visible=bool(client["mapped"]) and not client["hidden"],
    )


def fullscreen_from_clients(clients) -> int:
    """Derive the workspace fullscreen state code from its clients.

    Clients report an internal mode (0 none, 1 maximized, 2+ fullscreen) in
    "fullscreen" and the mode sent to the client in "fullscreenClient".
    Fullscreen takes precedence over maximized.
    """
    state = NO_FULLSCREEN
    for client in clients:
        internal = client.get("fullscreen", 0)
        client_side = client.get("fullscreenClient", internal)
        if internal >= 2:
            if client_side >= 2:
                return FULLSCREEN
            state = FULLSCREEN_NO_STATE
        elif internal == 1 and state == NO_FULLSCREEN:
            state = MAXIMIZED
    return state


def workspace_from_json(workspace: dict, clients=()) -> Workspace:
    """Build a Workspace from one entry of `hyprctl workspaces -j`.

    Args:
        workspace: the workspace object.
        clients: entries of `hyprctl clients -j` on this workspace.
    """
    workspace = merge(copy.deepcopy(WORKSPACE_DEFAULTS), workspace)
    clients = list(clients)
    if "fullscreenState" in workspace:
        fullscreen_state = workspace["fullscreenState"]
    else:
        fullscreen_state = fullscreen_from_clients(clients)
    return Workspace(
        id=workspace["id"],
        name=workspace["name"],
        monitor=workspace["monitor"],
        special=workspace.get("special"),
        named=workspace.get("named"),
        fullscreen_state=fullscreen_state,
        windows=[window_from_json(client) for client in clients],
    )


def load_workspaces(workspaces, clients=()) -> list:
    """Build every workspace, attaching clients by their workspace id."""
    clients_by_workspace = defaultdict(list)
    for client in clients:
        workspace_id = (client.get("workspace") or {}).get("id")
        clients_by_workspace[workspace_id].append(client)
    return [
        workspace_from_json(workspace, clients_by_workspace[workspace.get("id", 0)])
        for workspace in workspaces
    ]
