from .grammar import parse
from .matcher import matches


class WorkspaceSelector:
    """A parsed selector string, e.g. "r[1-5] m[DP-1] w[t1-3]".

    Selectors are parsed once on construction and ANDed together by
    `matches`. Unrecognized tokens are ignored.
    """

    def __init__(self, selector_string: str):
        self.selector_string = selector_string
        self.selectors = parse(selector_string)

    def matches(self, workspace) -> bool:
        return matches(self.selectors, workspace)

    def filter(self, workspaces) -> list:
        """Return the workspaces this selector matches, in input order."""
        return [workspace for workspace in workspaces if self.matches(workspace)]

    def __iter__(self):
        return iter(self.selectors)

    def __len__(self):
        return len(self.selectors)

    def __repr__(self):
        return f"WorkspaceSelector({self.selector_string!r})"
