# wsselect: workspace selectors

# A selector string is a whitespace-separated list of tokens, all of which
# must hold for a workspace to match:
#
#   r[A-B]           workspace id between A and B (inclusive)
#   s[true|false]    special workspace or not
#   n[true|false]    has a custom name or not
#   n[s:STR]         name starts with STR
#   n[e:STR]         name ends with STR
#   m[STR]           on monitor STR
#   w[FLAGS N]       exactly N windows, counting only those matching FLAGS
#   w[FLAGS A-B]     between A and B windows
#                    (FLAGS: t tiled, f floating, g grouped, v visible)
#   f[STATE]         fullscreen state: -1 none, 0 fullscreen, 1 maximized,
#                    2 fullscreen without client state
#
# Tokens that aren't one of the above are ignored.
#
## every tiled workspace on DP-1 with one to three windows
# r[1-10] s[false] m[DP-1] w[t1-3]

from .grammar import (
    FullscreenSelector,
    MonitorSelector,
    NameKind,
    NameSelector,
    RangeSelector,
    SpecialSelector,
    WindowSelector,
    grammar,
    parse,
    parse_token,
    SelectorVisitor,
)
from .matcher import matches, selector_matches
from .selector import WorkspaceSelector
from .workspace import Window, Workspace, load_workspaces, workspace_from_json
