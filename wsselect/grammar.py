from collections import namedtuple
from enum import Enum
import logging

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar, NodeVisitor

logger = logging.getLogger(__name__)

class NameKind(Enum):
    BOOL = 0
    STARTS_WITH = 1
    ENDS_WITH = 2


RangeSelector = namedtuple("RangeSelector", ["start", "end"])
SpecialSelector = namedtuple("SpecialSelector", ["is_special"])
NameSelector = namedtuple("NameSelector", ["kind", "value"])
MonitorSelector = namedtuple("MonitorSelector", ["monitor"])
WindowSelector = namedtuple(
    "WindowSelector",
    [
        "tiled_only",
        "floating_only",
        "groups_only",
        "visible_only",
        "exact_count",
        "range",
    ],
    defaults=(False, False, False, False, None, None),
)
FullscreenSelector = namedtuple("FullscreenSelector", ["state"])

SELECTOR_TYPES = (
    RangeSelector,
    SpecialSelector,
    NameSelector,
    MonitorSelector,
    WindowSelector,
    FullscreenSelector,
)

# Rules are tried in this order for every token, first match wins.
RULES = ["range", "special", "name", "monitor", "window", "fullscreen"]

grammar = Grammar(
    r"""
    range = "r[" uint "-" uint "]"
    special = "s[" boolean "]"
    name = name_bool / name_starts / name_ends
    name_bool = "n[" boolean "]"
    name_starts = "n[s:" text "]"
    name_ends = "n[e:" text "]"
    monitor = "m[" text "]"
    window = "w[" flags count? "]"
    count = uint ("-" uint)?
    fullscreen = "f[" int "]"
    flags = ~"[tfgv]*"
    boolean = "true" / "false"
    uint = ~"[0-9]+"
    int = ~"-?[0-9]+"
    text = ~".*(?=[]])"
    """
)


class SelectorVisitor(NodeVisitor):
    def visit_range(self, _node, visited_children):
        _open, start, _dash, end, _close = visited_children
        return RangeSelector(start, end)

    def visit_special(self, _node, visited_children):
        _open, is_special, _close = visited_children
        return SpecialSelector(is_special)

    def visit_name(self, _node, visited_children):
        return visited_children[0]

    def visit_name_bool(self, _node, visited_children):
        _open, value, _close = visited_children
        return NameSelector(NameKind.BOOL, value)

    def visit_name_starts(self, _node, visited_children):
        _open, value, _close = visited_children
        return NameSelector(NameKind.STARTS_WITH, value)

    def visit_name_ends(self, _node, visited_children):
        _open, value, _close = visited_children
        return NameSelector(NameKind.ENDS_WITH, value)

    def visit_monitor(self, _node, visited_children):
        _open, monitor, _close = visited_children
        return MonitorSelector(monitor)

    def visit_window(self, _node, visited_children):
        _open, flags, count_opt, _close = visited_children
        exact_count = None
        count_range = None
        if isinstance(count_opt, list):
            count = count_opt[0]
            if isinstance(count, RangeSelector):
                count_range = count
            else:
                exact_count = count
        return WindowSelector(
            tiled_only="t" in flags,
            floating_only="f" in flags,
            groups_only="g" in flags,
            visible_only="v" in flags,
            exact_count=exact_count,
            range=count_range,
        )

    def visit_count(self, _node, visited_children):
        start, end_opt = visited_children
        if isinstance(end_opt, list):
            _dash, end = end_opt[0]
            return RangeSelector(start, end)
        return start

    def visit_fullscreen(self, _node, visited_children):
        _open, state, _close = visited_children
        return FullscreenSelector(state)

    def visit_flags(self, node, _visited_children):
        return node.text

    def visit_boolean(self, node, _visited_children):
        return node.text == "true"

    def visit_uint(self, node, _visited_children):
        return int(node.text)

    def visit_int(self, node, _visited_children):
        return int(node.text)

    def visit_text(self, node, _visited_children):
        return node.text

    def generic_visit(self, node, visited_children):
        """Pass literal nodes through; keep the children of anything else."""
        return visited_children or node


visitor = SelectorVisitor()


def parse_token(token: str):
    """Parse a single selector token.

    Args:
        token: one whitespace-free token, e.g. "r[1-5]" or "w[tv1-3]".

    Returns:
        The selector built by the first rule in RULES that accepts the whole
        token, or None if no rule does.
    """
    for rule in RULES:
        try:
            tree = grammar[rule].parse(token)
        except ParseError:
            continue
        return visitor.visit(tree)
    logger.debug(f"Ignoring unrecognized selector {token!r}")
    return None


def parse(selector_string: str) -> tuple:
    """Split a selector string on whitespace and parse every token.

    Tokens no rule accepts are dropped, so this never fails.
    """
    selectors = []
    for token in selector_string.split():
        selector = parse_token(token)
        if selector is not None:
            selectors.append(selector)
    return tuple(selectors)
