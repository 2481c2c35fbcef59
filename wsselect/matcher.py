from .grammar import (
    FullscreenSelector,
    MonitorSelector,
    NameKind,
    NameSelector,
    RangeSelector,
    SpecialSelector,
    WindowSelector,
)


def in_range(value: int, range_selector: RangeSelector) -> bool:
    return range_selector.start <= value <= range_selector.end


def name_matches(selector: NameSelector, workspace) -> bool:
    if selector.kind == NameKind.BOOL:
        return workspace.named == selector.value
    elif selector.kind == NameKind.STARTS_WITH:
        return workspace.name.startswith(selector.value)
    elif selector.kind == NameKind.ENDS_WITH:
        return workspace.name.endswith(selector.value)
    raise TypeError(f"Unknown name selector kind {selector.kind!r}")


def window_matches(selector: WindowSelector, workspace) -> bool:
    """Check the window count constraint of `selector` against `workspace`.

    A selector with neither an exact count nor a range (e.g. "w[t]") holds
    for every workspace.
    """
    if selector.exact_count is None and selector.range is None:
        return True

    count = workspace.window_count(
        tiled=selector.tiled_only,
        floating=selector.floating_only,
        groups=selector.groups_only,
        visible=selector.visible_only,
    )
    if selector.exact_count is not None:
        return count == selector.exact_count
    return in_range(count, selector.range)


def selector_matches(selector, workspace) -> bool:
    """Check if a single parsed selector holds for the given workspace.

    Args:
        selector: one of the selector tuples built by `grammar.parse`.
        workspace: anything exposing `id`, `name`, `named`, `special`,
            `monitor`, `fullscreen_state` and `window_count(...)`.

    Returns:
        bool: Whether the selector is satisfied.
    """
    if isinstance(selector, RangeSelector):
        return in_range(workspace.id, selector)
    elif isinstance(selector, SpecialSelector):
        return workspace.special == selector.is_special
    elif isinstance(selector, NameSelector):
        return name_matches(selector, workspace)
    elif isinstance(selector, MonitorSelector):
        return workspace.monitor == selector.monitor
    elif isinstance(selector, WindowSelector):
        return window_matches(selector, workspace)
    elif isinstance(selector, FullscreenSelector):
        return workspace.fullscreen_state == selector.state
    raise TypeError(f"Not a workspace selector: {selector!r}")


def matches(selectors, workspace) -> bool:
    """True if every selector holds for `workspace`; no selectors match all."""
    return all(selector_matches(selector, workspace) for selector in selectors)
