"""Keyboard shortcut table for interactive front ends."""

from typing import NamedTuple

from textconvert.core.types import ConversionId


class Shortcut(NamedTuple):
    """Key combination bound to an action."""

    key: str
    action: str
    description: str


# Non-conversion actions a front end handles itself
COPY_ACTION = "copy"
DOWNLOAD_ACTION = "download"
CLEAR_ACTION = "clear"
HELP_ACTION = "help"

SHORTCUTS: list[Shortcut] = [
    Shortcut("Ctrl+U", ConversionId.UPPER_CASE.value, "Convert to UPPERCASE"),
    Shortcut("Ctrl+L", ConversionId.LOWER_CASE.value, "Convert to lowercase"),
    Shortcut("Ctrl+T", ConversionId.TITLE_CASE.value, "Convert to Title Case"),
    Shortcut("Ctrl+C", ConversionId.CAMEL_CASE.value, "Convert to camelCase"),
    Shortcut("Ctrl+P", ConversionId.PASCAL_CASE.value, "Convert to PascalCase"),
    Shortcut("Ctrl+S", ConversionId.SNAKE_CASE.value, "Convert to snake_case"),
    Shortcut("Ctrl+K", ConversionId.KEBAB_CASE.value, "Convert to kebab-case"),
    Shortcut("Ctrl+R", ConversionId.REVERSE_TEXT.value, "Reverse text"),
    Shortcut("Ctrl+Shift+C", COPY_ACTION, "Copy result to clipboard"),
    Shortcut("Ctrl+Shift+D", DOWNLOAD_ACTION, "Download as text file"),
    Shortcut("Ctrl+Shift+X", CLEAR_ACTION, "Clear all text"),
    Shortcut("?", HELP_ACTION, "Show/hide shortcuts"),
]

def _build_bindings() -> dict[tuple[str, bool, bool], str]:
    bindings = {}
    for shortcut in SHORTCUTS:
        *modifiers, key = shortcut.key.split("+")
        bindings[(key.lower(), "Ctrl" in modifiers, "Shift" in modifiers)] = shortcut.action
    return bindings


_BINDINGS = _build_bindings()


def resolve_shortcut(key: str, ctrl: bool = False, shift: bool = False) -> str | None:
    """Return the action bound to a key press, or None if unbound.

    Args:
        key: Key name as reported by the keyboard event (case-insensitive)
        ctrl: Whether Ctrl was held
        shift: Whether Shift was held
    """
    return _BINDINGS.get((key.lower(), ctrl, shift))


def conversion_for_shortcut(
    key: str, ctrl: bool = False, shift: bool = False
) -> ConversionId | None:
    """Return the conversion bound to a key press, ignoring non-conversion actions."""
    action = resolve_shortcut(key, ctrl, shift)
    if action is None:
        return None
    try:
        return ConversionId(action)
    except ValueError:
        return None


def shortcut_for(conversion_id: ConversionId) -> str | None:
    for shortcut in SHORTCUTS:
        if shortcut.action == conversion_id.value:
            return shortcut.key
    return None
