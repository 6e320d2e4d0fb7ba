"""Key bindings: key events, the configurable key map and key hints."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


class KeyCode(enum.Enum):
    """The key of a key event."""

    CHAR = "Char"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    BACKSPACE = "Backspace"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    ESC = "Esc"
    F = "F"
    NULL = "Null"


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


_MODIFIER_ORDER = (KeyModifiers.SHIFT, KeyModifiers.CONTROL, KeyModifiers.ALT)


@dataclass(frozen=True)
class KeyEvent:
    """A key press: the key code, its modifiers and, for characters and
    function keys, the character or the function key number."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    value: str | int | None = None

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.code is KeyCode.F:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError("a function key needs its number")
        elif self.value is not None:
            raise ValueError(f"key {self.code.value} takes no value")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code.value}
        if self.value is not None:
            data["value"] = self.value
        data["modifiers"] = [m.name for m in _MODIFIER_ORDER if m in self.modifiers]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyEvent:
        if not isinstance(data, dict):
            raise ValueError("a key event must be a mapping")
        try:
            code = KeyCode(data["code"])
        except KeyError as exc:
            raise ValueError("key event without code") from exc
        except ValueError as exc:
            raise ValueError(f"unknown key code: {data['code']!r}") from exc
        modifiers = KeyModifiers.NONE
        for name in data.get("modifiers", []):
            try:
                modifiers |= KeyModifiers[name]
            except (KeyError, TypeError) as exc:
                raise ValueError(f"unknown key modifier: {name!r}") from exc
        return cls(code, modifiers, data.get("value"))


def _key(code: KeyCode, value: str | int | None = None,
         modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    return KeyEvent(code, modifiers, value)


def _char(c: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    return KeyEvent(KeyCode.CHAR, modifiers, c)


_SHIFT = KeyModifiers.SHIFT
_CTRL = KeyModifiers.CONTROL


@dataclass
class KeyConfig:
    """The key binding for every action of the application."""

    tab_status: KeyEvent = _char("1")
    tab_log: KeyEvent = _char("2")
    tab_stashing: KeyEvent = _char("3")
    tab_stashes: KeyEvent = _char("4")
    tab_toggle: KeyEvent = _key(KeyCode.TAB)
    tab_toggle_reverse: KeyEvent = _key(KeyCode.BACK_TAB, modifiers=_SHIFT)
    focus_workdir: KeyEvent = _char("w")
    focus_stage: KeyEvent = _char("s")
    focus_right: KeyEvent = _key(KeyCode.RIGHT)
    focus_left: KeyEvent = _key(KeyCode.LEFT)
    focus_above: KeyEvent = _key(KeyCode.UP)
    focus_below: KeyEvent = _key(KeyCode.DOWN)
    exit: KeyEvent = _char("c", _CTRL)
    exit_popup: KeyEvent = _key(KeyCode.ESC)
    open_commit: KeyEvent = _char("c")
    open_commit_editor: KeyEvent = _char("e", _CTRL)
    open_help: KeyEvent = _char("h")
    move_left: KeyEvent = _key(KeyCode.LEFT)
    move_right: KeyEvent = _key(KeyCode.RIGHT)
    home: KeyEvent = _key(KeyCode.HOME)
    end: KeyEvent = _key(KeyCode.END)
    move_up: KeyEvent = _key(KeyCode.UP)
    move_down: KeyEvent = _key(KeyCode.DOWN)
    page_down: KeyEvent = _key(KeyCode.PAGE_DOWN)
    page_up: KeyEvent = _key(KeyCode.PAGE_UP)
    shift_up: KeyEvent = _key(KeyCode.UP, modifiers=_SHIFT)
    shift_down: KeyEvent = _key(KeyCode.DOWN, modifiers=_SHIFT)
    enter: KeyEvent = _key(KeyCode.ENTER)
    edit_file: KeyEvent = _char("e")
    status_stage_all: KeyEvent = _char("a")
    status_reset_item: KeyEvent = _char("D", _SHIFT)
    status_ignore_file: KeyEvent = _char("i")
    stashing_save: KeyEvent = _char("s")
    stashing_toggle_untracked: KeyEvent = _char("u")
    stashing_toggle_index: KeyEvent = _char("i")
    stash_open: KeyEvent = _key(KeyCode.RIGHT)
    stash_drop: KeyEvent = _char("D", _SHIFT)
    cmd_bar_toggle: KeyEvent = _char(".")
    log_tag_commit: KeyEvent = _char("t")
    commit_amend: KeyEvent = _char("a", _CTRL)
    copy: KeyEvent = _char("y")
    create_branch: KeyEvent = _char("c")
    rename_branch: KeyEvent = _char("r")
    select_branch: KeyEvent = _char("b")
    delete_branch: KeyEvent = _char("D", _SHIFT)
    push: KeyEvent = _char("p")
    fetch: KeyEvent = _char("f")

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name).to_dict() for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyConfig:
        if not isinstance(data, dict):
            raise ValueError("a key config must be a mapping")
        bindings = {}
        for f in fields(cls):
            if f.name not in data:
                raise ValueError(f"missing key binding: {f.name}")
            bindings[f.name] = KeyEvent.from_dict(data[f.name])
        return cls(**bindings)

    @classmethod
    def read_file(cls, path: str | Path) -> KeyConfig:
        """Load a key config; raises OSError or ValueError on failure."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_dict(json.loads(text))

    def save(self, path: str | Path) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")

    @classmethod
    def init(cls, path: str | Path) -> KeyConfig:
        """Load the key config at `path`, storing the defaults there when it
        does not exist; falls back to the defaults on any error."""
        target = Path(path)
        try:
            if target.exists():
                return cls.read_file(target)
            config = cls()
            try:
                config.save(target)
            except OSError:
                log.warning("failed to store default key config to disk.")
            return config
        except (OSError, ValueError) as exc:
            log.error("failed loading key binding: %s", exc)
            return cls()


_KEY_SYMBOLS = {
    KeyCode.ENTER: "\u23ce",
    KeyCode.LEFT: "\u2190",
    KeyCode.RIGHT: "\u2192",
    KeyCode.UP: "\u2191",
    KeyCode.DOWN: "\u2193",
    KeyCode.BACKSPACE: "\u232b",
    KeyCode.HOME: "\u2912",
    KeyCode.END: "\u2913",
    KeyCode.PAGE_UP: "\u21de",
    KeyCode.PAGE_DOWN: "\u21df",
    KeyCode.TAB: "\u21e5",
    KeyCode.BACK_TAB: "\u21e4",
    KeyCode.DELETE: "\u2326",
    KeyCode.INSERT: "\u2380",
    KeyCode.ESC: "\u238b",
}

_MODIFIER_SYMBOLS = {
    KeyModifiers.CONTROL: "^",
    KeyModifiers.SHIFT: "\u21e7",
    KeyModifiers.ALT: "\u2325",
}


def get_modifier_hint(modifiers: KeyModifiers) -> str:
    """Symbol for a single modifier; empty for none or a combination."""
    return _MODIFIER_SYMBOLS.get(modifiers, "")


def get_hint(event: KeyEvent) -> str:
    """Short display hint for a key event, in the style of Apple menus."""
    prefix = get_modifier_hint(event.modifiers)
    if event.code is KeyCode.CHAR:
        return f"{prefix}{event.value}"
    if event.code is KeyCode.F:
        return f"{prefix}F{event.value}"
    if event.code is KeyCode.NULL:
        return prefix
    return prefix + _KEY_SYMBOLS[event.code]