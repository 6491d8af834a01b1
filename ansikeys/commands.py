"""The editor's command table: labels, messages, key bindings and states."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sized
from dataclasses import dataclass
from typing import Any

from ansikeys.states import (
    AlwaysEnabledState,
    AspectRatioState,
    BufferOpenState,
    CanCopyState,
    CanCutState,
    CanPasteState,
    CanRedoState,
    CanSwitchPaletteState,
    CanUndoState,
    CommandState,
    EditorSettings,
    FileIsDirtyState,
    FileOpenState,
    HasRecentFilesState,
    LayerBordersState,
    LGAFontState,
    LineNumberState,
)


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held together with a key."""

    alt: bool = False
    ctrl: bool = False
    shift: bool = False

    @classmethod
    def parse(cls, text: str) -> Modifiers:
        """Parse names such as ``"Ctrl+Shift"``; empty or ``"none"`` means none."""
        flags = {"alt": False, "ctrl": False, "shift": False}
        aliases = {"alt": "alt", "ctrl": "ctrl", "control": "ctrl", "shift": "shift"}
        stripped = text.strip()
        if not stripped or stripped.lower() == "none":
            return cls()
        for part in stripped.split("+"):
            name = aliases.get(part.strip().lower())
            if name is None:
                raise ValueError(f"unknown modifier: {part.strip()!r}")
            flags[name] = True
        return cls(**flags)


NONE = Modifiers()
CTRL = Modifiers(ctrl=True)
ALT = Modifiers(alt=True)
ALT_CTRL = Modifiers(alt=True, ctrl=True)
CTRL_SHIFT = Modifiers(ctrl=True, shift=True)

_KEY_NAMES = {
    "ArrowDown": "Down",
    "ArrowLeft": "Left",
    "ArrowRight": "Right",
    "ArrowUp": "Up",
}


@dataclass(frozen=True)
class KeyBinding:
    """A key together with its modifiers."""

    key: str
    modifiers: Modifiers = NONE

    def shortcut_text(self) -> str:
        """The shortcut as shown in menus, e.g. ``Shift+Ctrl+Z``."""
        text = _KEY_NAMES.get(self.key, self.key)
        if self.modifiers.ctrl:
            text = "Ctrl+" + text
        if self.modifiers.alt:
            text = "Alt+" + text
        if self.modifiers.shift:
            text = "Shift+" + text
        return text


@dataclass(frozen=True)
class CommandSpec:
    """Static description of one command."""

    name: str
    translation: str
    message: str
    state: type[CommandState]
    key: KeyBinding | None = None


def _spec(name, translation, message, state, key=None, modifiers=NONE):
    binding = KeyBinding(key, modifiers) if key is not None else None
    return CommandSpec(name, translation, message, state, binding)


COMMAND_SPECS: tuple[CommandSpec, ...] = (
    _spec("new_file", "menu-new", "NewFileDialog", AlwaysEnabledState, "N", CTRL),
    _spec("save", "menu-save", "SaveFile", FileIsDirtyState, "S", CTRL),
    _spec("save_as", "menu-save-as", "SaveFileAs", FileOpenState, "S", CTRL_SHIFT),
    _spec("open_file", "menu-open", "OpenFileDialog", AlwaysEnabledState, "O", CTRL),
    _spec("export", "menu-export", "ExportFile", BufferOpenState),
    _spec("edit_font_outline", "menu-edit-font-outline", "ShowOutlineDialog", AlwaysEnabledState),
    _spec("close_window", "menu-close", "CloseWindow", AlwaysEnabledState, "Q", CTRL),
    _spec("undo", "menu-undo", "Undo", CanUndoState, "Z", CTRL),
    _spec("redo", "menu-redo", "Redo", CanRedoState, "Z", CTRL_SHIFT),
    _spec("cut", "menu-cut", "Cut", CanCutState, "X", CTRL),
    _spec("copy", "menu-copy", "Copy", CanCopyState, "C", CTRL),
    _spec("paste", "menu-paste", "Paste", CanPasteState, "V", CTRL),
    _spec("show_settings", "menu-show_settings", "ShowSettings", AlwaysEnabledState),
    _spec("select_all", "menu-select-all", "SelectAll", BufferOpenState, "A", CTRL),
    _spec("deselect", "menu-select_nothing", "SelectNothing", BufferOpenState),
    _spec("erase_selection", "menu-erase", "DeleteSelection", BufferOpenState, "Delete", NONE),
    _spec("flip_x", "menu-flipx", "FlipX", BufferOpenState),
    _spec("flip_y", "menu-flipy", "FlipY", BufferOpenState),
    _spec("justifycenter", "menu-justifycenter", "Center", BufferOpenState),
    _spec("justifyleft", "menu-justifyleft", "JustifyLeft", BufferOpenState),
    _spec("justifyright", "menu-justifyright", "JustifyRight", BufferOpenState),
    _spec("crop", "menu-crop", "Crop", BufferOpenState),
    _spec("about", "menu-about", "ShowAboutDialog", AlwaysEnabledState),
    _spec("justify_line_center", "menu-justify_line_center", "CenterLine", BufferOpenState, "C", ALT),
    _spec("justify_line_left", "menu-justify_line_left", "JustifyLineLeft", BufferOpenState, "L", ALT),
    _spec("justify_line_right", "menu-justify_line_right", "JustifyLineRight", BufferOpenState, "R", ALT),
    _spec("insert_row", "menu-insert_row", "InsertRow", BufferOpenState, "ArrowUp", ALT),
    _spec("delete_row", "menu-delete_row", "DeleteRow", BufferOpenState, "ArrowDown", ALT),
    _spec("insert_column", "menu-insert_colum", "InsertColumn", BufferOpenState, "ArrowRight", ALT),
    _spec("delete_column", "menu-delete_colum", "DeleteColumn", BufferOpenState, "ArrowLeft", ALT),
    _spec("erase_row", "menu-erase_row", "EraseRow", BufferOpenState, "E", ALT),
    _spec("erase_row_to_start", "menu-erase_row_to_start", "EraseRowToStart", BufferOpenState, "Home", ALT),
    _spec("erase_row_to_end", "menu-erase_row_to_end", "EraseRowToEnd", BufferOpenState, "End", ALT),
    _spec("erase_column", "menu-erase_column", "EraseColumn", BufferOpenState, "E", ALT),
    _spec("erase_column_to_start", "menu-erase_column_to_start", "EraseColumnToStart",
          BufferOpenState, "Home", ALT),
    _spec("erase_column_to_end", "menu-erase_column_to_end", "EraseColumnToEnd", BufferOpenState, "End", ALT),
    _spec("scroll_area_up", "menu-scroll_area_up", "ScrollAreaUp", BufferOpenState, "ArrowUp", ALT_CTRL),
    _spec("scroll_area_down", "menu-scroll_area_down", "ScrollAreaDown", BufferOpenState,
          "ArrowDown", ALT_CTRL),
    _spec("scroll_area_left", "menu-scroll_area_left", "ScrollAreaLeft", BufferOpenState,
          "ArrowLeft", ALT_CTRL),
    _spec("scroll_area_right", "menu-scroll_area_right", "ScrollAreaRight", BufferOpenState,
          "ArrowRight", ALT_CTRL),
    _spec("set_reference_image", "menu-reference-image", "SetReferenceImage", BufferOpenState,
          "O", CTRL_SHIFT),
    _spec("toggle_reference_image", "menu-toggle-reference-image", "ToggleReferenceImage",
          BufferOpenState, "Tab", CTRL),
    _spec("clear_reference_image", "menu-clear-reference-image", "ClearReferenceImage", BufferOpenState),
    _spec("pick_attribute_under_caret", "menu-pick_attribute_under_caret", "PickAttributeUnderCaret",
          BufferOpenState, "U", ALT),
    _spec("switch_to_default_color", "menu-default_color", "SwitchToDefaultColor", BufferOpenState,
          "D", CTRL),
    _spec("toggle_color", "menu-toggle_color", "ToggleColor", BufferOpenState, "X", ALT),
    _spec("fullscreen", "menu-toggle_fullscreen", "ToggleFullScreen", AlwaysEnabledState, "Enter", ALT),
    _spec("zoom_reset", "menu-zoom_reset", "ZoomReset", BufferOpenState, "Backspace", CTRL),
    _spec("zoom_in", "menu-zoom_in", "ZoomIn", BufferOpenState, "Plus", CTRL),
    _spec("zoom_out", "menu-zoom_out", "ZoomOut", BufferOpenState, "Minus", CTRL),
    _spec("open_tdf_directory", "menu-open_tdf_directoy", "OpenTdfDirectory", AlwaysEnabledState),
    _spec("open_font_selector", "menu-open_font_selector", "OpenFontSelector", BufferOpenState),
    _spec("add_fonts", "menu-add_fonts", "OpenAddFonts", BufferOpenState),
    _spec("open_font_manager", "menu-open_font_manager", "OpenFontManager", BufferOpenState),
    _spec("open_font_directory", "menu-open_font_directoy", "OpenFontDirectory", AlwaysEnabledState),
    _spec("open_palettes_directory", "menu-open_palettes_directoy", "OpenPalettesDirectory",
          AlwaysEnabledState),
    _spec("mirror_mode", "menu-mirror_mode", "ToggleMirrorMode", BufferOpenState),
    _spec("clear_recent_open", "menu-open_recent_clear", "ClearRecentOpenFiles", HasRecentFilesState),
    _spec("inverse_selection", "menu-inverse_selection", "InverseSelection", BufferOpenState),
    _spec("clear_selection", "menu-delete_row", "ClearSelection", BufferOpenState, "Escape", NONE),
    _spec("select_palette", "menu-select_palette", "SelectPalette", CanSwitchPaletteState),
    _spec("show_layer_borders", "menu-show_layer_borders", "ToggleLayerBorders", LayerBordersState),
    _spec("show_line_numbers", "menu-show_line_numbers", "ToggleLineNumbers", LineNumberState),
    _spec("open_plugin_directory", "menu-open_plugin_directory", "OpenPluginDirectory", AlwaysEnabledState),
    _spec("next_fg_color", "menu-next_fg_color", "NextFgColor", BufferOpenState, "ArrowDown", CTRL),
    _spec("prev_fg_color", "menu-prev_fg_color", "PreviousFgColor", BufferOpenState, "ArrowUp", CTRL),
    _spec("next_bg_color", "menu-next_bg_color", "NextBgColor", BufferOpenState, "ArrowRight", CTRL),
    _spec("prev_bg_color", "menu-prev_bg_color", "PreviousBgColor", BufferOpenState, "ArrowLeft", CTRL),
    _spec("lga_font", "menu-9px-font", "ToggleLGAFont", LGAFontState),
    _spec("aspect_ratio", "menu-aspect-ratio", "ToggleAspectRatio", AspectRatioState),
    _spec("toggle_grid_guides", "menu-toggle_grid", "ToggleGrid", BufferOpenState),
)


@dataclass
class CommandWrapper:
    """A command as shown in menus, with its current binding and state."""

    name: str
    message: str
    label: str
    state_key: type[CommandState]
    key: KeyBinding | None = None
    is_enabled: bool = True
    is_checked: bool | None = None

    def update_state(self, result_map: dict[type[CommandState], tuple[bool, bool | None]]) -> None:
        """Take the enabled and checked values computed for this command's state."""
        result = result_map.get(self.state_key)
        if result is not None:
            self.is_enabled, self.is_checked = result

    def is_pressed(self, key: str, modifiers: Modifiers) -> bool:
        """True when the given key press matches this command's binding."""
        return self.key is not None and self.key == KeyBinding(key, modifiers)

    def shortcut_text(self) -> str | None:
        """The bound shortcut as menu text, or ``None`` when unbound."""
        return self.key.shortcut_text() if self.key is not None else None


class Commands:
    """All editor commands, in menu order."""

    def __init__(
        self,
        settings: EditorSettings | None = None,
        recent_files: Sized | None = None,
        translate: Callable[[str], str] | None = None,
    ) -> None:
        settings = settings if settings is not None else EditorSettings()
        recent_files = recent_files if recent_files is not None else []
        translate = translate if translate is not None else (lambda text: text)

        self._states: dict[type[CommandState], CommandState] = {}
        for spec in COMMAND_SPECS:
            if spec.state not in self._states:
                self._states[spec.state] = _make_state(spec.state, settings, recent_files)

        self._commands: dict[str, CommandWrapper] = {
            spec.name: CommandWrapper(
                name=spec.name,
                message=spec.message,
                label=translate(spec.translation),
                state_key=spec.state,
                key=spec.key,
            )
            for spec in COMMAND_SPECS
        }

    @classmethod
    def default_keybindings(cls) -> list[tuple[str, str, Modifiers]]:
        """The default ``(command, key, modifiers)`` bindings."""
        return [
            (spec.name, spec.key.key, spec.key.modifiers)
            for spec in COMMAND_SPECS
            if spec.key is not None
        ]

    def check(self, key: str, modifiers: Modifiers) -> str | None:
        """The message of the first command bound to this key press, if any."""
        for command in self._commands.values():
            if command.is_pressed(key, modifiers):
                return command.message
        return None

    def update_states(self, open_tab: Any) -> None:
        """Recompute every command's enabled and checked state."""
        result_map = {
            state_key: (state.is_enabled(open_tab), state.is_checked(open_tab))
            for state_key, state in self._states.items()
        }
        for command in self._commands.values():
            command.update_state(result_map)

    def apply_key_bindings(self, key_bindings: Iterable[tuple[str, str, Modifiers]]) -> None:
        """Rebind commands by name; unknown names are ignored."""
        for name, key, modifiers in key_bindings:
            command = self._commands.get(name)
            if command is not None:
                command.key = KeyBinding(key, modifiers)

    def filter(self, text: str) -> list[CommandWrapper]:
        """Commands whose label contains ``text``, ignoring case; all if empty."""
        needle = text.lower()
        return [c for c in self._commands.values() if not needle or needle in c.label.lower()]

    def __getitem__(self, name: str) -> CommandWrapper:
        return self._commands[name]

    def __iter__(self) -> Iterator[CommandWrapper]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


def _make_state(state_cls: type[CommandState], settings: EditorSettings,
                recent_files: Sized) -> CommandState:
    if state_cls in (LayerBordersState, LineNumberState):
        return state_cls(settings)
    if state_cls is HasRecentFilesState:
        return state_cls(recent_files)
    return state_cls()