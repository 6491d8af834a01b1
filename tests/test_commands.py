from types import SimpleNamespace

import pytest

from ansikeys.commands import (
    ALT,
    ALT_CTRL,
    COMMAND_SPECS,
    CTRL,
    CTRL_SHIFT,
    NONE,
    Commands,
    KeyBinding,
    Modifiers,
)
from ansikeys.states import EditorSettings


def make_tab(editor=True, dirty=False):
    ansi_editor = None
    if editor:
        buffer = SimpleNamespace(palette_mode="Free", use_letter_spacing=True,
                                 use_aspect_ratio=False)
        ansi_editor = SimpleNamespace(buffer=buffer)
    doc = SimpleNamespace(
        ansi_editor=ansi_editor,
        can_undo=lambda: True,
        can_redo=lambda: False,
        can_cut=lambda: False,
        can_copy=lambda: True,
        can_paste=lambda: False,
    )
    return SimpleNamespace(doc=doc, is_dirty=dirty)


def test_modifiers_parse():
    assert Modifiers.parse("Ctrl+Shift") == CTRL_SHIFT
    assert Modifiers.parse("alt+control") == ALT_CTRL
    assert Modifiers.parse("") == NONE
    assert Modifiers.parse("none") == NONE
    assert Modifiers.parse("Alt") == ALT


def test_modifiers_parse_rejects_unknown():
    with pytest.raises(ValueError):
        Modifiers.parse("Ctrl+Hyper")


def test_shortcut_text_order():
    assert KeyBinding("Z", CTRL_SHIFT).shortcut_text() == "Shift+Ctrl+Z"
    assert KeyBinding("ArrowUp", ALT_CTRL).shortcut_text() == "Alt+Ctrl+Up"
    assert KeyBinding("Escape", NONE).shortcut_text() == "Escape"


def test_commands_follow_spec_order():
    commands = Commands()
    assert [c.name for c in commands] == [s.name for s in COMMAND_SPECS]
    assert len(commands) == len(COMMAND_SPECS)
    assert len({c.name for c in commands}) == len(commands)


def test_command_fields():
    save = Commands()["save"]
    assert save.message == "SaveFile"
    assert save.label == "menu-save"
    assert save.key == KeyBinding("S", CTRL)
    assert Commands()["export"].key is None
    assert Commands()["export"].shortcut_text() is None


def test_unknown_command_raises():
    with pytest.raises(KeyError):
        Commands()["no_such_command"]


def test_translate_is_applied():
    commands = Commands(translate=str.upper)
    assert commands["save"].label == "MENU-SAVE"
    assert commands["clear_selection"].label == "MENU-DELETE_ROW"


def test_check_finds_messages():
    commands = Commands()
    assert commands.check("S", CTRL) == "SaveFile"
    assert commands.check("S", CTRL_SHIFT) == "SaveFileAs"
    assert commands.check("Z", CTRL_SHIFT) == "Redo"
    assert commands.check("Escape", NONE) == "ClearSelection"
    assert commands.check("S", NONE) is None


def test_check_first_binding_wins():
    commands = Commands()
    assert commands["erase_column"].key == commands["erase_row"].key
    assert commands.check("E", ALT) == "EraseRow"


def test_default_keybindings_match_commands():
    bindings = Commands.default_keybindings()
    assert ("save", "S", CTRL) in bindings
    assert all(name != "export" for name, _, _ in bindings)
    commands = Commands()
    for name, key, modifiers in bindings:
        assert commands[name].key == KeyBinding(key, modifiers)
    bound = {c.name for c in commands if c.key is not None}
    assert bound == {name for name, _, _ in bindings}


def test_apply_key_bindings():
    commands = Commands()
    commands.apply_key_bindings([("save", "F2", NONE), ("unknown", "X", CTRL)])
    assert commands["save"].key == KeyBinding("F2", NONE)
    assert commands.check("F2", NONE) == "SaveFile"
    assert commands.check("S", CTRL) is None
    assert commands["undo"].key == KeyBinding("Z", CTRL)


def test_apply_default_bindings_round_trip():
    commands = Commands()
    commands.apply_key_bindings([(name, "F1", NONE) for name, _, _ in Commands.default_keybindings()])
    commands.apply_key_bindings(Commands.default_keybindings())
    for name, key, modifiers in Commands.default_keybindings():
        assert commands[name].key == KeyBinding(key, modifiers)


def test_update_states_without_tab():
    settings = EditorSettings(show_layer_borders=True, show_line_numbers=False)
    commands = Commands(settings=settings, recent_files=[])
    commands.update_states(None)
    assert commands["new_file"].is_enabled is True
    assert commands["save"].is_enabled is False
    assert commands["export"].is_enabled is False
    assert commands["clear_recent_open"].is_enabled is False
    assert commands["show_layer_borders"].is_checked is True
    assert commands["show_line_numbers"].is_checked is False
    assert commands["lga_font"].is_checked is False
    assert commands["new_file"].is_checked is None


def test_update_states_with_tab():
    commands = Commands(recent_files=["art.ans"])
    commands.update_states(make_tab(dirty=True))
    assert commands["save"].is_enabled is True
    assert commands["save_as"].is_enabled is True
    assert commands["export"].is_enabled is True
    assert commands["undo"].is_enabled is True
    assert commands["redo"].is_enabled is False
    assert commands["copy"].is_enabled is True
    assert commands["paste"].is_enabled is False
    assert commands["select_palette"].is_enabled is True
    assert commands["clear_recent_open"].is_enabled is True
    assert commands["lga_font"].is_checked is True
    assert commands["aspect_ratio"].is_checked is False


def test_update_states_sees_setting_changes():
    settings = EditorSettings()
    commands = Commands(settings=settings)
    commands.update_states(None)
    before = commands["show_line_numbers"].is_checked
    settings.show_line_numbers = not settings.show_line_numbers
    commands.update_states(None)
    assert commands["show_line_numbers"].is_checked is (not before)


def test_filter():
    commands = Commands()
    assert [c.name for c in commands.filter("ZOOM")] == ["zoom_reset", "zoom_in", "zoom_out"]
    assert len(commands.filter("")) == len(commands)
    assert commands.filter("no-such-label") == []
    assert all("undo" in c.label.lower() for c in commands.filter("Undo"))