# ansikeys

A registry of editor commands for a text-mode art editor. Every command has
a name, a menu label, a message that is sent when the command fires, an
optional keyboard shortcut and a state. The state decides whether the
command is enabled and whether it is shown with a check mark.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

`ansikeys.commands.Commands` holds every command in menu order, keyed by
name. It can be indexed by name, iterated and sized:

```python
from ansikeys.commands import Commands, Modifiers
from ansikeys.states import EditorSettings

settings = EditorSettings()
commands = Commands(settings, recent_files=[], translate=lambda key: key)

save = commands["save"]
print(save.shortcut_text())      # Ctrl+S
print(save.message)              # SaveFile
print(len(commands))
```

All three constructor arguments are optional. `settings` defaults to a fresh
`EditorSettings`, `recent_files` to an empty list (any sized object will do)
and `translate` to a function that gives back the translation key, such as
`"menu-save"`, unchanged. The result of `translate` becomes each command's
`label`.

Each entry is a `CommandWrapper` with the fields `name`, `message`, `label`,
`state_key`, `key` (a `KeyBinding` or `None`), `is_enabled` and
`is_checked`. The static table behind it is `COMMAND_SPECS`, a tuple of
`CommandSpec` records.

## Key bindings

A `KeyBinding` is a key name (`"S"`, `"ArrowUp"`, `"Delete"`, ...) and a
`Modifiers` value with `alt`, `ctrl` and `shift` flags.
`Modifiers.parse` reads names joined by `+`, such as `"Ctrl+Shift"`,
ignoring case and accepting `Control` for `Ctrl`. An empty string or
`"none"` gives no modifiers, and an unknown name raises `ValueError`.

`KeyBinding.shortcut_text()` gives the menu text of a shortcut. Modifiers
come in the order `Shift+Alt+Ctrl+`, and arrow keys are shown as `Up`,
`Down`, `Left` and `Right`. For example, redo is `Shift+Ctrl+Z`.

Matching a key press:

```python
message = commands.check("S", Modifiers.parse("Ctrl"))   # "SaveFile"
```

`check` walks the commands in menu order and returns the message of the
first one whose binding equals the key and modifiers exactly. It returns
`None` when no binding matches. `CommandWrapper.is_pressed(key, modifiers)`
does the same test for a single command.

`Commands.default_keybindings()` lists the built-in bindings as
`(name, key, modifiers)` tuples. `apply_key_bindings` takes tuples of the
same shape and replaces the bindings of the named commands. Names it does
not know are ignored.

`filter(text)` returns the commands whose label contains `text`, ignoring
case. An empty text returns every command.

## States

`ansikeys.states` holds the state classes. `CommandState` is the base, and
it is always enabled and never checked. The others are
`AlwaysEnabledState`, `BufferOpenState`, `CanSwitchPaletteState`,
`LayerBordersState`, `LineNumberState`, `FileOpenState`,
`FileIsDirtyState`, `HasRecentFilesState`, `CanUndoState`, `CanRedoState`,
`CanCutState`, `CanCopyState`, `CanPasteState`, `LGAFontState` and
`AspectRatioState`. `EditorSettings` holds the `show_layer_borders` and
`show_line_numbers` toggles that the layer-border and line-number commands
show as check marks.

`Commands.update_states(open_tab)` asks each state about the open tab, which
may be `None`, and stores the resulting `is_enabled` and `is_checked` on
every command. The open tab can be any object with this shape:

- `open_tab.is_dirty`
- `open_tab.doc.ansi_editor`, which is an editor or `None`
- `open_tab.doc.can_undo()`, `can_redo()`, `can_cut()`, `can_copy()` and
  `can_paste()`
- on the editor, `buffer.palette_mode` (`"Fixed16"` disables palette
  switching), `buffer.use_letter_spacing` and `buffer.use_aspect_ratio`

## What this package does not do

It draws no menus, buttons or settings screens and reads no keyboard events
itself. The caller passes key presses to `check` and renders the commands.
It ships no translations, so labels are whatever `translate` returns. It
does not save or load key bindings or settings. It does not act on the
messages it returns either, since opening files, editing buffers and the
rest are left to the caller.