"""Providers that decide whether an editor command is enabled or checked.

The open tab handed to a state is any object shaped like this:

* ``open_tab.is_dirty``: true when the document has unsaved changes;
* ``open_tab.doc.ansi_editor``: the ANSI editor of the document, or ``None``;
* ``open_tab.doc.can_undo()``, ``can_redo()``, ``can_cut()``, ``can_copy()``
  and ``can_paste()``: the document's clipboard and history abilities;
* ``editor.buffer.palette_mode``, ``editor.buffer.use_letter_spacing`` and
  ``editor.buffer.use_aspect_ratio`` on the ANSI editor.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

PALETTE_FIXED16 = "Fixed16"


@dataclass
class EditorSettings:
    """View settings that some commands show as check marks."""

    show_layer_borders: bool = False
    show_line_numbers: bool = False


def _ansi_editor(open_tab: Any) -> Any:
    if open_tab is None:
        return None
    return open_tab.doc.ansi_editor


class CommandState:
    """Base state: always enabled, never shown with a check mark."""

    def is_enabled(self, open_tab: Any) -> bool:
        return True

    def is_checked(self, open_tab: Any) -> bool | None:
        return None


class AlwaysEnabledState(CommandState):
    """Commands that can run at any time."""


class BufferOpenState(CommandState):
    """Enabled while the open tab holds an ANSI editor."""

    def is_enabled(self, open_tab: Any) -> bool:
        return _ansi_editor(open_tab) is not None


class CanSwitchPaletteState(CommandState):
    """Enabled while the open buffer's palette is not the fixed 16 colours."""

    def is_enabled(self, open_tab: Any) -> bool:
        editor = _ansi_editor(open_tab)
        if editor is None:
            return False
        return editor.buffer.palette_mode != PALETTE_FIXED16


class LayerBordersState(CommandState):
    """Checked when layer borders are shown."""

    def __init__(self, settings: EditorSettings) -> None:
        self._settings = settings

    def is_checked(self, open_tab: Any) -> bool | None:
        return self._settings.show_layer_borders


class LineNumberState(CommandState):
    """Checked when line numbers are shown."""

    def __init__(self, settings: EditorSettings) -> None:
        self._settings = settings

    def is_checked(self, open_tab: Any) -> bool | None:
        return self._settings.show_line_numbers


class FileOpenState(CommandState):
    """Enabled while any tab is open."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None


class FileIsDirtyState(CommandState):
    """Enabled while the open tab has unsaved changes."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.is_dirty)


class HasRecentFilesState(CommandState):
    """Enabled while the recent-files list is not empty."""

    def __init__(self, recent_files: Sized) -> None:
        self._recent_files = recent_files

    def is_enabled(self, open_tab: Any) -> bool:
        return len(self._recent_files) > 0


class CanUndoState(CommandState):
    """Enabled while the open document can undo."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.doc.can_undo())


class CanRedoState(CommandState):
    """Enabled while the open document can redo."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.doc.can_redo())


class CanCutState(CommandState):
    """Enabled while the open document can cut."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.doc.can_cut())


class CanCopyState(CommandState):
    """Enabled while the open document can copy."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.doc.can_copy())


class CanPasteState(CommandState):
    """Enabled while the open document can paste."""

    def is_enabled(self, open_tab: Any) -> bool:
        return open_tab is not None and bool(open_tab.doc.can_paste())


class LGAFontState(CommandState):
    """Checked when the open buffer uses 9 pixel letter spacing."""

    def is_enabled(self, open_tab: Any) -> bool:
        return _ansi_editor(open_tab) is not None

    def is_checked(self, open_tab: Any) -> bool | None:
        editor = _ansi_editor(open_tab)
        if editor is None:
            return False
        return bool(editor.buffer.use_letter_spacing)


class AspectRatioState(CommandState):
    """Checked when the open buffer is shown with aspect ratio correction."""

    def is_enabled(self, open_tab: Any) -> bool:
        return _ansi_editor(open_tab) is not None

    def is_checked(self, open_tab: Any) -> bool | None:
        editor = _ansi_editor(open_tab)
        if editor is None:
            return False
        return bool(editor.buffer.use_aspect_ratio)