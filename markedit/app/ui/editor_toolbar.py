from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QToolBar, QWidget

from markedit.engine.commands import COMMANDS, is_command_active
from markedit.engine.inspector import FormatState

# Commands that insert content rather than reflect a state at the cursor.
_MOMENTARY = {"link", "horizontal_rule"}


class EditorToolbar(QToolBar):
    """Formatting toolbar: one action per editor command, grouped with separators."""

    commandTriggered = Signal(str)
    undoRequested = Signal()
    redoRequested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Formatting", parent)
        self.setMovable(False)
        self._actions: dict[str, QAction] = {}
        self.undo_action = self._history_action("Undo", "Undo (Ctrl+Z)", self.undoRequested)
        self.redo_action = self._history_action("Redo", "Redo (Ctrl+Y)", self.redoRequested)
        self.addSeparator()
        group = None
        for command in COMMANDS:
            if group is not None and command.group != group:
                self.addSeparator()
            group = command.group
            action = QAction(command.label, self)
            action.setObjectName(f"format_{command.id}")
            tip = command.tooltip if not command.shortcut else f"{command.tooltip} ({command.shortcut})"
            action.setToolTip(tip)
            action.setCheckable(command.id not in _MOMENTARY)
            action.triggered.connect(lambda _checked=False, cid=command.id: self.commandTriggered.emit(cid))
            self.addAction(action)
            self._actions[command.id] = action

    def _history_action(self, label: str, tip: str, signal) -> QAction:
        action = QAction(label, self)
        action.setObjectName(f"history_{label.lower()}")
        action.setToolTip(tip)
        action.setEnabled(False)
        action.triggered.connect(lambda _checked=False: signal.emit())
        self.addAction(action)
        return action

    def action_for(self, command_id: str) -> QAction:
        return self._actions[command_id]

    def set_format_state(self, state: FormatState) -> None:
        for command_id, action in self._actions.items():
            if action.isCheckable():
                action.setChecked(is_command_active(state, command_id))

    def active_commands(self) -> list[str]:
        return [cid for cid, action in self._actions.items() if action.isChecked()]
