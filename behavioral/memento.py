"""
Memento pattern: undo/redo history for a text editor.

The caretaker keeps a linear history of snapshots and a cursor. Saving after
an undo discards the snapshots ahead of the cursor, so redo never jumps into
a branch that was abandoned.
"""
from typing import List
from utils.logging_config import get_logger

logger = get_logger(__name__)


class TextEditorMemento:
    """Opaque snapshot of the editor content."""

    __slots__ = ('_state',)

    def __init__(self, state: str):
        self._state = state

    @property
    def state(self) -> str:
        return self._state

    def __repr__(self) -> str:
        return f"TextEditorMemento({self._state!r})"


class TextEditor:
    """Originator."""

    def __init__(self, content: str = ""):
        self.content = content

    def save_to_memento(self) -> TextEditorMemento:
        return TextEditorMemento(self.content)

    def restore_from_memento(self, memento: TextEditorMemento):
        self.content = memento.state


class Caretaker:
    """Owns the snapshot history of one editor."""

    def __init__(self, editor: TextEditor):
        self.editor = editor
        self._history: List[TextEditorMemento] = []
        self._cursor = -1
        self.logger = get_logger(self.__class__.__name__)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def history(self) -> List[str]:
        return [memento.state for memento in self._history]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._history) - 1

    def save(self):
        """Snapshot the editor, dropping any redo tail past the cursor."""
        dropped = len(self._history) - (self._cursor + 1)
        if dropped:
            del self._history[self._cursor + 1:]
            self.logger.debug(f"Discarded {dropped} redo snapshots")

        self._history.append(self.editor.save_to_memento())
        self._cursor = len(self._history) - 1

    def undo(self) -> bool:
        """Restore the previous snapshot; returns False at the start of history."""
        if not self.can_undo:
            return False
        self._cursor -= 1
        self.editor.restore_from_memento(self._history[self._cursor])
        return True

    def redo(self) -> bool:
        """Restore the next snapshot; returns False at the end of history."""
        if not self.can_redo:
            return False
        self._cursor += 1
        self.editor.restore_from_memento(self._history[self._cursor])
        return True


def main():
    editor = TextEditor("Initial content")
    caretaker = Caretaker(editor)

    caretaker.save()
    editor.content = "Updated content"

    caretaker.save()
    editor.content = "More changes"

    caretaker.save()
    editor.content = "Even more changes"

    print("Current content:", editor.content)

    caretaker.undo()
    print("Undone content:", editor.content)

    caretaker.undo()
    print("Undone content:", editor.content)

    caretaker.redo()
    print("Redone content:", editor.content)

    caretaker.redo()
    print("Redone content:", editor.content)


if __name__ == "__main__":
    main()
