"""Snapshot based undo history for editor buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, Tuple, TypeVar

__all__ = ["Snapshot", "UndoIndexTooBigError", "History"]

INITIAL_LABEL = "Before reading in a file (empty)"


class Snapshot(ABC):
    """A state that can produce a cheap copy of itself for the history."""

    @abstractmethod
    def create_snapshot(self) -> "Snapshot":
        """Return a memory efficient copy of this state.

        Mutating the copy may affect the original, depending on the
        implementation.
        """


T = TypeVar("T", bound=Snapshot)


class UndoIndexTooBigError(IndexError):
    """Raised when asked to view a history index that holds no snapshot."""

    def __init__(self, index: int, history_len: int, relative_redo_limit: int) -> None:
        self.index = index
        self.history_len = history_len
        self.relative_redo_limit = relative_redo_limit
        super().__init__(
            f"Undo index {index} is too big: history holds {history_len} "
            f"snapshots (at most {relative_redo_limit} steps can be redone)"
        )


class History(Generic[T]):
    """Linear history of snapshots with revert-style undo.

    Mutable access through :meth:`current_mut` creates snapshots
    automatically. Setting :attr:`dont_snapshot` pauses snapshot creation,
    except for the revert snapshot created when modifying a viewed point
    in the past.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._snapshots: list[Tuple[str, T]] = [(INITIAL_LABEL, factory())]
        self._viewed_i = 0
        self._saved_i: Optional[int] = 0
        self.dont_snapshot = False

    @property
    def saved(self) -> bool:
        """True when the viewed state is the one last marked as saved."""
        return self._saved_i == self._viewed_i

    def set_saved(self) -> None:
        """Mark the viewed state as saved.

        While :attr:`dont_snapshot` is set no saved state is recorded, since
        no snapshot is sure to match what was saved.
        """
        self._saved_i = None if self.dont_snapshot else self._viewed_i

    def set_unsaved(self) -> None:
        """Declare that no known state is saved."""
        self._saved_i = None

    @property
    def current(self) -> T:
        """The state at the currently viewed point in history."""
        return self._snapshots[self._viewed_i][1]

    def current_mut(self, modification_cause: str) -> T:
        """Snapshot as needed and return the state at the end of history for mutation."""
        self.snapshot(modification_cause)
        return self._snapshots[self._viewed_i][1]

    def _push_snapshot(self, label: str) -> None:
        state = self._snapshots[self._viewed_i][1].create_snapshot()
        self._snapshots.append((label, state))
        self._viewed_i = len(self._snapshots) - 1

    def snapshot(self, modification_cause: str) -> None:
        """Add a snapshot labelled with what causes the coming change.

        If a past point is viewed, a revert snapshot labelled ``u<steps>`` is
        first added at the end of history, even when snapshots are paused.
        """
        if self._viewed_i < len(self._snapshots) - 1:
            steps = max(len(self._snapshots) - (self._viewed_i + 1), 0)
            self._push_snapshot(f"u{steps}")
        if not self.dont_snapshot:
            self._push_snapshot(modification_cause)

    def dedup_present(self) -> None:
        """Drop the last snapshot if it equals the one before it."""
        if len(self._snapshots) >= 2 and self._snapshots[-1][1] == self._snapshots[-2][1]:
            self._snapshots.pop()
            self._viewed_i = len(self._snapshots) - 1

    @property
    def snapshots(self) -> Tuple[Tuple[str, T], ...]:
        """All snapshots in creation order, each paired with its cause."""
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def saved_i(self) -> Optional[int]:
        """Index of the snapshot believed saved, or None."""
        return self._saved_i

    @property
    def viewed_i(self) -> int:
        """Index of the currently viewed snapshot."""
        return self._viewed_i

    def set_viewed_i(self, new_i: int) -> str:
        """View the snapshot at ``new_i`` and return its modification cause."""
        if 0 <= new_i < len(self._snapshots):
            self._viewed_i = new_i
            return self._snapshots[new_i][0]
        raise UndoIndexTooBigError(
            index=new_i,
            history_len=len(self._snapshots),
            relative_redo_limit=len(self._snapshots) - self._viewed_i - 1,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(len={len(self._snapshots)}, "
            f"viewed_i={self._viewed_i}, saved_i={self._saved_i}, "
            f"dont_snapshot={self.dont_snapshot})"
        )