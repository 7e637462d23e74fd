# edhistory

A small history manager for ed-like text editors. It keeps a list of labelled
snapshots of a buffer and uses a *revert* style of undo. Undoing never throws
history away. If you change an older state, the history first appends a
snapshot that reverts to that state. The new change is then recorded after it.

## Installation

```
pip install edhistory
```

## Usage

Everything lives in `edhistory.history`.

Objects kept in a `History` must subclass `Snapshot` and must support `==`.
`Snapshot` asks for one method, `create_snapshot()`, which returns a cheap copy
of the object.

Build a `History` by passing a factory that creates the initial, empty state.
That state is labelled `"Before reading in a file (empty)"` and counts as
saved.

```python
from edhistory.history import History, Snapshot, UndoIndexTooBigError


class Lines(Snapshot, list):
    def create_snapshot(self):
        return Lines(self)


history = History(Lines)
history.saved                        # True: the empty initial state counts as saved

history.current_mut("a").append("hello\n")
history.current                      # ['hello\n']
history.saved                        # False
len(history)                         # 2

history.set_viewed_i(0)              # view the initial state; returns its label
history.current_mut("a").append("x\n")
[label for label, _ in history.snapshots]
# ['Before reading in a file (empty)', 'a', 'u1', 'a']

try:
    history.set_viewed_i(99)
except UndoIndexTooBigError as err:  # a subclass of IndexError
    print(err.index, err.history_len, err.relative_redo_limit)
```

### What each member does

| Member | Kind | What it does |
| --- | --- | --- |
| `current` | property | The state at the viewed point in history. |
| `current_mut(cause)` | method | Calls `snapshot(cause)`, then returns the state at the end of history so you can change it. |
| `snapshot(cause)` | method | Adds a snapshot by hand (see below). |
| `snapshots` | property | A tuple of `(label, state)` pairs, in the order they were created. |
| `viewed_i` | property | The index of the viewed snapshot. |
| `set_viewed_i(i)` | method | Views snapshot `i` and returns its label. Raises `UndoIndexTooBigError` if no snapshot has that index. |
| `dedup_present()` | method | Drops the last snapshot if it equals the one before it. |

`snapshot(cause)` behaves differently depending on where you are in history:

- If you are viewing a past point, it first appends a revert snapshot labelled `u<steps>`. This happens even when snapshots are paused.
- Unless `dont_snapshot` is set, it then appends a snapshot labelled `cause`.

### Grouping changes

Set `history.dont_snapshot = True` to stop snapshots being created
automatically. This is useful when running a macro or script that the user sees
as one action. The usual pattern is:

1. Call `history.snapshot("cause")` once.
2. Set `dont_snapshot = True` and run the script.
3. Set `dont_snapshot = False` again.
4. Call `history.dedup_present()` to drop the snapshot if the script changed nothing.

### Saved state

- `set_saved()` marks the viewed state as saved. While `dont_snapshot` is set, it records no saved state instead.
- `set_unsaved()` forgets which state was saved.
- `saved` (property) is true when the viewed state is the saved one.
- `saved_i` (property) is the index of the saved snapshot, or `None`.

## What this package does not do

This package manages history only. It provides no editor, no command parser,
no file reading or writing, and no command-line program. The state objects you
store, and their `create_snapshot()`, are up to you.

## Running the tests

```
pip install -e .[test]
pytest
```