import pytest

from edhistory.history import History, Snapshot, UndoIndexTooBigError


class Lines(list, Snapshot):
    def create_snapshot(self):
        return Lines(self)


def make_history():
    return History(Lines)


def test_new_history_is_saved_with_one_empty_snapshot():
    h = make_history()
    assert len(h) == 1
    assert h.saved
    assert h.saved_i == 0
    assert h.viewed_i == 0
    assert h.current == []
    assert h.snapshots[0][0] == "Before reading in a file (empty)"


def test_current_mut_creates_tagged_snapshot_and_unsaves():
    h = make_history()
    h.current_mut("initial load").append("a\n")
    assert len(h) == 2
    assert h.viewed_i == 1
    assert h.snapshots[1][0] == "initial load"
    assert h.current == ["a\n"]
    assert not h.saved
    # earlier snapshot untouched
    assert h.snapshots[0][1] == []


def test_set_saved_then_modify():
    h = make_history()
    h.current_mut("initial load").append("a\n")
    h.set_saved()
    assert h.saved
    assert h.saved_i == 1
    h.current_mut("1d").clear()
    assert not h.saved
    assert h.saved_i == 1


def test_set_unsaved():
    h = make_history()
    h.set_unsaved()
    assert h.saved_i is None
    assert not h.saved


def test_undo_by_viewing_and_revert_snapshot_on_modify():
    h = make_history()
    h.current_mut("initial load").extend(["a\n", "b\n"])
    h.set_saved()
    h.current_mut("1d").pop(0)
    label = h.set_viewed_i(1)
    assert label == "initial load"
    assert h.saved
    assert h.current == ["a\n", "b\n"]
    h.current_mut("3d").pop()
    tags = [tag for tag, _ in h.snapshots[2:]]
    assert tags == ["1d", "u1", "3d"]
    assert h.current == ["a\n"]
    assert h.viewed_i == len(h) - 1


def test_revert_snapshot_created_even_when_snapshots_paused():
    h = make_history()
    h.current_mut("initial load").append("x\n")
    h.set_viewed_i(0)
    h.dont_snapshot = True
    h.current_mut("ignored").append("y\n")
    assert [tag for tag, _ in h.snapshots] == [
        "Before reading in a file (empty)",
        "initial load",
        "u1",
    ]
    assert h.current == ["y\n"]


def test_dont_snapshot_skips_snapshot_creation():
    h = make_history()
    h.dont_snapshot = True
    h.current_mut("ignored").append("a\n")
    assert len(h) == 1
    assert h.current == ["a\n"]


def test_set_saved_with_dont_snapshot_marks_unsaved():
    h = make_history()
    h.dont_snapshot = True
    h.set_saved()
    assert h.saved_i is None
    assert not h.saved


def test_dedup_present_removes_identical_snapshot():
    h = make_history()
    h.current_mut("initial load").append("a\n")
    h.snapshot("macro")
    assert len(h) == 3
    h.dedup_present()
    assert len(h) == 2
    assert h.viewed_i == 1


def test_dedup_present_keeps_differing_snapshot():
    h = make_history()
    h.current_mut("initial load").append("a\n")
    h.current_mut("macro").append("b\n")
    h.dedup_present()
    assert len(h) == 3
    assert h.current == ["a\n", "b\n"]


def test_dedup_present_with_single_snapshot_keeps_it():
    h = make_history()
    h.dedup_present()
    assert len(h) == 1
    assert h.viewed_i == 0


def test_set_viewed_i_too_big_raises_with_details():
    h = make_history()
    h.current_mut("initial load").append("a\n")
    h.set_viewed_i(0)
    with pytest.raises(UndoIndexTooBigError) as info:
        h.set_viewed_i(2)
    err = info.value
    assert err.index == 2
    assert err.history_len == len(h)
    assert err.relative_redo_limit == len(h) - h.viewed_i - 1
    assert h.viewed_i == 0


def test_set_viewed_i_rejects_negative_index():
    h = make_history()
    with pytest.raises(UndoIndexTooBigError):
        h.set_viewed_i(-1)
    assert h.viewed_i == 0


def test_snapshots_is_not_a_live_view():
    h = make_history()
    snaps = h.snapshots
    h.current_mut("change").append("a\n")
    assert len(snaps) == 1
    assert len(h.snapshots) == len(h)


def test_snapshot_base_class_is_abstract():
    with pytest.raises(TypeError):
        Snapshot()