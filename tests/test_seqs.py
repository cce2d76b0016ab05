"""Tests for vdmrt.seqs — 1-based access, slicing and positional update."""

from __future__ import annotations

import pytest

from vdmrt import IndexOutOfRange, Map, Seq, Set, map_of, seq_of, set_of, str_seq


def test_default_is_empty() -> None:
    s: Seq[int] = Seq()
    assert s == seq_of()
    assert len(s) == 0


def test_equality() -> None:
    assert seq_of(1, 2, 3) == seq_of(1, 2, 3)


def test_str_equality() -> None:
    assert str_seq("foo") == seq_of("f", "o", "o")


def test_inequality() -> None:
    assert seq_of(1, 2, 3) != seq_of(1, 2)
    assert seq_of(1, 2) != seq_of(2, 1)


def test_hashable_as_set_member() -> None:
    assert set_of(seq_of(1, 2), seq_of(1, 2), seq_of(2, 1)).cardinality() == 2


# ─────────────────────────────────────────────────────────────────────────────
# Indexed access
# ─────────────────────────────────────────────────────────────────────────────


class TestIndexing:
    def test_get(self) -> None:
        assert seq_of(1, 2, 3).get(2) == 2

    def test_get_is_one_based(self) -> None:
        s = seq_of("a", "b", "c")
        assert s.get(1) == "a"
        assert s.get(3) == "c"

    @pytest.mark.parametrize("index", [0, -1, 4, 100])
    def test_get_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexOutOfRange):
            seq_of(1, 2, 3).get(index)

    def test_index_error_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            seq_of(1, 2, 3).get(100)

    def test_error_records_position(self) -> None:
        with pytest.raises(IndexOutOfRange) as exc_info:
            seq_of(1, 2, 3).get(100)
        assert exc_info.value.index == 100
        assert exc_info.value.length == 3

    def test_put(self) -> None:
        s = seq_of(1, 2, 3)
        s.put(2, 5)
        assert s.get(2) == 5
        assert s == seq_of(1, 5, 3)

    @pytest.mark.parametrize("index", [0, 4])
    def test_put_out_of_range(self, index: int) -> None:
        s = seq_of(1, 2, 3)
        with pytest.raises(IndexOutOfRange):
            s.put(index, 9)
        assert s == seq_of(1, 2, 3)

    def test_head(self) -> None:
        assert seq_of(1, 2, 3).head() == 1

    def test_tail(self) -> None:
        assert seq_of(1, 2, 3).tail() == seq_of(2, 3)

    def test_tail_of_singleton(self) -> None:
        assert seq_of(1).tail() == Seq()

    def test_head_of_empty(self) -> None:
        with pytest.raises(IndexOutOfRange):
            Seq().head()

    def test_tail_of_empty(self) -> None:
        with pytest.raises(IndexOutOfRange):
            Seq().tail()


# ─────────────────────────────────────────────────────────────────────────────
# Slicing
# ─────────────────────────────────────────────────────────────────────────────


class TestSubSequence:
    @pytest.fixture(autouse=True)
    def _seq(self) -> None:
        self.s = seq_of(1, 2, 2, 3, 3)

    def test_inclusive_slice(self) -> None:
        assert self.s.sub_sequence(2, 4) == seq_of(2, 2, 3)

    def test_start_after_end_is_empty(self) -> None:
        assert self.s.sub_sequence(5, 2) == Seq()

    def test_start_below_one_is_empty(self) -> None:
        assert self.s.sub_sequence(0, 3) == Seq()

    def test_end_is_clamped(self) -> None:
        assert self.s.sub_sequence(4, 99) == seq_of(3, 3)

    def test_start_past_length_is_empty(self) -> None:
        assert self.s.sub_sequence(7, 9) == Seq()

    def test_single_element(self) -> None:
        assert self.s.sub_sequence(1, 1) == seq_of(1)


# ─────────────────────────────────────────────────────────────────────────────
# Whole-sequence operations
# ─────────────────────────────────────────────────────────────────────────────


def test_elements() -> None:
    assert seq_of(1, 2, 2, 3, 3).elements() == set_of(1, 2, 3)


def test_indices() -> None:
    assert seq_of(1, 2, 2, 3, 3).indices() == set_of(1, 2, 3, 4, 5)


def test_indices_of_empty() -> None:
    assert Seq().indices() == Set()


def test_reverse() -> None:
    s = seq_of(1, 2, 3)
    assert s.reverse() == seq_of(3, 2, 1)
    assert s == seq_of(1, 2, 3)


def test_concat() -> None:
    assert seq_of(1, 2, 3).concat(seq_of(4, 5)) == seq_of(1, 2, 3, 4, 5)


def test_flatten() -> None:
    ss = seq_of(seq_of(1, 2), seq_of(3, 4), seq_of(5, 6))
    assert ss.flatten() == seq_of(1, 2, 3, 4, 5, 6)


def test_flatten_keeps_order_and_duplicates() -> None:
    ss = seq_of(seq_of(2), Seq(), seq_of(1, 2))
    assert ss.flatten() == seq_of(2, 1, 2)


def test_modify() -> None:
    assert seq_of(1, 2).modify(map_of((1, 5))) == seq_of(5, 2)


def test_modify_many_positions() -> None:
    result = seq_of(1, 2, 3, 4).modify(map_of((4, 40), (2, 20)))
    assert result == seq_of(1, 20, 3, 40)


def test_modify_does_not_touch_receiver() -> None:
    s = seq_of(1, 2)
    s.modify(map_of((2, 7)))
    assert s == seq_of(1, 2)


def test_modify_invalid_position() -> None:
    with pytest.raises(IndexOutOfRange):
        seq_of(1, 2).modify(map_of((3, 5)))


def test_modify_with_empty_map() -> None:
    assert seq_of(1, 2).modify(Map()) == seq_of(1, 2)


# ─────────────────────────────────────────────────────────────────────────────
# Character sequences
# ─────────────────────────────────────────────────────────────────────────────


def test_str_seq_counts_code_points() -> None:
    assert len(str_seq("🀜")) == 1


def test_as_string() -> None:
    assert str_seq("foo").concat(str_seq("bar")).as_string() == "foobar"


def test_hash_follows_contents() -> None:
    s = seq_of(1, 2)
    t = s.copy()
    t.put(1, 9)
    assert hash(s) == hash(seq_of(1, 2))
    assert hash(t) == hash(seq_of(9, 2))
    assert set_of(s, t) == set_of(seq_of(1, 2), seq_of(9, 2))
