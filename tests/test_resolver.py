"""Test the loop resolver (resolve, check_loops)."""
import pytest

from bfi.errors import LoopStructureError, UnmatchedLoopClose, UnmatchedLoopOpen
from bfi.lexer import Instruction, tokenize
from bfi.resolver import check_loops, resolve


def _bracket_indices(instructions):
    return {
        i for i, ins in enumerate(instructions)
        if ins in (Instruction.LOOP_OPEN, Instruction.LOOP_CLOSE)
    }


class TestResolve:
    """Tests for resolve() on well-bracketed programs."""

    def test_no_loops(self):
        assert resolve(tokenize("+++>.")) == {}

    def test_empty_program(self):
        assert resolve(()) == {}

    def test_single_loop(self):
        assert resolve(tokenize("+[-]")) == {1: 3, 3: 1}

    def test_nested_loops(self):
        jumps = resolve(tokenize("[[]]"))
        assert jumps == {0: 3, 3: 0, 1: 2, 2: 1}

    def test_sibling_loops(self):
        jumps = resolve(tokenize("[][]"))
        assert jumps == {0: 1, 1: 0, 2: 3, 3: 2}

    @pytest.mark.parametrize("source", [
        "[]",
        "+[>+[-]<-]",
        "[[[]][]]",
        "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.",
    ])
    def test_mapping_is_symmetric_and_complete(self, source):
        instructions = tokenize(source)
        jumps = resolve(instructions)

        assert set(jumps) == _bracket_indices(instructions)
        for a, b in jumps.items():
            assert jumps[b] == a
            if instructions[a] is Instruction.LOOP_OPEN:
                assert b > a
                assert instructions[b] is Instruction.LOOP_CLOSE


class TestResolveErrors:
    """Tests for unbalanced programs."""

    def test_unmatched_open(self):
        with pytest.raises(UnmatchedLoopOpen) as exc_info:
            resolve(tokenize("+[>+"))
        assert exc_info.value.index == 1

    def test_unmatched_open_reports_earliest(self):
        with pytest.raises(UnmatchedLoopOpen) as exc_info:
            resolve(tokenize("[[[]"))
        assert exc_info.value.index == 0

    def test_unmatched_close(self):
        with pytest.raises(UnmatchedLoopClose) as exc_info:
            resolve(tokenize("+]"))
        assert exc_info.value.index == 1

    def test_unmatched_close_after_balanced_loop(self):
        with pytest.raises(UnmatchedLoopClose) as exc_info:
            resolve(tokenize("[]]["))
        assert exc_info.value.index == 2

    def test_errors_share_base_class(self):
        with pytest.raises(LoopStructureError):
            resolve(tokenize("]"))
        with pytest.raises(LoopStructureError):
            resolve(tokenize("["))

    def test_error_kind_and_message(self):
        with pytest.raises(UnmatchedLoopClose) as exc_info:
            resolve(tokenize("]"))
        err = exc_info.value
        assert err.kind == "UnmatchedLoopClose"
        assert "instruction 0" in str(err)
        assert err.to_dict() == {"kind": "UnmatchedLoopClose", "message": err.message, "index": 0}


class TestCheckLoops:
    """Tests for check_loops()."""

    def test_valid_program(self):
        assert check_loops(tokenize("+[-]")) == []

    def test_reports_every_error(self):
        errors = check_loops(tokenize("]+[[-]]]["))
        kinds = [(type(e), e.index) for e in errors]
        assert kinds == [
            (UnmatchedLoopClose, 0),
            (UnmatchedLoopClose, 7),
            (UnmatchedLoopOpen, 8),
        ]

    @pytest.mark.parametrize("source", ["]", "[", "[]][", "[[]", "]]"])
    def test_resolve_raises_first_reported_error(self, source):
        instructions = tokenize(source)
        first = check_loops(instructions)[0]
        with pytest.raises(LoopStructureError) as exc_info:
            resolve(instructions)
        assert type(exc_info.value) is type(first)
        assert exc_info.value.index == first.index
