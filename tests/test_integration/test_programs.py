"""Integration tests: whole programs through the full pipeline."""
import pytest

from bfi.errors import PointerOutOfBounds, StepLimitExceeded
from bfi.runtime.environment import Environment
from bfi.runtime.executor import EofPolicy, ExecutionConfig
from bfi.runtime.interpreter import Interpreter


class TestEndToEnd:
    """Programs with known output."""

    def test_hello_world(self, interpreter, hello_world):
        result = interpreter.interpret(hello_world)
        assert result.success
        assert result.output == b"Hello World!\n"

    def test_multiply_prints_sixteen(self, interpreter):
        result = interpreter.interpret("++++[>++++<-]>.", Environment.from_bytes(b""))
        assert result.success
        assert result.output == bytes([16])
        assert len(result.output) == 1

    def test_commented_program(self, interpreter, commented_program):
        assert interpreter.run(commented_program) == b"\x10"

    def test_single_input_no_output(self, interpreter):
        env = Environment.from_bytes(b"A")
        result = interpreter.interpret(",", env)
        assert result.success
        assert result.output == b""
        assert env.source.position == 1
        assert result.final_state.tape[0] == 65

    def test_cat_stops_at_zero_byte(self, interpreter, cat_program):
        assert interpreter.run(cat_program, b"abc\x00ignored") == b"abc"

    def test_cat_with_zero_eof(self, cat_program):
        interpreter = Interpreter(ExecutionConfig(eof_policy=EofPolicy.ZERO))
        assert interpreter.run(cat_program, b"echo me") == b"echo me"

    def test_cat_with_error_eof(self, interpreter, cat_program):
        result = interpreter.interpret(cat_program, Environment.from_bytes(b"xy"))
        assert not result.success
        assert result.error_kind == "InputExhausted"
        assert result.output == b"xy"

    def test_reverse_input(self):
        """Read until EOF (zero policy) then print in reverse."""
        interpreter = Interpreter(ExecutionConfig(eof_policy="zero"))
        assert interpreter.run(">,[>,]<[.<]", b"abc") == b"cba"

    def test_add_two_digits(self, interpreter):
        # '3' + '4' -> '7'
        program = ",>,[<+>-]<------------------------------------------------."
        assert interpreter.run(program, b"34") == b"7"

    def test_print_every_byte_value(self, interpreter):
        output = interpreter.run(".+[.+]")
        assert output == bytes(range(256))


class TestNonTermination:
    """Programs that never halt must be caught by a step budget."""

    def test_empty_loop_on_nonzero_cell(self):
        interpreter = Interpreter(ExecutionConfig(max_steps=50_000))
        with pytest.raises(StepLimitExceeded):
            interpreter.run("+[]")

    @pytest.mark.parametrize("budget", [10, 1000, 100_000])
    def test_does_not_halt_within_any_budget(self, budget):
        result = Interpreter(ExecutionConfig(max_steps=budget)).interpret("+[]")
        assert result.error_kind == "StepLimitExceeded"
        assert result.steps == budget

    def test_code_after_infinite_loop_never_runs(self):
        result = Interpreter(ExecutionConfig(max_steps=50_000)).interpret("+[]-")
        assert result.error_kind == "StepLimitExceeded"

    def test_terminating_program_within_budget(self):
        """An empty loop on a zero cell is skipped, so the program halts."""
        result = Interpreter(ExecutionConfig(max_steps=50_000)).interpret("[]-")
        assert result.success
        assert result.steps == 2


class TestPointerBounds:
    def test_scan_left_off_tape(self, interpreter):
        with pytest.raises(PointerOutOfBounds):
            interpreter.run("+[<+]")

    def test_small_tape(self):
        interpreter = Interpreter(ExecutionConfig(tape_size=3))
        with pytest.raises(PointerOutOfBounds) as exc_info:
            interpreter.run("+[>+]")
        assert exc_info.value.pointer == 3
