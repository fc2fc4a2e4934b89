"""Test fixtures for the bfi test suite."""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bfi.runtime.environment import Environment
from bfi.runtime.executor import Executor, ExecutionConfig
from bfi.runtime.interpreter import Interpreter


HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)

# Echo input until a zero byte (or EOF under the zero policy)
CAT = ",[.,]"


@pytest.fixture
def hello_world() -> str:
    """Program printing 'Hello World!\\n'."""
    return HELLO_WORLD


@pytest.fixture
def cat_program() -> str:
    return CAT


@pytest.fixture
def commented_program() -> str:
    """A program with comments, whitespace and a nested loop."""
    return """
    Multiply 4 by 4 into cell 1
    ++++ [ > ++++ < - ]   move to the result
    > .                   and print it (byte 16)
    """


@pytest.fixture
def interpreter() -> Interpreter:
    return Interpreter()


@pytest.fixture
def bounded_interpreter() -> Interpreter:
    """Interpreter with a step budget, for programs that may not terminate."""
    return Interpreter(ExecutionConfig(max_steps=10_000))


@pytest.fixture
def executor() -> Executor:
    return Executor()


@pytest.fixture
def empty_env() -> Environment:
    return Environment.from_bytes(b"")
