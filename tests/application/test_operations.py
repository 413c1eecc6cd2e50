from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tally_cli.application.operations import (
    NOP_MESSAGE,
    OPERATIONS,
    completion_value,
    decrement,
    describe_args,
    describe_verbosity,
    increment,
    run_operation,
    split,
)
from tally_cli.domain.config import Operation, OperationKind

NUMBERS = st.integers(min_value=-1_000, max_value=1_000)


class Recorder:
    """Collect echo calls into the text a terminal would show."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def __call__(self, message: str = "", nl: bool = True) -> None:
        self.chunks.append(message + ("\n" if nl else ""))

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@given(st.integers(min_value=0, max_value=1_000))
def test_increment_emits_n_values(number: int) -> None:
    assert list(increment(number)) == list(range(number))


@given(st.integers(min_value=0, max_value=1_000))
def test_decrement_emits_n_values_descending(number: int) -> None:
    values = list(decrement(number))
    assert len(values) == number
    assert values == sorted(values, reverse=True)
    if number:
        assert values[0] == number and values[-1] == 1


@given(st.integers(min_value=1, max_value=2**31 - 1))
def test_split_emits_log2_plus_one_values(number: int) -> None:
    values = list(split(number))
    assert len(values) == number.bit_length()
    assert values[0] == number
    assert values[-1] == 1
    assert all(later == earlier // 2 for earlier, later in zip(values, values[1:]))


@given(st.integers(max_value=0))
def test_non_positive_inputs_emit_nothing(number: int) -> None:
    assert list(increment(number)) == []
    assert list(decrement(number)) == []
    assert list(split(number)) == []


def test_split_of_ten() -> None:
    assert list(split(10)) == [10, 5, 2, 1]


def test_operations_cover_every_kind() -> None:
    assert set(OPERATIONS) == set(OperationKind)


@given(NUMBERS)
def test_completion_value(number: int) -> None:
    assert completion_value(Operation(OperationKind.INCREMENT, number)) == number
    assert completion_value(Operation(OperationKind.DECREMENT, number)) == 0
    assert completion_value(Operation(OperationKind.SPLIT, number)) == 0


def test_run_increment_verbose() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.INCREMENT, 3), 1, echo)
    assert echo.text == "0..1..2..3 done!\n"


def test_run_increment_quiet() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.INCREMENT, 3), 0, echo)
    assert echo.text == "3 done!\n"


def test_run_decrement_verbose() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.DECREMENT, 3), 2, echo)
    assert echo.text == "3..2..1..0 done!\n"


def test_run_split_verbose() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.SPLIT, 10), 1, echo)
    assert echo.text == "10..5..2..1..0 done!\n"


def test_run_split_negative_finishes_immediately() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.SPLIT, -8), 3, echo)
    assert echo.text == "0 done!\n"


def test_run_increment_negative_reports_target() -> None:
    echo = Recorder()
    run_operation(Operation(OperationKind.INCREMENT, -2), 1, echo)
    assert echo.text == "-2 done!\n"


def test_run_without_operation_prints_nop() -> None:
    echo = Recorder()
    run_operation(None, 2, echo)
    assert echo.text == NOP_MESSAGE + "\n"


def test_describe_verbosity_levels() -> None:
    assert describe_verbosity(0) == "Basic logging"
    assert describe_verbosity(1) == "Detailed logging"
    assert describe_verbosity(2) == "All logging"
    assert describe_verbosity(3) == "You can't get crazier than this"
    assert describe_verbosity(250) == "You can't get crazier than this"


def test_describe_args() -> None:
    assert describe_args(None) == "No args passed"
    assert describe_args(()) == "Arg vec: []"
    assert describe_args(("a", "b")) == 'Arg vec: ["a", "b"]'
    assert describe_args(('say "hi"',)) == 'Arg vec: ["say \\"hi\\""]'
