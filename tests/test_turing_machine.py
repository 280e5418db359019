import pytest

from simulator.turing_machine import (
    HALT,
    Direction,
    Halt,
    StateID,
    Symbol,
    Transition,
    TuringMachine,
)

BB2_CHAMP = "1RB1LB_1LA---"


def fill_right_machine():
    return TuringMachine([
        [Transition(Symbol.ONE, Direction.RIGHT, StateID(0)), HALT],
    ])


def test_lookup_and_accessors():
    machine = fill_right_machine()
    assert machine.num_states == 1
    assert machine.initial_state == StateID(0)
    assert machine.lookup_action(StateID(0), Symbol.ONE) is HALT
    action = machine.lookup_action(StateID(0), Symbol.ZERO)
    assert action == Transition(Symbol.ONE, Direction.RIGHT, StateID(0))


def test_lookup_out_of_range_state_is_fatal():
    machine = fill_right_machine()
    with pytest.raises(IndexError):
        machine.lookup_action(StateID(5), Symbol.ZERO)


def test_halt_is_a_singleton():
    assert Halt() is HALT
    assert str(HALT) == "HALT"


def test_state_id_rejects_bad_values():
    with pytest.raises(ValueError):
        StateID(-1)
    with pytest.raises(TypeError):
        StateID(1.5)
    assert str(StateID(3)) == "3"
    assert StateID(2) != 2


def test_direction_displacement():
    assert Direction.LEFT.displacement == -1
    assert Direction.RIGHT.displacement == 1


def test_machine_is_immutable():
    machine = fill_right_machine()
    with pytest.raises(AttributeError):
        machine._rows = ()
    with pytest.raises(AttributeError):
        machine.initial_state = StateID(0)


def test_rows_are_copied_at_construction():
    rows = [[HALT, HALT]]
    machine = TuringMachine(rows)
    rows[0][0] = Transition(Symbol.ONE, Direction.LEFT, StateID(0))
    assert machine.lookup_action(StateID(0), Symbol.ZERO) is HALT


@pytest.mark.parametrize("rows, initial_state", [
    ([], StateID(0)),
    ([[HALT]], StateID(0)),
    ([[HALT, HALT, HALT]], StateID(0)),
    ([[HALT, Transition(Symbol.ONE, Direction.LEFT, StateID(1))]], StateID(0)),
    ([[HALT, HALT]], StateID(1)),
    ([[HALT, "1RA"]], StateID(0)),
    ([[Transition(Symbol.ONE, Direction.RIGHT, 0), HALT]], StateID(0)),
])
def test_malformed_tables_are_rejected_eagerly(rows, initial_state):
    with pytest.raises(ValueError):
        TuringMachine(rows, initial_state)


def test_describe_is_stable_and_ordered():
    machine = TuringMachine.from_compact("1RB---_0LA1RB")
    assert machine.describe() == (
        "States: 2\n"
        "Initial state: 0\n"
        "0: 0 -> 1R1, 1 -> HALT\n"
        "1: 0 -> 0L0, 1 -> 1R1"
    )
    assert str(machine) == machine.describe()


def test_transitions_order():
    machine = TuringMachine.from_compact(BB2_CHAMP)
    order = [(state.index, int(symbol)) for state, symbol, _ in machine.transitions()]
    assert order == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_compact_notation_round_trip():
    machine = TuringMachine.from_compact(BB2_CHAMP)
    assert machine.num_states == 2
    assert machine.lookup_action(StateID(1), Symbol.ONE) is HALT
    assert machine.lookup_action(StateID(0), Symbol.ONE) == Transition(Symbol.ONE, Direction.LEFT, StateID(1))
    assert machine.to_compact() == BB2_CHAMP
    assert TuringMachine.from_compact(machine.to_compact()) == machine


@pytest.mark.parametrize("text", ["", "1RB", "1XB1LB_1LA---", "2RB1LB_1LA---", "1RB1LC_1LA---", "1Rb1LB_1LA---"])
def test_compact_notation_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        TuringMachine.from_compact(text)


def test_compact_notation_needs_letters():
    machine = TuringMachine([[HALT, HALT]] * 27)
    with pytest.raises(ValueError):
        machine.to_compact()


def test_serialize_uses_ruleset_triples():
    machine = TuringMachine.from_compact(BB2_CHAMP)
    assert machine.serialize() == [[1, 1, 1], [1, 0, 1], [1, 0, 0], [-1, 0, -1]]
    assert TuringMachine.from_rules(machine.serialize()) == machine


def test_from_rules_rejects_odd_length_and_bad_direction():
    with pytest.raises(ValueError):
        TuringMachine.from_rules([[-1, 0, -1]])
    with pytest.raises(ValueError):
        TuringMachine.from_rules([[1, 2, 0], [-1, 0, -1]])
