import numpy as np

from simulator.turing_machine import (
    HALT,
    NUM_SYMBOLS,
    Direction,
    StateID,
    Symbol,
    Transition,
    TuringMachine,
)

DIRECTIONS = (Direction.LEFT, Direction.RIGHT)
SYMBOLS = (Symbol.ZERO, Symbol.ONE)


def make_rng(seed=None):
    """Seeded numpy Generator; the same seed always yields the same machines."""
    return np.random.default_rng(seed)


def random_action(rng, num_states):
    # Drawing num_states itself stands for HALT, so it comes up with probability 1/(num_states+1)
    next_state_id = int(rng.integers(0, num_states + 1))
    if next_state_id == num_states:
        return HALT
    direction = DIRECTIONS[int(rng.integers(0, 2))]
    new_symbol = SYMBOLS[int(rng.integers(0, 2))]
    return Transition(write=new_symbol, movement=direction, next_state=StateID(next_state_id))


def random_turing_machine(rng, num_states):
    """Sample every (state, symbol) cell uniformly; initial state is always 0."""
    if num_states < 1:
        raise ValueError(f"num_states must be at least 1, got {num_states}.")

    transition_rules = []
    for _ in range(num_states):
        transition_rules.append([random_action(rng, num_states) for _ in range(NUM_SYMBOLS)])

    return TuringMachine(transition_rules, initial_state=StateID(0))
