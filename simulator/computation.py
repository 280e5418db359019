from simulator.tape import Tape
from simulator.turing_machine import HALT, TuringMachine


class Computation:
    """One run of a TuringMachine over its own blank tape.

    The machine is only ever read, so several computations may share it.
    ``step`` (and ``run``, which calls it) is the only mutator.
    """

    def __init__(self, turing_machine: TuringMachine):
        self._turing_machine = turing_machine
        self._tape = Tape()
        self._tape_head = 0
        self._cur_state = turing_machine.initial_state
        self._is_halted = False
        self._steps = 0

    @classmethod
    def start(cls, turing_machine: TuringMachine):
        return cls(turing_machine)

    @property
    def tape(self):
        return self._tape

    @property
    def tape_head_position(self):
        return self._tape_head

    @property
    def current_state(self):
        return self._cur_state

    @property
    def is_halted(self):
        return self._is_halted

    @property
    def turing_machine(self):
        return self._turing_machine

    @property
    def steps(self):
        """Transitions applied so far; the halting lookup is not counted."""
        return self._steps

    def step(self):
        if self._is_halted:
            return True

        symbol = self._tape.read_at(self._tape_head)
        action = self._turing_machine.lookup_action(self._cur_state, symbol)

        if action is HALT:
            self._is_halted = True
            return True

        # Write happens at the pre-move position
        self._tape.write_at(self._tape_head, action.write)
        self._tape_head += action.movement.displacement
        self._cur_state = action.next_state
        self._steps += 1
        return False

    def run(self, max_steps=10000):
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}.")
        for _ in range(max_steps):
            if self.step():
                break
        return self._is_halted

    def __repr__(self):
        return (
            f"Computation(state={self._cur_state}, head={self._tape_head}, "
            f"steps={self._steps}, halted={self._is_halted})"
        )
