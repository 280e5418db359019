from dataclasses import dataclass
from enum import Enum, IntEnum

NUM_SYMBOLS = 2
HALT_RULE = [-1, 0, -1]


class Symbol(IntEnum):
    ZERO = 0
    ONE = 1


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"

    @property
    def displacement(self):
        return -1 if self is Direction.LEFT else 1

    @property
    def letter(self):
        return self.value


@dataclass(frozen=True)
class StateID:
    """Index of a machine state, kept apart from plain ints on purpose."""
    index: int

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"StateID index must be an int, got {type(self.index)}.")
        if self.index < 0:
            raise ValueError(f"StateID index must be non-negative, got {self.index}.")

    def __str__(self):
        return str(self.index)


class Halt:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "HALT"

    def __str__(self):
        return "HALT"


HALT = Halt()


@dataclass(frozen=True)
class Transition:
    write: Symbol
    movement: Direction
    next_state: StateID

    def __str__(self):
        return f"{int(self.write)}{self.movement.letter}{self.next_state}"


class TuringMachine:
    """Immutable transition table: one row of two actions per state.

    Rows are indexed by state, columns by Symbol. Every table is checked when
    it is built, so a dangling next_state never reaches a running computation.
    """

    __slots__ = ("_initial_state", "_rows")

    def __init__(self, rows, initial_state=StateID(0)):
        rows = tuple(tuple(row) for row in rows)
        validate_rows(rows, initial_state)
        object.__setattr__(self, "_initial_state", initial_state)
        object.__setattr__(self, "_rows", rows)

    def __setattr__(self, name, value):
        raise AttributeError(f"TuringMachine is immutable; cannot set '{name}'.")

    def __eq__(self, other):
        if not isinstance(other, TuringMachine):
            return NotImplemented
        return self._initial_state == other._initial_state and self._rows == other._rows

    def __hash__(self):
        return hash((self._initial_state, self._rows))

    @property
    def initial_state(self):
        return self._initial_state

    @property
    def num_states(self):
        return len(self._rows)

    def lookup_action(self, state: StateID, symbol: Symbol):
        # Out-of-range states raise IndexError: a construction bug, not a runtime condition.
        return self._rows[state.index][symbol]

    def transitions(self):
        """Yield (state, symbol, action) in row order, Zero before One."""
        for index, row in enumerate(self._rows):
            for symbol in Symbol:
                yield StateID(index), symbol, row[symbol]

    def describe(self):
        lines = [f"States: {self.num_states}", f"Initial state: {self._initial_state}"]
        for index, row in enumerate(self._rows):
            cells = ", ".join(f"{int(symbol)} -> {row[symbol]}" for symbol in Symbol)
            lines.append(f"{index}: {cells}")
        return "\n".join(lines)

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f"TuringMachine(num_states={self.num_states}, initial_state={self._initial_state})"

    # === Compact Notation ===
    def to_compact(self):
        """Render in standard busy beaver notation, e.g. "1RB1LB_1LA---"."""
        if self.num_states > 26:
            raise ValueError("Compact notation supports at most 26 states.")
        groups = []
        for row in self._rows:
            parts = []
            for action in row:
                if action is HALT:
                    parts.append("---")
                else:
                    state_letter = chr(ord('A') + action.next_state.index)
                    parts.append(f"{int(action.write)}{action.movement.letter}{state_letter}")
            groups.append("".join(parts))
        return "_".join(groups)

    @classmethod
    def from_compact(cls, text):
        """Parse standard notation; any malformed group raises ValueError."""
        text = text.strip()
        if not text:
            raise ValueError("Empty machine text.")
        rows = []
        for group in text.split("_"):
            if len(group) != 3 * NUM_SYMBOLS:
                raise ValueError(f"Invalid state group: {group!r}")
            row = []
            for i in range(0, len(group), 3):
                row.append(_parse_compact_action(group[i:i + 3]))
            rows.append(row)
        return cls(rows)

    # === Ruleset Triples ===
    def serialize(self):
        arr = []
        for row in self._rows:
            for action in row:
                if action is HALT:
                    arr.append(list(HALT_RULE))
                else:
                    dir_bit = 0 if action.movement is Direction.LEFT else 1
                    arr.append([int(action.write), dir_bit, action.next_state.index])
        return arr

    @classmethod
    def from_rules(cls, rules, initial_state=StateID(0)):
        if len(rules) % NUM_SYMBOLS != 0:
            raise ValueError(f"Ruleset length {len(rules)} is not a multiple of {NUM_SYMBOLS}.")
        actions = []
        for rule in rules:
            if list(rule) == HALT_RULE:
                actions.append(HALT)
                continue
            write_symbol, dir_bit, next_state = rule
            if dir_bit not in (0, 1):
                raise ValueError(f"Invalid direction bit in rule: {rule}")
            actions.append(Transition(
                write=Symbol(write_symbol),
                movement=Direction.LEFT if dir_bit == 0 else Direction.RIGHT,
                next_state=StateID(next_state),
            ))
        rows = [actions[i:i + NUM_SYMBOLS] for i in range(0, len(actions), NUM_SYMBOLS)]
        return cls(rows, initial_state)


def _parse_compact_action(text):
    if text == "---":
        return HALT
    write_char, dir_char, state_char = text
    if write_char not in "01":
        raise ValueError(f"Invalid symbol in action: {text}")
    if dir_char not in "LR":
        raise ValueError(f"Invalid direction in action: {text}")
    if not "A" <= state_char <= "Z":
        raise ValueError(f"Invalid next state in action: {text}")
    return Transition(
        write=Symbol(int(write_char)),
        movement=Direction(dir_char),
        next_state=StateID(ord(state_char) - ord('A')),
    )


def validate_rows(rows, initial_state):
    num_states = len(rows)
    if num_states == 0:
        raise ValueError("A Turing machine needs at least one state.")
    if not isinstance(initial_state, StateID):
        raise TypeError(f"initial_state expected StateID, got {type(initial_state)}.")
    if initial_state.index >= num_states:
        raise ValueError(f"Initial state {initial_state} out of range for {num_states} states.")

    for index, row in enumerate(rows):
        if len(row) != NUM_SYMBOLS:
            raise ValueError(f"State {index} has {len(row)} actions, expected {NUM_SYMBOLS}.")
        for action in row:
            if action is HALT:
                continue
            if not isinstance(action, Transition):
                raise ValueError(f"State {index} holds a non-action: {action!r}")
            if (not isinstance(action.write, Symbol) or not isinstance(action.movement, Direction)
                    or not isinstance(action.next_state, StateID)):
                raise ValueError(f"State {index} has a malformed transition: {action!r}")
            if action.next_state.index >= num_states:
                raise ValueError(
                    f"State {index} refers to state {action.next_state}, "
                    f"but the machine has only {num_states} states."
                )
