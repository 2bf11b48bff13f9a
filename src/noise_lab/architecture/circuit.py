"""
Circuit Grid
============

Immutable model of the circuit editor: an ``n_qubits × max_time_steps``
grid where each cell holds at most one gate.

Every edit returns a new ``Circuit``; nothing is mutated in place, so a
circuit handed to the simulator can never change underneath it.

    >>> c = Circuit(n_qubits=2)
    >>> c = c.place_gate("H", qubit=0, time=0)
    >>> c = c.place_gate("CNOT", qubit=1, time=1, control=0)
    >>> [g.kind.value for g in c.scheduled()]
    ['H', 'CNOT']
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ..exceptions import InvalidConfigurationError
from ..primitives.gates import Gate, GateKind
from .scheduler import schedule_gates

DEFAULT_QUBITS = 3
DEFAULT_TIME_STEPS = 10


@dataclass(frozen=True)
class Circuit:
    """
    A fixed-size gate grid.

    Attributes
    ----------
    n_qubits : int
        Number of qubit rows.
    max_time_steps : int
        Number of time-step columns.
    gates : tuple of Gate
        Placed gates, in placement order.
    """
    n_qubits: int = DEFAULT_QUBITS
    max_time_steps: int = DEFAULT_TIME_STEPS
    gates: Tuple[Gate, ...] = ()

    def __post_init__(self):
        if self.n_qubits < 1:
            raise InvalidConfigurationError(f"Circuit needs at least one qubit, got {self.n_qubits}")
        if self.max_time_steps < 1:
            raise InvalidConfigurationError(
                f"Circuit needs at least one time step, got {self.max_time_steps}"
            )
        object.__setattr__(self, "gates", tuple(self.gates))
        occupied = set()
        for gate in self.gates:
            self._check_gate(gate)
            cell = (gate.qubit, gate.time)
            if cell in occupied:
                raise InvalidConfigurationError(
                    f"Two gates share qubit {gate.qubit} at time step {gate.time}"
                )
            occupied.add(cell)

    def __len__(self) -> int:
        return len(self.gates)

    def _check_cell(self, qubit: int, time: int) -> None:
        if not 0 <= qubit < self.n_qubits:
            raise InvalidConfigurationError(
                f"Qubit {qubit} outside circuit with {self.n_qubits} qubits"
            )
        if not 0 <= time < self.max_time_steps:
            raise InvalidConfigurationError(
                f"Time step {time} outside circuit with {self.max_time_steps} steps"
            )

    def _check_gate(self, gate: Gate) -> None:
        self._check_cell(gate.qubit, gate.time)
        if gate.control is not None and not 0 <= gate.control < self.n_qubits:
            raise InvalidConfigurationError(
                f"Control qubit {gate.control} outside circuit with {self.n_qubits} qubits"
            )

    def gate_at(self, qubit: int, time: int) -> Optional[Gate]:
        for gate in self.gates:
            if gate.qubit == qubit and gate.time == time:
                return gate
        return None

    def place_gate(
        self,
        kind: Union[GateKind, str],
        qubit: int,
        time: int,
        control: Optional[int] = None,
    ) -> "Circuit":
        """
        Place a gate, replacing whatever occupied the (qubit, time) cell.

        A CNOT placed without an explicit control is controlled by the next
        qubit down, wrapping around: ``(qubit + 1) % n_qubits``.
        """
        gate_kind = kind if isinstance(kind, GateKind) else GateKind.from_label(kind)
        if gate_kind is GateKind.CNOT and control is None:
            control = (qubit + 1) % self.n_qubits
        gate = Gate(kind=gate_kind, qubit=qubit, time=time, control=control)
        self._check_gate(gate)
        kept = tuple(g for g in self.gates if not (g.qubit == qubit and g.time == time))
        return replace(self, gates=kept + (gate,))

    def remove_gate(self, qubit: int, time: int) -> "Circuit":
        """Drop the gate in the (qubit, time) cell. An empty cell is left as is."""
        kept = tuple(g for g in self.gates if not (g.qubit == qubit and g.time == time))
        return replace(self, gates=kept)

    def cleared(self) -> "Circuit":
        return replace(self, gates=())

    def scheduled(self) -> Tuple[Gate, ...]:
        """Gates in the order the evolver applies them."""
        return schedule_gates(self.gates)
