"""
Operation Scheduler
===================

Temporal ordering of circuit gates.

Gates are applied in non-decreasing time-step order. Gates sharing a time
step keep their input order (Python's sort is stable), so a circuit that
carries duplicates on one (qubit, time) cell is still evolved
deterministically.
"""

from __future__ import annotations

from itertools import groupby
from typing import Dict, Iterable, List, Tuple

from ..primitives.gates import Gate


def schedule_gates(gates: Iterable[Gate]) -> Tuple[Gate, ...]:
    """Gates sorted by time step, ties broken by input order."""
    return tuple(sorted(gates, key=lambda gate: gate.time))


def group_by_time_step(gates: Iterable[Gate]) -> List[Tuple[int, Tuple[Gate, ...]]]:
    """Scheduled gates bucketed into (time_step, gates) moments."""
    return [(time, tuple(moment))
            for time, moment in groupby(schedule_gates(gates), key=lambda gate: gate.time)]


def circuit_depth(gates: Iterable[Gate], n_qubits: int) -> Dict[int, int]:
    """
    Per-qubit depth: the number of gates touching each qubit.

    A CNOT counts toward both its control and its target. This is reported
    alongside results; the noise engine uses total gate count instead.
    """
    depth = {q: 0 for q in range(n_qubits)}
    for gate in gates:
        for q in gate.qubits:
            if q in depth:
                depth[q] += 1
    return depth
