"""
Gate Primitives
===============

Gate records and the state-vector kernels that apply them.

The state vector is a dense ``complex128`` array of length 2^N. Basis index
``i`` encodes qubit ``q`` in bit ``q`` of ``i`` (qubit 0 is the least
significant bit), so index 0 is the all-zero computational basis state.

Every kernel works with the same masking technique:

    mask = 1 << target
    low  = indices whose target bit is 0
    high = low | mask

Each unordered pair ``{low, high}`` is visited exactly once and both members
are updated simultaneously from their pre-update values. Kernels are pure:
they return a new array and never touch their input.

Supported kinds
---------------

| Kind            | Action on the pair (low, high)                        |
|-----------------|-------------------------------------------------------|
| IDENTITY        | unchanged                                             |
| PAULI_X         | swap                                                  |
| PAULI_Y         | low' = -i * high,  high' = i * low                    |
| PAULI_Z         | high' = -high                                         |
| HADAMARD        | low' = (low + high)/√2,  high' = (low - high)/√2      |
| CNOT            | swap, restricted to indices whose control bit is 1    |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from ..exceptions import InvalidConfigurationError


INV_SQRT2 = 1.0 / np.sqrt(2.0)


# =============================================================================
# GATE RECORDS
# =============================================================================

class GateKind(str, Enum):
    """Gate kinds understood by the evolver."""

    IDENTITY = "I"
    PAULI_X = "X"
    PAULI_Y = "Y"
    PAULI_Z = "Z"
    HADAMARD = "H"
    CNOT = "CNOT"

    @property
    def is_two_qubit(self) -> bool:
        return self is GateKind.CNOT

    @classmethod
    def from_label(cls, label: str) -> "GateKind":
        """
        Resolve a gate kind from its short symbol ("H", "CNOT") or its
        enum name ("HADAMARD", "pauli_x"). Matching is case-insensitive.
        """
        key = str(label).strip().upper()
        for kind in cls:
            if key in (kind.value, kind.name):
                return kind
        raise InvalidConfigurationError(f"Unknown gate kind: {label!r}. "
                                        f"Available: {[k.value for k in cls]}")


def _check_index(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfigurationError(f"Gate {name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidConfigurationError(f"Gate {name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Gate:
    """
    A single gate placed on the circuit grid.

    Attributes
    ----------
    kind : GateKind
        Which operation to apply. Strings are accepted and resolved with
        ``GateKind.from_label``.
    qubit : int
        Target qubit index.
    time : int
        Time step (non-negative, need not be contiguous).
    control : int or None
        Control qubit index. Only meaningful for CNOT; a CNOT without a
        control is applied as a no-op.
    """
    kind: GateKind
    qubit: int
    time: int = 0
    control: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.kind, GateKind):
            object.__setattr__(self, "kind", GateKind.from_label(self.kind))
        _check_index("target qubit", self.qubit)
        _check_index("time step", self.time)
        if self.control is not None:
            _check_index("control qubit", self.control)

    @property
    def qubits(self) -> Tuple[int, ...]:
        """Qubits touched by this gate (control first for CNOT)."""
        if self.kind.is_two_qubit and self.control is not None:
            return (self.control, self.qubit)
        return (self.qubit,)

    def to_dict(self) -> dict:
        out = {"type": self.kind.value, "qubit": self.qubit, "time": self.time}
        if self.control is not None:
            out["control"] = self.control
        return out


# =============================================================================
# STATE-VECTOR KERNELS
# =============================================================================

def _pairs(n_states: int, mask: int) -> Tuple[np.ndarray, np.ndarray]:
    """Indices with the masked bit clear, and their partners with it set."""
    indices = np.arange(n_states)
    low = indices[(indices & mask) == 0]
    return low, low | mask


def apply_identity(amplitudes: np.ndarray, target: int) -> np.ndarray:
    return amplitudes.copy()


def apply_pauli_x(amplitudes: np.ndarray, target: int) -> np.ndarray:
    """Bit flip: swap every pair differing in the target bit."""
    low, high = _pairs(len(amplitudes), 1 << target)
    out = amplitudes.copy()
    out[low] = amplitudes[high]
    out[high] = amplitudes[low]
    return out


def apply_pauli_y(amplitudes: np.ndarray, target: int) -> np.ndarray:
    """Bit flip with phase: |0⟩ → i|1⟩, |1⟩ → -i|0⟩."""
    low, high = _pairs(len(amplitudes), 1 << target)
    out = amplitudes.copy()
    out[low] = -1j * amplitudes[high]
    out[high] = 1j * amplitudes[low]
    return out


def apply_pauli_z(amplitudes: np.ndarray, target: int) -> np.ndarray:
    """Phase flip: negate every amplitude whose target bit is set."""
    _, high = _pairs(len(amplitudes), 1 << target)
    out = amplitudes.copy()
    out[high] = -amplitudes[high]
    return out


def apply_hadamard(amplitudes: np.ndarray, target: int) -> np.ndarray:
    """
    Hadamard on ``target``.

    Both members of each pair are computed from the pre-update values,
    so this is a simultaneous (not sequential) update.
    """
    low, high = _pairs(len(amplitudes), 1 << target)
    a_low = amplitudes[low]
    a_high = amplitudes[high]
    out = amplitudes.copy()
    out[low] = (a_low + a_high) * INV_SQRT2
    out[high] = (a_low - a_high) * INV_SQRT2
    return out


def apply_cnot(amplitudes: np.ndarray, control: int, target: int) -> np.ndarray:
    """
    Controlled-NOT: swap pairs differing in ``target`` among indices whose
    ``control`` bit is 1.

    With ``control == target`` no index qualifies and the state is unchanged.
    """
    control_mask = 1 << control
    target_mask = 1 << target
    indices = np.arange(len(amplitudes))
    low = indices[((indices & control_mask) != 0) & ((indices & target_mask) == 0)]
    high = low | target_mask
    out = amplitudes.copy()
    out[low] = amplitudes[high]
    out[high] = amplitudes[low]
    return out


_SINGLE_QUBIT_KERNELS: Dict[GateKind, Callable[[np.ndarray, int], np.ndarray]] = {
    GateKind.IDENTITY: apply_identity,
    GateKind.PAULI_X: apply_pauli_x,
    GateKind.PAULI_Y: apply_pauli_y,
    GateKind.PAULI_Z: apply_pauli_z,
    GateKind.HADAMARD: apply_hadamard,
}


def apply_gate(amplitudes: np.ndarray, gate: Gate) -> np.ndarray:
    """
    Apply one gate to a state vector and return the new state vector.

    A CNOT missing its control qubit is skipped (returns an unchanged copy).
    """
    if gate.kind is GateKind.CNOT:
        if gate.control is None:
            return amplitudes.copy()
        return apply_cnot(amplitudes, gate.control, gate.qubit)
    return _SINGLE_QUBIT_KERNELS[gate.kind](amplitudes, gate.qubit)
