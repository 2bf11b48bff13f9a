# Primitives Layer
#
# Gate records and the stateless kernels that apply them to a dense
# state vector. Everything above this layer (scheduling, simulation,
# noise) consumes these kernels through ``apply_gate``.
#
# Core Primitives:
#   - GateKind: Identity, Pauli X/Y/Z, Hadamard, CNOT
#   - Gate: immutable (kind, target, time, optional control) record
#   - apply_*: per-kind masking kernels

from .gates import (
    INV_SQRT2,
    GateKind,
    Gate,
    apply_identity,
    apply_pauli_x,
    apply_pauli_y,
    apply_pauli_z,
    apply_hadamard,
    apply_cnot,
    apply_gate,
)

__all__ = [
    "INV_SQRT2",
    "GateKind",
    "Gate",
    "apply_identity",
    "apply_pauli_x",
    "apply_pauli_y",
    "apply_pauli_z",
    "apply_hadamard",
    "apply_cnot",
    "apply_gate",
]
