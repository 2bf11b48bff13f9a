"""
Mathematical Utilities
======================

Probability-vector helpers shared by the evolver and the noise engine, and
a dense QuTiP reference for the gate set.

Functions
---------
- probabilities_from_amplitudes(): |a|² per basis state
- renormalize(): divide by the sum, leaving an all-zero vector untouched
- classical_fidelity(): squared Bhattacharyya overlap of two distributions
- basis_label() / to_distribution() / from_distribution(): index ↔ bitstring
- gate_operator() / circuit_unitary(): full 2^N × 2^N operators built with
  QuTiP, used to cross-check the masking kernels

Bit ordering
------------
Qubit ``q`` lives in bit ``q`` of the basis index, and labels are printed
most-significant bit first. For N = 3, index 6 = 0b110 has qubits 1 and 2
set and is labelled "110".

QuTiP's ``tensor(A, B, ...)`` puts its first factor in the most significant
position, so dense operators are assembled from qubit N-1 down to qubit 0.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

import numpy as np
from qutip import Qobj, basis, ket2dm, qeye, sigmax, sigmay, sigmaz, tensor

from ..primitives.gates import Gate, GateKind


# =============================================================================
# PROBABILITY VECTORS
# =============================================================================

def probabilities_from_amplitudes(amplitudes: np.ndarray) -> np.ndarray:
    """Ideal probability real² + imag² for every basis state. No renormalisation."""
    amplitudes = np.asarray(amplitudes, dtype=np.complex128)
    return amplitudes.real ** 2 + amplitudes.imag ** 2


def renormalize(vector: np.ndarray) -> np.ndarray:
    """
    Scale a non-negative vector to unit sum.

    A zero sum is treated as a divisor of 1, so a degenerate vector comes
    back unchanged instead of filled with NaN.
    """
    vector = np.asarray(vector, dtype=float)
    total = float(np.sum(vector))
    return vector / (total or 1.0)


def classical_fidelity(p: np.ndarray, q: np.ndarray) -> float:
    """
    Classical fidelity between two probability distributions.

        F = (Σᵢ √(pᵢ qᵢ))²

    clamped to 1 to absorb floating-point overshoot.

    Parameters
    ----------
    p, q : np.ndarray
        Distributions over the same basis, same length.

    Returns
    -------
    float
        Fidelity in [0, 1]; 1 for identical distributions, 0 for disjoint
        support.
    """
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    if p.shape != q.shape:
        raise ValueError(f"Distributions differ in length: {p.shape} vs {q.shape}")
    overlap = float(np.sum(np.sqrt(p * q)))
    return min(1.0, overlap * overlap)


# =============================================================================
# BASIS LABELS
# =============================================================================

def basis_label(index: int, n_qubits: int) -> str:
    """N-bit binary label of a basis index, most significant bit first."""
    return format(index, f"0{n_qubits}b")


def to_distribution(probabilities: Iterable[float], n_qubits: int) -> Dict[str, float]:
    """Key a probability vector by basis label, in index order."""
    return {basis_label(i, n_qubits): float(p) for i, p in enumerate(probabilities)}


def from_distribution(distribution: Mapping[str, float]) -> np.ndarray:
    """Inverse of ``to_distribution``: bitstring-keyed mapping back to a vector."""
    if not distribution:
        return np.zeros(0)
    n_states = 1 << len(next(iter(distribution)))
    vector = np.zeros(n_states)
    for label, p in distribution.items():
        vector[int(label, 2)] = p
    return vector


# =============================================================================
# DENSE REFERENCE OPERATORS (QuTiP)
# =============================================================================

_PAULI = {
    GateKind.IDENTITY: qeye,
    GateKind.PAULI_X: sigmax,
    GateKind.PAULI_Y: sigmay,
    GateKind.PAULI_Z: sigmaz,
}


def _embed(factors: Dict[int, Qobj], n_qubits: int) -> Qobj:
    ops = [factors.get(q, qeye(2)) for q in range(n_qubits)]
    return tensor(*reversed(ops))


def _single_qubit_matrix(kind: GateKind) -> Qobj:
    if kind is GateKind.HADAMARD:
        return (sigmax() + sigmaz()) / np.sqrt(2)
    if kind is GateKind.IDENTITY:
        return qeye(2)
    return _PAULI[kind]()


def gate_operator(gate: Gate, n_qubits: int) -> Qobj:
    """
    Full 2^N × 2^N operator for one gate.

    CNOT is built as |0⟩⟨0|_c ⊗ I + |1⟩⟨1|_c ⊗ X_t. A CNOT without a control,
    or with control equal to target, maps to the identity, matching the
    masking kernels.
    """
    if gate.kind is GateKind.CNOT:
        if gate.control is None or gate.control == gate.qubit:
            return _embed({}, n_qubits)
        p0 = ket2dm(basis(2, 0))
        p1 = ket2dm(basis(2, 1))
        return (_embed({gate.control: p0}, n_qubits)
                + _embed({gate.control: p1, gate.qubit: sigmax()}, n_qubits))
    return _embed({gate.qubit: _single_qubit_matrix(gate.kind)}, n_qubits)


def circuit_unitary(gates: Iterable[Gate], n_qubits: int) -> Qobj:
    """Product of gate operators, applied in the order given (first gate acts first)."""
    unitary = _embed({}, n_qubits)
    for gate in gates:
        unitary = gate_operator(gate, n_qubits) * unitary
    return unitary
