"""
Test Suite: Gate Primitives
===========================

Single-gate behaviour of the masking kernels on small registers, plus the
Gate record's own validation.
"""

import numpy as np
import pytest

from noise_lab.exceptions import InvalidConfigurationError
from noise_lab.primitives.gates import (
    INV_SQRT2,
    Gate,
    GateKind,
    apply_cnot,
    apply_gate,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_y,
    apply_pauli_z,
)


def basis_state(index: int, n_qubits: int) -> np.ndarray:
    state = np.zeros(1 << n_qubits, dtype=np.complex128)
    state[index] = 1.0
    return state


@pytest.fixture
def random_state() -> np.ndarray:
    """Normalised random 3-qubit state with non-trivial phases."""
    rng = np.random.default_rng(7)
    state = rng.normal(size=8) + 1j * rng.normal(size=8)
    return state / np.linalg.norm(state)


# =============================================================================
# GATE RECORD
# =============================================================================

class TestGateRecord:

    def test_kind_resolved_from_string(self):
        assert Gate("H", qubit=0).kind is GateKind.HADAMARD
        assert Gate("cnot", qubit=1, control=0).kind is GateKind.CNOT
        assert Gate("pauli_y", qubit=0).kind is GateKind.PAULI_Y

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Gate("T", qubit=0)

    @pytest.mark.parametrize("kwargs", [
        {"qubit": -1},
        {"qubit": 0, "time": -2},
        {"qubit": 0, "control": -1},
    ])
    def test_negative_indices_rejected(self, kwargs):
        with pytest.raises(InvalidConfigurationError):
            Gate(GateKind.PAULI_X, **kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"qubit": 1.0},
        {"qubit": "0"},
        {"qubit": True},
        {"qubit": 0, "time": 1.5},
        {"qubit": 0, "control": 1.0},
    ])
    def test_non_integer_indices_rejected(self, kwargs):
        with pytest.raises(InvalidConfigurationError):
            Gate(GateKind.CNOT, **kwargs)

    def test_numpy_integers_accepted(self):
        gate = Gate(GateKind.CNOT, qubit=np.int64(1), time=np.int32(2), control=np.int64(0))
        assert gate.qubits == (0, 1)

    def test_gate_is_immutable(self):
        gate = Gate(GateKind.PAULI_X, qubit=0)
        with pytest.raises(AttributeError):
            gate.qubit = 1

    def test_qubits_lists_control_first(self):
        assert Gate(GateKind.CNOT, qubit=2, control=0).qubits == (0, 2)
        assert Gate(GateKind.CNOT, qubit=2).qubits == (2,)
        assert Gate(GateKind.HADAMARD, qubit=1).qubits == (1,)


# =============================================================================
# KERNELS
# =============================================================================

class TestKernels:

    def test_hadamard_on_single_qubit(self):
        out = apply_hadamard(basis_state(0, 1), 0)
        assert out[0].real == pytest.approx(1 / np.sqrt(2))
        assert out[1].real == pytest.approx(1 / np.sqrt(2))
        assert np.all(out.imag == 0.0)
        probs = out.real ** 2 + out.imag ** 2
        assert probs == pytest.approx([0.5, 0.5])

    def test_hadamard_on_one_is_minus_state(self):
        out = apply_hadamard(basis_state(1, 1), 0)
        assert np.allclose(out, [INV_SQRT2, -INV_SQRT2])

    def test_hadamard_is_self_inverse(self, random_state):
        for q in range(3):
            twice = apply_hadamard(apply_hadamard(random_state, q), q)
            assert np.allclose(twice, random_state)

    def test_pauli_x_flips_target_bit(self):
        out = apply_pauli_x(basis_state(0, 2), 1)
        assert out[2] == 1.0
        assert np.count_nonzero(out) == 1

    def test_pauli_z_negates_set_bit(self):
        plus = apply_hadamard(basis_state(0, 1), 0)
        out = apply_pauli_z(plus, 0)
        assert np.allclose(out, [INV_SQRT2, -INV_SQRT2])

    def test_pauli_z_leaves_zero_state(self):
        assert np.array_equal(apply_pauli_z(basis_state(0, 2), 1), basis_state(0, 2))

    def test_pauli_y_phases(self):
        # Y|0⟩ = i|1⟩, Y|1⟩ = -i|0⟩
        assert apply_pauli_y(basis_state(0, 1), 0)[1] == 1j
        assert apply_pauli_y(basis_state(1, 1), 0)[0] == -1j

    def test_cnot_flips_target_only_when_control_set(self):
        # |q1 q0⟩ = |01⟩ (index 1): control q0 set → |11⟩ (index 3)
        assert apply_cnot(basis_state(1, 2), control=0, target=1)[3] == 1.0
        # control clear → unchanged
        assert np.array_equal(apply_cnot(basis_state(2, 2), control=0, target=1), basis_state(2, 2))

    def test_cnot_with_control_equal_target_is_noop(self, random_state):
        assert np.array_equal(apply_cnot(random_state, control=1, target=1), random_state)

    def test_kernels_do_not_mutate_input(self, random_state):
        before = random_state.copy()
        for kind in GateKind:
            apply_gate(random_state, Gate(kind, qubit=1, control=0 if kind is GateKind.CNOT else None))
        assert np.array_equal(random_state, before)

    @pytest.mark.parametrize("kind", list(GateKind))
    @pytest.mark.parametrize("target", [0, 1, 2])
    def test_every_gate_preserves_total_probability(self, random_state, kind, target):
        control = (target + 1) % 3 if kind is GateKind.CNOT else None
        out = apply_gate(random_state, Gate(kind, qubit=target, control=control))
        total = float(np.sum(out.real ** 2 + out.imag ** 2))
        assert abs(total - 1.0) < 1e-9, f"{kind.value} on q{target} changed norm to {total}"


class TestApplyGate:

    def test_identity_is_noop(self, random_state):
        assert np.array_equal(apply_gate(random_state, Gate(GateKind.IDENTITY, qubit=2)), random_state)

    def test_cnot_without_control_is_skipped(self, random_state):
        out = apply_gate(random_state, Gate(GateKind.CNOT, qubit=1))
        assert np.array_equal(out, random_state)
        assert out is not random_state
