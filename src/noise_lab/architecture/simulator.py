"""
Circuit Simulation
==================

Main simulation engine: evolve a state vector through a gate sequence,
then degrade its probability distribution with a noise channel and score
the result.

High-Level Overview
-------------------
1. **Validation** (boundary): qubit count within range, every gate's
   target/control inside the register, noise config well formed.
   Violations raise ``InvalidConfigurationError``.

2. **Evolution** (``evolve_state``): start from |0...0⟩ and apply the gates
   in time-step order with the masking kernels from ``primitives.gates``.

3. **Ideal distribution**: pᵢ = Re(aᵢ)² + Im(aᵢ)². No renormalisation:
   every kernel preserves total probability on its own.

4. **Noise** (``noise_models.apply_noise_model``): cumulative error from the
   gate count, channel perturbation, renormalisation, classical fidelity.

The two stages share no state. ``simulate`` is a pure function of its
arguments; identical inputs give bit-identical results.

Validation mode
---------------
``evolve_dense`` runs the same circuit through full QuTiP operators. It is
exponentially more expensive and exists to cross-check the kernels.
"""

from __future__ import annotations

import asyncio
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

import numpy as np

from ..exceptions import InvalidConfigurationError
from ..noise_models.config import NoiseConfig
from ..noise_models.perturbation import apply_noise_model
from ..primitives.gates import Gate, apply_gate
from ..utils.math_utils import (
    basis_label,
    circuit_unitary,
    probabilities_from_amplitudes,
    to_distribution,
)
from .circuit import Circuit
from .scheduler import schedule_gates

MAX_SUPPORTED_QUBITS = 10
LARGE_REGISTER_QUBITS = 8


# =============================================================================
# RESULT CONTAINER
# =============================================================================

@dataclass(frozen=True)
class SimulationResult:
    """
    Snapshot of one simulation run.

    Attributes
    ----------
    ideal : Mapping[str, float]
        Ideal distribution keyed by N-bit label (MSB first), in index order.
        Stored as a read-only view.
    noisy : Mapping[str, float]
        Noisy distribution, same keys. Read-only.
    fidelity : float
        Classical fidelity between ``ideal`` and ``noisy``, in [0, 1].
    qubit_count : int
        Number of qubits simulated.
    amplitudes : tuple of complex
        Final ideal state vector, in index order.
    total_error : float
        Cumulative error ε the noise channel was applied with.
    gate_count : int
        Number of gates in the circuit (the depth proxy for ε).
    """
    ideal: Mapping[str, float]
    noisy: Mapping[str, float]
    fidelity: float
    qubit_count: int
    amplitudes: Tuple[complex, ...] = ()
    total_error: float = 0.0
    gate_count: int = 0

    def __post_init__(self):
        object.__setattr__(self, "ideal", MappingProxyType(dict(self.ideal)))
        object.__setattr__(self, "noisy", MappingProxyType(dict(self.noisy)))
        object.__setattr__(self, "amplitudes", tuple(self.amplitudes))

    def __hash__(self) -> int:
        return hash((
            tuple(self.ideal.items()),
            tuple(self.noisy.items()),
            self.fidelity,
            self.qubit_count,
            self.amplitudes,
            self.total_error,
            self.gate_count,
        ))

    @property
    def states(self) -> Tuple[str, ...]:
        return tuple(self.ideal)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary (amplitudes as [re, im] pairs)."""
        return {
            "probabilities": dict(self.ideal),
            "noisyProbabilities": dict(self.noisy),
            "fidelity": self.fidelity,
            "qubitCount": self.qubit_count,
            "amplitudes": [[a.real, a.imag] for a in self.amplitudes],
            "totalError": self.total_error,
            "gateCount": self.gate_count,
        }

    def summary_table(self) -> str:
        """Generate a formatted per-state comparison table."""
        lines = [
            "=" * 44,
            "SIMULATION SUMMARY",
            "=" * 44,
            f"{'State':<10} {'Ideal':>10} {'Noisy':>10} {'Δ':>10}",
            "-" * 44,
        ]
        for state, p_ideal in self.ideal.items():
            p_noisy = self.noisy[state]
            lines.append(f"{state:<10} {p_ideal:>10.4f} {p_noisy:>10.4f} {p_noisy - p_ideal:>+10.4f}")
        lines.extend([
            "-" * 44,
            f"Gates: {self.gate_count}   ε = {self.total_error:.4f}   F = {self.fidelity:.6f}",
            "=" * 44,
        ])
        return "\n".join(lines)


# =============================================================================
# BOUNDARY VALIDATION
# =============================================================================

def validate_inputs(n_qubits: int, gates: Sequence[Gate], noise: NoiseConfig) -> None:
    """Reject inputs the pure computation is not defined for."""
    if isinstance(n_qubits, bool) or not isinstance(n_qubits, (int, np.integer)):
        raise InvalidConfigurationError(f"Qubit count must be an integer, got {n_qubits!r}")
    if not 1 <= n_qubits <= MAX_SUPPORTED_QUBITS:
        raise InvalidConfigurationError(
            f"Qubit count must lie in [1, {MAX_SUPPORTED_QUBITS}], got {n_qubits}"
        )
    if not isinstance(noise, NoiseConfig):
        raise InvalidConfigurationError(
            f"Expected a NoiseConfig, got {type(noise).__name__}"
        )
    for gate in gates:
        if not isinstance(gate, Gate):
            raise InvalidConfigurationError(f"Expected a Gate, got {type(gate).__name__}")
        for q in gate.qubits:
            if q >= n_qubits:
                raise InvalidConfigurationError(
                    f"{gate.kind.value} gate at t={gate.time} touches qubit {q}, "
                    f"but the register has {n_qubits} qubits"
                )


# =============================================================================
# CIRCUIT EVOLVER
# =============================================================================

def zero_state(n_qubits: int) -> np.ndarray:
    state = np.zeros(1 << n_qubits, dtype=np.complex128)
    state[0] = 1.0
    return state


def evolve_state(n_qubits: int, gates: Iterable[Gate]) -> np.ndarray:
    """
    Final amplitudes after applying ``gates`` to |0...0⟩.

    Gates run in non-decreasing time-step order, ties in input order.
    """
    state = zero_state(n_qubits)
    for gate in schedule_gates(gates):
        state = apply_gate(state, gate)
    return state


def evolve_dense(n_qubits: int, gates: Iterable[Gate]) -> np.ndarray:
    """Same as ``evolve_state`` but through full QuTiP operators."""
    unitary = circuit_unitary(schedule_gates(gates), n_qubits)
    return np.asarray(unitary.full() @ zero_state(n_qubits)).reshape(-1)


def ideal_probabilities(amplitudes: np.ndarray) -> np.ndarray:
    return probabilities_from_amplitudes(amplitudes)


# =============================================================================
# MAIN SIMULATION FUNCTION
# =============================================================================

def simulate(
    n_qubits: int,
    gates: Sequence[Gate],
    noise: NoiseConfig,
    verbose: bool = False,
) -> SimulationResult:
    """
    Run the evolver and the noise engine on one circuit.

    Parameters
    ----------
    n_qubits : int
        Register size N, 1 ≤ N ≤ MAX_SUPPORTED_QUBITS.
    gates : sequence of Gate
        Circuit gates, any order; they are scheduled by time step.
    noise : NoiseConfig
        Noise channel and per-gate error rate.
    verbose : bool
        Print a short progress report.

    Returns
    -------
    SimulationResult

    Raises
    ------
    InvalidConfigurationError
        If the qubit count, a gate placement or the noise config is invalid.
    """
    gates = tuple(gates)
    validate_inputs(n_qubits, gates, noise)

    if n_qubits > LARGE_REGISTER_QUBITS:
        warnings.warn(
            f"{n_qubits} qubits means a {1 << n_qubits}-entry state vector. "
            f"Expect slow updates.",
            UserWarning
        )

    if verbose:
        print(f"Simulating {len(gates)} gates on {n_qubits} qubits "
              f"({noise.kind.value}, p = {noise.probability:.4f})")

    amplitudes = evolve_state(n_qubits, gates)
    ideal = ideal_probabilities(amplitudes)
    outcome = apply_noise_model(ideal, noise, len(gates))

    if verbose:
        peak = int(np.argmax(ideal))
        print(f"  Peak ideal state: |{basis_label(peak, n_qubits)}⟩ ({ideal[peak]:.4f})")
        print(f"  ε = {outcome.total_error:.4f}, F = {outcome.fidelity:.6f}")

    return SimulationResult(
        ideal=to_distribution(ideal, n_qubits),
        noisy=to_distribution(outcome.noisy, n_qubits),
        fidelity=outcome.fidelity,
        qubit_count=n_qubits,
        amplitudes=tuple(complex(a) for a in amplitudes),
        total_error=outcome.total_error,
        gate_count=len(gates),
    )


def simulate_circuit(circuit: Circuit, noise: NoiseConfig, verbose: bool = False) -> SimulationResult:
    return simulate(circuit.n_qubits, circuit.gates, noise, verbose=verbose)


async def simulate_async(
    n_qubits: int,
    gates: Sequence[Gate],
    noise: NoiseConfig,
) -> SimulationResult:
    """
    ``simulate`` offloaded to a worker thread as one unit of work.

    Cancelling the awaiting task discards the result; the worker itself is
    not interrupted.
    """
    return await asyncio.to_thread(simulate, n_qubits, tuple(gates), noise)
