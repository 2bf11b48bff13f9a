"""
Lab Configuration and Preset Circuits
=====================================

Defaults for the noise lab and a handful of textbook circuits to start
from.

PRESET CIRCUITS
---------------

- ``bell``: H on q0, then CNOT q0 → q1. Ideal output {00: ½, 11: ½}.
- ``ghz``: Bell pair extended with CNOT q1 → q2. Ideal output {000: ½, 111: ½}.
- ``superposition``: H on every qubit at t = 0. Uniform output.

Usage
-----
    config = LabConfiguration()
    circuit = get_preset("ghz", n_qubits=config.n_qubits)
    result = simulate_circuit(circuit, config.default_noise)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

from .architecture.circuit import DEFAULT_QUBITS, DEFAULT_TIME_STEPS, Circuit
from .architecture.simulator import MAX_SUPPORTED_QUBITS
from .exceptions import InvalidConfigurationError
from .noise_models.config import NoiseConfig, NoiseKind
from .primitives.gates import GateKind


# =============================================================================
# LAB CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class LabConfiguration:
    """
    Workbench settings.

    Attributes
    ----------
    n_qubits : int
        Register size of the circuit grid.
    max_time_steps : int
        Number of time-step columns in the grid.
    default_noise : NoiseConfig
        Noise applied until the user picks another channel.
    """
    n_qubits: int = DEFAULT_QUBITS
    max_time_steps: int = DEFAULT_TIME_STEPS
    default_noise: NoiseConfig = field(
        default_factory=lambda: NoiseConfig(NoiseKind.DEPOLARIZING, 0.05)
    )

    def __post_init__(self):
        if not 1 <= self.n_qubits <= MAX_SUPPORTED_QUBITS:
            raise InvalidConfigurationError(
                f"n_qubits must lie in [1, {MAX_SUPPORTED_QUBITS}], got {self.n_qubits}"
            )
        if self.max_time_steps < 1:
            raise InvalidConfigurationError(
                f"max_time_steps must be positive, got {self.max_time_steps}"
            )

    def empty_circuit(self) -> Circuit:
        return Circuit(n_qubits=self.n_qubits, max_time_steps=self.max_time_steps)


# =============================================================================
# PRESETS
# =============================================================================

def _require_qubits(name: str, needed: int, n_qubits: int) -> None:
    if n_qubits < needed:
        raise InvalidConfigurationError(
            f"Preset {name!r} needs {needed} qubits, circuit has {n_qubits}"
        )


def get_bell_circuit(n_qubits: int = 2, max_time_steps: int = DEFAULT_TIME_STEPS) -> Circuit:
    _require_qubits("bell", 2, n_qubits)
    return (Circuit(n_qubits=n_qubits, max_time_steps=max_time_steps)
            .place_gate(GateKind.HADAMARD, qubit=0, time=0)
            .place_gate(GateKind.CNOT, qubit=1, time=1, control=0))


def get_ghz_circuit(n_qubits: int = 3, max_time_steps: int = DEFAULT_TIME_STEPS) -> Circuit:
    _require_qubits("ghz", 3, n_qubits)
    return (get_bell_circuit(n_qubits, max_time_steps)
            .place_gate(GateKind.CNOT, qubit=2, time=2, control=1))


def get_superposition_circuit(n_qubits: int = 3, max_time_steps: int = DEFAULT_TIME_STEPS) -> Circuit:
    circuit = Circuit(n_qubits=n_qubits, max_time_steps=max_time_steps)
    for q in range(n_qubits):
        circuit = circuit.place_gate(GateKind.HADAMARD, qubit=q, time=0)
    return circuit


PRESETS: Dict[str, Callable[..., Circuit]] = {
    "bell": get_bell_circuit,
    "ghz": get_ghz_circuit,
    "superposition": get_superposition_circuit,
}


def get_preset(name: str, n_qubits: int = DEFAULT_QUBITS,
               max_time_steps: int = DEFAULT_TIME_STEPS) -> Circuit:
    """Build a preset circuit by name ("bell", "ghz", "superposition")."""
    key = name.strip().lower()
    if key not in PRESETS:
        raise InvalidConfigurationError(f"Unknown preset: {name!r}. "
                                        f"Available: {list(PRESETS)}")
    return PRESETS[key](n_qubits=n_qubits, max_time_steps=max_time_steps)
