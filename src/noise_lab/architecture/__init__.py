# Architecture Layer
#
# Circuit-level simulation built on the gate primitives and noise models.
#
# Submodules:
#   - scheduler: time-step ordering and per-qubit depth
#   - circuit: immutable editor grid (place / replace / remove / clear)
#   - simulator: evolver + noise engine facade, SimulationResult
#
# Simulation flow:
#   1. Validate qubit count, gate placement and noise config
#   2. Evolve |0...0⟩ through the scheduled gates
#   3. Collapse to the ideal distribution
#   4. Perturb with the noise channel, renormalise, score fidelity

from .scheduler import schedule_gates, group_by_time_step, circuit_depth
from .circuit import Circuit, DEFAULT_QUBITS, DEFAULT_TIME_STEPS
from .simulator import (
    MAX_SUPPORTED_QUBITS,
    SimulationResult,
    validate_inputs,
    zero_state,
    evolve_state,
    evolve_dense,
    ideal_probabilities,
    simulate,
    simulate_circuit,
    simulate_async,
)

__all__ = [
    "schedule_gates",
    "group_by_time_step",
    "circuit_depth",
    "Circuit",
    "DEFAULT_QUBITS",
    "DEFAULT_TIME_STEPS",
    "MAX_SUPPORTED_QUBITS",
    "SimulationResult",
    "validate_inputs",
    "zero_state",
    "evolve_state",
    "evolve_dense",
    "ideal_probabilities",
    "simulate",
    "simulate_circuit",
    "simulate_async",
]
