# Noise Lab: State-Vector Circuits Under Phenomenological Noise
#
# Evolves a small register through single- and two-qubit gates, degrades
# the resulting probability distribution with a named noise channel, and
# scores the damage with a classical fidelity.
#
# Architecture:
#   Primitives:    Gate records and masking kernels on the state vector
#   Noise models:  Channel perturbations on probability vectors
#   Architecture:  Scheduling, the circuit grid, and the simulation facade
#   Insights:      Optional language-model commentary on a result

__version__ = "0.1.0"

from .exceptions import InvalidConfigurationError, InsightsError
from .primitives.gates import Gate, GateKind, apply_gate
from .noise_models.config import NoiseConfig, NoiseKind
from .noise_models.perturbation import apply_noise_model, cumulative_error
from .architecture.circuit import Circuit
from .architecture.simulator import (
    MAX_SUPPORTED_QUBITS,
    SimulationResult,
    evolve_state,
    simulate,
    simulate_async,
    simulate_circuit,
)
from .configurations import LabConfiguration, PRESETS, get_preset
from .insights import get_quantum_insights

__all__ = [
    "__version__",
    "InvalidConfigurationError",
    "InsightsError",
    "Gate",
    "GateKind",
    "apply_gate",
    "NoiseConfig",
    "NoiseKind",
    "apply_noise_model",
    "cumulative_error",
    "Circuit",
    "MAX_SUPPORTED_QUBITS",
    "SimulationResult",
    "evolve_state",
    "simulate",
    "simulate_async",
    "simulate_circuit",
    "LabConfiguration",
    "PRESETS",
    "get_preset",
    "get_quantum_insights",
]
