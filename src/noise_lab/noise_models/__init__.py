# Noise Models
#
# Phenomenological error channels acting on the ideal probability vector
# produced by the evolver, plus the fidelity score between the two.
#
# Channel types:
#   - Pauli channels (depolarizing, bit-flip, phase-flip)
#   - Amplitude damping (T1)
#   - Phase damping (T2)
#
# The cumulative error over a circuit of G gates is 1 - (1 - p)^max(1, G).

from .config import NoiseKind, NoiseConfig
from .pauli_channels import (
    BIT_FLIP_RATE_FACTOR,
    uniform_blend,
    depolarizing,
    bit_flip,
    phase_flip,
)
from .damping import AMPLITUDE_DAMPING_RATE_FACTOR, amplitude_damping, phase_damping
from .perturbation import (
    CHANNELS,
    NoiseOutcome,
    cumulative_error,
    perturb,
    apply_noise_model,
)

__all__ = [
    "NoiseKind",
    "NoiseConfig",
    "BIT_FLIP_RATE_FACTOR",
    "AMPLITUDE_DAMPING_RATE_FACTOR",
    "uniform_blend",
    "depolarizing",
    "bit_flip",
    "phase_flip",
    "amplitude_damping",
    "phase_damping",
    "CHANNELS",
    "NoiseOutcome",
    "cumulative_error",
    "perturb",
    "apply_noise_model",
]
