"""
Damping Channels on Probability Vectors
=======================================

Amplitude damping (T1):
    Relaxation toward the ground state. Population drains from every
    excited basis state into |0...0⟩ at rate 0.8·ε:

        result[0] = ideal[0] + (1 - ideal[0])·decay
        result[i] = ideal[i]·(1 - decay),   i > 0

Phase damping (T2):
    Pure dephasing does not move population; with only probabilities left
    to act on, it is modelled by the generic decoherence blend.
"""

import numpy as np

from .pauli_channels import uniform_blend

AMPLITUDE_DAMPING_RATE_FACTOR = 0.8


def amplitude_damping(ideal: np.ndarray, total_error: float) -> np.ndarray:
    ideal = np.asarray(ideal, dtype=float)
    decay = total_error * AMPLITUDE_DAMPING_RATE_FACTOR
    result = ideal * (1.0 - decay)
    result[0] = ideal[0] + (1.0 - ideal[0]) * decay
    return result


def phase_damping(ideal: np.ndarray, total_error: float) -> np.ndarray:
    return uniform_blend(ideal, total_error)
