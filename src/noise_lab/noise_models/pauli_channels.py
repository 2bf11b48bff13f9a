"""
Pauli Error Channels on Probability Vectors
===========================================

Phenomenological versions of the standard Pauli channels. The circuit has
already been collapsed to a probability vector, so each channel is a
classical perturbation of that vector rather than a map on ρ.

Depolarizing:
    ρ → (1-p)ρ + p·I/d
    On probabilities: pᵢ → (1-ε)pᵢ + ε/S

Bit-flip:
    ρ → (1-p)ρ + p·XρX
    On probabilities: each entry leaks toward its bit-complement partner
    S-1-i at a reduced rate 0.4·ε.

Phase-flip:
    ρ → (1-p)ρ + p·ZρZ
    Z leaves populations alone, and phase information is gone once the state
    is a probability vector. The channel falls back to the generic
    decoherence blend (identical in form to depolarizing).

Here ε is the cumulative error over the whole circuit and S = 2^N.
"""

import numpy as np

BIT_FLIP_RATE_FACTOR = 0.4


def uniform_blend(ideal: np.ndarray, total_error: float) -> np.ndarray:
    """Generic decoherence: mix toward the uniform distribution with weight ε."""
    ideal = np.asarray(ideal, dtype=float)
    n_states = len(ideal)
    return ideal * (1.0 - total_error) + (1.0 / n_states) * total_error


def depolarizing(ideal: np.ndarray, total_error: float) -> np.ndarray:
    return uniform_blend(ideal, total_error)


def bit_flip(ideal: np.ndarray, total_error: float) -> np.ndarray:
    """
    Blend every entry with its bit-complement partner.

        result[i] = ideal[i]·(1-f) + ideal[S-1-i]·f,   f = 0.4·ε

    Partners are read from the unperturbed vector, so reversing the input
    reverses the output.
    """
    ideal = np.asarray(ideal, dtype=float)
    flip_amount = total_error * BIT_FLIP_RATE_FACTOR
    return ideal * (1.0 - flip_amount) + ideal[::-1] * flip_amount


def phase_flip(ideal: np.ndarray, total_error: float) -> np.ndarray:
    return uniform_blend(ideal, total_error)
