"""
Noise & Fidelity Engine
=======================

Turns an ideal probability distribution into a noisy one and scores the
damage.

Depth-to-error mapping
----------------------
Each gate is assumed to fail independently with probability p, so the
chance that at least one of G gates failed is

    ε = 1 - (1 - p)^max(1, G)

The exponent is floored at 1: an empty circuit still sees one gate's worth
of error. ε saturates toward 1 as the circuit grows. Gate count is used as
the depth proxy, not the per-qubit depth (see
``architecture.scheduler.circuit_depth`` for the latter).

Pipeline
--------
1. ε from (p, G)
2. channel-specific perturbation (``CHANNELS``; unknown kinds fall back to
   the uniform decoherence blend)
3. renormalise to unit sum
4. fidelity F = min(1, (Σ √(ideal·noisy))²)

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

from ..utils.math_utils import classical_fidelity, renormalize
from .config import NoiseConfig, NoiseKind
from .damping import amplitude_damping, phase_damping
from .pauli_channels import bit_flip, depolarizing, phase_flip, uniform_blend


CHANNELS: Dict[NoiseKind, Callable[[np.ndarray, float], np.ndarray]] = {
    NoiseKind.DEPOLARIZING: depolarizing,
    NoiseKind.BIT_FLIP: bit_flip,
    NoiseKind.AMPLITUDE_DAMPING: amplitude_damping,
    NoiseKind.PHASE_DAMPING: phase_damping,
    NoiseKind.PHASE_FLIP: phase_flip,
}


@dataclass(frozen=True, eq=False)
class NoiseOutcome:
    """
    Result of one pass through the noise engine.

    Attributes
    ----------
    noisy : np.ndarray
        Perturbed, renormalised distribution (index order).
    total_error : float
        Cumulative error ε used for the perturbation.
    fidelity : float
        Classical fidelity between the ideal and noisy distributions.

    Compared by identity; compare ``noisy`` with numpy when needed.
    """
    noisy: np.ndarray
    total_error: float
    fidelity: float


def cumulative_error(probability: float, gate_count: int) -> float:
    """ε = 1 - (1 - p)^max(1, gate_count)."""
    return 1.0 - (1.0 - probability) ** max(1, gate_count)


def perturb(ideal: np.ndarray, kind: NoiseKind, total_error: float) -> np.ndarray:
    """Apply one channel's perturbation rule, without renormalising."""
    channel = CHANNELS.get(kind, uniform_blend)
    return channel(np.asarray(ideal, dtype=float), total_error)


def apply_noise_model(ideal: np.ndarray, noise: NoiseConfig, gate_count: int) -> NoiseOutcome:
    """
    Perturb an ideal distribution and compute its fidelity.

    Parameters
    ----------
    ideal : np.ndarray
        Ideal probabilities in basis-index order (length 2^N).
    noise : NoiseConfig
        Channel and per-gate error rate.
    gate_count : int
        Number of gates in the circuit (depth proxy).

    Returns
    -------
    NoiseOutcome
    """
    ideal = np.asarray(ideal, dtype=float)
    total_error = cumulative_error(noise.probability, gate_count)
    noisy = renormalize(perturb(ideal, noise.kind, total_error))

    # A noise-free channel is the identity map: report exact fidelity.
    if total_error == 0.0:
        fidelity = 1.0
    else:
        fidelity = classical_fidelity(ideal, noisy)

    return NoiseOutcome(noisy=noisy, total_error=total_error, fidelity=fidelity)
