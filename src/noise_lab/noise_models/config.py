"""
Noise configuration: which channel to apply and its per-gate error rate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidConfigurationError


class NoiseKind(str, Enum):
    """Named noise channels. Values are the human-readable labels."""

    DEPOLARIZING = "Depolarizing"
    AMPLITUDE_DAMPING = "Amplitude Damping"
    PHASE_DAMPING = "Phase Damping"
    BIT_FLIP = "Bit Flip"
    PHASE_FLIP = "Phase Flip"

    @classmethod
    def from_label(cls, label: str) -> "NoiseKind":
        """Accepts "BIT_FLIP", "bit flip", "Bit Flip", "bit-flip"."""
        key = str(label).strip().upper().replace("-", " ").replace("_", " ")
        for kind in cls:
            if key in (kind.value.upper(), kind.name.replace("_", " ")):
                return kind
        raise InvalidConfigurationError(
            f"Unknown noise kind: {label!r}. Available: {[k.value for k in cls]}"
        )


@dataclass(frozen=True)
class NoiseConfig:
    """
    Noise channel selection.

    Attributes
    ----------
    kind : NoiseKind
        Channel to apply. Strings are resolved with ``NoiseKind.from_label``.
    probability : float
        Per-gate error rate in [0, 1].
    """
    kind: NoiseKind = NoiseKind.DEPOLARIZING
    probability: float = 0.05

    def __post_init__(self):
        if not isinstance(self.kind, NoiseKind):
            object.__setattr__(self, "kind", NoiseKind.from_label(self.kind))
        try:
            probability = float(self.probability)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(
                f"Noise probability must be a number, got {self.probability!r}"
            ) from None
        if not 0.0 <= probability <= 1.0:
            raise InvalidConfigurationError(
                f"Noise probability must lie in [0, 1], got {probability}"
            )
        object.__setattr__(self, "probability", probability)

    def to_dict(self) -> dict:
        return {"type": self.kind.value, "probability": self.probability}
