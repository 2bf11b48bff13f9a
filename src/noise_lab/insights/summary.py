"""
Serializable circuit summaries and the analysis prompt built from them.
"""

from __future__ import annotations

import json
from typing import Sequence

from ..architecture.scheduler import circuit_depth
from ..noise_models.config import NoiseConfig
from ..primitives.gates import Gate


def summarize_for_insights(gates: Sequence[Gate], noise: NoiseConfig, result) -> dict:
    """
    Everything the insights service gets to see.

    Gates are reduced to kind and target qubit. ``result`` is a
    ``SimulationResult``; only its fidelity and qubit count are read.
    """
    return {
        "gates": [{"type": g.kind.value, "qubit": g.qubit} for g in gates],
        "noise": noise.to_dict(),
        "fidelity": float(result.fidelity),
        "depth": {f"q{q}": d for q, d in circuit_depth(gates, result.qubit_count).items()},
    }


def build_insights_prompt(summary: dict) -> str:
    noise = summary["noise"]
    return "\n".join([
        "As a Quantum Error Correction Expert, analyze this circuit and its noise profile:",
        "",
        f"Circuit Gates: {json.dumps(summary['gates'])}",
        f"Gates per qubit: {json.dumps(summary.get('depth', {}))}",
        f"Noise Model: {noise['type']} with error rate {noise['probability']}",
        f"Observed Fidelity: {summary['fidelity'] * 100:.2f}%",
        "",
        "Please provide:",
        "1. A brief explanation of why this specific noise affects these gates.",
        "2. One concrete mitigation technique (e.g., Dynamical Decoupling, "
        "Error Mitigation, or a specific Error Correcting Code).",
        "3. How the fidelity might change if the error rate is doubled.",
        "",
        "Keep the tone professional and academic yet accessible.",
    ])
