#!/usr/bin/env python3
"""
Noise Sweeps Over Preset Circuits
=================================

Sweeps the per-gate error rate for every noise channel on each preset
circuit and plots fidelity against error rate. Also prints the noisy
distribution of the GHZ circuit at the lab's default noise.

Generates:
1. One fidelity-vs-error-rate panel per preset (bell, ghz, superposition)
2. Ideal vs noisy bar chart for GHZ at the default noise

Usage:
    python examples/noise_sweeps.py [output_dir]
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np

from noise_lab import LabConfiguration, NoiseConfig, NoiseKind, get_preset, simulate_circuit
from noise_lab.utils.visualization import draw_circuit, plot_distributions


@dataclass
class SweepResult:
    """Container for sweep results"""
    error_rates: np.ndarray
    fidelities: Dict[NoiseKind, np.ndarray]


def sweep_preset(name: str, config: LabConfiguration, error_rates: np.ndarray) -> SweepResult:
    circuit = get_preset(name, n_qubits=config.n_qubits, max_time_steps=config.max_time_steps)
    fidelities = {}
    for kind in NoiseKind:
        fidelities[kind] = np.array([
            simulate_circuit(circuit, NoiseConfig(kind, p)).fidelity for p in error_rates
        ])
    return SweepResult(error_rates=error_rates, fidelities=fidelities)


def main(output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    config = LabConfiguration()
    error_rates = np.linspace(0.0, 0.3, 31)

    fig, axes = plt.subplots(1, 3, figsize=(15, 4.5), sharey=True)
    for ax, name in zip(axes, ("bell", "ghz", "superposition")):
        print(f"Sweeping {name}...")
        result = sweep_preset(name, config, error_rates)
        for kind, fidelities in result.fidelities.items():
            ax.plot(result.error_rates, fidelities, label=kind.value, linewidth=2)
        ax.set_title(name.upper(), fontsize=14)
        ax.set_xlabel("Per-gate error rate p", fontsize=12)
        ax.grid(True, alpha=0.3)
    axes[0].set_ylabel("Fidelity", fontsize=12)
    axes[0].legend(fontsize=9)
    fig.tight_layout()
    fig.savefig(output_dir / "fidelity_sweeps.png", dpi=150)
    plt.close(fig)

    ghz = get_preset("ghz", n_qubits=config.n_qubits)
    print()
    print(draw_circuit(ghz))
    result = simulate_circuit(ghz, config.default_noise, verbose=True)
    print(result.summary_table())

    ax = plot_distributions(result, title=f"GHZ under {config.default_noise.kind.value}")
    ax.figure.savefig(output_dir / "ghz_distribution.png", dpi=150)
    plt.close(ax.figure)

    print(f"\nFigures written to {output_dir}")


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("figures"))
