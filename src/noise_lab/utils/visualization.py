"""
Visualization Utilities
=======================

Key Functions
-------------
- distribution_rows(): (state, ideal, noisy) rows for charting
- plot_distributions(): grouped bar chart of ideal vs noisy probabilities
- draw_circuit(): plain-text grid of a circuit
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..architecture.circuit import Circuit
from ..architecture.scheduler import group_by_time_step
from ..primitives.gates import GateKind


def distribution_rows(result) -> List[Dict[str, float]]:
    """
    One row per basis state, in index order.

    ``result`` is anything with ``ideal`` and ``noisy`` mappings keyed by
    basis label, e.g. a ``SimulationResult``.
    """
    return [
        {"state": state, "ideal": result.ideal[state], "noisy": result.noisy[state]}
        for state in result.ideal
    ]


def plot_distributions(
    result,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    figsize: Tuple[float, float] = (8, 5),
) -> plt.Axes:
    """
    Grouped bar chart of ideal and noisy probabilities per basis state.

    Parameters
    ----------
    result : SimulationResult
        Simulation output to plot.
    ax : plt.Axes, optional
        Axes to plot on. If None, creates new figure.
    title : str, optional
        Plot title. Defaults to the fidelity.
    figsize : tuple
        Figure size (width, height) in inches

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    rows = distribution_rows(result)
    x = np.arange(len(rows))
    width = 0.4

    ax.bar(x - width / 2, [r["ideal"] for r in rows], width, label="Ideal", color="#6366f1")
    ax.bar(x + width / 2, [r["noisy"] for r in rows], width, label="Noisy", color="#f43f5e")

    ax.set_xticks(x)
    ax.set_xticklabels([f"|{r['state']}⟩" for r in rows])
    ax.set_ylim(0, 1)
    ax.set_ylabel("Probability", fontsize=12)
    ax.set_xlabel("Basis state", fontsize=12)

    if title is None:
        title = f"Fidelity {result.fidelity * 100:.2f}%"
    ax.set_title(title, fontsize=14)
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)

    return ax


def draw_circuit(circuit: Circuit) -> str:
    """
    Text rendering of the occupied time steps, one line per qubit.

        q0: ─H──●─
        q1: ────⊕─
    """
    wires = [[] for _ in range(circuit.n_qubits)]
    for _, moment in group_by_time_step(circuit.gates):
        cells = ["─"] * circuit.n_qubits
        for gate in moment:
            if gate.kind is GateKind.CNOT:
                cells[gate.qubit] = "⊕"
                if gate.control is not None:
                    cells[gate.control] = "●"
            else:
                cells[gate.qubit] = gate.kind.value
        for q, symbol in enumerate(cells):
            wires[q].append(f"─{symbol}─")
    return "\n".join(f"q{q}: " + "".join(w) for q, w in enumerate(wires))
