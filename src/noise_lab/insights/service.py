"""
Fault-tolerant entry point for circuit insights.

Whatever goes wrong with the generator, the caller gets a string back and
the simulation result it passed in is never touched.
"""

from __future__ import annotations

import warnings
from typing import Optional, Sequence

from ..noise_models.config import NoiseConfig
from ..primitives.gates import Gate
from .client import GeminiInsightsGenerator, InsightsGenerator
from .summary import build_insights_prompt, summarize_for_insights

EMPTY_RESPONSE_MESSAGE = "I was unable to analyze the circuit at this time."
ERROR_MESSAGE = "Error connecting to the quantum analysis engine. Please try again later."


def get_quantum_insights(
    gates: Sequence[Gate],
    noise: NoiseConfig,
    result,
    generator: Optional[InsightsGenerator] = None,
) -> str:
    """
    Ask an insights generator to comment on a simulated circuit.

    Parameters
    ----------
    gates : sequence of Gate
        The simulated circuit.
    noise : NoiseConfig
        Noise the circuit was simulated with.
    result : SimulationResult
        Output of ``simulate`` for these inputs.
    generator : InsightsGenerator, optional
        Defaults to a ``GeminiInsightsGenerator`` configured from the
        environment.

    Returns
    -------
    str
        The generated text, or a placeholder message on failure.
    """
    prompt = build_insights_prompt(summarize_for_insights(gates, noise, result))

    owned = generator is None
    try:
        if owned:
            generator = GeminiInsightsGenerator()
        text = generator.generate(prompt)
    except Exception as e:
        warnings.warn(f"Insights generation failed: {e}", RuntimeWarning)
        return ERROR_MESSAGE
    finally:
        if owned and generator is not None:
            generator.close()

    return text or EMPTY_RESPONSE_MESSAGE
