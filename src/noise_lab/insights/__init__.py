# Insights
#
# Optional text commentary on a simulated circuit from an external
# language-model service. Nothing here feeds back into simulation state.
#
#   summary: serializable circuit/noise/fidelity summary and the prompt
#   client:  InsightsGenerator protocol and the httpx Gemini client
#   service: get_quantum_insights(), which never raises

from .summary import summarize_for_insights, build_insights_prompt
from .client import InsightsGenerator, GeminiInsightsGenerator, DEFAULT_MODEL
from .service import get_quantum_insights, EMPTY_RESPONSE_MESSAGE, ERROR_MESSAGE

__all__ = [
    "summarize_for_insights",
    "build_insights_prompt",
    "InsightsGenerator",
    "GeminiInsightsGenerator",
    "DEFAULT_MODEL",
    "get_quantum_insights",
    "EMPTY_RESPONSE_MESSAGE",
    "ERROR_MESSAGE",
]
