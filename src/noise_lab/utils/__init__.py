# Utility Functions
#
# Common utilities used across the simulator.
#
# Submodules:
#   - math_utils: probability vectors, fidelity, basis labels, QuTiP reference operators
#   - visualization: chart rows and distribution bar charts
#
# Import submodules directly; visualization pulls in matplotlib:
#   from noise_lab.utils.visualization import plot_distributions

__all__ = []
