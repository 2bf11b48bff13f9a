# Tests for Noise Lab
#
# Test organization mirrors source structure:
#   - test_primitives/: gate records and state-vector kernels
#   - test_noise_models/: channel perturbations and the fidelity engine
#   - test_architecture/: scheduling, circuit grid, simulation facade
#   - test_utils/: math helpers, QuTiP cross-checks, visualization
#   - test_insights/: prompt building and the insights client
#
# Running tests:
#   pytest tests/
#   pytest tests/test_architecture/ -v
#   pytest tests/ -k "bell"
