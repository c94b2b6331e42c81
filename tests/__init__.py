# Tests for the Two-Qubit Simulator
#
# Test organization:
#   - test_core/: gate rules, state vector, normalization, sampling
#   - test_simulation.py: end-to-end gate-sequence runs
#   - test_cli.py: console transcript, exit codes, plotting
#
# Running tests:
#   pytest tests/
#   pytest tests/test_core/ -v
#   pytest tests/ -k "legacy"
