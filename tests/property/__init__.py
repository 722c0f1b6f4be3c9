"""Property-based tests for QuickProp components.

These tests use Hypothesis to check the invariants of the shrinkers, the
random source and the runner over a much wider range of inputs than the
example-based unit tests.
"""
