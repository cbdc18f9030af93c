"""Shared pytest setup for the wgraph suite.

The graph fixtures (``sample``, ``line1``, ``random_graphs`` and friends) live
in ``tests/algorithms/sample_graphs.py`` and are used by the algorithm, graph,
logging and CLI tests alike. Loading that module as a plugin, rather than
importing it here, keeps pytest's assertion rewriting on for it.
"""

pytest_plugins = ["tests.algorithms.sample_graphs"]
