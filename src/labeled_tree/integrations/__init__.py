"""Integrations subpackage for labeled-tree.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_tree_equivalent`` fixture.
"""
