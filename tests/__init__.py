"""Test suite package marker to ensure deterministic module names."""

# Package semantics keep fully qualified names such as
# ``tests.spa.test_reference_vector`` distinct from any top-level module
# sharing the same basename.
