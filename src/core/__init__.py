"""
Core domain models, mathematical primitives, and contracts.

This module contains the Sign value type used for signed quantities
(e.g. durations whose magnitude is stored separately from their sign),
the numeric helpers it relies on, and its serialization contracts.
"""
