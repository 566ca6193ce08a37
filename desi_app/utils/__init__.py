"""
Utility functions module.

Numeric predicates and rounding helpers shared by the validators and the
aggregation routines.
"""
