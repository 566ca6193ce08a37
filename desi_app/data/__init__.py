"""
Input record models and validation.

Converts untrusted plain mappings into typed, immutable records before any
computation runs on them.
"""
