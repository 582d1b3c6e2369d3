"""
Processing Package.

Caller-side slot editing and the boundary with the external judge.
"""
