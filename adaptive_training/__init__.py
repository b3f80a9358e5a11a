"""Adaptive Training Engine.

Daily strength-training autoregulation: readiness scoring, load and volume
autoregulation, injury substitution and user-facing rationale.
"""

__version__ = "0.1.0"
