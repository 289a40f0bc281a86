"""
suggestion_refiner
==================

Does: Root package initializer for the suggestion post-processing engine.
Returns: Exposes the `suggest` stages and `utils` helpers through a stable namespace.
Used by: All higher-level imports starting from `suggestion_refiner.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
