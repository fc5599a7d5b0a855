"""
binned_kfold.data

Synthetic data used by the demo CLI and the tests.
"""

from .synthetic import make_bimodal_frame, make_bimodal_target

__all__ = [
    "make_bimodal_frame",
    "make_bimodal_target",
]
