"""
binned_kfold.core

Binning, fold assignment and distribution checks.
"""

from .exceptions import BinnedKFoldError, DegenerateBinning, InvalidArgument
from .binning import bin_target, compute_bin_edges, sturges_bins
from .splits import create_folds, fold_indices
from .distribution import KSResult, ks_test, pairwise_ks, summarize_folds

__all__ = [
    "BinnedKFoldError",
    "DegenerateBinning",
    "InvalidArgument",
    "bin_target",
    "compute_bin_edges",
    "sturges_bins",
    "create_folds",
    "fold_indices",
    "KSResult",
    "ks_test",
    "pairwise_ks",
    "summarize_folds",
]
