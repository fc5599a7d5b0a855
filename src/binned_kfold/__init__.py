"""
binned_kfold

Stratified K-Fold cross validation for continuous targets, by binning the
target and stratifying on the bin ids.
"""

from .config import FoldConfig
from .core import (
    BinnedKFoldError,
    DegenerateBinning,
    InvalidArgument,
    KSResult,
    bin_target,
    create_folds,
    fold_indices,
    ks_test,
    pairwise_ks,
    summarize_folds,
)
from .pipeline import compare_fold_strategies, create_kfold_frame

__version__ = "0.1.0"

__all__ = [
    "FoldConfig",
    "BinnedKFoldError",
    "DegenerateBinning",
    "InvalidArgument",
    "KSResult",
    "bin_target",
    "create_folds",
    "fold_indices",
    "ks_test",
    "pairwise_ks",
    "summarize_folds",
    "compare_fold_strategies",
    "create_kfold_frame",
]
