"""
binned_kfold.core.binning

Equal-width quantization of a continuous target into ordered bins.

The bin ids act as a categorical proxy for the target so that an ordinary
stratified K-Fold split can balance the target distribution across folds.
Bins are half-open intervals [lo, hi); the last bin is closed on the right
so that max(y) lands in bin n_bins - 1.
"""

from typing import Union

import numpy as np

from binned_kfold.core.exceptions import InvalidArgument
from binned_kfold.utils.contract import ArrayLike, as_target_array

STURGES = "sturges"

BinSpec = Union[int, str]


def sturges_bins(n_samples: int) -> int:
    """
    Number of bins from Sturges' rule, floor(1 + log2(n)), never fewer than 2.
    """
    if n_samples < 1:
        raise InvalidArgument(f"n_samples must be positive; got {n_samples}")
    return max(2, int(np.floor(1 + np.log2(n_samples))))


def resolve_n_bins(n_bins: BinSpec, n_samples: int) -> int:
    """Turn an int or the name of a binning rule into a validated bin count."""
    if isinstance(n_bins, str):
        if n_bins.lower() != STURGES:
            raise InvalidArgument(f"Unknown binning rule: {n_bins!r}")
        return sturges_bins(n_samples)

    if isinstance(n_bins, bool) or not isinstance(n_bins, (int, np.integer)):
        raise InvalidArgument(f"n_bins must be an integer; got {n_bins!r}")
    if n_bins < 2:
        raise InvalidArgument(f"n_bins must be >= 2; got {n_bins}")
    return int(n_bins)


def compute_bin_edges(y: ArrayLike, n_bins: BinSpec) -> np.ndarray:
    """
    Compute n_bins + 1 equally spaced edges spanning [min(y), max(y)].

    Args:
        y: Continuous target values.
        n_bins: Number of bins, or "sturges".

    Returns:
        np.ndarray: Monotone edges; edges[0] == min(y), edges[-1] == max(y).
    """
    arr = as_target_array(y)
    k = resolve_n_bins(n_bins, arr.shape[0])
    return np.linspace(arr.min(), arr.max(), k + 1)


def bin_target(y: ArrayLike, n_bins: BinSpec) -> np.ndarray:
    """
    Assign each sample the id of the equal-width bin it falls into.

    Args:
        y: Continuous target values.
        n_bins: Number of bins, or "sturges".

    Returns:
        np.ndarray: Integer bin ids in [0, n_bins). A constant target maps to bin 0.
    """
    arr = as_target_array(y)
    k = resolve_n_bins(n_bins, arr.shape[0])

    lo, hi = arr.min(), arr.max()
    if lo == hi:
        return np.zeros(arr.shape[0], dtype=int)

    edges = np.linspace(lo, hi, k + 1)
    # side="right" puts a value equal to an inner edge into the upper bin
    ids = np.searchsorted(edges, arr, side="right") - 1
    return np.clip(ids, 0, k - 1).astype(int)
