"""
binned_kfold.core.splits

K-Fold assignment for continuous targets.

Two modes are supported:

- **Stratified** (`n_bins` given): the target is quantized into equal-width bins
  (see `binned_kfold.core.binning`) and the bin ids are handed to scikit-learn's
  `StratifiedKFold`. Without shuffling each bin is cut into contiguous blocks in
  original order, and the block sizes are allocated so that folds are balanced
  to within one sample both globally and inside every bin.
- **Unstratified** (`n_bins=None`): scikit-learn's `KFold`, i.e. contiguous blocks
  of the index sequence; the first `n % n_splits` folds get one extra sample.

With `shuffle=True` the order inside each bin (or the whole index order) is
permuted using `random_state`, so results stay reproducible for a fixed seed.

Bins that are non-empty but hold fewer samples than `n_splits` cannot be split
into every fold. The `on_sparse_bin` policy decides what happens:

- ``"spread"`` (default): the bin is spread over fewer folds, one sample each,
  and a warning is logged. Global and per-bin balance still hold.
- ``"raise"``: `DegenerateBinning` is raised.

If no bin at all holds `n_splits` samples, `DegenerateBinning` is raised under
either policy.
"""

import warnings
from typing import List, Optional, Tuple

import numpy as np
from sklearn.model_selection import KFold, StratifiedKFold

from binned_kfold.core.binning import BinSpec, bin_target
from binned_kfold.core.exceptions import DegenerateBinning, InvalidArgument
from binned_kfold.utils.contract import ArrayLike, as_target_array
from binned_kfold.utils.logging import log

SPREAD = "spread"
RAISE = "raise"
SPARSE_BIN_POLICIES = (SPREAD, RAISE)


def validate_n_splits(n_splits: int, n_samples: Optional[int] = None) -> int:
    """Check that n_splits is an integer >= 2 and not larger than the sample count."""
    if isinstance(n_splits, bool) or not isinstance(n_splits, (int, np.integer)):
        raise InvalidArgument(f"n_splits must be an integer; got {n_splits!r}")
    if n_splits < 2:
        raise InvalidArgument(f"n_splits must be >= 2; got {n_splits}")
    if n_samples is not None and n_splits > n_samples:
        raise InvalidArgument(f"n_splits={n_splits} is greater than the number of samples ({n_samples})")
    return int(n_splits)


def check_bin_sizes(bins: np.ndarray, n_splits: int, on_sparse_bin: str = SPREAD) -> None:
    """
    Enforce the sparse-bin policy on a bin assignment.

    Raises:
        DegenerateBinning: If no bin can feed every fold, or if a sparse bin is
            found while `on_sparse_bin="raise"`.
    """
    counts = np.bincount(bins)
    occupied = np.flatnonzero(counts)
    sparse = occupied[counts[occupied] < n_splits]

    if counts.max() < n_splits:
        raise DegenerateBinning(
            f"No bin holds n_splits={n_splits} samples (largest bin: {int(counts.max())}); "
            f"reduce n_bins or n_splits"
        )

    if sparse.size == 0:
        return

    if on_sparse_bin == RAISE:
        raise DegenerateBinning(
            f"{sparse.size} bin(s) hold fewer than n_splits={n_splits} samples "
            f"(e.g. bin {int(sparse[0])} with {int(counts[sparse[0]])}); reduce n_bins or n_splits"
        )

    n_spread = int(counts[sparse].sum())
    log(
        f"{sparse.size} of {occupied.size} occupied bins hold fewer than {n_splits} samples; "
        f"spreading their {n_spread} samples over fewer folds",
        level="WARNING",
    )


def create_folds(
    samples: ArrayLike,
    n_splits: int,
    n_bins: Optional[BinSpec] = None,
    *,
    shuffle: bool = False,
    random_state: Optional[int] = None,
    on_sparse_bin: str = SPREAD,
) -> np.ndarray:
    """
    Assign every sample a fold id in [0, n_splits).

    Args:
        samples: Continuous target values, one per sample, in dataset order.
        n_splits: Number of folds (>= 2).
        n_bins: Number of equal-width bins to stratify on, or "sturges".
            None selects the unstratified mode.
        shuffle: Permute samples (within bins when stratifying) before blocking.
        random_state: Seed used when shuffle is True.
        on_sparse_bin: "spread" or "raise"; see module docstring.

    Returns:
        np.ndarray: Integer fold id per sample.
    """
    y = as_target_array(samples)
    n_samples = y.shape[0]
    n_splits = validate_n_splits(n_splits, n_samples)

    if on_sparse_bin not in SPARSE_BIN_POLICIES:
        raise InvalidArgument(f"on_sparse_bin must be one of {SPARSE_BIN_POLICIES}; got {on_sparse_bin!r}")

    # KFold/StratifiedKFold reject a seed when shuffle is off
    seed = random_state if shuffle else None
    X_dummy = np.zeros((n_samples, 1))

    if n_bins is None:
        splitter = KFold(n_splits=n_splits, shuffle=shuffle, random_state=seed)
        splits = list(splitter.split(X_dummy))
        mode = "unstratified"
    else:
        bins = bin_target(y, n_bins)
        check_bin_sizes(bins, n_splits, on_sparse_bin)

        splitter = StratifiedKFold(n_splits=n_splits, shuffle=shuffle, random_state=seed)
        # Sparse bins were already reported above.
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message="The least populated class", category=UserWarning)
            splits = list(splitter.split(X_dummy, bins))
        mode = f"stratified on {int(bins.max()) + 1} bins"

    folds = np.empty(n_samples, dtype=int)
    for fold_idx, (_, val_idx) in enumerate(splits):
        folds[val_idx] = fold_idx

    sizes = np.bincount(folds, minlength=n_splits)
    log(f"Created {n_splits} folds ({mode}) over {n_samples} samples. Sizes: {sizes.tolist()}")
    return folds


def fold_indices(folds: ArrayLike) -> List[Tuple[np.ndarray, np.ndarray]]:
    """
    Expand a fold assignment into (train_idx, val_idx) pairs, one per fold.

    Args:
        folds: Fold id per sample, as returned by `create_folds`.

    Returns:
        List[Tuple[np.ndarray, np.ndarray]]: Training and validation indices for each fold.
    """
    folds = np.asarray(folds)
    if folds.ndim != 1 or folds.shape[0] == 0:
        raise InvalidArgument("folds must be a non-empty 1D array")
    if not np.issubdtype(folds.dtype, np.integer) or folds.min() < 0:
        raise InvalidArgument("folds must hold non-negative integer fold ids")

    all_idx = np.arange(folds.shape[0])
    cv_indices = []

    for i in range(int(folds.max()) + 1):
        is_val = folds == i
        cv_indices.append((all_idx[~is_val], all_idx[is_val]))

    return cv_indices
