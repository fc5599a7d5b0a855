"""
binned_kfold.core.distribution

Checks that folds carry the same target distribution.

The acceptance criterion for a stratified split is the two-sample
Kolmogorov-Smirnov test: the statistic is the largest absolute gap between the
empirical CDFs of two folds, and the asymptotic p-value tests the null
hypothesis that both folds were drawn from the same distribution.
"""

from itertools import combinations
from typing import NamedTuple

import numpy as np
import pandas as pd
from scipy import stats

from binned_kfold.core.exceptions import InvalidArgument
from binned_kfold.utils.contract import ArrayLike, as_target_array


class KSResult(NamedTuple):
    """Two-sample KS outcome; unpacks as (statistic, pvalue)."""
    statistic: float
    pvalue: float


def ks_test(sample_a: ArrayLike, sample_b: ArrayLike) -> KSResult:
    """
    Two-sample Kolmogorov-Smirnov test with the asymptotic p-value.

    Args:
        sample_a: First sample.
        sample_b: Second sample.

    Returns:
        KSResult: sup |ECDF_a - ECDF_b| and its p-value.
    """
    a = as_target_array(sample_a, "sample_a")
    b = as_target_array(sample_b, "sample_b")
    res = stats.ks_2samp(a, b, alternative="two-sided", method="asymp")
    return KSResult(statistic=float(res.statistic), pvalue=float(res.pvalue))


def _aligned(y: ArrayLike, folds: ArrayLike):
    yt = as_target_array(y, "y")
    f = np.asarray(folds).reshape(-1)
    if f.shape[0] != yt.shape[0]:
        raise InvalidArgument(f"Length mismatch: y={yt.shape[0]}, folds={f.shape[0]}")
    return yt, f


def pairwise_ks(y: ArrayLike, folds: ArrayLike) -> pd.DataFrame:
    """
    Run `ks_test` between the target values of every pair of folds.

    Returns:
        pd.DataFrame: Columns fold_a, fold_b, statistic, pvalue; one row per pair
        with fold_a < fold_b.
    """
    yt, f = _aligned(y, folds)
    fold_ids = np.unique(f)
    if fold_ids.shape[0] < 2:
        raise InvalidArgument("At least two folds are required for a pairwise comparison")

    rows = []
    for a, b in combinations(fold_ids.tolist(), 2):
        res = ks_test(yt[f == a], yt[f == b])
        rows.append({"fold_a": a, "fold_b": b, "statistic": res.statistic, "pvalue": res.pvalue})

    return pd.DataFrame(rows, columns=["fold_a", "fold_b", "statistic", "pvalue"])


def summarize_folds(y: ArrayLike, folds: ArrayLike) -> pd.DataFrame:
    """Per-fold size and moments of the target, indexed by fold id."""
    yt, f = _aligned(y, folds)
    df = pd.DataFrame({"fold": f, "target": yt})
    summary = df.groupby("fold")["target"].agg(["count", "mean", "std", "min", "max"])
    return summary.rename(columns={"count": "n"})
