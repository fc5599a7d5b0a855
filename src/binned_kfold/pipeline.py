"""
binned_kfold.pipeline

High-level helpers that work on tables and compare fold strategies.
"""

from typing import Optional

import pandas as pd

from binned_kfold.config import FoldConfig
from binned_kfold.core.binning import bin_target
from binned_kfold.core.distribution import pairwise_ks
from binned_kfold.core.splits import create_folds
from binned_kfold.utils.contract import ArrayLike, as_target_array, validate_frame
from binned_kfold.utils.logging import log


def create_kfold_frame(
    df: pd.DataFrame,
    target_col: str,
    config: Optional[FoldConfig] = None,
    fold_col: str = "kfold",
    bin_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a copy of `df` with a fold id column added.

    Args:
        df: Input table; left untouched.
        target_col: Continuous column to stratify on.
        config: Fold settings. Defaults to FoldConfig().
        fold_col: Name of the fold id column.
        bin_col: If given (and stratifying), also store the bin ids under this name.

    Returns:
        pd.DataFrame: The new table, same index and row order as `df`.
    """
    config = (config or FoldConfig()).validate()
    validate_frame(df, target_col)

    log(f"=== Building {config.n_splits} folds on '{target_col}' ({len(df)} rows) ===")
    folds = create_folds(df[target_col].to_numpy(), **config.as_kwargs())

    out = df.copy()
    if bin_col is not None and config.stratified:
        out[bin_col] = bin_target(df[target_col].to_numpy(), config.n_bins)
    out[fold_col] = folds
    return out


def compare_fold_strategies(y: ArrayLike, config: FoldConfig) -> pd.DataFrame:
    """
    Pairwise KS results for stratified and unstratified folds of the same target.

    Returns:
        pd.DataFrame: pairwise_ks columns plus a `mode` column
        ("stratified" / "unstratified"). Only the unstratified rows are
        returned when `config` has no bins.
    """
    config = config.validate()
    yt = as_target_array(y)

    frames = []
    if config.stratified:
        strat = pairwise_ks(yt, create_folds(yt, **config.as_kwargs()))
        strat.insert(0, "mode", "stratified")
        frames.append(strat)

    plain = pairwise_ks(yt, create_folds(yt, **config.unstratified().as_kwargs()))
    plain.insert(0, "mode", "unstratified")
    frames.append(plain)

    result = pd.concat(frames, ignore_index=True)
    for mode, sub in result.groupby("mode"):
        log(
            f"{mode}: KS statistic max={sub['statistic'].max():.5f}, "
            f"p-value min={sub['pvalue'].min():.3f}"
        )
    return result
