"""
binned_kfold.utils.contract

Input contract validation for targets and tables.
"""

from typing import Sequence, Union

import numpy as np
import pandas as pd

from binned_kfold.core.exceptions import InvalidArgument

ArrayLike = Union[np.ndarray, Sequence[float], pd.Series]


def as_target_array(y: ArrayLike, name: str = "samples") -> np.ndarray:
    """
    Convert a target vector into a 1D float numpy array.

    Column vectors of shape (n, 1) are flattened. The target must be non-empty
    and contain only finite values.

    Raises:
        InvalidArgument: If the input is empty, not one-dimensional, non-numeric
            or holds NaN/inf.
    """
    try:
        arr = np.asarray(y, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be numeric: {exc}") from exc

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr.reshape(-1)
    if arr.ndim != 1:
        raise InvalidArgument(f"{name} must be 1D; got shape {arr.shape}")
    if arr.shape[0] == 0:
        raise InvalidArgument(f"{name} must not be empty")

    n_bad = int((~np.isfinite(arr)).sum())
    if n_bad:
        raise InvalidArgument(f"{name} contains {n_bad} non-finite values")
    return arr


def validate_frame(df: pd.DataFrame, target_col: str) -> None:
    """
    Validates that a table can be split on `target_col`.

    Args:
        df: Input DataFrame.
        target_col: Name of the continuous target column.

    Raises:
        InvalidArgument: If the frame is empty, lacks the column, or the column
            is not numeric.
    """
    if df.empty:
        raise InvalidArgument("Input table is empty")

    if target_col not in df.columns:
        raise InvalidArgument(f"Input table missing target column: {target_col!r}")

    if not pd.api.types.is_numeric_dtype(df[target_col]):
        raise InvalidArgument(f"Target column {target_col!r} is not numeric (dtype={df[target_col].dtype})")
