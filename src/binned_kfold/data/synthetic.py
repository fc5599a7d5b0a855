"""
binned_kfold.data.synthetic

Synthetic targets for demonstrating and testing stratification.
"""

from typing import Optional

import numpy as np
import pandas as pd

from binned_kfold.core.exceptions import InvalidArgument


def make_bimodal_target(
    n_samples: int,
    modes: tuple = (0.0, 6.0),
    scales: tuple = (1.0, 1.5),
    weight: float = 0.6,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Draw a two-component Gaussian mixture.

    Args:
        n_samples: Number of values to draw.
        modes: Means of the two components.
        scales: Standard deviations of the two components.
        weight: Probability of drawing from the first component.
        seed: Seed for numpy's Generator.

    Returns:
        np.ndarray: 1D float array of length n_samples, in random order.
    """
    if n_samples < 1:
        raise InvalidArgument(f"n_samples must be positive; got {n_samples}")
    if not 0.0 <= weight <= 1.0:
        raise InvalidArgument(f"weight must be in [0, 1]; got {weight}")

    rng = np.random.default_rng(seed)
    first = rng.random(n_samples) < weight
    y = np.where(
        first,
        rng.normal(modes[0], scales[0], n_samples),
        rng.normal(modes[1], scales[1], n_samples),
    )
    return y


def make_bimodal_frame(n_samples: int, target_col: str = "target", seed: Optional[int] = None) -> pd.DataFrame:
    """Bimodal target wrapped in a DataFrame with a sample_id column."""
    y = make_bimodal_target(n_samples, seed=seed)
    return pd.DataFrame({"sample_id": np.arange(n_samples), target_col: y})
