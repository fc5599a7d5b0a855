"""
binned_kfold.config

Fold-building hyperparameters bundled into one immutable object, so the CLI and
the pipeline helpers pass them around together.
"""

from dataclasses import dataclass, replace
from typing import Optional

from binned_kfold.core.binning import BinSpec, resolve_n_bins
from binned_kfold.core.exceptions import InvalidArgument
from binned_kfold.core.splits import SPARSE_BIN_POLICIES, SPREAD, validate_n_splits


@dataclass(frozen=True)
class FoldConfig:
    """Settings for `create_folds`. `n_bins=None` means unstratified folds."""
    n_splits: int = 5
    n_bins: Optional[BinSpec] = None
    shuffle: bool = False
    random_state: Optional[int] = None
    on_sparse_bin: str = SPREAD

    @property
    def stratified(self) -> bool:
        return self.n_bins is not None

    def validate(self) -> "FoldConfig":
        """Raise InvalidArgument on a bad setting; returns self for chaining."""
        validate_n_splits(self.n_splits)
        if self.n_bins is not None:
            # Sample count only matters for named rules; any positive value checks the name.
            resolve_n_bins(self.n_bins, n_samples=1)
        if self.on_sparse_bin not in SPARSE_BIN_POLICIES:
            raise InvalidArgument(f"on_sparse_bin must be one of {SPARSE_BIN_POLICIES}; got {self.on_sparse_bin!r}")
        return self

    def unstratified(self) -> "FoldConfig":
        """Same settings with stratification switched off."""
        return replace(self, n_bins=None)

    def as_kwargs(self) -> dict:
        return {
            "n_splits": self.n_splits,
            "n_bins": self.n_bins,
            "shuffle": self.shuffle,
            "random_state": self.random_state,
            "on_sparse_bin": self.on_sparse_bin,
        }
