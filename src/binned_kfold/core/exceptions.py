"""
binned_kfold.core.exceptions

Error types raised by the fold builders. Both derive from ValueError so callers
that already guard against bad arguments keep working.
"""


class BinnedKFoldError(ValueError):
    """Base class for all errors raised by binned_kfold."""


class InvalidArgument(BinnedKFoldError):
    """Bad n_splits / n_bins, empty or non-finite targets, unknown options."""


class DegenerateBinning(BinnedKFoldError):
    """A bin holds too few samples to be spread over the requested folds."""
