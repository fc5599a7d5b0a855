import numpy as np
import pandas as pd
import pytest

import binned_kfold.core.splits as splits_mod
from binned_kfold.core.binning import bin_target
from binned_kfold.core.exceptions import DegenerateBinning, InvalidArgument
from binned_kfold.core.splits import create_folds, fold_indices
from binned_kfold.data.synthetic import make_bimodal_target


@pytest.fixture(scope="module")
def bimodal():
    return make_bimodal_target(20_000, seed=7)


def _assert_balanced(folds, n_splits):
    sizes = np.bincount(folds, minlength=n_splits)
    assert sizes.max() - sizes.min() <= 1


def test_unstratified_contiguous_blocks():
    """Without bins the index sequence is cut into contiguous blocks."""
    folds = create_folds(np.arange(10.0), 3)
    assert folds.tolist() == [0, 0, 0, 0, 1, 1, 1, 2, 2, 2]

def test_stratified_contiguous_blocks_per_bin():
    """Each bin is cut into contiguous blocks in original order."""
    folds = create_folds(np.arange(10.0), 2, n_bins=2)
    assert folds.tolist() == [0, 0, 0, 1, 1, 0, 0, 1, 1, 1]

@pytest.mark.parametrize("n_bins", [None, 10, 200, "sturges"])
@pytest.mark.parametrize("n_splits", [2, 3, 5, 7])
def test_folds_partition_and_balance(bimodal, n_splits, n_bins):
    folds = create_folds(bimodal, n_splits, n_bins=n_bins)

    assert folds.shape == bimodal.shape
    assert set(np.unique(folds).tolist()) == set(range(n_splits))
    _assert_balanced(folds, n_splits)

    # fold_indices gives disjoint validation sets covering every index
    pairs = fold_indices(folds)
    val_all = np.concatenate([val for _, val in pairs])
    assert np.array_equal(np.sort(val_all), np.arange(len(bimodal)))
    for train, val in pairs:
        assert len(np.intersect1d(train, val)) == 0
        assert len(train) + len(val) == len(bimodal)

@pytest.mark.parametrize("shuffle", [False, True])
def test_per_bin_balance(bimodal, shuffle):
    n_splits, n_bins = 5, 50
    folds = create_folds(bimodal, n_splits, n_bins=n_bins, shuffle=shuffle, random_state=3)
    bins = bin_target(bimodal, n_bins)
    for b in np.unique(bins):
        _assert_balanced(folds[bins == b], n_splits)

def test_idempotent(bimodal):
    a = create_folds(bimodal, 5, n_bins=100)
    b = create_folds(bimodal, 5, n_bins=100)
    np.testing.assert_array_equal(a, b)

def test_shuffle_reproducible_with_seed(bimodal):
    a = create_folds(bimodal, 5, n_bins=100, shuffle=True, random_state=11)
    b = create_folds(bimodal, 5, n_bins=100, shuffle=True, random_state=11)
    c = create_folds(bimodal, 5, n_bins=100, shuffle=False)
    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, c)

def test_input_not_mutated():
    y = np.array([3.0, 1.0, 2.0, 5.0, 4.0, 0.0])
    before = y.copy()
    create_folds(y, 2, n_bins=2, shuffle=True, random_state=0)
    np.testing.assert_array_equal(y, before)

def test_accepts_list_and_series():
    y = [0.5, 1.5, 2.5, 3.5, 4.5, 5.5]
    np.testing.assert_array_equal(create_folds(y, 2, n_bins=2), create_folds(pd.Series(y), 2, n_bins=2))

@pytest.mark.parametrize("n_splits", [1, 0, -2, 2.0, True])
def test_bad_n_splits(n_splits):
    with pytest.raises(InvalidArgument):
        create_folds([1.0, 2.0, 3.0, 4.0], n_splits)

def test_empty_samples():
    with pytest.raises(InvalidArgument):
        create_folds([], 5)

def test_more_splits_than_samples():
    with pytest.raises(InvalidArgument):
        create_folds([1.0, 2.0, 3.0], 4)

def test_bad_n_bins():
    with pytest.raises(InvalidArgument):
        create_folds([1.0, 2.0, 3.0, 4.0], 2, n_bins=1)

def test_unknown_sparse_policy():
    with pytest.raises(InvalidArgument):
        create_folds([1.0, 2.0, 3.0, 4.0], 2, n_bins=2, on_sparse_bin="merge")

def test_sparse_bin_raise_policy():
    y = np.array([0.0] * 10 + [100.0])
    with pytest.raises(DegenerateBinning):
        create_folds(y, 2, n_bins=2, on_sparse_bin="raise")

def test_sparse_bin_spread_policy(monkeypatch):
    messages = []
    monkeypatch.setattr(splits_mod, "log", lambda msg, level="INFO": messages.append((level, msg)))

    y = np.array([0.0] * 10 + [100.0])
    folds = create_folds(y, 2, n_bins=2)

    assert np.bincount(folds).tolist() == [6, 5]
    assert any(level == "WARNING" for level, _ in messages)

def test_no_bin_can_feed_every_fold():
    """Every bin is smaller than n_splits: nothing to stratify, under any policy."""
    y = np.array([0.0, 1.0, 2.0, 3.0])
    with pytest.raises(DegenerateBinning):
        create_folds(y, 2, n_bins=4)

def test_constant_target_stratified():
    folds = create_folds(np.ones(9), 3, n_bins=4)
    assert np.bincount(folds).tolist() == [3, 3, 3]

def test_fold_indices_rejects_bad_input():
    with pytest.raises(InvalidArgument):
        fold_indices([])
    with pytest.raises(InvalidArgument):
        fold_indices([0, -1, 1])
