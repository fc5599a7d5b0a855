"""
binned_kfold.cli

Command Line Interface.
The `demo` command reproduces the stratified vs. unstratified comparison on a
synthetic bimodal target.
"""

import argparse
import sys

import pandas as pd

from binned_kfold.config import FoldConfig
from binned_kfold.core.distribution import summarize_folds
from binned_kfold.core.exceptions import BinnedKFoldError
from binned_kfold.core.splits import SPARSE_BIN_POLICIES, SPREAD, create_folds
from binned_kfold.data.synthetic import make_bimodal_target
from binned_kfold.pipeline import compare_fold_strategies
from binned_kfold.utils.logging import log, set_level


def parse_n_bins(value):
    if value.lower() == "sturges":
        return "sturges"
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer or 'sturges', got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="binned-kfold", description="Stratified K-Fold for continuous targets")
    parser.add_argument("--log-level", type=str, default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- Demo ---
    p_demo = subparsers.add_parser("demo", help="Compare fold strategies on a synthetic bimodal target")
    p_demo.add_argument("--n-samples", type=int, default=300_000, help="Number of synthetic samples")
    p_demo.add_argument("--n-splits", type=int, default=5, help="Number of folds")
    p_demo.add_argument("--n-bins", type=parse_n_bins, default=None,
                        help="Equal-width bins to stratify on, or 'sturges'. Omit for unstratified folds")
    p_demo.add_argument("--shuffle", action="store_true", help="Shuffle within bins before splitting")
    p_demo.add_argument("--seed", type=int, default=42, help="Random seed for data and shuffling")
    p_demo.add_argument("--on-sparse-bin", choices=SPARSE_BIN_POLICIES, default=SPREAD,
                        help="What to do with bins smaller than n_splits")

    return parser


def run_demo(args) -> None:
    config = FoldConfig(
        n_splits=args.n_splits,
        n_bins=args.n_bins,
        shuffle=args.shuffle,
        random_state=args.seed,
        on_sparse_bin=args.on_sparse_bin,
    ).validate()

    y = make_bimodal_target(args.n_samples, seed=args.seed)
    log(f"Drew {len(y)} bimodal samples (seed={args.seed})")

    folds = create_folds(y, **config.as_kwargs())
    with pd.option_context("display.width", 120, "display.float_format", "{:.6f}".format):
        print(summarize_folds(y, folds).to_string())
        print()
        print(compare_fold_strategies(y, config).to_string(index=False))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_level(args.log_level)

    if args.command == "demo":
        try:
            run_demo(args)
        except BinnedKFoldError as exc:
            log(f"Error: {exc}", level="ERROR")
            sys.exit(1)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
