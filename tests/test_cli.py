import pytest

from binned_kfold.cli import main

def test_demo_stratified(capsys):
    main(["demo", "--n-samples", "2000", "--n-splits", "3", "--n-bins", "10"])
    out = capsys.readouterr().out
    assert "stratified" in out
    assert "unstratified" in out

def test_demo_sturges_shuffled(capsys):
    main(["demo", "--n-samples", "1000", "--n-bins", "sturges", "--shuffle", "--seed", "1"])
    assert "pvalue" in capsys.readouterr().out

def test_demo_bad_n_splits_exits():
    with pytest.raises(SystemExit) as exc:
        main(["demo", "--n-samples", "100", "--n-splits", "1"])
    assert exc.value.code == 1

def test_demo_rejects_bad_n_bins_flag():
    with pytest.raises(SystemExit) as exc:
        main(["demo", "--n-bins", "lots"])
    assert exc.value.code == 2

def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()
