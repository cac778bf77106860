import pytest

from poker_equity.cli import build_parser, config_from_args, main
from poker_equity.config import EquityConfig
from poker_equity.helpers.cards import Hand, parse_hand


def test_numeric_output_is_reproducible(capsys):
    argv = ["--player", "As Ah", "--opponent", "2c 7d", "--samples", "2000", "--output", "numeric"]
    assert main(argv) == 0
    first = capsys.readouterr().out.strip()
    assert main(argv) == 0
    second = capsys.readouterr().out.strip()
    assert first == second
    assert 0.7 < float(first) <= 1.0


def test_pretty_output(capsys):
    assert main(["-p", "As Ah", "-o", "2c 7d", "-o", "Kd Kh", "--samples", "500"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("As Ah has ")
    assert out.strip().endswith("equity on preflop against [2c 7d, Kd Kh].")


def test_performance_goes_to_stderr(capsys):
    assert main(["--hero", "As Ah", "--samples", "300", "--performance", "--output", "numeric"]) == 0
    captured = capsys.readouterr()
    assert "300 samples in" in captured.err
    assert "samples/ms." in captured.err
    float(captured.out)


def test_unparseable_cards_are_usage_errors(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--player", "Zz 2c"])
    assert exc.value.code == 2
    assert "Unable to parse Zz 2c" in capsys.readouterr().err


def test_too_many_board_cards(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--board", "As Ks Qs Js Ts 9s"])
    assert exc.value.code == 2
    assert "Maximum 5 cards allowed" in capsys.readouterr().err


def test_card_in_two_roles_is_reported(capsys):
    assert main(["--player", "As Ah", "--opponent", "As Kd", "--samples", "10"]) == 1
    assert "error: Card assigned more than once: As" in capsys.readouterr().err


def test_too_many_opponents_is_reported(capsys):
    assert main(["--player", "As Ah", "-u", "22", "--samples", "10"]) == 1
    assert "error: Cannot deal 51 cards, only 50 remain" in capsys.readouterr().err


def test_defaults_to_one_random_opponent():
    cfg = config_from_args(build_parser().parse_args([]))
    assert cfg.opponents == (Hand(),)
    assert cfg.samples == 100_000
    assert cfg.seed == 42
    assert cfg.output == "pretty"


def test_known_then_unknown_opponents():
    cfg = config_from_args(build_parser().parse_args(["-o", "Kd Kh", "-u", "2"]))
    assert cfg.opponents == (parse_hand("Kd Kh"), Hand(), Hand())


def test_config_rejects_unknown_output():
    with pytest.raises(ValueError):
        EquityConfig(output="loud")


def test_unknown_opponents_add_to_the_default_random_one():
    cfg = config_from_args(build_parser().parse_args(["-u", "2"]))
    assert cfg.opponents == (Hand(), Hand(), Hand())
