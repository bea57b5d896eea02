"""Testes de tetris_stack/app.py (linha de comando e montagem da fila)"""

import pytest

from tetris_stack import app
from tetris_stack.constants import Settings
from tetris_stack.models.piece_queue import QueueState


def parse(*argv: str):
    return app.build_parser().parse_args(list(argv))


def test_flags_override_environment() -> None:
    base = Settings(capacity=5, kinds=("I", "O"), seed=1, log_level="WARNING")
    settings = app.resolve_settings(
        parse("--capacity", "3", "--seed", "9", "--kinds", "TL", "--log-level", "info"), base
    )
    assert settings == Settings(capacity=3, kinds=("T", "L"), seed=9, log_level="INFO")


def test_without_flags_environment_wins() -> None:
    base = Settings(capacity=4, seed=2)
    assert app.resolve_settings(parse(), base) == base


@pytest.mark.parametrize("argv", [("--capacity", "0"), ("--kinds", "II")])
def test_invalid_flags_exit(argv: tuple) -> None:
    with pytest.raises(SystemExit):
        app.resolve_settings(parse(*argv), Settings())


def test_build_queue_starts_full_and_reproducible() -> None:
    settings = Settings(capacity=5, seed=123)
    a = app.build_queue(settings)
    b = app.build_queue(settings)
    assert a.state == QueueState.FULL
    assert [p.id for p in a.snapshot()] == [0, 1, 2, 3, 4]
    assert a.snapshot() == b.snapshot()


def test_main_runs_console_until_quit(monkeypatch, capsys) -> None:
    answers = iter(["1", "2", "2", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    monkeypatch.setattr(app, "load_settings", lambda: Settings(seed=5))

    assert app.main(["--no-pause"]) == 0

    out = capsys.readouterr().out
    assert "PECA JOGADA: " in out
    assert "PECA INSERIDA: " in out
    assert "Fila cheia! Nao e possivel inserir mais pecas. Maximo: 5." in out
    assert "Saindo do Tetris Stack Simulator" in out


def test_main_rejects_bad_environment(monkeypatch) -> None:
    def broken():
        raise RuntimeError("TETRIS_STACK_CAPACITY deve ser um inteiro")

    monkeypatch.setattr(app, "load_settings", broken)
    with pytest.raises(SystemExit):
        app.main([])


def test_main_rejects_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setattr(app, "load_settings", lambda: Settings(seed=5))
    with pytest.raises(SystemExit, match="nível de log inválido: NOPE"):
        app.main(["--log-level", "NOPE"])
