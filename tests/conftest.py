"""
Fixtures compartilhadas: RNG com semente fixa, fábrica e filas prontas.
"""

import random
import sys
from typing import Callable, Iterator

import pytest
from loguru import logger

from tetris_stack.factory import PieceFactory
from tetris_stack.models.piece_queue import PieceQueue


class ScriptedRandom:
    """Fonte 'aleatória' que devolve os tipos numa ordem roteirizada."""

    def __init__(self, picks: list[str]):
        self.picks = list(picks)
        self.calls = 0

    def choice(self, seq):
        pick = self.picks[self.calls % len(self.picks)]
        self.calls += 1
        assert pick in seq
        return pick


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """app.main troca os sinks do loguru; volta ao sink padrão depois de cada teste."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def scripted_rng() -> Callable[[list[str]], ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def factory(rng: random.Random) -> PieceFactory:
    return PieceFactory(rng=rng)


@pytest.fixture
def empty_queue(factory: PieceFactory) -> PieceQueue:
    return PieceQueue(5, factory)


@pytest.fixture
def full_queue(factory: PieceFactory) -> PieceQueue:
    queue = PieceQueue(5, factory)
    queue.fill(5)
    return queue
