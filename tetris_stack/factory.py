# tetris_stack/factory.py
import random
from typing import Sequence

from loguru import logger

from .pieces import DEFAULT_KINDS
from .models.piece import Piece


def random_kind(kinds: Sequence[str], rng: random.Random) -> str:
    """Sorteia um tipo, com probabilidade uniforme, usando o RNG passado."""
    return rng.choice(kinds)


class PieceFactory:
    """
    Gera peças com tipo aleatório e id único.

    O contador de ids pertence à instância: crie uma só fábrica por processo
    e compartilhe-a entre quem precisar de peças novas.
    """

    def __init__(self, kinds: Sequence[str] = DEFAULT_KINDS,
                 rng: random.Random | None = None, start_id: int = 0):
        if not kinds:
            raise ValueError("PieceFactory precisa de pelo menos um tipo")
        if start_id < 0:
            raise ValueError("start_id não pode ser negativo")
        self.kinds = tuple(kinds)
        self._rng = rng if rng is not None else random.Random()
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        # id que a próxima peça vai receber
        return self._next_id

    def generate(self) -> Piece:
        piece = Piece(random_kind(self.kinds, self._rng), self._next_id)
        self._next_id += 1
        logger.debug("peça gerada: {}", piece)
        return piece
