from __future__ import annotations

from enum import Enum
from typing import List, Optional

from loguru import logger

from tetris_stack.factory import PieceFactory
from tetris_stack.models.piece import Piece


class QueueError(Enum):
    FULL = "full"
    EMPTY = "empty"


class QueueState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


class PieceQueue:
    """
    Fila circular de capacidade fixa com as próximas peças.

    Guarda um array de slots, o índice da frente e o tamanho atual; o fim
    é sempre (frente + tamanho - 1) % capacidade. enqueue/dequeue devolvem
    um par (peça, erro) em vez de levantar exceção: fila cheia e fila vazia
    são situações normais de jogo.
    """

    def __init__(self, capacity: int, factory: PieceFactory):
        if capacity < 1:
            raise ValueError(f"capacidade deve ser >= 1 (recebido {capacity})")
        self.capacity = capacity
        self.factory = factory
        self._slots: List[Optional[Piece]] = [None] * capacity
        self._front = 0
        self._size = 0
        logger.debug("fila criada com capacidade {}", capacity)

    # ----- Estado -----
    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    @property
    def state(self) -> QueueState:
        if self.is_empty():
            return QueueState.EMPTY
        if self.is_full():
            return QueueState.FULL
        return QueueState.PARTIAL

    def _advance(self, index: int, steps: int = 1) -> int:
        return (index + steps) % self.capacity

    # ----- Operações -----
    def fill(self, count: int) -> int:
        """Enfileira até `count` peças novas, sem passar da capacidade. Retorna quantas entraram."""
        count = min(count, self.capacity - self._size)
        for _ in range(count):
            self.enqueue()
        return max(count, 0)

    def enqueue(self) -> tuple[Piece | None, QueueError | None]:
        # checa antes de gerar: fila cheia não consome id
        if self.is_full():
            logger.debug("enqueue recusado: fila cheia ({}/{})", self._size, self.capacity)
            return None, QueueError.FULL

        piece = self.factory.generate()
        self._slots[self._advance(self._front, self._size)] = piece
        self._size += 1
        logger.debug("enqueue {} ({}/{})", piece, self._size, self.capacity)
        return piece, None

    def dequeue(self) -> tuple[Piece | None, QueueError | None]:
        if self.is_empty():
            logger.debug("dequeue recusado: fila vazia")
            return None, QueueError.EMPTY

        piece = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._advance(self._front)
        self._size -= 1
        logger.debug("dequeue {} ({}/{})", piece, self._size, self.capacity)
        return piece, None

    def snapshot(self) -> tuple[Piece, ...]:
        # da frente para o fim; tupla para poder iterar de novo sem mexer na fila
        return tuple(
            self._slots[self._advance(self._front, i)] for i in range(self._size)
        )

    def __iter__(self):
        return iter(self.snapshot())
