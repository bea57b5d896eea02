# tetris_stack/console.py
from __future__ import annotations

from typing import Callable

from loguru import logger

from .models.piece_queue import PieceQueue, QueueError

PLAY = 1
INSERT = 2
QUIT = 0

MENU = (
    "\nOpcoes de acao:\n"
    "1. Jogar peca (dequeue)\n"
    "2. Inserir nova peca (enqueue)\n"
    "0. Sair"
)
PROMPT = "Digite o codigo da acao: "


# ---------- formatação ----------

def format_queue(queue: PieceQueue) -> str:
    lines = [f"\n--- ESTADO ATUAL DA FILA ({queue.size}/{queue.capacity}) ---"]
    pieces = queue.snapshot()
    if not pieces:
        lines.append("Fila de pecas: [VAZIA]")
        return "\n".join(lines)

    lines.append("Fila de pecas: " + " -> ".join(str(p) for p in pieces))
    lines.append("--- FIM DA FILA ---")
    return "\n".join(lines)


def play_message(queue: PieceQueue) -> str:
    """Joga a peça da frente e devolve a mensagem para o usuário."""
    piece, error = queue.dequeue()
    if error is QueueError.EMPTY:
        return "Fila vazia! Nao ha pecas para jogar."
    return f"PECA JOGADA: {piece} removida da frente da fila."


def insert_message(queue: PieceQueue) -> str:
    """Insere uma peça nova no fim e devolve a mensagem para o usuário."""
    piece, error = queue.enqueue()
    if error is QueueError.FULL:
        return f"Fila cheia! Nao e possivel inserir mais pecas. Maximo: {queue.capacity}."
    return f"PECA INSERIDA: {piece} adicionada ao final da fila."


# ============================================================
#                        SHELL INTERATIVO
# ============================================================


class ConsoleShell:
    """
    Menu em loop no terminal: mostra a fila, lê a opção e aplica na fila.

    read/write são injetáveis (por padrão input/print) para rodar com
    entradas roteirizadas nos testes.
    """

    def __init__(self, queue: PieceQueue,
                 read: Callable[[str], str] | None = None,
                 write: Callable[[str], None] | None = None,
                 pause: bool = True):
        self.queue = queue
        self._read = read or input
        self._write = write or print
        self.pause = pause

    def run(self) -> int:
        while True:
            self._write(format_queue(self.queue))
            self._write(MENU)
            try:
                line = self._read(PROMPT)
            except (EOFError, KeyboardInterrupt):
                # fim da entrada conta como sair
                logger.info("entrada encerrada, saindo")
                self._write("")
                break

            if not self.handle(line):
                break
        return 0

    def handle(self, line: str) -> bool:
        """Aplica uma linha de entrada. Retorna False quando o usuário pede para sair."""
        try:
            option = int(line.strip())
        except ValueError:
            # linha descartada; fila e contador de ids intactos
            logger.debug("entrada não numérica ignorada: {!r}", line)
            self._write("\nOpcao invalida. Por favor, digite um numero.")
            return True

        if option == QUIT:
            self._write("\nSaindo do Tetris Stack Simulator. Ate logo!")
            return False

        if option == PLAY:
            self._write("\n" + play_message(self.queue))
        elif option == INSERT:
            self._write("\n" + insert_message(self.queue))
        else:
            self._write("\nOpcao invalida. Tente novamente.")

        if self.pause:
            return self._wait_enter()
        return True

    def _wait_enter(self) -> bool:
        try:
            self._read("\nPressione ENTER para continuar...")
        except (EOFError, KeyboardInterrupt):
            # fim da entrada ou Ctrl-C na pausa também encerra
            logger.info("entrada encerrada na pausa, saindo")
            self._write("")
            return False
        return True
