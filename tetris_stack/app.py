from __future__ import annotations

import argparse
import random
import sys
import time

from loguru import logger

from .constants import Settings, load_settings
from .console import ConsoleShell
from .factory import PieceFactory
from .models.piece_queue import PieceQueue
from .pieces import parse_kinds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tetris-stack",
        description="Simulador da fila de peças futuras do Tetris Stack.",
    )
    parser.add_argument("--capacity", type=int, default=None,
                        help="capacidade da fila (padrão: TETRIS_STACK_CAPACITY ou 5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="semente do RNG; sem ela usa time.time_ns()")
    parser.add_argument("--kinds", type=str, default=None,
                        help='tipos de peça, ex.: "IOTL"')
    parser.add_argument("--log-level", type=str, default=None,
                        help="nível do log em stderr (DEBUG, INFO, WARNING...)")
    parser.add_argument("--no-pause", action="store_true",
                        help="não espera ENTER depois de cada ação")
    parser.add_argument("--gui", action="store_true",
                        help="abre a prévia gráfica (arcade) em vez do menu no terminal")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Aplica as flags da linha de comando por cima da configuração do ambiente."""
    capacity = args.capacity if args.capacity is not None else base.capacity
    if capacity < 1:
        raise SystemExit(f"--capacity deve ser >= 1 (recebido {capacity})")

    kinds = base.kinds
    if args.kinds:
        try:
            kinds = parse_kinds(args.kinds)
        except ValueError as e:
            raise SystemExit(f"--kinds inválido: {e}") from e

    return Settings(
        capacity=capacity,
        kinds=kinds,
        seed=args.seed if args.seed is not None else base.seed,
        log_level=(args.log_level or base.log_level).upper(),
    )


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def build_queue(settings: Settings) -> PieceQueue:
    # uma única fábrica (e um único contador de ids) por execução
    seed = settings.seed if settings.seed is not None else time.time_ns()
    logger.info("rng_seed={}", seed)
    factory = PieceFactory(settings.kinds, rng=random.Random(seed))
    queue = PieceQueue(settings.capacity, factory)
    queue.fill(settings.capacity)
    logger.info("fila inicial com {} peças", queue.size)
    return queue


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args, load_settings())
    except RuntimeError as e:
        # configuração inválida no ambiente/.env
        raise SystemExit(str(e)) from e

    try:
        configure_logging(settings.log_level)
    except ValueError as e:
        raise SystemExit(f"nível de log inválido: {settings.log_level}") from e
    queue = build_queue(settings)

    if args.gui:
        # import tardio: o modo terminal não precisa de display
        from .gui import run_preview
        return run_preview(queue)

    return ConsoleShell(queue, pause=not args.no_pause).run()


if __name__ == "__main__":
    sys.exit(main())
