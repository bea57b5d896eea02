# tetris_stack/constants.py
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from .pieces import DEFAULT_KINDS, parse_kinds

# capacidade fixa da fila de peças futuras
QUEUE_CAPACITY = 5
LOG_LEVEL = "WARNING"

ENV_CAPACITY = "TETRIS_STACK_CAPACITY"
ENV_KINDS = "TETRIS_STACK_KINDS"
ENV_SEED = "TETRIS_STACK_SEED"
ENV_LOG_LEVEL = "TETRIS_STACK_LOG_LEVEL"

# janela da prévia (arcade)
CELL_SIZE = 56
CELL_GAP = 14
WINDOW_HEIGHT = 260
MIN_WINDOW_WIDTH = 520


@dataclass(frozen=True)
class Settings:
    capacity: int = QUEUE_CAPACITY
    kinds: tuple = DEFAULT_KINDS
    seed: int | None = None
    log_level: str = LOG_LEVEL


def _int_var(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} deve ser um inteiro (recebido {raw!r})") from None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Lê a configuração do ambiente.
    Sem `env`, carrega o .env (load_dotenv) e usa os.environ.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    capacity = _int_var(env, ENV_CAPACITY)
    if capacity is None:
        capacity = QUEUE_CAPACITY
    if capacity < 1:
        raise RuntimeError(f"{ENV_CAPACITY} deve ser >= 1 (recebido {capacity})")

    kinds = DEFAULT_KINDS
    raw_kinds = env.get(ENV_KINDS)
    if raw_kinds:
        try:
            kinds = parse_kinds(raw_kinds)
        except ValueError as e:
            raise RuntimeError(f"{ENV_KINDS} inválido: {e}") from e

    log_level = (env.get(ENV_LOG_LEVEL) or LOG_LEVEL).upper()

    return Settings(
        capacity=capacity,
        kinds=kinds,
        seed=_int_var(env, ENV_SEED),
        log_level=log_level,
    )
