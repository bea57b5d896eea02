CYAN    = ( 86, 180, 233)
YELLOW  = (240, 228,  66)
MAGENTA = (204, 121, 167)
GREEN   = (  0, 158, 115)
RED     = (213,  94,   0)
BLUE    = (  0, 114, 178)
ORANGE  = (230, 159,   0)
GREY    = (150, 150, 150)

# alfabeto padrão (simplificado para 4 tipos)
DEFAULT_KINDS = ("I", "O", "T", "L")

KIND_COLORS = {
    "I": CYAN,
    "O": YELLOW,
    "T": MAGENTA,
    "S": GREEN,
    "Z": RED,
    "J": BLUE,
    "L": ORANGE,
}


def kind_color(kind: str) -> tuple:
    # tipos fora do conjunto clássico ficam cinza
    return KIND_COLORS.get(kind, GREY)


def parse_kinds(raw: str) -> tuple[str, ...]:
    """
    Converte "IOTL" (ou "I,O,T,L") na tupla de tipos.
    Levanta ValueError se vazio ou com repetição.
    """
    kinds = tuple(k for k in raw.replace(",", "").replace(" ", "").upper())
    if not kinds:
        raise ValueError("alfabeto de tipos vazio")
    if len(set(kinds)) != len(kinds):
        raise ValueError(f"tipos repetidos em {raw!r}")
    return kinds
