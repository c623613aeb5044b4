import re
from typing import Tuple

POSITION_CODE_RE = re.compile(r"^([A-Z]+)(\d+)-([A-Z])(\d+)$")


def row_to_letter(row_index: int) -> str:
    """Converte índice de fila (1..26) para letra (A..Z)."""
    if row_index < 1:
        row_index = 1
    # Limitar a 26 letras caso extrapole
    row_index = min(row_index, 26)
    return chr(ord('A') + row_index - 1)


def position_code(row: str, number: int, level_code: str, index: int) -> str:
    """Monta o identificador de posição: {row}{number}-{levelCode}{index} (ex: A1-H1)."""
    return f"{row}{number}-{level_code}{index}"


def parse_position_code(code: str) -> Tuple[str, int, str, int]:
    """Decompõe 'A1-H1' em ('A', 1, 'H', 1)."""
    match = POSITION_CODE_RE.match(code.strip().upper()) if code else None
    if not match:
        raise ValueError(f"Código de posição inválido: {code!r}")
    row, number, level_code, index = match.groups()
    return row, int(number), level_code, int(index)
