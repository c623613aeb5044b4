"""
Classificação do estado de um material a partir da condição (0-100%)
"""
from models.material import MaterialState
from services.errors import ValidationError

GOOD_THRESHOLD = 80
WARNING_THRESHOLD = 40


def classify(condition: int) -> MaterialState:
    """
    Converte a condição em estado:
    - >= 80: good
    - 40..79: warning
    - < 40: bad
    Valores fora de [0, 100] são rejeitados.
    """
    if isinstance(condition, bool) or not isinstance(condition, int):
        raise ValidationError(f"Condição inválida: {condition!r}")
    if condition < 0 or condition > 100:
        raise ValidationError(f"Condição deve estar entre 0 e 100 (recebido {condition})")

    if condition >= GOOD_THRESHOLD:
        return MaterialState.GOOD
    if condition >= WARNING_THRESHOLD:
        return MaterialState.WARNING
    return MaterialState.BAD
