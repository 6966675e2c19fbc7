import re
from typing import Optional

# PETR4, VALE3, ALZR11, BPAC11...
_TICKER = re.compile(r"[A-Z0-9]+")


def resolve_ticker(q: Optional[str]) -> Optional[str]:
    """
    Normaliza o input do usuário para o código canônico (maiúsculas, sem espaços).
    Retorna None para entrada vazia ou com caracteres fora de [A-Z0-9].
    """
    if q is None:
        return None
    u = q.strip().upper()
    if not _TICKER.fullmatch(u):
        return None
    return u
