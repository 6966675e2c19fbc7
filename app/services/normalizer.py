import re
import logging
from typing import Optional, Union

log = logging.getLogger("indicadores")

# Marcadores de "sem valor" publicados pelos sites
_EMPTY = {"", "-", "n/a"}

# sinal antes da moeda é preservado: "-R$ 5,00" -> "-5,00"
_CURRENCY = re.compile(r"^\s*([-+]?)\s*(R\$|US\$|\$|€)\s*")

_NUMBER = re.compile(r"([-+]?\d+(\.\d+)?)\s*([kKmMbBtT])?$")

_MULTIPLIERS = {
    "k": 1e3,
    "m": 1e6,
    "b": 1e9,
    "t": 1e12,
}


def normalize(raw: Union[str, float, int, None]) -> Optional[float]:
    """
    Converte um valor no formato pt-BR em float.

      "1.234,56"  -> 1234.56
      "R$ 12,30"  -> 12.3
      "-R$ 5,00"  -> -5.0
      "9,87%"     -> 9.87
      "1,5M"      -> 1500000.0
      "-" / "N/A" -> None

    Números já convertidos passam direto. A forma textual de um número já
    convertido ("1234.56") não é suportada: o ponto é sempre separador de
    milhar, então o resultado seria 123456.0.
    Texto que não vira número retorna None.
    """
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)

    s = str(raw).strip()
    if s.lower() in _EMPTY:
        return None

    s = _CURRENCY.sub(r"\1", s).replace("%", "").strip()
    s = s.replace(".", "").replace(",", ".")
    if s in _EMPTY:
        return None

    # sufixos de magnitude depois da troca da vírgula decimal
    m = _NUMBER.match(s)
    if m:
        v = float(m.group(1))
        suf = (m.group(3) or "").lower()
        return v * _MULTIPLIERS.get(suf, 1.0)

    log.debug("valor não numérico descartado: %r", raw)
    return None
