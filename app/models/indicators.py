from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional


class AcaoIndicators(BaseModel):
    ticker: str
    preco_atual: Optional[float] = None         # R$

    # valuation
    pl: Optional[float] = None                  # P/L
    pvp: Optional[float] = None                 # P/VP
    dy: Optional[float] = None                  # %
    roe: Optional[float] = None                 # %

    # endividamento / liquidez
    liquidez_corrente: Optional[float] = None
    div_liq_ebitda: Optional[float] = None
    cagr_lucros: Optional[float] = None         # %
    div_patrimonio: Optional[float] = None

    # crescimento
    cres_rec_5a: Optional[float] = None         # %
    cres_lucro_5a: Optional[float] = None       # %


class FiiIndicators(BaseModel):
    ticker: str
    preco_atual: Optional[float] = None               # R$
    liquidez_media_diaria: Optional[float] = None     # R$
    ultimo_rendimento: Optional[float] = None         # R$ por cota
    dividend_yield: Optional[float] = None            # %
    patrimonio_liquido: Optional[float] = None        # R$
    valor_patrimonial: Optional[float] = None         # R$ por cota
    pvp: Optional[float] = None
    rentabilidade_no_mes: Optional[float] = None      # %
    vacancia_fisica: Optional[float] = None           # %
    vacancia_financeira: Optional[float] = None       # %
    qtd_imoveis: Optional[float] = None


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    TRANSPORT_FAILURE = "transport_failure"
    STRUCTURE_MISMATCH = "structure_mismatch"


class ErrorResult(BaseModel):
    erro: str = Field(..., description="Mensagem legível do erro")
    kind: ErrorKind = Field(..., exclude=True)
