import logging
import httpx
from typing import Optional, Type, Union

from pydantic import BaseModel

from app.models.indicators import AcaoIndicators, ErrorKind, ErrorResult, FiiIndicators
from app.services.extractor import extract_value, parse_document, select_text
from app.services.fetcher import fetch_html
from app.services.normalizer import normalize
from app.services.resolver import resolve_ticker
from app.services.sites import FUNDSEXPLORER, INVESTIDOR10, Site

log = logging.getLogger("indicadores")


async def _assemble(
    raw_ticker: Optional[str],
    site: Site,
    model: Type[BaseModel],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Union[BaseModel, ErrorResult]:
    """
    Estratégia:
      1) Valida e normaliza o ticker
      2) GET na página do site (ticker minúsculo no path)
      3) Confere a âncora da cotação; sem ela a página não é de um ticker válido
      4) Extrai cada indicador da tabela do site
    Falhas esperadas voltam como ErrorResult, nunca como exceção.
    """
    if raw_ticker is None or not raw_ticker.strip():
        return ErrorResult(erro="Ticker não fornecido.", kind=ErrorKind.INVALID_INPUT)
    ticker = resolve_ticker(raw_ticker)
    if ticker is None:
        return ErrorResult(erro=f"Ticker inválido: {raw_ticker.strip()}", kind=ErrorKind.INVALID_INPUT)

    url = site.url_for(ticker)
    try:
        html = await fetch_html(url, transport=transport)
    except httpx.HTTPError as e:
        log.warning("%s: falha ao buscar %s: %s", site.name, url, e)
        return ErrorResult(
            erro=f"Falha ao buscar dados para o ticker {ticker}: {e}",
            kind=ErrorKind.TRANSPORT_FAILURE,
        )

    doc = parse_document(html)
    quote = select_text(doc, site.quote_selector)
    if not quote:
        log.info("%s: âncora de cotação ausente para %s", site.name, ticker)
        return ErrorResult(
            erro=f"Ticker {ticker} não encontrado: o ticker pode não existir ou a estrutura da página mudou.",
            kind=ErrorKind.STRUCTURE_MISMATCH,
        )

    values = {name: extract_value(doc, label, locator) for name, label, locator in site.indicators}
    missing = [name for name, v in values.items() if v is None]
    if missing:
        log.debug("%s: %s sem valor para %s", site.name, ticker, ", ".join(missing))

    return model(ticker=ticker, preco_atual=normalize(quote), **values)


# -------------------------
# API pública do módulo
# -------------------------
async def get_equity_indicators(
    ticker: Optional[str], transport: Optional[httpx.AsyncBaseTransport] = None
) -> Union[AcaoIndicators, ErrorResult]:
    return await _assemble(ticker, INVESTIDOR10, AcaoIndicators, transport=transport)


async def get_fund_indicators(
    ticker: Optional[str], transport: Optional[httpx.AsyncBaseTransport] = None
) -> Union[FiiIndicators, ErrorResult]:
    return await _assemble(ticker, FUNDSEXPLORER, FiiIndicators, transport=transport)
