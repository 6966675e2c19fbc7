import os
from dataclasses import dataclass
from typing import Tuple

from app.services.extractor import BoxLocator, CardLocator

INVESTIDOR10_URL = os.getenv("INVESTIDOR10_URL", "https://investidor10.com.br/acoes/{ticker}/")
FUNDSEXPLORER_URL = os.getenv("FUNDSEXPLORER_URL", "https://www.fundsexplorer.com.br/funds/{ticker}/")


@dataclass(frozen=True)
class Site:
    name: str
    url_template: str
    # âncora da cotação: se não existir, a página não é de um ticker válido
    quote_selector: str
    # (campo de saída, rótulo na página, estratégia)
    indicators: Tuple[Tuple[str, str, object], ...]

    def url_for(self, ticker: str) -> str:
        return self.url_template.format(ticker=ticker.lower())


_CARD = CardLocator(header="._card-header span", container_class="_card", value="._card-body span")
_BOX = BoxLocator(container=".indicators__box", value="p b")

INVESTIDOR10 = Site(
    name="investidor10",
    url_template=INVESTIDOR10_URL,
    quote_selector="#cards-ticker ._card.cotacao .value",
    indicators=(
        ("pl", "P/L", _CARD),
        ("pvp", "P/VP", _CARD),
        ("dy", "DY", _CARD),
        ("roe", "ROE", _CARD),
        ("liquidez_corrente", "Liquidez Corrente", _CARD),
        ("div_liq_ebitda", "Dív. Líquida / EBITDA", _CARD),
        ("cagr_lucros", "CAGR Lucros 5 anos", _CARD),
        ("div_patrimonio", "Dív. Bruta / Patrimônio", _CARD),
        ("cres_rec_5a", "Cresc. Receita 5 anos", _CARD),
        ("cres_lucro_5a", "Cresc. Lucro 5 anos", _CARD),
    ),
)

FUNDSEXPLORER = Site(
    name="fundsexplorer",
    url_template=FUNDSEXPLORER_URL,
    quote_selector=".item--quotation .item-value .value",
    indicators=(
        ("liquidez_media_diaria", "Liquidez Média Diária", _BOX),
        ("ultimo_rendimento", "Último Rendimento", _BOX),
        ("dividend_yield", "Dividend Yield", _BOX),
        ("patrimonio_liquido", "Patrimônio Líquido", _BOX),
        ("valor_patrimonial", "Valor Patrimonial", _BOX),
        ("pvp", "P/VP", _BOX),
        ("rentabilidade_no_mes", "Rentab. no mês", _BOX),
        ("vacancia_fisica", "Vacância Física", _BOX),
        ("vacancia_financeira", "Vacância Financeira", _BOX),
        ("qtd_imoveis", "Quantidade de imóveis", _BOX),
    ),
)
