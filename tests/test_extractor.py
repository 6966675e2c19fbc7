import pytest

from app.services.extractor import (
    BoxLocator, CardLocator, SiblingLocator,
    extract_value, locate_text, parse_document, select_text,
)
from app.services.sites import FUNDSEXPLORER, INVESTIDOR10
from conftest import load_fixture

CARD = CardLocator(header="._card-header span", container_class="_card", value="._card-body span")
BOX = BoxLocator(container=".indicators__box", value="p b")


@pytest.fixture
def card_doc(investidor10_html):
    return parse_document(investidor10_html)


@pytest.fixture
def box_doc(fundsexplorer_html):
    return parse_document(fundsexplorer_html)


@pytest.mark.parametrize("label,exp", [
    ("P/L", 4.12),
    ("P/VP", 0.89),
    ("DY", 9.87),
    ("ROE", 21.34),
    ("Dív. Bruta / Patrimônio", 1234.56),
])
def test_card_strategy(card_doc, label, exp):
    assert extract_value(card_doc, label, CARD) == pytest.approx(exp)

def test_card_strategy_raw_text(card_doc):
    assert locate_text(card_doc, "DY", CARD) == "9,87%"

def test_card_strategy_missing_label(card_doc):
    assert locate_text(card_doc, "Dív. Líquida / EBITDA", CARD) is None
    assert extract_value(card_doc, "Dív. Líquida / EBITDA", CARD) is None

def test_card_strategy_dash_is_null(card_doc):
    assert extract_value(card_doc, "Liquidez Corrente", CARD) is None

@pytest.mark.parametrize("label,exp", [
    ("Liquidez Média Diária", 2_500_000),
    ("Último Rendimento", 0.82),
    ("Patrimônio Líquido", 1_200_000_000),
    ("P/VP", 1.04),
    ("Quantidade de imóveis", 24),
])
def test_box_strategy(box_doc, label, exp):
    assert extract_value(box_doc, label, BOX) == pytest.approx(exp)

def test_box_strategy_missing_label(box_doc):
    assert extract_value(box_doc, "Vacância Financeira", BOX) is None

def test_sibling_strategy_scoped():
    doc = parse_document(load_fixture("top_info.html"))
    loc = SiblingLocator(scope=".top-info")
    assert extract_value(doc, "P/L", loc) == pytest.approx(6.7)
    assert extract_value(doc, "Dividend Yield", loc) == pytest.approx(12.5)
    # rótulo sem irmão
    assert extract_value(doc, "ROE", loc) is None
    # fora do escopo
    assert extract_value(doc, "P/VP", loc) is None

def test_sibling_strategy_whole_document():
    doc = parse_document(load_fixture("top_info.html"))
    assert extract_value(doc, "P/VP", SiblingLocator()) == pytest.approx(99.0)

def test_unknown_strategy(card_doc):
    with pytest.raises(TypeError):
        locate_text(card_doc, "P/L", object())

def test_quote_anchors(card_doc, box_doc):
    assert select_text(card_doc, INVESTIDOR10.quote_selector) == "R$ 27,45"
    assert select_text(box_doc, FUNDSEXPLORER.quote_selector) == "R$ 112,50"
    assert select_text(box_doc, INVESTIDOR10.quote_selector) is None

def test_url_templates():
    assert INVESTIDOR10.url_for("BBAS3") == "https://investidor10.com.br/acoes/bbas3/"
    assert FUNDSEXPLORER.url_for("ALZR11") == "https://www.fundsexplorer.com.br/funds/alzr11/"
