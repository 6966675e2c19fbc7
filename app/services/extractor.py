from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

from app.services.normalizer import normalize


# -------------------------
# Estratégias de localização (rótulo -> valor)
# -------------------------
@dataclass(frozen=True)
class SiblingLocator:
    """Rótulo em um elemento, valor no próximo irmão."""
    scope: Optional[str] = None


@dataclass(frozen=True)
class CardLocator:
    """Cabeçalho com o rótulo (title ou texto) dentro de um cartão; valor no corpo do cartão."""
    header: str
    container_class: str
    value: str


@dataclass(frozen=True)
class BoxLocator:
    """Caixa cujo texto contém o rótulo; valor no primeiro elemento em destaque."""
    container: str
    value: str


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _text(tag: Optional[Tag]) -> Optional[str]:
    if tag is None:
        return None
    return tag.get_text(" ", strip=True)


def _locate_sibling(doc: BeautifulSoup, label: str, loc: SiblingLocator) -> Optional[str]:
    scopes = doc.select(loc.scope) if loc.scope else [doc]
    for scope in scopes:
        lab = scope.find(string=lambda s: s is not None and s.strip() == label)
        if lab is None:
            continue
        nxt = lab.parent.find_next_sibling(True) if lab.parent is not None else None
        if nxt is not None:
            return _text(nxt)
    return None


def _locate_card(doc: BeautifulSoup, label: str, loc: CardLocator) -> Optional[str]:
    for header in doc.select(loc.header):
        if header.get("title") != label and header.get_text(strip=True) != label:
            continue
        card = header.find_parent(class_=loc.container_class)
        if card is None:
            continue
        return _text(card.select_one(loc.value))
    return None


def _locate_box(doc: BeautifulSoup, label: str, loc: BoxLocator) -> Optional[str]:
    for box in doc.select(loc.container):
        if label not in box.get_text(" ", strip=True):
            continue
        val = box.select_one(loc.value)
        if val is not None:
            return _text(val)
    return None


_STRATEGIES = {
    SiblingLocator: _locate_sibling,
    CardLocator: _locate_card,
    BoxLocator: _locate_box,
}


def locate_text(doc: BeautifulSoup, label: str, locator) -> Optional[str]:
    """Texto bruto associado ao rótulo, ou None se o rótulo não está na página."""
    try:
        find = _STRATEGIES[type(locator)]
    except KeyError:
        raise TypeError(f"estratégia desconhecida: {locator!r}") from None
    return find(doc, label, locator)


def extract_value(doc: BeautifulSoup, label: str, locator) -> Optional[float]:
    return normalize(locate_text(doc, label, locator))


def select_text(doc: BeautifulSoup, selector: str) -> Optional[str]:
    """Texto do primeiro elemento para o seletor CSS, None se não existir."""
    return _text(doc.select_one(selector))
