import os
import logging
import httpx
from typing import Optional

log = logging.getLogger("indicadores")

UA = os.getenv(
    "HTTP_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0 Safari/537.36",
)
HEADERS = {
    "User-Agent": UA,
    "Accept-Language": os.getenv("HTTP_ACCEPT_LANGUAGE", "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7"),
}
T_OUT = float(os.getenv("HTTP_TIMEOUT", "5.0"))


async def fetch_html(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    GET único, sem retry. Levanta httpx.HTTPError em falha de rede ou status != 2xx.
    """
    async with httpx.AsyncClient(
        timeout=T_OUT, headers=HEADERS, follow_redirects=True, transport=transport
    ) as client:
        r = await client.get(url)
        r.raise_for_status()
        log.debug("GET %s -> %s (%d bytes)", url, r.status_code, len(r.content))
        return r.text
