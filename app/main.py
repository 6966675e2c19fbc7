import os
import json
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.models.indicators import ErrorKind, ErrorResult
from app.services.indicators import get_equity_indicators, get_fund_indicators

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s | %(levelname)s | indicadores | %(message)s",
)
log = logging.getLogger("indicadores")

ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

app = FastAPI(title="Indicadores API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS or ["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# not found / entrada inválida -> 404, falha externa -> 500
_STATUS = {
    ErrorKind.INVALID_INPUT: 404,
    ErrorKind.STRUCTURE_MISMATCH: 404,
    ErrorKind.TRANSPORT_FAILURE: 500,
}


def _now():
    return datetime.now(timezone.utc).isoformat()


async def _respond(fetch, ticker: str, what: str) -> JSONResponse:
    try:
        result = await fetch(ticker)
    except Exception:
        log.exception("Erro ao obter dados %s %s", what, ticker)
        return JSONResponse({"erro": f"Erro ao obter dados {what}."}, status_code=500)

    if isinstance(result, ErrorResult):
        log.warning("%s: %s", ticker, result.erro)
        return JSONResponse(json.loads(result.model_dump_json()), status_code=_STATUS[result.kind])
    return JSONResponse(json.loads(result.model_dump_json()))


# ---------- Rotas ----------
@app.get("/health")
def health():
    return {"status": "ok", "time_utc": _now()}


@app.get("/api/acao/{ticker}")
async def api_acao(ticker: str):
    return await _respond(get_equity_indicators, ticker, "da ação")


@app.get("/api/fii/{ticker}")
async def api_fii(ticker: str):
    return await _respond(get_fund_indicators, ticker, "do FII")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))
