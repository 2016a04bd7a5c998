# cringe_horoscope/main.py
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.responses import PlainTextResponse
from loguru import logger

from cringe_horoscope.composer import get_mode_description
from cringe_horoscope.generator import generate_horoscope
from cringe_horoscope.lucky import describe_lucky
from cringe_horoscope.models import CRINGE_LABELS, ZODIAC_SIGNS, InvalidInputError
from cringe_horoscope.prng import compare_seed_sequences
from cringe_horoscope.roast import generate_cringe_preview
from cringe_horoscope.roast_voice import display_sign, get_cringe_mapping
from cringe_horoscope.seeds import generate_deterministic_seed

# -------------------- Env -------------------- #
DEFAULT_DETERMINISTIC = os.getenv("HOROSCOPE_DEFAULT_DETERMINISTIC", "1") == "1"
PREVIEW_SAMPLES = int(os.getenv("PREVIEW_SAMPLES", "3"))

# -------------------- App -------------------- #
app = FastAPI(
    title="Cringe Horoscope",
    docs_url="/docs",
    openapi_url="/openapi.json",
    redoc_url=None,
)
logger.info("[API][Boot] deterministic_default={} preview_samples={}", DEFAULT_DETERMINISTIC, PREVIEW_SAMPLES)


def _bad_request(e: InvalidInputError) -> HTTPException:
    logger.info("[API] rejected input: {}", e)
    return HTTPException(status_code=400, detail=str(e))


@app.get("/", include_in_schema=False)
def root():
    return {"ok": True, "service": "cringe-horoscope"}


@app.head("/", include_in_schema=False)
def root_head():
    return Response(status_code=200)


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.get("/health", include_in_schema=False)
def health():
    return PlainTextResponse("ok", status_code=200)

# -------------------- Catalog -------------------- #
@app.get("/signs")
def signs():
    return {
        "signs": [{"sign": s, "name": display_sign(s)} for s in ZODIAC_SIGNS],
        "cringe_levels": {str(int(k)): v for k, v in CRINGE_LABELS.items()},
    }


@app.get("/cringe/{level}")
def cringe_mapping(level: int):
    try:
        return get_cringe_mapping(level)
    except InvalidInputError as e:
        raise _bad_request(e)


@app.get("/cringe/{level}/preview")
def cringe_preview(level: int, sign: str = Query("aries")):
    try:
        return generate_cringe_preview(level, sign, samples=PREVIEW_SAMPLES)
    except InvalidInputError as e:
        raise _bad_request(e)

# -------------------- Seeds -------------------- #
@app.get("/seed")
def seed(sign: str, date: str, cringe: int):
    try:
        value = generate_deterministic_seed(sign, date, cringe)
    except InvalidInputError as e:
        raise _bad_request(e)
    return {"seed": value, "formula": f"{sign.strip().lower()}|{date}|{cringe}"}


@app.get("/debug/seed-compare")
def seed_compare(seed1: int, seed2: int, length: int = Query(10, ge=1, le=100)):
    return compare_seed_sequences(seed1, seed2, length)

# -------------------- Horoscope -------------------- #
@app.get("/horoscope")
async def horoscope(
    sign: str,
    day: str = Query("today"),
    mode: str = Query("roast"),
    cringe: int = Query(0),
    deterministic: Optional[bool] = Query(None),
    seed: Optional[int] = Query(None),
):
    try:
        result = await generate_horoscope(
            sign,
            day,
            mode,
            cringe,
            deterministic=DEFAULT_DETERMINISTIC if deterministic is None else deterministic,
            seed=seed,
        )
    except InvalidInputError as e:
        raise _bad_request(e)
    result["mode_description"] = get_mode_description(mode)
    result["lucky"] = describe_lucky(result)
    return result
