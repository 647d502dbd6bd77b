import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse, Response

from multifetch.core.config import settings
from multifetch.fetch import fetcher
from multifetch.fetch.base import DecodeError, FetchError
from multifetch.schemas import FetchOutcome, HealthResponse, decode_url_batch
from multifetch.services.multi_fetch import fetch_all, to_legacy

logger = logging.getLogger(__name__)

router = APIRouter()

async def _read_url_batch(request: Request) -> List[str]:
    raw = await request.body()
    try:
        return decode_url_batch(raw)
    except DecodeError as e:
        logger.info("Rejected multi-fetch payload: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="JSON invalide"
        )

@router.post("/multi-fetch", response_model=List[str])
async def multi_fetch(request: Request):
    """
    Fetch every URL of a JSON array in parallel.

    Returns one string per URL in the same order: the response body, or
    "Erreur: <cause>" when that URL could not be fetched.
    """
    urls = await _read_url_batch(request)
    return to_legacy(await fetch_all(urls))

@router.post("/multi-fetch/detailed", response_model=List[FetchOutcome])
async def multi_fetch_detailed(request: Request):
    """Same as /multi-fetch but each entry is tagged {ok, body, error}."""
    urls = await _read_url_batch(request)
    return await fetch_all(urls)

@router.get("/versions")
async def versions():
    """Passthrough of the upstream versions JSON"""
    try:
        data = await fetcher.fetch(settings.VERSIONS_URL)
    except FetchError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Erreur fetch: {e}"
        )
    return Response(content=data, media_type="application/json")

@router.get("/process", response_class=PlainTextResponse)
async def process():
    return "✅ Hello depuis ton serveur Python !"

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Multi-Fetch Service"}
