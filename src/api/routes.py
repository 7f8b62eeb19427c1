# cocktail_browser/src/api/routes.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from src.api.schemas import DrinkDetailResponse, SearchHistoryResponse, SearchResponse, ViewedDrinksResponse

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state
# -------------------------
def _state(request: Request, name: str):
    v = getattr(request.app.state, name, None)
    if v is None:
        raise RuntimeError(f"{name} not initialized. Check app startup wiring.")
    return v


def get_search_uc(request: Request):
    return _state(request, "search_uc")


def get_detail_uc(request: Request):
    return _state(request, "detail_uc")


def get_chart_uc(request: Request):
    return _state(request, "chart_uc")


def get_search_history(request: Request):
    return _state(request, "search_history")


def get_viewed_drinks(request: Request):
    return _state(request, "viewed_drinks")


@router.get("/healthz")
def healthz() -> Any:
    return {"status": "ok"}


# -------------------------
# /drinks
# -------------------------
@router.get("/drinks/search", response_model=SearchResponse)
def search_drinks(q: str = Query(default="", description="Empty falls back to the default term"), uc=Depends(get_search_uc)) -> Any:
    try:
        return uc(q)
    except Exception as e:
        log.exception("Processing /drinks/search error")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/drinks/{drink_id}", response_model=DrinkDetailResponse)
def drink_detail(drink_id: str, uc=Depends(get_detail_uc)) -> Any:
    try:
        return uc(drink_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /drinks/{id} error")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/drinks/{drink_id}/chart.svg")
def drink_chart(drink_id: str, uc=Depends(get_chart_uc)) -> Response:
    try:
        svg = uc(drink_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /drinks/{id}/chart.svg error")
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=svg, media_type="image/svg+xml")


# -------------------------
# /history
# -------------------------
@router.get("/history/searches", response_model=SearchHistoryResponse)
def list_searches(store=Depends(get_search_history)) -> Any:
    return {"terms": store.list()}


@router.delete("/history/searches", status_code=204)
def clear_searches(store=Depends(get_search_history)) -> Response:
    store.clear()
    return Response(status_code=204)


@router.get("/history/viewed", response_model=ViewedDrinksResponse)
def list_viewed(store=Depends(get_viewed_drinks)) -> Any:
    return {"drinks": [d.to_dict() for d in store.list()]}


@router.delete("/history/viewed", status_code=204)
def clear_viewed(store=Depends(get_viewed_drinks)) -> Response:
    store.clear()
    return Response(status_code=204)
