from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    store = request.app.state.store
    return {"status": "ok", "todos": await store.count()}
