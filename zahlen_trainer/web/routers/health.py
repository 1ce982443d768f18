from __future__ import annotations
from fastapi import APIRouter

router = APIRouter(prefix="/api")

@router.get("/health")
def health():
    return {"status": "OK", "message": "German number drill API is running"}
