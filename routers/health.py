# routers/health.py
from fastapi import APIRouter

from core.config import OPENAI_MODEL

router = APIRouter(tags=["health"])


@router.get("/", summary="헬스 체크 (사용 중인 LLM 모델 포함)")
def root():
    return {"message": "공문 생성 FastAPI 동작 중", "model": OPENAI_MODEL}
