# app_fastapi.py
# -*- coding: utf-8 -*-

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import OPENAI_MODEL
from core.logging import logger
from routers import generate, health

# ============================================================
# FastAPI 앱 기본 세팅 (Swagger 설명 포함)
# ============================================================

app = FastAPI(
    title="공문 자동 생성 백엔드 API",
    description="""
학교 행정업무용 **공문 초안 생성·정리 백엔드** API입니다.

- 화면(프론트)은 제목/수신/발신/시행일/핵심 내용/붙임/관련 문서를 이 API로 전송합니다.
- 이 백엔드는
  - LLM으로 공문 초안을 생성하고
  - 수신/(경유)/제목 머리글, 번호 본문, "1. 관련" 항목,
    붙임 0/1/N개 규칙, 끝. 표시, 발신 꼬리말을
  - 정해진 레이아웃으로 다시 정리해서 돌려줍니다.
""",
    version="1.0.0",
)

# CORS: 개발 단계에서는 * 허용, 배포 시에는 도메인 제한 권장
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(generate.router)


@app.get(
    "/debug/routes",
    tags=["debug"],
    summary="현재 FastAPI에 등록된 라우트 목록 디버그용",
)
def debug_routes():
    return [r.path for r in app.routes]


logger.info(f"공문 생성 API 준비 완료 (model={OPENAI_MODEL})")

# ============================================================
# uvicorn 실행용 엔트리포인트
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app_fastapi:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
