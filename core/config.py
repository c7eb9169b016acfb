# core/config.py
# -*- coding: utf-8 -*-

import os
from pathlib import Path

from dotenv import load_dotenv

# .env 로드 (가장 먼저 실행)
load_dotenv()

# --------------------------------
# 경로 / 로그 디렉터리 설정
# --------------------------------

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent

# 로그 디렉터리 (요청 1건당 JSONL 1줄)
LOG_DIR = Path(os.getenv("GONGMUN_LOG_DIR", str(BASE_DIR / "data" / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)


# --------------------------------
# OpenAI 설정
# --------------------------------

def sanitize_model(raw) -> str:
    """
    환경변수에 `"gpt-5.2"` 처럼 따옴표까지 넣어 두는 경우가 있어서
    양 끝의 따옴표를 반복해서 벗겨낸다.
    """
    if not isinstance(raw, str):
        return ""

    value = raw.strip()
    while len(value) >= 2 and (
        (value.startswith('"') and value.endswith('"'))
        or (value.startswith("'") and value.endswith("'"))
    ):
        value = value[1:-1].strip()

    return value


DEFAULT_MODEL = "gpt-5.2"

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = sanitize_model(os.getenv("OPENAI_MODEL")) or DEFAULT_MODEL


# --------------------------------
# 공문 기본값
# --------------------------------

DEFAULT_RECIPIENT = os.getenv("GONGMUN_DEFAULT_RECIPIENT", "내부결재")
DEFAULT_SENDER = os.getenv("GONGMUN_DEFAULT_SENDER", "판교대장초등학교장")
