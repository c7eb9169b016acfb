# core/logging.py
# -*- coding: utf-8 -*-

import sys
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import LOG_DIR

# ------------------------------------------------
# 터미널 출력용 logger
# ------------------------------------------------
logger = logging.getLogger("gongmun")
logger.setLevel(logging.DEBUG)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)


# ------------------------------------------------
# 요청 단위 JSONL 기록
# ------------------------------------------------
def event_log_path(request_id: str, log_dir: Optional[Path] = None) -> Path:
    """요청 1건의 이벤트 파일 경로 (LOG_DIR/<request_id>.jsonl)."""
    return (log_dir or LOG_DIR) / f"{request_id}.jsonl"


def log_event(request_id: str, event_type: str, payload: Dict[str, Any]) -> Path:
    """
    공문 생성 요청 1건의 입력/LLM 원문/정리 결과를 JSONL 한 줄로 남긴다.
    같은 request_id 로 다시 부르면 같은 파일 아래에 이어 붙는다.

    return: 기록한 파일 경로
    """
    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id,
        "type": event_type,
        **payload,
    }

    path = event_log_path(request_id)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")

    logger.debug(f"[log_event] {event_type} -> {path.name}")
    return path
