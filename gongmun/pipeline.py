# -*- coding: utf-8 -*-
"""
gongmun.pipeline

공문 후처리 파이프라인의 "전체 흐름"만 모아 둔 모듈.

    LLM 출력 텍스트
      -> 1) 머리글 라벨 정리        (header.normalize_header)
      -> 2) "1. 관련" 삽입/번호 밀기 (related.normalize_related)
      -> 3) 붙임 구역 + 끝. 표시    (attachments.normalize_attachments)
      -> 4) 본문 들여쓰기 정리      (indentation.normalize_indentation)
      -> 규격 공문 텍스트

각 단계는 순수 함수이고 어떤 입력에도 예외를 던지지 않는다.
같은 입력으로 두 번 돌려도 결과가 같아야 한다.
"""

from __future__ import annotations

from typing import Iterable, Optional

from core.logging import logger

from .attachments import normalize_attachments
from .header import normalize_header
from .indentation import normalize_indentation
from .regions import join_lines, lstrip_blank, split_lines
from .related import normalize_related


def normalize_document(
    document: str,
    attachments: Optional[Iterable[str]] = None,
    related: Optional[Iterable[str]] = None,
) -> str:
    """
    LLM이 만든 공문 후보 텍스트를 규격 레이아웃으로 다시 맞춘다.

    - document    : LLM 출력 원문 (여러 줄)
    - attachments : 붙임 항목 목록 (순서 유지)
    - related     : 관련 문서 목록 (순서 유지)

    return: 끝쪽 공백을 제거한 정리된 공문 텍스트
    """
    attachments = list(attachments or [])
    related = list(related or [])

    lines = lstrip_blank(split_lines(document))
    lines = normalize_header(lines)
    lines = normalize_related(lines, related)
    lines = normalize_attachments(lines, attachments)
    lines = normalize_indentation(lines)

    result = join_lines(lines).rstrip()
    logger.debug(
        f"[pipeline] normalized {len(lines)} lines "
        f"(attachments={len(attachments)}, related={len(related)})"
    )
    return result
