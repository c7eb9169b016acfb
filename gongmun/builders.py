# -*- coding: utf-8 -*-
"""
gongmun.builders

LLM 없이 입력값만으로 공문 초안을 "조립"하는 템플릿 계층입니다.

- format_date("2024-03-05") -> "2024. 3. 5."
- build_template_document(...):
    수신/(경유)/제목 + 1. 본문 + 붙임 + 끝. + 발신/시행일 형태의 초안 텍스트.

결과는 규격을 대충 맞춘 초안이므로,
화면에 보여주기 전에 pipeline.normalize_document 를 한 번 거친다.
"""

from __future__ import annotations

from datetime import date as date_type
from datetime import datetime
from typing import List, Optional, Union

from .regions import END_MARKER


def format_date(raw: Union[str, date_type, None]) -> str:
    """ISO 날짜("2024-03-05")를 공문 날짜 표기("2024. 3. 5.")로 바꾼다."""
    if not raw:
        return ""

    if isinstance(raw, date_type):
        d = raw
    else:
        try:
            d = datetime.strptime(str(raw).strip(), "%Y-%m-%d").date()
        except ValueError:
            # 이미 "2024. 3. 5." 처럼 들어온 값은 그대로 쓴다
            return str(raw).strip()

    return f"{d.year}. {d.month}. {d.day}."


def build_template_document(
    subject: str,
    recipient: str,
    sender: str,
    date: Union[str, date_type, None] = "",
    details: str = "",
    attachments: Optional[List[str]] = None,
    related: Optional[List[str]] = None,
) -> str:
    """
    간단한 템플릿 기반 공문 초안 텍스트 생성.
    (관련 항목은 normalize_document 단계에서 1번 항목으로 끼워 넣는다)
    """
    subject = (subject or "").strip() or "공문 제목을 입력하세요"
    recipient = (recipient or "").strip() or "수신처를 입력하세요"
    sender = (sender or "").strip() or "발신 기관을 입력하세요"
    details = (details or "").strip()
    attachments = [a.strip() for a in (attachments or []) if a and a.strip()]

    if details:
        body = [
            f"1. {subject}과 관련하여 아래와 같이 안내드립니다.",
            f"  가. {details}",
        ]
    else:
        body = [
            f"1. {subject}과 관련하여 세부 사항을 안내드립니다.",
            "  가. 추진 목적: 원활한 업무 협조",
            "  나. 협조 요청: 관련 부서 검토 및 회신",
        ]

    attachment_lines = [f"붙임 {idx}. {item}" for idx, item in enumerate(attachments, start=1)]

    lines = [
        f"수신  {recipient}",
        "(경유)",
        f"제목  {subject}",
        "",
        *body,
        "",
        *attachment_lines,
        END_MARKER,
        "",
        f"발신  {sender}",
        f"시행일  {format_date(date)}",
    ]
    return "\n".join(lines)
