# -*- coding: utf-8 -*-
"""
gongmun.attachments

붙임 구역과 "끝." 표시를 붙임 개수에 따라 다시 쓰는 단계.

표기 규칙
--------
- 0개 : 붙임 줄 없음. 본문 마지막 줄 끝에 "  끝."
- 1개 : "붙임  <항목>.  끝."  (번호 없이 한 줄)
- 2개+: "붙임 1. <항목1>."
        "     2. <항목2>."
        ...
        "     N. <항목N>.  끝."

LLM이 만든 붙임 구역은 모양과 상관없이 통째로 버리고,
호출 측에서 넘겨준 붙임 목록으로 다시 만든다.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .regions import (
    ATTACHMENT_INDENT,
    ATTACHMENT_LABEL,
    END_MARKER,
    END_SUFFIX,
    Region,
    find_attachment_index,
    find_footer_index,
    is_end_marker_line,
    rstrip_blank,
    scan_regions,
)

# 사용자가 입력한 "붙임", "1.", "2)" 같은 머리 기호
_ITEM_PREFIX_RE = re.compile(r"^(?:붙임(?=[\s:：\d]|$)\s*[:：]?\s*|\d{1,2}[.)](?!\d)\s*)")
# 항목 끝에 붙어 온 끝 표시
_ITEM_END_RE = re.compile(r"(?:^|(?<=[\s.]))끝\.?$")
# 마지막 내용 줄 끝의 끝 표시 ("내용.끝.", "내용 끝." 까지 허용)
_LINE_END_RE = re.compile(r"(?:(?<=\s)|(?<=\.))끝\.$")
# 중간 줄에서는 끝 표시 모양("  끝.", ". 끝.")일 때만 뗀다. "수업 끝." 같은 문장은 유지
_INLINE_END_RE = re.compile(r"(?:\s{2,}|(?<=\.)\s+)끝\.$")


# ------------------------------------------------------------
# 1. 붙임 항목 정리
# ------------------------------------------------------------

def sanitize_attachment(item) -> str:
    """
    붙임 항목 1건 정리.

    - 앞뒤 공백 제거
    - 앞에 붙은 "붙임" / 번호 제거
    - 뒤에 붙은 "끝." / 마침표 제거 후 마침표 1개만 다시 붙임

    정리 결과가 비면 "" 을 돌려준다.
    """
    text = re.sub(r"\s*\n\s*", " ", str(item or "")).strip()
    previous = None
    while text != previous:
        previous = text
        text = _ITEM_PREFIX_RE.sub("", text, count=1).strip()
        text = _ITEM_END_RE.sub("", text).rstrip(" .\t")
    return f"{text}." if text else ""


def clean_attachments(items: Optional[Iterable]) -> List[str]:
    cleaned = (sanitize_attachment(item) for item in (items or []))
    return [item for item in cleaned if item]


def strip_end_suffix(line: str) -> str:
    """줄 끝의 "끝." 표시를 떼어낸다."""
    return _LINE_END_RE.sub("", line).rstrip()


# ------------------------------------------------------------
# 2. 개수별 표기
# ------------------------------------------------------------

def _attach_end_marker(content: List[str]) -> List[str]:
    if not content:
        return [END_MARKER]

    last = strip_end_suffix(content[-1]).rstrip(" .")
    return content[:-1] + [f"{last}.{END_SUFFIX}"]


def render_attachment_block(items: List[str]) -> List[str]:
    if len(items) == 1:
        return [f"{ATTACHMENT_LABEL}  {items[0]}{END_SUFFIX}"]

    block = [f"{ATTACHMENT_LABEL} 1. {items[0]}"]
    for number, item in enumerate(items[1:], start=2):
        block.append(f"{ATTACHMENT_INDENT}{number}. {item}")
    block[-1] += END_SUFFIX
    return block


# ------------------------------------------------------------
# 3. 메인 함수
# ------------------------------------------------------------

def normalize_attachments(lines: List[str], attachments: Optional[Iterable] = None) -> List[str]:
    items = clean_attachments(attachments)

    footer_index = find_footer_index(lines)
    content = lines[:footer_index]
    footer = lines[footer_index:]

    attachment_index = find_attachment_index(content)
    if attachment_index is not None:
        content = content[:attachment_index]

    # 남아 있는 "끝."은 아래에서 다시 만든다 (머리글 줄 내용은 건드리지 않음)
    cleaned: List[str] = []
    cleaned_regions: List[Region] = []
    for line, region in zip(content, scan_regions(content)):
        if is_end_marker_line(line):
            continue
        if region is not Region.HEADER:
            line = _INLINE_END_RE.sub("", line).rstrip()
        cleaned.append(line)
        cleaned_regions.append(region)
    content = rstrip_blank(cleaned)

    if not items:
        content = _attach_end_marker(content)
    else:
        if content and cleaned_regions[len(content) - 1] is not Region.HEADER:
            content[-1] = strip_end_suffix(content[-1])
        if content:
            content = content + [""]
        content = content + render_attachment_block(items)

    if content and footer:
        return content + [""] + footer
    return content + footer
