# -*- coding: utf-8 -*-
"""
gongmun.related

"관련" 문서 목록을 본문 첫 번째 항목(1. 관련)으로 끼워 넣는 단계.

처리 순서
--------
1) 제목 줄을 찾는다. 없으면 문서를 그대로 돌려준다.
2) 제목 바로 아래의 옛 형식 관련 문단("관련: ...")을 걷어낸다.
3) 이미 있는 "1. 관련" 항목(바로 붙은 하위 항목까지)을 걷어낸다.
4) 관련 목록이 비어 있으면 여기서 끝.
5) "1. 관련" + "  가. <문서>" 하위 항목을 만든다.
6) 기존 본문의 가장 작은 상위 번호가 정확히 1이면
   모든 상위 번호를 1씩 밀어서 2부터 시작하게 한다.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

from .regions import (
    SUB_ORDINALS,
    LineKind,
    body_end_index,
    find_title_index,
    lstrip_blank,
    strip_blank_edges,
    tag_line,
)

RELATED_LABEL = "관련"
RELATED_HEADING = f"1. {RELATED_LABEL}"

# "관련하여", "관련된" 처럼 문장 속 낱말은 관련 항목이 아니다.
_NUMBERED_RELATED_RE = re.compile(r"^\s?1\.\s*관련(?![가-힣])")
_LEGACY_RELATED_RE = re.compile(r"^관련(?![가-힣])")

_TOP_NUMBER_RE = re.compile(r"^(\s?)(\d+)\.\s")

# 사용자가 직접 붙여 넣은 "관련:", "1.", "가." 같은 머리 기호
_RELATED_PREFIX_RE = re.compile(
    r"^(?:관련\s*[:：]\s*|\d{1,2}[.)](?!\d)\s*|[" + "".join(SUB_ORDINALS) + r"][.)]\s+)"
)

# 옛 관련 문단이 끝나는 줄 종류
_LEGACY_STOP_KINDS = (
    LineKind.BLANK,
    LineKind.TOP_LEVEL,
    LineKind.ATTACHMENT,
    LineKind.END_MARKER,
    LineKind.FOOTER,
)


# ------------------------------------------------------------
# 1. 입력 정리
# ------------------------------------------------------------

def sanitize_related(item) -> str:
    """관련 문서 1건 정리: 앞뒤 공백, 앞쪽 "관련:"/번호 기호 제거."""
    text = re.sub(r"\s*\n\s*", " ", str(item or "")).strip()
    previous = None
    while text != previous:
        previous = text
        text = _RELATED_PREFIX_RE.sub("", text, count=1).strip()
    return text


def clean_related(items: Optional[Iterable]) -> List[str]:
    cleaned = (sanitize_related(item) for item in (items or []))
    return [item for item in cleaned if item]


def build_related_section(items: List[str]) -> List[str]:
    """
    "1. 관련" 항목과 하위 항목을 만든다.
    하위 기호는 가~하 14개, 그 이후는 번호로 대신한다.
    """
    section = [RELATED_HEADING]
    for idx, item in enumerate(items):
        label = SUB_ORDINALS[idx] if idx < len(SUB_ORDINALS) else str(idx + 1)
        section.append(f"  {label}. {item}")
    return section


# ------------------------------------------------------------
# 2. 기존 관련 문단 걷어내기
# ------------------------------------------------------------

def _strip_legacy_block(rest: List[str]) -> List[str]:
    start = next((i for i, line in enumerate(rest) if line.strip()), None)
    if start is None or not _LEGACY_RELATED_RE.match(rest[start].strip()):
        return rest

    end = start + 1
    while end < len(rest) and tag_line(rest[end]).kind not in _LEGACY_STOP_KINDS:
        end += 1
    # 문단 뒤 빈 줄도 같이 정리
    while end < len(rest) and not rest[end].strip():
        end += 1

    return rest[:start] + rest[end:]


def _is_related_continuation(line: str) -> bool:
    tagged = tag_line(line)
    if tagged.kind in (LineKind.SUB_LEVEL, LineKind.NESTED):
        return True
    # 빈 줄 아래부터는 본문이다 (번호 없는 본문의 가./나. 항목 보호)
    if tagged.kind in (LineKind.BLANK, LineKind.TOP_LEVEL, LineKind.ATTACHMENT,
                       LineKind.FOOTER, LineKind.END_MARKER):
        return False
    # 들여쓴 이어지는 줄만 관련 항목에 속한다
    return tagged.indent > 0


def _strip_numbered_block(rest: List[str]) -> List[str]:
    limit = body_end_index(rest)
    for start in range(limit):
        if not _NUMBERED_RELATED_RE.match(rest[start]):
            continue
        end = start + 1
        while end < limit and _is_related_continuation(rest[end]):
            end += 1
        while end < limit and not rest[end].strip():
            end += 1
        return rest[:start] + rest[end:]
    return rest


# ------------------------------------------------------------
# 3. 번호 밀기
# ------------------------------------------------------------

def _split_at_first_top_level(rest: List[str]) -> Tuple[List[str], List[str]]:
    limit = body_end_index(rest)
    for idx in range(limit):
        if tag_line(rest[idx]).kind is LineKind.TOP_LEVEL:
            return rest[:idx], rest[idx:]
    return [], rest


def shift_top_level_numbers(lines: List[str]) -> List[str]:
    """
    본문 구간(붙임/꼬리말 전)의 상위 번호 최솟값이 정확히 1일 때만
    모든 상위 번호를 1씩 올린다. 들여쓰기는 그대로 두고
    번호와 그 뒤 공백 한 칸만 다시 쓴다.
    """
    limit = body_end_index(lines)
    tagged = [tag_line(line) for line in lines[:limit]]
    numbers = [t.number for t in tagged if t.kind is LineKind.TOP_LEVEL]
    if not numbers or min(numbers) != 1:
        return list(lines)

    shifted = list(lines)
    for idx, t in enumerate(tagged):
        if t.kind is not LineKind.TOP_LEVEL:
            continue
        m = _TOP_NUMBER_RE.match(t.text)
        if m is None:
            continue
        shifted[idx] = f"{m.group(1)}{int(m.group(2)) + 1}. {t.text[m.end():]}"
    return shifted


# ------------------------------------------------------------
# 4. 메인 함수
# ------------------------------------------------------------

def normalize_related(lines: List[str], related: Optional[Iterable] = None) -> List[str]:
    title_index = find_title_index(lines)
    if title_index is None:
        return list(lines)

    header = lines[: title_index + 1]
    rest = lines[title_index + 1:]

    rest = _strip_legacy_block(rest)
    rest = _strip_numbered_block(rest)

    items = clean_related(related)
    if not items:
        return header + rest

    before, after = _split_at_first_top_level(rest)
    after = shift_top_level_numbers(after)

    out = header + [""]
    before = strip_blank_edges(before)
    if before:
        out += before + [""]
    out += build_related_section(items) + [""]
    out += lstrip_blank(after)
    return out
