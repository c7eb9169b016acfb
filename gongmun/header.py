# -*- coding: utf-8 -*-
"""
gongmun.header

공문 머리글 세 줄(수신 / (경유) / 제목)의 라벨 간격을 규격에 맞춘다.

- 수신  <값>    : 라벨 뒤 공백 2칸
- (경유) <값>   : 라벨 뒤 공백 1칸 (값이 없으면 "(경유)"만)
- 제목  <값>    : 라벨 뒤 공백 2칸 ("제 목", "제목:" 등 변형 허용)

머리글 영역(RegionScanner 기준) 안의 줄만 손대고,
라벨이 없는 줄은 그대로 통과시킨다.
"""

from __future__ import annotations

from typing import List

from .regions import RECIPIENT_RE, TITLE_RE, VIA_RE, Region, scan_regions

# (라벨, 패턴, 라벨 뒤 공백)
_HEADER_RULES = (
    ("수신", RECIPIENT_RE, "  "),
    ("(경유)", VIA_RE, " "),
    ("제목", TITLE_RE, "  "),
)


def normalize_header_line(line: str) -> str:
    for label, pattern, separator in _HEADER_RULES:
        m = pattern.match(line)
        if m:
            value = m.group(1).strip()
            return f"{label}{separator}{value}" if value else label
    return line


def normalize_header(lines: List[str]) -> List[str]:
    regions = scan_regions(lines)
    return [
        normalize_header_line(line) if region is Region.HEADER else line
        for line, region in zip(lines, regions)
    ]
