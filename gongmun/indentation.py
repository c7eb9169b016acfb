# -*- coding: utf-8 -*-
"""
gongmun.indentation

본문 항목 들여쓰기 정리.

- 상위 항목  "1. ..."   : 0칸 들여쓰기, 마침표 뒤 공백 1칸
- 하위 항목  "  가. ..." : 2칸 들여쓰기, 마침표 뒤 공백 1칸
- 이미 들여쓴 번호 목록  : 그대로 둔다 (의도된 중첩)
- 항목 바로 다음의 이어지는 줄 : 항목 내용 시작 위치에 맞춰 들여쓴다 (1회)
- 붙임 구역의 번호 줄   : 첫 번호 아래로 고정 들여쓰기

머리글/꼬리말 영역은 손대지 않는다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .regions import (
    ATTACHMENT_INDENT,
    ATTACHMENT_LABEL,
    LineKind,
    Region,
    TaggedLine,
    display_width,
    scan_regions,
    tag_line,
)

_ATTACHMENT_NUMBERED_RE = re.compile(r"^붙임\s*(\d+)\.(?!\d)\s*(.*)$")
_ATTACHMENT_PLAIN_RE = re.compile(r"^붙임[\s:：]*(.*)$")
_NUMBERED_RE = re.compile(r"^(\d+)\.(?!\d)\s*(.*)$")

# 앞 항목에 맞춰 다시 들여쓸 수 있는 줄 종류
_CONTINUATION_KINDS = (LineKind.TEXT, LineKind.RECIPIENT, LineKind.VIA, LineKind.TITLE)


@dataclass
class _ScanState:
    previous_marker_indent_width: Optional[int] = None
    inside_attachment_block: bool = False

    def reset(self) -> None:
        self.previous_marker_indent_width = None
        self.inside_attachment_block = False


def _render_attachment_head(tagged: TaggedLine) -> str:
    m = _ATTACHMENT_NUMBERED_RE.match(tagged.stripped)
    if m:
        return f"{ATTACHMENT_LABEL} {m.group(1)}. {m.group(2)}".rstrip()

    m = _ATTACHMENT_PLAIN_RE.match(tagged.stripped)
    rest = m.group(1) if m else ""
    return f"{ATTACHMENT_LABEL}  {rest}" if rest else ATTACHMENT_LABEL


def _head_width(rendered: str) -> int:
    """붙임 머리 줄에서 내용이 시작되는 화면 폭."""
    m = _ATTACHMENT_NUMBERED_RE.match(rendered)
    if m:
        return display_width(f"{ATTACHMENT_LABEL} {m.group(1)}. ")
    return display_width(f"{ATTACHMENT_LABEL}  ")


def normalize_indentation(lines: List[str]) -> List[str]:
    regions = scan_regions(lines)
    state = _ScanState()
    out: List[str] = []

    for line, region in zip(lines, regions):
        if region in (Region.HEADER, Region.FOOTER):
            out.append(line)
            continue

        tagged = tag_line(line)

        if tagged.kind is LineKind.BLANK:
            out.append("")
            state.reset()
            continue

        if tagged.kind is LineKind.ATTACHMENT:
            rendered = _render_attachment_head(tagged)
            state.inside_attachment_block = True
            state.previous_marker_indent_width = _head_width(rendered)
            out.append(rendered)
            continue

        if state.inside_attachment_block:
            m = _NUMBERED_RE.match(tagged.stripped)
            if m:
                prefix = f"{ATTACHMENT_INDENT}{m.group(1)}. "
                out.append(f"{prefix}{m.group(2)}".rstrip())
                state.previous_marker_indent_width = display_width(prefix)
                continue
            state.inside_attachment_block = False

        if tagged.kind is LineKind.TOP_LEVEL:
            prefix = f"{tagged.marker} "
            out.append(f"{prefix}{tagged.payload}")
            state.previous_marker_indent_width = display_width(prefix)
        elif tagged.kind is LineKind.SUB_LEVEL:
            prefix = f"  {tagged.marker} "
            out.append(f"{prefix}{tagged.payload}")
            state.previous_marker_indent_width = display_width(prefix)
        elif tagged.kind is LineKind.NESTED:
            out.append(line)
            state.previous_marker_indent_width = (
                display_width(line[: tagged.indent]) + display_width(tagged.marker) + 1
            )
        elif (
            tagged.kind in _CONTINUATION_KINDS
            and tagged.indent == 0
            and state.previous_marker_indent_width is not None
        ):
            out.append(" " * state.previous_marker_indent_width + line)
            state.previous_marker_indent_width = None
        else:
            out.append(line)
            state.previous_marker_indent_width = None

    return out
