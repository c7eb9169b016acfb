# -*- coding: utf-8 -*-
"""
gongmun.regions

공문 텍스트를 줄 단위로 읽어서
"이 줄이 무엇인지(태그)"와 "문서의 어느 영역에 속하는지(Region)"를
판정하는 공통 모듈.

역할
----
- split_lines(text) / join_lines(lines): 문자열 <-> 줄 목록 변환
- tag_line(line): 한 줄을 TaggedLine(kind, indent, marker, number, payload)로 파싱
- RegionScanner: 머리글 -> 본문 -> 붙임 -> 꼬리말 상태 기계
- scan_regions(lines): 줄마다 Region 목록 반환
- find_title_index / find_attachment_index / find_footer_index: 경계 찾기

정규화 단계(header/related/attachments/indentation)는 서로 구조화된 상태를
넘기지 않고, 필요할 때마다 이 모듈로 경계를 다시 계산한다.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional


# ------------------------------------------------------------
# 1. 고정 문구 / 표식
# ------------------------------------------------------------

END_MARKER = "끝."
END_SUFFIX = "  " + END_MARKER

ATTACHMENT_LABEL = "붙임"

# "붙임 " 의 화면 폭(한글 2칸 x 2 + 공백 1칸)과 같은 폭의 공백.
# 여러 개 붙임의 2번째 줄부터 번호가 첫 번호 아래에 오도록 맞춘다.
ATTACHMENT_INDENT = " " * 5

# 꼬리말 시작 표식 (위에서부터 처음 나오는 줄이 꼬리말 경계)
FOOTER_MARKERS = ("발신", "시행일", "문서번호", "담당", "연락처")

# 하위 항목 기호 순서
SUB_ORDINALS = (
    "가", "나", "다", "라", "마", "바", "사",
    "아", "자", "차", "카", "타", "파", "하",
)
_ORDINAL_CLASS = "[" + "".join(SUB_ORDINALS) + "]"


# ------------------------------------------------------------
# 2. 패턴
# ------------------------------------------------------------

# 머리글 라벨 (콜론 변형 허용)
RECIPIENT_RE = re.compile(r"^\s*수\s*신(?:\s*[:：])?\s*(.*)$")
VIA_RE = re.compile(r"^\s*\(\s*경\s*유\s*\)(?:\s*[:：])?\s*(.*)$")
TITLE_RE = re.compile(r"^\s*제\s*목(?:\s*[:：])?\s*(.*)$")

# "붙임과 같이 ..." 같은 본문 문장은 붙임 표식이 아니다.
ATTACHMENT_RE = re.compile(r"^붙임(?![과와의을를은는이가에도로])")

_TOP_LEVEL_RE = re.compile(r"^(\d+)\.\s+(.*)$")
_SUB_LEVEL_RE = re.compile(r"^(" + _ORDINAL_CLASS + r")\.\s+(.*)$")
_NESTED_RE = re.compile(r"^(\d+[.)]|\(\d+\)|[가-힣]\)|\([가-힣]\))\s+(.*)$")


class LineKind(str, Enum):
    BLANK = "blank"
    RECIPIENT = "recipient"
    VIA = "via"
    TITLE = "title"
    TOP_LEVEL = "top_level"
    SUB_LEVEL = "sub_level"
    NESTED = "nested"
    ATTACHMENT = "attachment"
    END_MARKER = "end_marker"
    FOOTER = "footer"
    TEXT = "text"


class Region(str, Enum):
    HEADER = "header"
    BODY = "body"
    ATTACHMENT = "attachment"
    FOOTER = "footer"


@dataclass(frozen=True)
class TaggedLine:
    """
    한 줄을 한 번만 파싱해 둔 레코드.

    - text    : 원문 줄
    - kind    : LineKind
    - indent  : 앞쪽 공백 문자 수
    - marker  : "1." / "가." / "1)" 처럼 항목 기호 (없으면 "")
    - number  : 상위 항목 번호 (TOP_LEVEL 일 때만)
    - payload : 기호 뒤의 내용 (기호가 없으면 공백 제거한 전체)
    """
    text: str
    kind: LineKind
    indent: int = 0
    marker: str = ""
    number: Optional[int] = None
    payload: str = ""

    @property
    def stripped(self) -> str:
        return self.text.strip()


# ------------------------------------------------------------
# 3. 줄 단위 유틸
# ------------------------------------------------------------

def split_lines(text: str) -> List[str]:
    """줄바꿈 변형을 통일하고, 줄마다 오른쪽 공백을 제거해서 나눈다."""
    normalized = str(text or "").replace("\r\n", "\n").replace("\r", "\n")
    return [line.rstrip() for line in normalized.split("\n")]


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def is_blank(line: str) -> bool:
    return not line.strip()


def rstrip_blank(lines: List[str]) -> List[str]:
    """끝쪽 빈 줄 제거."""
    end = len(lines)
    while end > 0 and is_blank(lines[end - 1]):
        end -= 1
    return lines[:end]


def lstrip_blank(lines: List[str]) -> List[str]:
    """앞쪽 빈 줄 제거."""
    start = 0
    while start < len(lines) and is_blank(lines[start]):
        start += 1
    return lines[start:]


def strip_blank_edges(lines: List[str]) -> List[str]:
    return rstrip_blank(lstrip_blank(lines))


def display_width(text: str) -> int:
    """고정폭 글꼴 기준 화면 폭. 한글 등 전각 문자는 2칸으로 센다."""
    return sum(
        2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        for ch in text
    )


def is_footer_line(line: str) -> bool:
    return line.strip().startswith(FOOTER_MARKERS)


def is_attachment_line(line: str) -> bool:
    return bool(ATTACHMENT_RE.match(line.strip()))


def is_end_marker_line(line: str) -> bool:
    return line.strip() == END_MARKER


# ------------------------------------------------------------
# 4. 줄 태깅
# ------------------------------------------------------------

def tag_line(line: str) -> TaggedLine:
    stripped = line.strip()
    if not stripped:
        return TaggedLine(text=line, kind=LineKind.BLANK)

    indent = len(line) - len(line.lstrip())

    if stripped.startswith(FOOTER_MARKERS):
        return TaggedLine(line, LineKind.FOOTER, indent, payload=stripped)

    if ATTACHMENT_RE.match(stripped):
        return TaggedLine(line, LineKind.ATTACHMENT, indent, marker=ATTACHMENT_LABEL,
                          payload=stripped[len(ATTACHMENT_LABEL):].strip())

    if stripped == END_MARKER:
        return TaggedLine(line, LineKind.END_MARKER, indent, payload=stripped)

    # 상위 항목은 0칸 들여쓰기만 인정
    m = _TOP_LEVEL_RE.match(stripped)
    if m and indent == 0:
        return TaggedLine(line, LineKind.TOP_LEVEL, indent, marker=f"{m.group(1)}.",
                          number=int(m.group(1)), payload=m.group(2))

    m = _SUB_LEVEL_RE.match(stripped)
    if m:
        return TaggedLine(line, LineKind.SUB_LEVEL, indent, marker=f"{m.group(1)}.",
                          payload=m.group(2))

    # 이미 들여쓴 번호 목록(1) 가) (1) ...)은 의도된 중첩 구조로 본다
    m = _NESTED_RE.match(stripped)
    if m and indent >= 1:
        return TaggedLine(line, LineKind.NESTED, indent, marker=m.group(1),
                          payload=m.group(2))

    for kind, pattern in (
        (LineKind.RECIPIENT, RECIPIENT_RE),
        (LineKind.VIA, VIA_RE),
        (LineKind.TITLE, TITLE_RE),
    ):
        m = pattern.match(line)
        if m:
            return TaggedLine(line, kind, indent, payload=m.group(1).strip())

    return TaggedLine(line, LineKind.TEXT, indent, payload=stripped)


def tag_lines(lines: Iterable[str]) -> List[TaggedLine]:
    return [tag_line(line) for line in lines]


# ------------------------------------------------------------
# 5. 영역 상태 기계
# ------------------------------------------------------------

class RegionScanner:
    """
    줄을 위에서부터 하나씩 넣으면 그 줄이 속한 Region을 돌려준다.

    전이 규칙
    - 어느 상태든 꼬리말 표식 줄 -> FOOTER (이후 계속 FOOTER)
    - HEADER: 붙임 표식 -> ATTACHMENT
              상위/하위 항목 -> BODY
              (단독 "끝."은 머리글을 끝내지 않는다. 제목 앞에 잘못 붙은 경우 대비)
              제목 줄은 HEADER 로 두고, 다음 줄부터 BODY
    - BODY: 붙임 표식 -> ATTACHMENT
    - ATTACHMENT: 꼬리말 전까지 유지
    """

    _BODY_STARTERS = (LineKind.TOP_LEVEL, LineKind.SUB_LEVEL)

    def __init__(self) -> None:
        self.state = Region.HEADER
        self._title_seen = False

    def feed(self, tagged: TaggedLine) -> Region:
        if self.state is Region.FOOTER:
            return self.state

        if tagged.kind is LineKind.FOOTER:
            self.state = Region.FOOTER
            return self.state

        if self.state is Region.HEADER and self._title_seen:
            self.state = Region.BODY

        if self.state is Region.HEADER:
            if tagged.kind is LineKind.ATTACHMENT:
                self.state = Region.ATTACHMENT
            elif tagged.kind in self._BODY_STARTERS:
                self.state = Region.BODY
            elif tagged.kind is LineKind.TITLE:
                self._title_seen = True
        elif self.state is Region.BODY:
            if tagged.kind is LineKind.ATTACHMENT:
                self.state = Region.ATTACHMENT

        return self.state


def scan_regions(lines: Iterable[str]) -> List[Region]:
    scanner = RegionScanner()
    return [scanner.feed(tag_line(line)) for line in lines]


def find_footer_index(lines: List[str]) -> int:
    """꼬리말 첫 줄 인덱스. 꼬리말이 없으면 len(lines)."""
    for idx, region in enumerate(scan_regions(lines)):
        if region is Region.FOOTER:
            return idx
    return len(lines)


def find_title_index(lines: List[str]) -> Optional[int]:
    """머리글 영역 안의 제목 줄 인덱스. 없으면 None."""
    for idx, (line, region) in enumerate(zip(lines, scan_regions(lines))):
        if region is not Region.HEADER:
            break
        if tag_line(line).kind is LineKind.TITLE:
            return idx
    return None


def find_attachment_index(lines: List[str]) -> Optional[int]:
    """꼬리말 이전의 첫 붙임 표식 줄 인덱스. 없으면 None."""
    for idx, region in enumerate(scan_regions(lines)):
        if region is Region.ATTACHMENT:
            return idx
        if region is Region.FOOTER:
            break
    return None


def body_end_index(lines: List[str]) -> int:
    """붙임 또는 꼬리말이 시작되기 직전까지가 본문 후보 구간."""
    for idx, line in enumerate(lines):
        if is_attachment_line(line) or is_footer_line(line):
            return idx
    return len(lines)
