import re

import pytest

from gongmun import normalize_document

BASE_LINES = [
    "수신  내부결재",
    "(경유)",
    "제목  테스트",
    "",
    "1. 테스트 관련입니다.",
    "",
    "발신  초등학교장",
    "시행일  2024. 1. 1.",
]
BASE = "\n".join(BASE_LINES)

MESSY = "\n".join([
    "수신:내부결재",
    "(경유)",
    "제 목 : 2024학년도 공개수업 운영",
    "관련: 교육청-1234(2024. 2. 1.)",
    "",
    "1.  목적",
    " 가. 학부모 참여 확대",
    "2. 운영 내용",
    "수업 공개 후 협의회를 운영함.",
    "붙임  1. 운영 계획(안) 1부",
    "      2. 시간표 1부",
    "끝.",
    "",
    "발신  판교대장초등학교장",
    "시행일  2024. 3. 5.",
])


SUB_ITEMS_ONLY = "\n".join([
    "수신  내부결재",
    "(경유)",
    "제목  테스트",
    "",
    "  가. 일시: 2024. 3. 5.",
    "  나. 장소: 본교 강당",
    "",
    "발신  초등학교장",
    "시행일  2024. 1. 1.",
])


def _end_marker_count(text):
    return sum(1 for line in text.split("\n") if line.endswith("끝."))


def test_zero_attachments_scenario():
    result = normalize_document(BASE, [], [])
    assert result.split("\n") == [
        "수신  내부결재",
        "(경유)",
        "제목  테스트",
        "",
        "1. 테스트 관련입니다.  끝.",
        "",
        "발신  초등학교장",
        "시행일  2024. 1. 1.",
    ]


def test_two_attachments_scenario():
    result = normalize_document(BASE, ["계획안 1부", "시간표 1부"], [])
    lines = result.split("\n")
    assert lines == [
        "수신  내부결재",
        "(경유)",
        "제목  테스트",
        "",
        "1. 테스트 관련입니다.",
        "",
        "붙임 1. 계획안 1부.",
        "     2. 시간표 1부.  끝.",
        "",
        "발신  초등학교장",
        "시행일  2024. 1. 1.",
    ]
    assert "끝." not in [line.strip() for line in lines]


def test_no_attachment_line_when_empty():
    doc = BASE.replace("관련입니다.\n", "관련입니다.\n\n붙임  1. 임의 자료 1부\n끝.\n")
    result = normalize_document(doc, [], [])
    lines = result.split("\n")
    assert not any(line.strip().startswith("붙임") for line in lines)
    assert _end_marker_count(result) == 1


def test_single_attachment_invariant():
    result = normalize_document(BASE, ["자료 1부"], [])
    pattern = re.compile(r"^붙임  .*\.  끝\.$")
    assert sum(1 for line in result.split("\n") if pattern.match(line)) == 1
    assert _end_marker_count(result) == 1


@pytest.mark.parametrize("count", [2, 3, 5])
def test_multi_attachment_invariant(count):
    items = [f"자료{i} 1부" for i in range(1, count + 1)]
    result = normalize_document(BASE, items, [])

    pattern = re.compile(r"^(?:붙임 | {5})(\d+)\. ")
    numbered = [line for line in result.split("\n") if pattern.match(line)]

    assert [int(pattern.match(line).group(1)) for line in numbered] == list(range(1, count + 1))
    assert numbered[-1].endswith("  끝.")
    assert not any(line.endswith("끝.") for line in numbered[:-1])


def test_related_renumbering():
    result = normalize_document(BASE, [], ["공문 제목 2024-1"])
    lines = result.split("\n")
    top_level = [line for line in lines if re.match(r"^\d+\. ", line)]

    assert top_level[0] == "1. 관련"
    assert lines[lines.index("1. 관련") + 1] == "  가. 공문 제목 2024-1"
    assert top_level[1] == "2. 테스트 관련입니다.  끝."


def test_related_noop_keeps_numbering():
    doc = BASE.replace("1. 테스트 관련입니다.", "1. 첫째\n2. 둘째")
    result = normalize_document(doc, [], [])
    assert "관련" not in result.replace("테스트 관련", "")
    assert "1. 첫째" in result.split("\n")
    assert "2. 둘째.  끝." in result.split("\n")


def test_sanitized_attachment_round_trip():
    assert normalize_document(BASE, ["1. 자료 1부."], []) == normalize_document(BASE, ["자료 1부"], [])


def test_messy_generator_output():
    result = normalize_document(
        MESSY,
        ["운영 계획(안) 1부", "시간표 1부"],
        ["교육청-1234(2024. 2. 1.)"],
    )
    assert result.split("\n") == [
        "수신  내부결재",
        "(경유)",
        "제목  2024학년도 공개수업 운영",
        "",
        "1. 관련",
        "  가. 교육청-1234(2024. 2. 1.)",
        "",
        "2. 목적",
        "  가. 학부모 참여 확대",
        "3. 운영 내용",
        "   수업 공개 후 협의회를 운영함.",
        "",
        "붙임 1. 운영 계획(안) 1부.",
        "     2. 시간표 1부.  끝.",
        "",
        "발신  판교대장초등학교장",
        "시행일  2024. 3. 5.",
    ]


@pytest.mark.parametrize(
    "document, attachments, related",
    [
        (BASE, [], []),
        (BASE, ["자료 1부"], []),
        (BASE, ["계획안 1부", "시간표 1부"], ["공문 1", "공문 2"]),
        (MESSY, ["운영 계획(안) 1부", "시간표 1부"], ["교육청-1234(2024. 2. 1.)"]),
        (MESSY, [], []),
        ("제목  T\n\n아래와 같이 안내합니다.\n붙임과 같이 시행하고자 합니다.", ["자료"], ["공문"]),
        ("", [], []),
        ("그냥 한 줄", [], ["공문"]),
        (SUB_ITEMS_ONLY, [], ["교육청-1234"]),
        (SUB_ITEMS_ONLY, ["자료 1부", "자료 2부"], ["교육청-1234", "교육청-5678"]),
        ("끝.\n수신:내부결재\n제목: 테스트\n\n1. 목적", [], ["공문"]),
        ("1. 일정\n  가. 5교시 수업 끝.\n  나. 6교시 협의회", [], []),
    ],
)
def test_pipeline_is_idempotent(document, attachments, related):
    once = normalize_document(document, attachments, related)
    assert normalize_document(once, attachments, related) == once


def test_empty_document():
    assert normalize_document("", [], []) == "끝."
    assert normalize_document(None) == "끝."


def test_output_has_no_trailing_whitespace():
    result = normalize_document(BASE + "\n\n\n   ", [], [])
    assert result == result.rstrip()


def test_body_sub_items_kept_after_related_section():
    once = normalize_document(SUB_ITEMS_ONLY, [], ["교육청-1234"])
    assert once.split("\n") == [
        "수신  내부결재",
        "(경유)",
        "제목  테스트",
        "",
        "1. 관련",
        "  가. 교육청-1234",
        "",
        "  가. 일시: 2024. 3. 5.",
        "  나. 장소: 본교 강당.  끝.",
        "",
        "발신  초등학교장",
        "시행일  2024. 1. 1.",
    ]
    assert normalize_document(once, [], ["교육청-1234"]) == once


def test_stray_end_marker_above_header():
    result = normalize_document("끝.\n수신:내부결재\n제목: 테스트\n\n1. 목적", [], ["공문"])
    assert result.split("\n") == [
        "수신  내부결재",
        "제목  테스트",
        "",
        "1. 관련",
        "  가. 공문",
        "",
        "2. 목적.  끝.",
    ]


def test_end_word_in_body_wording_is_kept():
    result = normalize_document("1. 일정\n  가. 5교시 수업 끝.\n  나. 6교시 협의회", [], [])
    assert result.split("\n") == ["1. 일정", "  가. 5교시 수업 끝.", "  나. 6교시 협의회.  끝."]
