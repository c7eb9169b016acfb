from gongmun.related import (
    build_related_section,
    clean_related,
    normalize_related,
    sanitize_related,
    shift_top_level_numbers,
)

HEADER = ["수신  내부결재", "(경유)", "제목  테스트"]


def test_related_inserted_as_first_item_and_renumbered():
    lines = HEADER + ["", "1. 목적", "  가. 내용", "2. 추진", "", "발신  학교장"]

    result = normalize_related(lines, ["공문 제목 2024-1"])

    assert result == HEADER + [
        "",
        "1. 관련",
        "  가. 공문 제목 2024-1",
        "",
        "2. 목적",
        "  가. 내용",
        "3. 추진",
        "",
        "발신  학교장",
    ]


def test_empty_related_is_noop():
    lines = HEADER + ["", "1. 목적", "2. 추진"]
    assert normalize_related(lines, []) == lines
    assert normalize_related(lines, None) == lines


def test_missing_title_is_noop():
    lines = ["수신  내부결재", "", "1. 목적"]
    assert normalize_related(lines, ["공문"]) == lines


def test_reapply_does_not_shift_again():
    lines = HEADER + ["", "1. 목적", "2. 추진"]
    once = normalize_related(lines, ["공문"])
    assert normalize_related(once, ["공문"]) == once


def test_legacy_block_is_replaced():
    lines = ["제목  테스트", "", "관련: 교육청-123", "(2024. 1. 1.)", "", "1. 목적"]

    result = normalize_related(lines, ["교육청-123"])

    assert result == ["제목  테스트", "", "1. 관련", "  가. 교육청-123", "", "2. 목적"]


def test_legacy_block_removed_without_related():
    lines = ["제목  테스트", "", "관련: 교육청-123", "", "1. 목적"]
    assert normalize_related(lines, []) == ["제목  테스트", "", "1. 목적"]


def test_existing_numbered_section_is_replaced():
    lines = ["제목  테스트", "", "1. 관련: 옛 공문", "  가. 옛 공문 2", "", "2. 목적"]

    result = normalize_related(lines, ["새 공문"])

    assert result == ["제목  테스트", "", "1. 관련", "  가. 새 공문", "", "2. 목적"]


def test_sentence_starting_with_related_word_is_kept():
    lines = ["제목  테스트", "", "1. 관련하여 안내합니다."]
    assert normalize_related(lines, []) == lines


def test_prose_body_without_numbers_survives_reapply():
    lines = ["제목  테스트", "", "아래와 같이 안내합니다."]
    once = normalize_related(lines, ["공문"])
    assert once == ["제목  테스트", "", "1. 관련", "  가. 공문", "", "아래와 같이 안내합니다."]
    assert normalize_related(once, ["공문"]) == once


def test_text_before_first_item_stays_above_section():
    lines = ["제목  테스트", "", "안내 문구", "", "1. 목적"]
    result = normalize_related(lines, ["공문"])
    assert result == ["제목  테스트", "", "안내 문구", "", "1. 관련", "  가. 공문", "", "2. 목적"]


def test_sanitize_related_prefixes():
    assert sanitize_related("  관련: 교육청-123 ") == "교육청-123"
    assert sanitize_related("관련：교육청-123") == "교육청-123"
    assert sanitize_related("1. 교육청-123") == "교육청-123"
    assert sanitize_related("가. 교육청 공문") == "교육청 공문"
    assert sanitize_related("   ") == ""
    assert sanitize_related("2024. 교육과정 운영 계획") == "2024. 교육과정 운영 계획"


def test_clean_related_drops_empty_items():
    assert clean_related(["", "  ", "공문"]) == ["공문"]


def test_section_labels_fall_back_to_numbers():
    items = [f"문서{i}" for i in range(1, 16)]
    section = build_related_section(items)
    assert section[0] == "1. 관련"
    assert section[1] == "  가. 문서1"
    assert section[14] == "  하. 문서14"
    assert section[15] == "  15. 문서15"


def test_shift_top_level_numbers():
    assert shift_top_level_numbers(["1. a", "  1) x", "2. b"]) == ["2. a", "  1) x", "3. b"]
    assert shift_top_level_numbers([" 1. 들여쓴 목록", "2. b"]) == [" 1. 들여쓴 목록", "2. b"]
    assert shift_top_level_numbers(["2. a", "3. b"]) == ["2. a", "3. b"]
    assert shift_top_level_numbers(["내용만 있음"]) == ["내용만 있음"]
    assert shift_top_level_numbers(["1. a", "붙임 1. x"]) == ["2. a", "붙임 1. x"]


def test_body_sub_items_survive_reapply():
    lines = HEADER + ["", "  가. 일시: 2024. 3. 5.", "  나. 장소: 본교 강당", "", "발신  학교장"]

    once = normalize_related(lines, ["교육청-1234"])

    assert once == HEADER + [
        "",
        "1. 관련",
        "  가. 교육청-1234",
        "",
        "  가. 일시: 2024. 3. 5.",
        "  나. 장소: 본교 강당",
        "",
        "발신  학교장",
    ]
    assert normalize_related(once, ["교육청-1234"]) == once


def test_removed_section_leaves_single_blank_line():
    lines = ["제목  테스트", "", "1. 관련", "  가. 옛 공문", "", "2. 목적"]
    assert normalize_related(lines, []) == ["제목  테스트", "", "2. 목적"]
