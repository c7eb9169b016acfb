# -*- coding: utf-8 -*-
"""
main.py

이 파일은 "공문 자동 생성" 백엔드의 콘솔 데모 진입점입니다.

🎯 역할 요약
--------------------------------------
1. 템플릿 미리보기 모드
   - 제목/수신/발신/붙임/관련 문서를 입력받아
   - LLM 호출 없이 builders.build_template_document 로 초안 조립
   - pipeline.normalize_document 로 규격 정리 후 출력

2. 붙여넣기 정리 모드
   - LLM이 만든 공문 텍스트를 그대로 붙여넣으면
   - 붙임/관련 목록과 함께 규격 정리 결과를 출력

👉 실제 서비스는 app_fastapi.py (/api/generate, /api/preview) 를 사용합니다.
"""

from typing import List

from core.config import DEFAULT_RECIPIENT, DEFAULT_SENDER
from gongmun.builders import build_template_document
from gongmun.pipeline import normalize_document


def _read_list(prompt: str) -> List[str]:
    """쉼표(,)로 구분된 목록 입력."""
    raw = input(prompt).strip()
    return [item.strip() for item in raw.split(",") if item.strip()]


def _read_block() -> str:
    """빈 줄 두 번이 나올 때까지 여러 줄 입력."""
    lines: List[str] = []
    blank_count = 0
    while True:
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            blank_count += 1
            if blank_count >= 2:
                break
        else:
            blank_count = 0
        lines.append(line)
    return "\n".join(lines)


# =====================================================================
#  모드 1: 템플릿 미리보기
# =====================================================================
def run_template_mode():
    print("\n[모드 1] 템플릿 공문 미리보기")
    subject = input("제목 > ").strip()
    recipient = input(f"수신 (기본: {DEFAULT_RECIPIENT}) > ").strip() or DEFAULT_RECIPIENT
    sender = input(f"발신 (기본: {DEFAULT_SENDER}) > ").strip() or DEFAULT_SENDER
    date = input("시행일 (YYYY-MM-DD) > ").strip()
    details = input("핵심 내용 > ").strip()
    attachments = _read_list("붙임 (쉼표로 구분) > ")
    related = _read_list("관련 문서 (쉼표로 구분) > ")

    draft = build_template_document(
        subject=subject,
        recipient=recipient,
        sender=sender,
        date=date,
        details=details,
        attachments=attachments,
        related=related,
    )

    print("\n===== 정리된 공문 =====")
    print(normalize_document(draft, attachments, related))


# =====================================================================
#  모드 2: 붙여넣기 정리
# =====================================================================
def run_paste_mode():
    print("\n[모드 2] LLM 출력 공문 정리 (빈 줄 두 번으로 입력 종료)")
    document = _read_block()
    attachments = _read_list("붙임 (쉼표로 구분) > ")
    related = _read_list("관련 문서 (쉼표로 구분) > ")

    print("\n===== 정리된 공문 =====")
    print(normalize_document(document, attachments, related))


# =====================================================================
#  메인 진입점
# =====================================================================

def main():
    """
    main.py의 진입점 함수.

    1) 실행 모드 선택
       - 1: 템플릿 미리보기
       - 2: 붙여넣기 정리
    2) 해당 모드 실행
    """
    print("===== 공문 자동 생성 데모 =====")
    print("1) 템플릿 공문 미리보기")
    print("2) LLM 출력 공문 정리")
    print("0) 종료")

    while True:
        try:
            mode = input("\n실행 모드를 선택하세요 (1/2/0) > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n종료합니다.")
            break

        if mode == "1":
            run_template_mode()
            break
        elif mode == "2":
            run_paste_mode()
            break
        elif mode == "0":
            print("종료합니다.")
            break
        else:
            print("잘못된 입력입니다. 1, 2, 0 중에서 선택해 주세요.")


if __name__ == "__main__":
    main()
