# -*- coding: utf-8 -*-
"""
gongmun.prompt_builder

LLM에 보낼 공문 작성 지시문을 조립한다.

LLM은 형식을 자주 틀리기 때문에(띄어쓰기, 번호, 붙임 표기 등)
여기서 최대한 자세히 규칙을 주고, 남는 형식 오류는
pipeline.normalize_document 가 결정적으로 다시 맞춘다.
"""

from typing import List, Optional

SYSTEM_PROMPT = (
    "당신은 한국 초등학교 행정업무를 돕는 공문 작성 비서다. "
    "출력은 완성된 공문 본문만 제공한다."
)


def _numbered(items: List[str]) -> str:
    if not items:
        return "(없음)"
    return "\n".join(f"{idx}. {item}" for idx, item in enumerate(items, start=1))


def build_prompt(
    subject: str,
    recipient: str,
    sender: str,
    date: str = "",
    details: str = "",
    attachments: Optional[List[str]] = None,
    related: Optional[List[str]] = None,
    use_attachment_phrase: bool = False,
) -> str:
    attachments = attachments or []
    related = related or []

    if use_attachment_phrase:
        attachment_sentence_rule = (
            "본문에는 '붙임과 같이 시행하고자 합니다.' 문장을 1회 포함하되, "
            "붙임이 0개면 '아래와 같이 시행하고자 합니다.'로 대체할 것."
        )
    else:
        attachment_sentence_rule = "본문에는 관행적인 붙임 문구를 임의로 추가하지 말 것."

    lines = [
        "아래 정보를 바탕으로 한국 학교 내부결재용 공문을 작성해줘.",
        "",
        "[입력 정보]",
        f"- 수신: {recipient}",
        f"- 제목: {subject}",
        f"- 시행일: {date or '오늘 날짜 형식 유지'}",
        f"- 발신: {sender}",
        f"- 핵심 내용: {details or '주제에 맞게 목적/추진내용/협조사항을 구체적으로 작성'}",
        f"- 관련: {_numbered(related)}",
        f"- 붙임: {_numbered(attachments)}",
        "",
        "[작성 규칙]",
        "1) 반드시 다음 형식만 출력:",
        "수신  ...",
        "(경유)",
        "제목  ...",
        "",
        "1. ...",
        "  가. ...",
        "  나. ...",
        "  다. ...",
        "",
        "관련 표기 규칙:",
        "- 관련 문서가 있으면 본문 첫 항목을 '1. 관련'으로 두고 '  가. <문서>' 형식으로 나열할 것.",
        "- 관련 문서가 없으면 '관련' 항목을 쓰지 말 것.",
        "",
        "붙임 표기 규칙:",
        "- 붙임이 0개면 '붙임' 줄을 쓰지 말 것(붙임 구역 전체 생략).",
        "- 붙임이 1개면 '붙임  <항목>.  끝.' 1줄만 표기.",
        "- 붙임이 여러 개면 '붙임' 아래에 1., 2., 3. ...으로 줄바꿈하여 모두 표기.",
        "- 붙임 항목 문구는 입력값을 우선 사용(불필요한 임의 생성/추가 금지).",
        f"- {attachment_sentence_rule}",
        "",
        "붙임(표기 예시)",
        "붙임 1. 운영 계획(안) 1부.",
        "     2. 학년별 운영 시간표 1부.  끝.",
        "",
        "발신  ...",
        "시행일  ...",
        "2) 학교 행정 문체로 자연스럽고 구체적으로 작성.",
        "3) 문장 길이는 간결하게, 내용은 실제 결재 가능한 수준으로 작성.",
        "4) 마크다운/코드블록/설명문은 절대 출력하지 말 것.",
    ]
    return "\n".join(lines)
