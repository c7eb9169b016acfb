# -*- coding: utf-8 -*-
"""
gongmun 패키지

LLM이 생성한 공문 초안을 "정해진 공문 레이아웃"으로 다시 맞춰 주는
후처리 엔진과, 그 주변(프롬프트/LLM 호출/템플릿 초안) 로직 모음입니다.

외부(예: app_fastapi.py, routers)에서는 보통 아래 함수만 직접 사용합니다.

- normalize_document(document, attachments, related):
    LLM 출력 텍스트 + 붙임 목록 + 관련 문서 목록을 받아
    수신/경유/제목 머리글, 번호 본문, 붙임, 끝. 표시, 발신 꼬리말이
    규격대로 정리된 공문 텍스트를 돌려줍니다.

세부 로직은 다음 모듈로 나뉘어 있습니다.

- regions        : 줄 태깅(TaggedLine), 영역(머리글/본문/붙임/꼬리말) 상태 기계
- header         : 수신/(경유)/제목 라벨 간격 정리
- related        : "1. 관련" 항목 삽입 및 본문 번호 재부여
- attachments    : 붙임 0/1/N개 규칙과 끝. 표시
- indentation    : 본문 항목 들여쓰기/이어지는 줄 정렬
- pipeline       : 위 네 단계를 고정 순서로 실행
- prompt_builder : LLM에 보낼 작성 지시문 조립
- llm_client     : OpenAI Responses API 호출 래퍼
- builders       : LLM 없이 쓰는 템플릿 초안
"""

from .pipeline import normalize_document

__all__ = ["normalize_document"]
