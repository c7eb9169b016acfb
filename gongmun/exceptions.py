# -*- coding: utf-8 -*-
"""
gongmun.exceptions

LLM 호출 주변에서만 쓰는 예외들.
후처리 파이프라인(normalize_document)은 예외를 던지지 않는다.
"""


class GongmunError(Exception):
    """gongmun 공통 예외."""


class LLMConfigError(GongmunError, RuntimeError):
    """OPENAI_API_KEY 등 LLM 설정이 없을 때."""


class LLMRequestError(GongmunError):
    """LLM API 호출 자체가 실패했을 때."""


class EmptyResponseError(GongmunError):
    """LLM 응답에 본문 텍스트가 없을 때."""
