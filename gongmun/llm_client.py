# -*- coding: utf-8 -*-
"""
gongmun.llm_client

이 모듈은 공문 초안 생성을 위한 OpenAI Responses API 호출 래퍼를 제공합니다.

- 환경설정: core.config 에서 OPENAI_API_KEY / OPENAI_MODEL 을 읽음
- get_client(): OpenAI 클라이언트를 처음 쓸 때 한 번만 생성
- extract_text(response): output_text 또는 output[].content[].text 를 모아 본문 추출
- generate_document_text(user_prompt, model): 시스템/사용자 메시지로 공문 본문 생성

라우터는 이 모듈을 통해서만 LLM을 호출하도록 분리해 두었습니다.
"""

from typing import Any, List, Optional

from openai import OpenAI, OpenAIError

from core import config
from core.logging import logger

from .exceptions import EmptyResponseError, LLMConfigError, LLMRequestError
from .prompt_builder import SYSTEM_PROMPT


_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    global _client

    if _client is None:
        if not config.OPENAI_API_KEY:
            raise LLMConfigError("OPENAI_API_KEY is not configured.")
        _client = OpenAI(api_key=config.OPENAI_API_KEY)
    return _client


def _get(obj: Any, name: str, default: Any = None) -> Any:
    """SDK 객체와 dict 응답을 같은 방식으로 읽기 위한 헬퍼."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def extract_text(response: Any) -> str:
    """
    Responses API 응답에서 본문 텍스트만 꺼낸다.

    1) output_text 가 있으면 그대로 사용
    2) 없으면 output[*].content[*].text 를 줄바꿈으로 이어 붙임
    """
    output_text = _get(response, "output_text")
    if isinstance(output_text, str) and output_text:
        return output_text

    output = _get(response, "output") or []
    chunks: List[str] = []
    for item in output if isinstance(output, list) else []:
        content = _get(item, "content") or []
        for part in content if isinstance(content, list) else []:
            text = _get(part, "text")
            if isinstance(text, str):
                chunks.append(text)

    return "\n".join(chunks)


# -------------------- OpenAI Responses 호출 래퍼 --------------------
def generate_document_text(user_prompt: str, model: Optional[str] = None) -> str:
    """공문 본문 생성. 실패/빈 응답은 예외로 올려 보낸다."""
    client = get_client()
    use_model = model or config.OPENAI_MODEL

    try:
        resp = client.responses.create(
            model=use_model,
            input=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
        )
    except OpenAIError as e:
        logger.warning(f"[LLM] OpenAI API error: {e}")
        message = getattr(e, "message", None) or "AI request failed."
        raise LLMRequestError(message) from e

    text = extract_text(resp).strip()
    if not text:
        raise EmptyResponseError("Empty AI response.")

    logger.info(f"[LLM] 공문 초안 생성 완료 (model={use_model}, {len(text)}자)")
    return text
