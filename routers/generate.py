# routers/generate.py
import uuid
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from core.config import DEFAULT_RECIPIENT, DEFAULT_SENDER
from core.logging import logger, log_event
from gongmun.builders import build_template_document
from gongmun.exceptions import EmptyResponseError, LLMConfigError, LLMRequestError
from gongmun.llm_client import generate_document_text
from gongmun.pipeline import normalize_document
from gongmun.prompt_builder import build_prompt

router = APIRouter(tags=["gongmun"])

INTERNAL_ERROR_DETAIL = "Internal error while generating document."


# 📦 공문 생성 요청 바디
class GenerateRequest(BaseModel):
    """
    공문 생성/미리보기 공통 요청 바디.
    - subject: 제목 (생성 API에서는 필수)
    - attachments / related: 순서가 그대로 번호/기호 순서가 됨
    """
    model_config = ConfigDict(populate_by_name=True)

    subject: str = Field(default="", description="공문 제목", examples=["2024학년도 학부모 공개수업 운영 계획"])
    recipient: str = Field(default="", description="수신처 (비우면 기본 수신처)", examples=["내부결재"])
    sender: str = Field(default="", description="발신 기관 (비우면 기본 발신 기관)")
    date: str = Field(default="", description="시행일 (예: 2024. 3. 5.)")
    details: str = Field(default="", description="핵심 내용")
    attachments: Optional[List[str]] = Field(default=None, examples=[["운영 계획(안) 1부"]])
    related: Optional[List[str]] = Field(default=None, examples=[["교육청 공문 2024-1"]])
    use_attachment_phrase: bool = Field(
        default=False,
        alias="useAttachmentPhrase",
        description="본문에 '붙임과 같이 시행하고자 합니다.' 문장을 넣을지 여부",
    )


# 📦 공문 응답
class GenerateResponse(BaseModel):
    document: str = Field(..., description="규격에 맞춰 정리된 공문 텍스트")


@router.post(
    "/api/generate",
    response_model=GenerateResponse,
    summary="LLM으로 공문 생성 후 규격 정리",
)
def generate_document(body: GenerateRequest):
    subject = body.subject.strip()
    if not subject:
        raise HTTPException(status_code=400, detail="subject is required.")

    request_id = str(uuid.uuid4())
    attachments = body.attachments or []
    related = body.related or []

    prompt = build_prompt(
        subject=subject,
        recipient=body.recipient.strip() or DEFAULT_RECIPIENT,
        sender=body.sender.strip() or DEFAULT_SENDER,
        date=body.date.strip(),
        details=body.details.strip(),
        attachments=attachments,
        related=related,
        use_attachment_phrase=body.use_attachment_phrase,
    )

    try:
        raw_document = generate_document_text(prompt)
        document = normalize_document(raw_document, attachments, related)
    except (LLMConfigError, LLMRequestError, EmptyResponseError) as e:
        logger.error(f"❌ [generate] {request_id} 공문 생성 실패: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception(f"❌ [generate] {request_id} 예상하지 못한 오류: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    log_event(
        request_id,
        "generate",
        {
            "subject": subject,
            "attachments": attachments,
            "related": related,
            "raw_document": raw_document,
            "document": document,
        },
    )

    return GenerateResponse(document=document)


@router.post(
    "/api/preview",
    response_model=GenerateResponse,
    summary="LLM 없이 템플릿 초안 미리보기",
)
def preview_document(body: GenerateRequest):
    attachments = body.attachments or []
    related = body.related or []

    draft = build_template_document(
        subject=body.subject,
        recipient=body.recipient.strip() or DEFAULT_RECIPIENT,
        sender=body.sender.strip() or DEFAULT_SENDER,
        date=body.date,
        details=body.details,
        attachments=attachments,
        related=related,
    )
    return GenerateResponse(document=normalize_document(draft, attachments, related))
