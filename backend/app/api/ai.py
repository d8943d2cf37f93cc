# backend/app/api/ai.py
from fastapi import APIRouter, Depends, HTTPException

from ..schemas.ai import (
    AIChatRequest, AIChatResponse, CodeEditRequest, CodeEditResponse,
    GenerateCodeRequest, GenerateCodeResponse
)
from ..services.ai import AIService, AIServiceError, get_ai_service
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/chat", response_model=AIChatResponse)
async def chat_with_ai(request: AIChatRequest, ai: AIService = Depends(get_ai_service)):
    context = request.context.model_dump() if request.context else {}
    api_logger.info("AI chat request", extra={
        "current_file": context.get("current_file"),
        "message_length": len(request.message)
    })

    try:
        result = await ai.chat(request.message, context)
    except AIServiceError as e:
        api_logger.error("AI chat failed", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to chat with AI")

    api_logger.info("AI chat completed", extra={
        "has_code_changes": bool(result.get("code_changes"))
    })
    return result


@router.post("/edit-code", response_model=CodeEditResponse)
async def edit_code_with_ai(request: CodeEditRequest, ai: AIService = Depends(get_ai_service)):
    """Failures come back as success=false rather than an HTTP error"""
    api_logger.info("AI edit request", extra={
        "filename": request.filename,
        "language": request.language
    })

    result = await ai.edit_code(
        instruction=request.instruction,
        current_code=request.current_code,
        filename=request.filename,
        language=request.language
    )

    api_logger.info("AI edit finished", extra={"success": result["success"]})
    return result


@router.post("/generate", response_model=GenerateCodeResponse)
async def generate_code(request: GenerateCodeRequest, ai: AIService = Depends(get_ai_service)):
    api_logger.info("AI generate request", extra={"language": request.language})

    try:
        code = await ai.generate_code(request.prompt, request.language)
    except AIServiceError as e:
        api_logger.error("AI code generation failed", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to generate code")

    return {"code": code}
