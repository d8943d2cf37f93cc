# backend/app/services/ai.py
import time
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..utils.logging import service_logger
from .code_blocks import extract_code_block, find_code_blocks, strip_code_blocks


class AIServiceError(Exception):
    """Raised when the completion API cannot produce a reply"""


class AIService:
    """
    Thin proxy to an OpenAI-compatible chat-completion endpoint.

    Every operation makes exactly one request. Nothing is retried; failures
    surface as AIServiceError (or as an error result for edit_code).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.base_url = (base_url or settings.OPENAI_BASE_URL).rstrip("/")
        self.model = model or settings.OPENAI_MODEL
        self.timeout = timeout if timeout is not None else settings.AI_TIMEOUT
        self.transport = transport

        service_logger.info("AI Service initialized", extra={
            "base_url": self.base_url,
            "model": self.model,
            "api_key_configured": bool(self.api_key)
        })

    async def complete(self, messages: List[Dict[str, str]], temperature: float) -> str:
        """Send one chat-completion request and return the reply text"""
        if not self.api_key:
            raise AIServiceError("OpenAI API key is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature
        }

        start_time = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=headers
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            service_logger.error("Completion request failed", extra={
                "model": self.model,
                "error": str(e)
            })
            raise AIServiceError(f"Completion request failed: {e}") from e
        except ValueError as e:
            service_logger.error("Completion API returned invalid JSON", extra={
                "model": self.model,
                "error": str(e)
            })
            raise AIServiceError("Completion API returned invalid JSON") from e

        content = self._reply_content(data)
        if not content:
            raise AIServiceError("No response from AI")

        service_logger.info("Completion received", extra={
            "model": self.model,
            "reply_length": len(content),
            "execution_time_ms": round((time.perf_counter() - start_time) * 1000, 2)
        })
        return content

    @staticmethod
    def _reply_content(data: Any) -> Optional[str]:
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None

    def _language_note(self) -> str:
        return f"Always answer in {settings.AI_RESPONSE_LANGUAGE}."

    async def edit_code(
        self,
        instruction: str,
        current_code: str,
        filename: Optional[str] = None,
        language: Optional[str] = None
    ) -> Dict[str, Any]:
        """Apply an instruction to the given code. Never raises."""
        language = language or "javascript"
        system_prompt = (
            "You are an expert programming assistant built into a code editor. "
            "You can read and modify code files directly. When you receive an instruction to change code:\n\n"
            "1. Analyse the current code and the requested changes\n"
            "2. Apply the changes precisely\n"
            "3. Return the complete modified code in a single fenced code block\n"
            "4. Give a short explanation of what changed\n\n"
            f"Current file: {filename or 'untitled'}\n"
            f"Language: {language}\n\n"
            f"{self._language_note()}"
        )
        user_prompt = (
            f"Current code:\n```{language}\n{current_code}\n```\n\n"
            f"Instruction: {instruction}\n\n"
            "Modify the code according to the instruction and return the complete updated code."
        )

        try:
            content = await self.complete(
                [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=0.1
            )
        except AIServiceError as e:
            service_logger.warning("Code edit failed", extra={"filename": filename, "error": str(e)})
            return {"success": False, "error": f"Failed to edit code: {e}"}

        code = extract_code_block(content)
        explanation = strip_code_blocks(content)
        return {
            "success": True,
            "modified_code": code if code is not None else content,
            "explanation": explanation or "The code was modified as requested."
        }

    async def chat(self, message: str, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Free-form question about the project, optionally proposing one code change"""
        context = context or {}
        current_file = context.get("current_file")
        current_code = context.get("current_code")
        project_files = context.get("project_files") or []

        system_prompt = (
            "You are an AI programming assistant built into a code editor. You can:\n"
            "- Answer programming questions\n"
            "- Help debug code\n"
            "- Suggest improvements\n"
            "- Create new files and code\n"
            "- Modify existing code directly in the editor\n\n"
            "When the user asks to edit, modify, change or create code, provide the complete "
            "updated code in a fenced code block and briefly explain the changes; "
            "the code will be applied in the editor.\n"
            f"{self._language_note()}\n\n"
            "Current project context:"
        )
        if current_file:
            system_prompt += f"\n\nCurrent file: {current_file}"
        if project_files:
            system_prompt += f"\n\nProject files: {', '.join(project_files)}"

        user_message = message
        if current_code:
            user_message += f"\n\nCurrent code in the editor:\n```\n{current_code}\n```"

        content = await self.complete(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message}
            ],
            temperature=0.3
        )

        code_changes = None
        if current_file:
            for block in find_code_blocks(content):
                # Short snippets are illustrations, not replacements
                if len(block) > settings.MIN_CODE_CHANGE_LENGTH:
                    code_changes = [{
                        "filename": current_file,
                        "content": block,
                        "explanation": "Changes suggested by the AI assistant"
                    }]
                    break

        return {"response": content, "code_changes": code_changes}

    async def generate_code(self, prompt: str, language: str = "javascript") -> str:
        return await self.complete(
            [
                {
                    "role": "system",
                    "content": (
                        f"You are a code generation assistant. Generate clean, well-documented {language} "
                        "code based on the user's request. Return only the code without explanations "
                        "unless specifically asked."
                    )
                },
                {"role": "user", "content": prompt}
            ],
            temperature=0.2
        )


ai_service = AIService()


def get_ai_service() -> AIService:
    return ai_service
