import logging
from typing import Optional

import httpx

from scholarship_journey import config
from scholarship_journey.errors import EndpointError, MalformedResponseError
from scholarship_journey.models import (
    CVAnalysisRequest,
    CVAnalysisResult,
    DocumentRequest,
    DocumentResult,
    ScholarshipSearchRequest,
    ScholarshipSearchResult,
)
from scholarship_journey.prompts import build_cv_prompt, build_document_prompt, build_scholarship_prompt
from scholarship_journey.utils import extract_cv_feedback, extract_scholarships

logger = logging.getLogger(__name__)


def _provider_message(response: httpx.Response) -> Optional[str]:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return None


class GeminiClient:
    """Sends one prompt to the Gemini generateContent endpoint"""

    def __init__(
        self,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.model = model or config.GEMINI_MODEL
        self.api_base = (api_base or config.GEMINI_API_BASE).rstrip("/")
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """POST the prompt and return candidates[0].content.parts[0].text"""
        api_key = config.get_api_key()
        timeout = config.get_timeout()

        async with httpx.AsyncClient(transport=self.transport, timeout=timeout) as client:
            try:
                response = await client.post(
                    self.url,
                    params={"key": api_key},
                    json={"contents": [{"parts": [{"text": prompt}]}]},
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                logger.error("Gemini request failed: %s", e)
                raise EndpointError(f"Failed to generate: {e}") from e

        if response.is_error:
            message = _provider_message(response) or response.reason_phrase
            logger.error("Gemini returned %s: %s", response.status_code, message)
            raise EndpointError(f"Failed to generate: {message}", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("Response body is not JSON") from e

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError("Unexpected API response format") from e

        if not isinstance(text, str) or not text:
            raise MalformedResponseError("Unexpected API response format")

        logger.debug("Gemini response length: %d chars", len(text))
        return text


class ScholarshipAssistant:
    """Runs the prompt -> dispatch -> extract round trip for each flow"""

    def __init__(self, client: Optional[GeminiClient] = None):
        self.client = client or GeminiClient()

    async def generate_document(self, request: DocumentRequest) -> DocumentResult:
        prompt = build_document_prompt(request)
        text = await self.client.generate(prompt)
        return DocumentResult(document_type=request.document_type, text=text)

    async def analyze_cv(self, request: CVAnalysisRequest) -> CVAnalysisResult:
        prompt = build_cv_prompt(request)
        text = await self.client.generate(prompt)
        return extract_cv_feedback(text)

    async def find_scholarships(self, request: ScholarshipSearchRequest) -> ScholarshipSearchResult:
        prompt = build_scholarship_prompt(request)
        text = await self.client.generate(prompt)
        return extract_scholarships(text)
