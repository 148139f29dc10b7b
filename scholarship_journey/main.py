import logging
import os

from fastapi import Depends, FastAPI, HTTPException

from scholarship_journey import config
from scholarship_journey.errors import (
    ConfigurationError,
    EndpointError,
    MalformedResponseError,
    ValidationError,
)
from scholarship_journey.llm import ScholarshipAssistant
from scholarship_journey.models import (
    CVAnalysisRequest,
    CVAnalysisResult,
    DocumentRequest,
    DocumentResult,
    ScholarshipSearchRequest,
    ScholarshipSearchResult,
)
from scholarship_journey.validation import (
    validate_cv_request,
    validate_document_request,
    validate_scholarship_request,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Scholarship Journey Assistant")


@app.on_event("startup")
async def startup_event():
    """Report configuration problems on startup"""
    print("Starting Scholarship Journey Assistant...")
    print(f"📊 Model: {config.GEMINI_MODEL}")

    try:
        config.get_api_key()
        print("✓ GEMINI_API_KEY configured")
    except ConfigurationError:
        print("⚠ WARNING: GEMINI_API_KEY not set, every generation request will fail")

    print("✅ Server ready!")


def get_assistant() -> ScholarshipAssistant:
    return ScholarshipAssistant()


def _raise_http(error: Exception):
    """Translate core errors into responses the UI can display"""
    if isinstance(error, ConfigurationError):
        logger.error("Configuration error: %s", error)
        raise HTTPException(status_code=500, detail="Server is missing its API configuration")
    if isinstance(error, EndpointError):
        raise HTTPException(
            status_code=502,
            detail=f"{str(error).rstrip('. ')}. Please try again.",
        )
    if isinstance(error, MalformedResponseError):
        raise HTTPException(
            status_code=502,
            detail="The AI service returned an unexpected response. Please try again.",
        )
    raise error


@app.get("/")
async def root():
    return {"message": "Scholarship Journey Assistant", "status": "running"}


@app.post("/api/documents", response_model=DocumentResult)
async def generate_document(
    request: DocumentRequest,
    assistant: ScholarshipAssistant = Depends(get_assistant),
):
    """Generate an SOP or LOM from the submitted form"""
    try:
        validate_document_request(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)

    try:
        return await assistant.generate_document(request)
    except (ConfigurationError, EndpointError, MalformedResponseError) as e:
        _raise_http(e)


@app.post("/api/cv/analyze", response_model=CVAnalysisResult)
async def analyze_cv(
    request: CVAnalysisRequest,
    assistant: ScholarshipAssistant = Depends(get_assistant),
):
    try:
        validate_cv_request(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)

    try:
        return await assistant.analyze_cv(request)
    except (ConfigurationError, EndpointError, MalformedResponseError) as e:
        _raise_http(e)


@app.post("/api/scholarships", response_model=ScholarshipSearchResult)
async def find_scholarships(
    request: ScholarshipSearchRequest,
    assistant: ScholarshipAssistant = Depends(get_assistant),
):
    """Recommend scholarships; an empty match set comes back as status no_results"""
    try:
        validate_scholarship_request(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)

    try:
        return await assistant.find_scholarships(request)
    except (ConfigurationError, EndpointError, MalformedResponseError) as e:
        _raise_http(e)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
