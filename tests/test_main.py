from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from scholarship_journey.errors import ConfigurationError, EndpointError, MalformedResponseError
from scholarship_journey.llm import ScholarshipAssistant
from scholarship_journey.main import app, get_assistant

DOCUMENT_FORM = {
    "document_type": "SOP",
    "name": "Amina Khan",
    "degree": "MS",
    "field": "Computer Science",
    "country": "Germany",
    "previous_education": "BS Software Engineering",
    "motivation": "Agritech",
    "reason_for_choice": "Research groups",
    "career_goals": "Research lab",
    "strengths": "Analytical",
    "experience": "Crop yield project",
}


class _ScriptedClient:
    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def scripted():
    fake = _ScriptedClient()
    app.dependency_overrides[get_assistant] = lambda: ScholarshipAssistant(client=fake)
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(scripted) -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_document_missing_fields_never_dispatch(client: TestClient, scripted: _ScriptedClient) -> None:
    form = dict(DOCUMENT_FORM, name="", motivation="  ")

    response = client.post("/api/documents", json=form)

    assert response.status_code == 400
    assert response.json()["detail"] == {"name": "Required", "motivation": "Required"}
    assert scripted.prompts == []


def test_document_length_bounds_are_checked(client: TestClient, scripted: _ScriptedClient) -> None:
    form = dict(DOCUMENT_FORM, limit_type="words", min_limit=900, max_limit=1200)

    response = client.post("/api/documents", json=form)

    assert response.status_code == 400
    assert "max_limit" in response.json()["detail"]
    assert scripted.prompts == []


def test_document_returns_generated_text(client: TestClient, scripted: _ScriptedClient) -> None:
    scripted.reply = "My journey into computer science began..."

    response = client.post("/api/documents", json=DOCUMENT_FORM)

    assert response.status_code == 200
    assert response.json() == {"document_type": "SOP", "text": "My journey into computer science began..."}
    assert len(scripted.prompts) == 1


def test_cv_analysis_falls_back_on_unparseable_reply(client: TestClient, scripted: _ScriptedClient) -> None:
    scripted.reply = "I cannot help with that."

    response = client.post("/api/cv/analyze", json={"content": "Jane Doe, Data Analyst"})

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "fallback"
    assert len(body["feedback"]["issues"]) == 1


def test_cv_analysis_requires_content(client: TestClient, scripted: _ScriptedClient) -> None:
    response = client.post("/api/cv/analyze", json={"content": "   "})

    assert response.status_code == 400
    assert scripted.prompts == []


def test_scholarships_no_results_state(client: TestClient, scripted: _ScriptedClient) -> None:
    scripted.reply = '{"scholarships":[{"title":"","description":"x"}]}'

    response = client.post("/api/scholarships", json={"degree_level": "PhD", "country": "Japan"})

    assert response.status_code == 200
    assert response.json()["status"] == "no_results"


def test_scholarships_serialize_wire_field_names(client: TestClient, scripted: _ScriptedClient) -> None:
    scripted.reply = (
        '{"scholarships":[{"title":"MEXT","description":"Japanese government scholarship",'
        '"financialCoverage":"Fully Funded"}]}'
    )

    response = client.post("/api/scholarships", json={"degree_level": "PhD", "country": "Japan"})

    entry = response.json()["scholarships"][0]
    assert entry["title"] == "MEXT"
    assert entry["financialCoverage"] == "Fully Funded"


def test_scholarships_reject_unknown_degree_level(client: TestClient, scripted: _ScriptedClient) -> None:
    response = client.post("/api/scholarships", json={"degree_level": "Diploma", "country": "Japan"})

    assert response.status_code == 400
    assert "degree_level" in response.json()["detail"]
    assert scripted.prompts == []


@pytest.mark.parametrize(
    ("error", "status_code", "detail"),
    [
        (
            EndpointError("Failed to generate: Bad Request", status_code=400),
            502,
            "Failed to generate: Bad Request. Please try again.",
        ),
        (
            EndpointError("Failed to generate: API key not valid.", status_code=400),
            502,
            "Failed to generate: API key not valid. Please try again.",
        ),
        (
            MalformedResponseError("Unexpected API response format"),
            502,
            "The AI service returned an unexpected response. Please try again.",
        ),
        (
            ConfigurationError("GEMINI_API_KEY is not set"),
            500,
            "Server is missing its API configuration",
        ),
    ],
)
def test_dispatch_errors_are_surfaced(
    client: TestClient, scripted: _ScriptedClient, error: Exception, status_code: int, detail: str
) -> None:
    scripted.error = error

    response = client.post("/api/cv/analyze", json={"content": "cv text"})

    assert response.status_code == status_code
    assert response.json()["detail"] == detail
