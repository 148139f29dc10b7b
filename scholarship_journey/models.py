from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEGREE_LEVELS = ("Bachelor's", "Master's", "PhD")

# Upper bound of min/max length per unit
LIMIT_MAXIMUMS = {"words": 1000, "characters": 5000}


# Request Models
class DocumentRequest(BaseModel):
    """Form fields for a Statement of Purpose or Letter of Motivation"""

    document_type: Literal["SOP", "LOM"] = "SOP"
    name: str = ""
    degree: str = Field("", description="BS/MS/PhD")
    field: str = Field("", description="Field of study")
    country: str = ""
    university: str = ""
    previous_education: str = ""
    motivation: str = ""
    reason_for_choice: str = ""
    career_goals: str = ""
    future_plans: str = ""
    strengths: str = ""
    experience: str = Field("", description="Projects, research or internships")
    work_experience: str = ""
    volunteer_work: str = ""
    achievements: str = ""
    personal_story: str = ""
    limit_type: Literal["words", "characters"] = "words"
    min_limit: int = 500
    max_limit: int = 1000


class CVAnalysisRequest(BaseModel):
    content: str = ""


class ScholarshipSearchRequest(BaseModel):
    degree_level: str = ""
    country: str = ""
    background: str = ""


# Response Models
class ExtractionStatus(str, Enum):
    OK = "ok"
    FALLBACK = "fallback"
    NO_RESULTS = "no_results"


class DocumentResult(BaseModel):
    document_type: str
    text: str


class CVFeedback(BaseModel):
    issues: List[str] = []
    suggestions: List[str] = []


class CVAnalysisResult(BaseModel):
    status: ExtractionStatus
    feedback: CVFeedback
    reason: Optional[str] = None


class ScholarshipEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    degree: Optional[str] = None
    country: Optional[str] = None
    link: Optional[str] = None
    financial_coverage: Optional[str] = Field(None, alias="financialCoverage")
    deadline: Optional[str] = None


class ScholarshipSearchResult(BaseModel):
    status: ExtractionStatus
    scholarships: List[ScholarshipEntry] = []
    reason: Optional[str] = None
