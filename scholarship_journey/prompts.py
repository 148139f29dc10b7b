from scholarship_journey.models import CVAnalysisRequest, DocumentRequest, ScholarshipSearchRequest

MAX_CV_CHARS = 10000

sop_instructions = """* Start with an engaging hook
* Highlight academic background
* Mention specific university resources
* Include country's progress in {field}
* Professional tone"""

lom_instructions = """* Focus on personal motivation
* Emotional connection to field
* Cultural exchange benefits
* Humble and grateful tone"""

cv_prompt = """Analyze this CV content and provide specific feedback in JSON format with these keys:
"issues" (array of strings), "suggestions" (array of strings).
Be very specific to the actual content. If the CV is empty or invalid, say so.

CV Content:
{content}"""

scholarship_prompt = """As an international scholarship expert, recommend 5-10 fully funded scholarships for {degree_level} programs in {country} that don't require IELTS.
Applicant background: {background}.

Format response as valid JSON exactly like this:
{{
  "scholarships": [
    {{
      "title": "Scholarship Name",
      "degree": "Degree Level",
      "country": "Country",
      "description": "Detailed description (120+ characters)",
      "link": "https://official.website",
      "financialCoverage": "Fully Funded/Partial",
      "deadline": "Month Year or Rolling"
    }}
  ]
}}"""


def _optional(label: str, value: str) -> list:
    value = value.strip()
    return [f"   - {label}: {value}"] if value else []


def build_document_prompt(request: DocumentRequest) -> str:
    """Prompt for an SOP or LOM; optional lines only appear when filled in"""
    university = request.university.strip()

    lines = [
        f"Generate a {request.document_type} for {request.name} applying for "
        f"{request.degree} in {request.field} at {university or 'a university'} "
        f"in {request.country}.",
        "",
        "Requirements:",
        f"- Length: {request.min_limit}-{request.max_limit} {request.limit_type}",
        "- Tone: Professional yet personal",
        "- Structure: Clear paragraphs with logical flow",
        "",
        "Applicant Details:",
        "1. Personal & Academic:",
        f"   - Previous Education: {request.previous_education}",
        f"   - University: {university or 'Not specified'}",
        "",
        "2. Motivation & Goals:",
        f"   - Motivation: {request.motivation}",
        f"   - Reason for choice: {request.reason_for_choice}",
        f"   - Career Goals: {request.career_goals}",
        *_optional("Future Plans", request.future_plans),
        f"   - Strengths: {request.strengths}",
        "",
        "3. Experience:",
        f"   - Projects/Research: {request.experience}",
        *_optional("Work Experience", request.work_experience),
        *_optional("Volunteer Work", request.volunteer_work),
        *_optional("Awards", request.achievements),
        *_optional("Personal Story", request.personal_story),
        "",
        "Special Instructions:",
    ]

    if request.document_type == "SOP":
        lines.append(sop_instructions.format(field=request.field))
    else:
        lines.append(lom_instructions)

    return "\n".join(lines)


def build_cv_prompt(request: CVAnalysisRequest) -> str:
    return cv_prompt.format(content=request.content[:MAX_CV_CHARS])


def build_scholarship_prompt(request: ScholarshipSearchRequest) -> str:
    return scholarship_prompt.format(
        degree_level=request.degree_level,
        country=request.country,
        background=request.background.strip() or "not specified",
    )
