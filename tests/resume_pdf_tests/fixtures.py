"""Resume-record builders and sample payloads for resume_pdf tests.

Data Builders (use defaults, override as needed):
    make_record()      -> ResumeRecord with identity + summary only
    make_experience()  -> ExperienceEntry
    make_education()   -> EducationEntry
    make_full_record() -> ResumeRecord with every section populated
    png_data_uri()     -> small valid PNG as a data URI

Sample Data Constants:
    SAMPLE_PAYLOAD     - camelCase dict as posted by the web form
"""

from __future__ import annotations

import base64
import io
from dataclasses import replace
from typing import Any

from resume_pdf.model import (
    Certificate,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    Link,
    LinkType,
    ProficiencyLevel,
    Project,
    ResumeRecord,
)

SAMPLE_SUMMARY = "Backend engineer focused on data pipelines and reliable services."

SECTION_TITLES = (
    "PROFESSIONAL SUMMARY",
    "WORK EXPERIENCE",
    "EDUCATION",
    "LANGUAGES",
    "SKILLS",
    "CERTIFICATES",
)


def make_record(**overrides: Any) -> ResumeRecord:
    base = ResumeRecord(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        phone="+1 555 0100",
        summary=SAMPLE_SUMMARY,
    )
    return replace(base, **overrides)


def make_experience(**overrides: Any) -> ExperienceEntry:
    base = ExperienceEntry(
        company="Acme Corp",
        position="Senior Engineer",
        start_month="January",
        start_year="2019",
        end_month="December",
        end_year="2021",
        is_current=False,
        description="Built and operated the billing platform.",
    )
    return replace(base, **overrides)


def make_education(**overrides: Any) -> EducationEntry:
    base = EducationEntry(
        institution="State University",
        degree="BSc",
        field_of_study="Computer Science",
        start_year="2012",
        end_year="2016",
    )
    return replace(base, **overrides)


def make_full_record(**overrides: Any) -> ResumeRecord:
    record = make_record(
        nickname="JD",
        links=(
            Link(LinkType.GIT, "https://git.example.com/jane"),
            Link(LinkType.LINKEDIN, "https://linkedin.example.com/in/jane"),
            Link(LinkType.OTHER, "https://blog.example.com", other_label="blog"),
        ),
        experience=(
            make_experience(
                is_current=True,
                end_month=None,
                end_year=None,
                company="Globex",
                start_month="March",
                start_year="2022",
                projects=(
                    Project("Ledger rewrite", "Moved settlement to event sourcing."),
                    Project("Ops dashboard"),
                ),
            ),
            make_experience(),
        ),
        education=(make_education(),),
        languages=(
            LanguageEntry("English", ProficiencyLevel.NATIVE),
            LanguageEntry("German", ProficiencyLevel.INTERMEDIATE),
        ),
        skills=("Python", "PostgreSQL", "Kubernetes"),
        certificates=(
            Certificate("CKA", "CNCF", "2023"),
            Certificate("Scrum Master", "Scrum.org"),
        ),
    )
    return replace(record, **overrides)


def png_data_uri(size: int = 8) -> str:
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", (size, size), (200, 30, 30)).save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


SAMPLE_PAYLOAD = {
    "firstName": "Jane",
    "lastName": "Doe",
    "nickname": "JD",
    "email": "jane@example.com",
    "phone": "+1 555 0100",
    "links": [
        {"type": "git", "url": "https://git.example.com/jane"},
        {"type": "other", "url": "https://blog.example.com", "otherLabel": "blog"},
    ],
    "summary": SAMPLE_SUMMARY,
    "experience": [
        {
            "company": "Globex",
            "position": "Staff Engineer",
            "startMonth": "March",
            "startYear": "2022",
            "endMonth": "",
            "endYear": "",
            "isCurrent": True,
            "description": "Leads the payments team.",
            "projects": [{"name": "Ledger rewrite", "detail": ""}],
        }
    ],
    "education": [
        {
            "institution": "State University",
            "degree": "BSc",
            "fieldOfStudy": "Computer Science",
            "startYear": "2012",
            "endYear": "2016",
            "isCurrent": False,
        }
    ],
    "languages": [{"language": "English", "level": "native"}],
    "skills": [{"value": "Python"}, {"value": "SQL"}],
    "certificates": [{"name": "CKA", "issuer": "CNCF", "year": "2023"}],
}
