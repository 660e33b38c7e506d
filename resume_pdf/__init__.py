"""resume_pdf package.

Renders a validated resume record into a paginated A4 PDF: header with
optional photo, summary, experience, education, languages, skills and
certificates, with page breaks that keep section titles and entry starts
together with their content.

Public entrypoints: ``render`` (async), ``render_resume_pdf`` (sync) and
``python -m resume_pdf``.
"""

__version__ = "0.1.0"

from .errors import RenderError
from .model import (
    Certificate,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    Link,
    LinkType,
    ProficiencyLevel,
    Project,
    ResumeRecord,
    record_from_dict,
)
from .pdf_writer import ResumePdfWriter, render, render_resume_pdf

__all__ = [
    "__version__",
    "Certificate",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "Link",
    "LinkType",
    "ProficiencyLevel",
    "Project",
    "RenderError",
    "ResumePdfWriter",
    "ResumeRecord",
    "record_from_dict",
    "render",
    "render_resume_pdf",
]
