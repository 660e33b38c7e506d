"""Immutable resume record handed to the PDF renderer.

Values arrive already validated and sanitized; nothing here re-checks
lengths or required-ness. ``record_from_dict`` only converts the upstream
JSON shape (camelCase keys) into these dataclasses.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class LinkType(str, Enum):
    GIT = "git"
    PORTFOLIO = "portfolio"
    LINKEDIN = "linkedin"
    OTHER = "other"


class ProficiencyLevel(str, Enum):
    NATIVE = "native"
    FLUENT = "fluent"
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"
    BASIC = "basic"


@dataclass(frozen=True)
class Link:
    type: LinkType
    url: str
    other_label: Optional[str] = None


@dataclass(frozen=True)
class Project:
    name: str
    detail: Optional[str] = None


@dataclass(frozen=True)
class ExperienceEntry:
    company: str
    position: str
    start_month: str
    start_year: str
    description: str = ""
    end_month: Optional[str] = None
    end_year: Optional[str] = None
    is_current: bool = False
    projects: Tuple[Project, ...] = ()


@dataclass(frozen=True)
class EducationEntry:
    institution: str
    degree: str
    start_year: str
    field_of_study: Optional[str] = None
    end_year: Optional[str] = None
    is_current: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class LanguageEntry:
    language: str
    level: ProficiencyLevel


@dataclass(frozen=True)
class Certificate:
    name: str
    issuer: str
    year: Optional[str] = None


@dataclass(frozen=True)
class ResumeRecord:
    first_name: str
    last_name: str
    email: str
    phone: str
    summary: str = ""
    nickname: Optional[str] = None
    photo: Optional[str] = None  # data URI: data:image/png;base64,....
    links: Tuple[Link, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    languages: Tuple[LanguageEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    certificates: Tuple[Certificate, ...] = ()


# -----------------------------------------------------------------------------
# Loading from the upstream JSON shape
# -----------------------------------------------------------------------------

def _opt(value: Any) -> Optional[str]:
    """Return a string for present values, None for missing/None."""
    if value is None:
        return None
    return str(value)


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key wins; accepts camelCase and snake_case spellings."""
    for k in keys:
        if k in data and data[k] is not None:
            return data[k]
    return default


def _items(data: Mapping[str, Any], *keys: str) -> Iterable[Any]:
    return _get(data, *keys, default=None) or []


def _link_from_dict(d: Mapping[str, Any]) -> Link:
    return Link(
        type=LinkType(str(d.get("type") or "other").lower()),
        url=str(d.get("url") or ""),
        other_label=_opt(_get(d, "otherLabel", "other_label")),
    )


def _experience_from_dict(d: Mapping[str, Any]) -> ExperienceEntry:
    projects = tuple(
        Project(name=str(p.get("name") or ""), detail=_opt(p.get("detail")))
        for p in _items(d, "projects")
    )
    return ExperienceEntry(
        company=str(d.get("company") or ""),
        position=str(d.get("position") or ""),
        start_month=str(_get(d, "startMonth", "start_month", default="")),
        start_year=str(_get(d, "startYear", "start_year", default="")),
        end_month=_opt(_get(d, "endMonth", "end_month")),
        end_year=_opt(_get(d, "endYear", "end_year")),
        is_current=bool(_get(d, "isCurrent", "is_current", default=False)),
        description=str(d.get("description") or ""),
        projects=projects,
    )


def _education_from_dict(d: Mapping[str, Any]) -> EducationEntry:
    return EducationEntry(
        institution=str(d.get("institution") or ""),
        degree=str(d.get("degree") or ""),
        field_of_study=_opt(_get(d, "fieldOfStudy", "field_of_study")),
        start_year=str(_get(d, "startYear", "start_year", default="")),
        end_year=_opt(_get(d, "endYear", "end_year")),
        is_current=bool(_get(d, "isCurrent", "is_current", default=False)),
        description=_opt(d.get("description")),
    )


def _skill_text(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("value") or "")
    return str(item)


def record_from_dict(data: Mapping[str, Any]) -> ResumeRecord:
    """Build a ``ResumeRecord`` from the form's JSON payload.

    Raises:
        ValueError: when a link type or language level is not a known enum value.
    """
    return ResumeRecord(
        first_name=str(_get(data, "firstName", "first_name", default="")),
        last_name=str(_get(data, "lastName", "last_name", default="")),
        nickname=_opt(data.get("nickname")),
        email=str(data.get("email") or ""),
        phone=str(data.get("phone") or ""),
        photo=_opt(data.get("photo")),
        links=tuple(_link_from_dict(x) for x in _items(data, "links")),
        summary=str(data.get("summary") or ""),
        experience=tuple(_experience_from_dict(x) for x in _items(data, "experience")),
        education=tuple(_education_from_dict(x) for x in _items(data, "education")),
        languages=tuple(
            LanguageEntry(
                language=str(x.get("language") or ""),
                level=ProficiencyLevel(str(x.get("level") or "").lower()),
            )
            for x in _items(data, "languages")
        ),
        skills=tuple(_skill_text(x) for x in _items(data, "skills")),
        certificates=tuple(
            Certificate(
                name=str(x.get("name") or ""),
                issuer=str(x.get("issuer") or ""),
                year=_opt(x.get("year")),
            )
            for x in _items(data, "certificates")
        ),
    )


def record_summary(record: ResumeRecord) -> Dict[str, int]:
    """Section counts for logging; carries no personal data."""
    return {
        "links": len(record.links),
        "experience": len(record.experience),
        "projects": sum(len(e.projects) for e in record.experience),
        "education": len(record.education),
        "languages": len(record.languages),
        "skills": len(record.skills),
        "certificates": len(record.certificates),
        "photo": 1 if record.photo else 0,
    }
