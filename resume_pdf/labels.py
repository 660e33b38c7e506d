"""Pure text helpers: link labels, durations and composed entry lines."""
from __future__ import annotations

from typing import Iterable, Optional

from .model import (
    Certificate,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    Link,
    LinkType,
    ResumeRecord,
)
from .style import BULLET, EM_DASH, EN_DASH


LINK_LABELS = {
    LinkType.GIT: "Git Repo",
    LinkType.LINKEDIN: "LinkedIn",
    LinkType.PORTFOLIO: "Portfolio",
}

PRESENT = "Present"
LIST_SEPARATOR = f" {BULLET} "


def is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def link_label(link: Link) -> str:
    label = LINK_LABELS.get(link.type)
    if label:
        return label
    custom = (link.other_label or "").strip()
    if custom:
        return capitalize_first(custom)
    return "Other"


def link_line(link: Link) -> str:
    return f"{link_label(link)}: {link.url}"


def full_name(record: ResumeRecord) -> str:
    name = f"{record.first_name} {record.last_name}"
    if not is_blank(record.nickname):
        name = f"{name} ({record.nickname.strip()})"
    return name


def contact_line(record: ResumeRecord) -> str:
    return f"{record.email} | {record.phone}"


def _join_words(*parts: Optional[str]) -> str:
    return " ".join(p.strip() for p in parts if not is_blank(p))


def _span(start: str, end: str) -> str:
    if start and end:
        return f"{start} {EN_DASH} {end}"
    return start or end


def experience_duration(entry: ExperienceEntry) -> str:
    """'Jan 2020 – Present' or 'Jan 2020 – Dec 2021'.

    The ongoing flag wins over any end date that happens to be present.
    """
    start = _join_words(entry.start_month, entry.start_year)
    if entry.is_current:
        return _span(start, PRESENT)
    return _span(start, _join_words(entry.end_month, entry.end_year))


def education_duration(entry: EducationEntry) -> str:
    start = (entry.start_year or "").strip()
    if entry.is_current:
        return _span(start, PRESENT)
    return _span(start, (entry.end_year or "").strip())


def degree_line(entry: EducationEntry) -> str:
    if is_blank(entry.field_of_study):
        return entry.degree
    return f"{entry.degree} {EM_DASH} {entry.field_of_study.strip()}"


def language_pair(entry: LanguageEntry) -> str:
    level = entry.level.value if hasattr(entry.level, "value") else str(entry.level)
    return f"{entry.language} {EM_DASH} {capitalize_first(level)}"


def languages_line(entries: Iterable[LanguageEntry]) -> str:
    return LIST_SEPARATOR.join(language_pair(e) for e in entries)


def skills_line(skills: Iterable[str]) -> str:
    return LIST_SEPARATOR.join(skills)


def certificate_line(cert: Certificate) -> str:
    base = f"{cert.name} {EM_DASH} {cert.issuer}"
    if is_blank(cert.year):
        return base
    return f"{base} ({cert.year.strip()})"
