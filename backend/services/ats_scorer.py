"""Deterministic ATS compatibility scoring.

``score_resume`` maps plain résumé text to a category breakdown plus the list
of issues explaining every point lost. It is pure and total: no I/O, no
shared mutable state, and no exception for any string input, so callers can
rerun it on every edit.

Checks run in a fixed order:
1. Contact content (email, phone)
2. Section headers (one ordered pass; also yields ``sections_found``)
3. Graphical skill indicators
4. Quantified impact
5. Length and generic buzzwords
6. Skills-section strength
"""

import logging
import math

from models.schemas.ats_result import (
    AnalysisDetails,
    AtsScoreResult,
    Issue,
    IssueSeverity,
    ScoreBreakdown,
    ScoreReport,
)
from services.ats_patterns import DEFAULT_PATTERNS, PatternLibrary
from services.scoring_profile import STRICT_PROFILE, ScoringProfile

logger = logging.getLogger(__name__)

# Breakdown key -> Issue.category
_ISSUE_CATEGORY = {
    "format": "format",
    "content": "content",
    "ats_compatibility": "ats",
    "keywords": "keywords",
    "impact": "impact",
}


class _Ledger:
    """Running category points; a deduction is only recorded with its issue."""

    def __init__(self, profile: ScoringProfile):
        self._profile = profile
        self.points: dict[str, int] = dict(profile.category_max)
        self.issues: list[Issue] = []

    def deduct(
        self,
        category: str,
        points: int,
        issue_id: str,
        severity: IssueSeverity,
        message: str,
        remediation: str,
    ) -> None:
        self.points[category] -= points
        self.issues.append(
            Issue(
                id=issue_id,
                category=_ISSUE_CATEGORY[category],
                severity=severity,
                message=message,
                remediation=remediation,
            )
        )

    def clamped(self) -> dict[str, int]:
        limits = self._profile.category_max
        return {key: max(0, min(value, limits[key])) for key, value in self.points.items()}


def score_resume(
    text: str,
    profile: ScoringProfile = STRICT_PROFILE,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
) -> ScoreReport:
    """Score *text* against ATS heuristics. Never raises."""
    text = text or ""
    ledger = _Ledger(profile)

    email_detected = patterns.has_email(text)
    phone_detected = patterns.has_phone(text)
    linkedin_detected = patterns.has_linkedin(text)

    _check_contact(ledger, profile, email_detected, phone_detected)
    sections_found = _check_sections(ledger, profile, patterns, text)
    _check_visual_elements(ledger, profile, patterns, text)
    _check_impact(ledger, profile, patterns, text)

    word_count = len(text.split())
    page_estimate = math.ceil(word_count / profile.words_per_page)
    _check_length(ledger, profile, word_count, page_estimate)
    _check_buzzwords(ledger, profile, patterns, text)
    _check_skills_strength(ledger, profile, patterns, text, "skills" in sections_found)

    details = AnalysisDetails(
        word_count=word_count,
        page_count_estimate=page_estimate,
        email_detected=email_detected,
        phone_detected=phone_detected,
        linkedin_detected=linkedin_detected,
        sections_found=tuple(sections_found),
    )
    report = assemble_result(ledger.clamped(), details, ledger.issues)
    logger.debug(
        "ATS score %d/%d (%d issues, %d words)",
        report.score.total, profile.max_total, len(report.issues), word_count,
    )
    return report


def assemble_result(
    points: dict[str, int], details: AnalysisDetails, issues: list[Issue]
) -> ScoreReport:
    """Bundle clamped category points, details and issues into one report."""
    breakdown = ScoreBreakdown(**points)
    return ScoreReport(
        score=AtsScoreResult(
            total=sum(points.values()),
            breakdown=breakdown,
            details=details,
        ),
        issues=tuple(issues),
    )


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def _check_contact(
    ledger: _Ledger, profile: ScoringProfile, has_email: bool, has_phone: bool
) -> None:
    if not has_email:
        ledger.deduct(
            "content", profile.missing_email, "missing-email", IssueSeverity.CRITICAL,
            "No email address detected.",
            "Add a professional email address to the header of your resume.",
        )
    if not has_phone:
        ledger.deduct(
            "content", profile.missing_phone, "missing-phone", IssueSeverity.IMPORTANT,
            "No phone number detected.",
            "Include a contact phone number next to your email address.",
        )


def _check_sections(
    ledger: _Ledger, profile: ScoringProfile, patterns: PatternLibrary, text: str
) -> list[str]:
    found: list[str] = []
    for name in patterns.section_names:
        if patterns.has_section(name, text):
            found.append(name)
            continue
        rule = profile.section_rule(name)
        title = name.capitalize()
        ledger.deduct(
            rule.category, rule.deduction, f"missing-section-{name}", rule.severity,
            f"Missing standard section: {title}",
            f'Add a section headed "{title}" on its own line so ATS parsers can find it.',
        )
    return found


def _check_visual_elements(
    ledger: _Ledger, profile: ScoringProfile, patterns: PatternLibrary, text: str
) -> None:
    if patterns.has_visual_element(text):
        ledger.deduct(
            "ats_compatibility", profile.visual_elements, "visual-elements",
            IssueSeverity.CRITICAL,
            "Graphical skill ratings detected (skill bars, star ratings or scales).",
            "ATS parsers cannot read skill bars or star ratings. Replace them "
            "with a plain comma-separated list of skills.",
        )


def _check_impact(
    ledger: _Ledger, profile: ScoringProfile, patterns: PatternLibrary, text: str
) -> None:
    count = patterns.count_quantifiers(text)
    target = profile.quantifier_target
    if count == 0:
        ledger.deduct(
            "impact", profile.impact_max, "no-impact", IssueSeverity.CRITICAL,
            "No measurable results found.",
            "Quantify achievements with percentages, dollar amounts or counts "
            '(e.g. "Increased sales by 20%").',
        )
    elif count < target:
        ledger.deduct(
            "impact", profile.low_impact, "low-impact", IssueSeverity.IMPORTANT,
            f"Only {count} quantified achievement(s) found.",
            f"Found {count} measurable result(s); aim for at least {target}. "
            f"Add numbers to {target - count} more bullet(s).",
        )


def _check_length(
    ledger: _Ledger, profile: ScoringProfile, word_count: int, page_estimate: int
) -> None:
    if word_count < profile.very_short_words:
        ledger.deduct(
            "format", profile.very_short, "too-short", IssueSeverity.CRITICAL,
            f"Resume is too short ({word_count} words).",
            f"Expand on your experience and skills to reach at least "
            f"{profile.min_words} words.",
        )
    elif word_count < profile.min_words:
        ledger.deduct(
            "format", profile.short, "too-short", IssueSeverity.IMPORTANT,
            f"Resume is on the short side ({word_count} words).",
            f"Add about {profile.min_words - word_count} more words of detail "
            f"to your experience bullets.",
        )
    elif page_estimate > profile.max_pages:
        ledger.deduct(
            "format", profile.too_long, "too-long", IssueSeverity.IMPORTANT,
            f"Resume runs to about {page_estimate} pages ({word_count} words).",
            f"Condense your resume to {profile.max_pages} pages or fewer "
            f"(roughly {profile.max_pages * profile.words_per_page} words).",
        )


def _check_buzzwords(
    ledger: _Ledger, profile: ScoringProfile, patterns: PatternLibrary, text: str
) -> None:
    buzzwords = patterns.find_buzzwords(text)
    if buzzwords:
        ledger.deduct(
            "format", profile.buzzwords, "generic-buzzwords", IssueSeverity.MINOR,
            f"Generic buzzwords found: {', '.join(buzzwords)}.",
            "Replace self-descriptions with concrete achievements that "
            "demonstrate the same quality.",
        )


def _check_skills_strength(
    ledger: _Ledger,
    profile: ScoringProfile,
    patterns: PatternLibrary,
    text: str,
    has_skills: bool,
) -> None:
    if not has_skills:
        ledger.deduct(
            "keywords", profile.keywords_max, "no-keywords", IssueSeverity.CRITICAL,
            "No skills section for ATS keyword matching.",
            "Add a Skills section listing the specific tools and technologies you use.",
        )
        return

    window = patterns.skills_window(text, profile.skills_window_chars)
    content_chars = sum(1 for ch in window if not ch.isspace())
    if content_chars < profile.min_skills_chars:
        ledger.deduct(
            "keywords", profile.weak_skills, "weak-skills", IssueSeverity.IMPORTANT,
            f"Skills section looks thin ({content_chars} characters of content).",
            f"List specific skills under the Skills header; aim for at least "
            f"{profile.min_skills_chars} characters of keywords.",
        )
