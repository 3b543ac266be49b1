"""Weights and thresholds for the deterministic ATS score.

Only the strict profile ships. Category maxima sum to 100, so the total is
bounded to [0, 100] once every category is clamped.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from models.schemas.ats_result import IssueSeverity


@dataclass(frozen=True)
class SectionRule:
    category: str  # breakdown key the deduction lands in
    deduction: int
    severity: IssueSeverity


@dataclass(frozen=True)
class ScoringProfile:
    name: str

    # Category maxima (breakdown keys)
    format_max: int
    content_max: int
    ats_compatibility_max: int
    keywords_max: int
    impact_max: int

    # Content
    missing_email: int
    missing_phone: int

    # Per-section rules, keyed by section name
    section_rules: tuple[tuple[str, SectionRule], ...]

    # ATS-hostile visuals
    visual_elements: int

    # Impact
    quantifier_target: int
    low_impact: int

    # Format / length
    words_per_page: int
    very_short_words: int
    min_words: int
    very_short: int
    short: int
    max_pages: int
    too_long: int
    buzzwords: int

    # Keywords
    skills_window_chars: int
    min_skills_chars: int
    weak_skills: int

    # Applied to any recognised section the table above does not list
    default_section_rule: SectionRule = SectionRule("ats_compatibility", 4, IssueSeverity.IMPORTANT)

    category_max: MappingProxyType = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_max", MappingProxyType({
            "format": self.format_max,
            "content": self.content_max,
            "ats_compatibility": self.ats_compatibility_max,
            "keywords": self.keywords_max,
            "impact": self.impact_max,
        }))

    @property
    def max_total(self) -> int:
        return sum(self.category_max.values())

    def section_rule(self, name: str) -> SectionRule:
        for section, rule in self.section_rules:
            if section == name:
                return rule
        return self.default_section_rule


STRICT_PROFILE = ScoringProfile(
    name="strict",
    format_max=20,
    content_max=20,
    ats_compatibility_max=30,
    keywords_max=15,
    impact_max=15,
    missing_email=10,
    missing_phone=5,
    section_rules=(
        ("experience", SectionRule("ats_compatibility", 6, IssueSeverity.CRITICAL)),
        ("education", SectionRule("ats_compatibility", 6, IssueSeverity.CRITICAL)),
        ("skills", SectionRule("ats_compatibility", 6, IssueSeverity.CRITICAL)),
        # The summary header counts towards identity content, not ATS parsing
        ("summary", SectionRule("content", 5, IssueSeverity.IMPORTANT)),
        ("projects", SectionRule("ats_compatibility", 4, IssueSeverity.IMPORTANT)),
        ("certifications", SectionRule("ats_compatibility", 4, IssueSeverity.IMPORTANT)),
    ),
    visual_elements=15,
    quantifier_target=5,
    low_impact=8,
    words_per_page=500,
    very_short_words=150,
    min_words=250,
    very_short=10,
    short=5,
    max_pages=2,
    too_long=5,
    buzzwords=3,
    skills_window_chars=300,
    min_skills_chars=40,
    weak_skills=8,
)
