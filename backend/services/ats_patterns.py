"""Text-recognition rules behind every ATS score deduction.

Vocabulary lives in plain tuples; ``PatternLibrary.build`` compiles it once
into an immutable object that the scorer closes over. Extending a synonym
list, a result noun or a buzzword never touches scoring code.

All patterns use bounded quantifiers (or a boundary lookbehind in front of an
unbounded run) so matching stays linear on arbitrary pasted input.
"""

import re
from dataclasses import dataclass

# Ordered: scorer iterates this once to build both issues and sections_found.
SECTION_SYNONYMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("experience", (
        r"(?:work|professional|employment|relevant|industry)[ \t]+(?:experience|history)",
        r"experience",
        r"career[ \t]+history",
    )),
    ("education", (
        r"education(?:al[ \t]+background)?",
        r"academic[ \t]+(?:background|history|qualifications)",
        r"academics",
    )),
    ("skills", (
        r"(?:technical|core|key|professional)[ \t]+skills",
        r"skills(?:[ \t]+(?:&|and)[ \t]+(?:abilities|expertise|tools))?",
        r"(?:core[ \t]+)?competencies",
        r"technologies",
        r"technical[ \t]+proficiencies",
        r"areas[ \t]+of[ \t]+expertise",
    )),
    ("summary", (
        r"(?:professional|executive|career)[ \t]+summary",
        r"summary",
        r"(?:career[ \t]+|professional[ \t]+)?objective",
        r"(?:professional[ \t]+)?profile",
        r"about(?:[ \t]+me)?",
    )),
    ("projects", (
        r"(?:key|notable|selected|personal|academic)[ \t]+projects",
        r"projects",
        r"portfolio",
    )),
    ("certifications", (
        r"(?:licen[sc]es?[ \t]+(?:&|and)[ \t]+)?certifications?",
        r"certificates?",
        r"credentials",
    )),
)

RESULT_NOUNS: tuple[str, ...] = (
    "users?", "customers?", "clients?", "revenue", "sales", "increase",
    "reduction", "tickets?", "servers?", "workstations?", "endpoints?",
    "projects?", "budget", "savings",
)

VISUAL_ELEMENT_PHRASES: tuple[str, ...] = (
    r"skills?[ \t-]?bars?",
    r"strength[ \t-]?graphs?",
    r"competency[ \t-]?scales?",
    r"proficiency[ \t-]?(?:bars?|meters?|scales?)",
    # A rating counts only next to a skill word or a score
    r"(?:skills?|proficiency|competency|expertise)[ \t-]?(?:ratings?|stars?)",
    r"(?:ratings?|stars?)[ \t]*:[ \t]*[0-5](?:\.5)?",
    r"rated[ \t]+[0-5](?:\.5)?[ \t]*/[ \t]*(?:5|10)(?![\d/])",
    r"(?<![\d,.])[1-5](?:\.5)?[ \t]+(?:out[ \t]+of[ \t]+5[ \t]+)?stars",
)

# Glyph runs such as "★★★★☆" used as inline skill meters
VISUAL_ELEMENT_GLYPHS = r"[★☆✩✪]{2,}"

BUZZWORDS: tuple[str, ...] = (
    r"hard[ \t-]?worker",
    r"team[ \t-]?player",
    r"go[ \t-]?getter",
    r"self[ \t-]?starter",
    r"synerg(?:y|ies|istic)",
    r"thought[ \t-]?leader(?:ship)?",
    r"think(?:ing)?[ \t]+outside[ \t]+(?:of[ \t]+)?the[ \t]+box",
    r"results?[ \t-]driven",
    r"detail[ \t-]oriented",
    r"rock[ \t-]?star",
    r"ninja",
    r"guru",
    r"best[ \t-]of[ \t-]breed",
    r"wear(?:s|ing)?[ \t]+many[ \t]+hats",
)

EMAIL_PATTERN = (
    r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]{1,64}"
    r"@[A-Za-z0-9-]{1,63}(?:\.[A-Za-z0-9-]{1,63}){0,8}\.[A-Za-z]{2,24}"
)
PHONE_PATTERN = (
    r"(?<!\d)(?:\+\d{1,2}[ .-]?)?\(?\d{3}\)?[ .-]?\d{3}[ .-]?\d{4}(?!\d)"
)
LINKEDIN_PATTERN = r"linkedin\.com/in/[A-Za-z0-9_-]+"
URL_PATTERN = (
    r"(?:https?://|www\.)[^\s]{1,2048}"
    r"|(?<![\w.-])[\w-]{1,63}(?:\.[\w-]{1,63}){0,3}\.[A-Za-z]{2,24}/[^\s]{0,2048}"
)


def _header_regex(synonyms: tuple[str, ...]) -> re.Pattern:
    # A header line: optional markdown marker, a synonym, then EOL or a colon
    combined = "|".join(synonyms)
    return re.compile(
        rf"^[ \t]*(?:[#*>-]{{1,6}}[ \t]*)?(?:{combined})[ \t]*(?::|\r?$)",
        re.IGNORECASE | re.MULTILINE,
    )


def _quantifier_regex(nouns: tuple[str, ...]) -> re.Pattern:
    number = r"(?:\d{1,3}(?:,\d{3}){1,3}|\d{1,9})"
    return re.compile(
        r"(?<![\d.])\d{1,3}(?:\.\d{1,2})?%"
        r"|\$\d{1,3}(?:,\d{3}){0,4}(?:\.\d{1,2})?(?:[kmb]\b)?"
        rf"|(?<![\d.,$]){number}[km]?\+?[ \t]?(?:{'|'.join(nouns)})\b",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class PatternLibrary:
    """Compiled matchers. Build once, share freely; nothing here mutates."""

    email: re.Pattern
    phone: re.Pattern
    linkedin: re.Pattern
    url: re.Pattern
    section_headers: tuple[tuple[str, re.Pattern], ...]
    quantifier: re.Pattern
    visual_element: re.Pattern
    buzzword: re.Pattern

    @classmethod
    def build(
        cls,
        section_synonyms: tuple[tuple[str, tuple[str, ...]], ...] = SECTION_SYNONYMS,
        result_nouns: tuple[str, ...] = RESULT_NOUNS,
        visual_phrases: tuple[str, ...] = VISUAL_ELEMENT_PHRASES,
        buzzwords: tuple[str, ...] = BUZZWORDS,
    ) -> "PatternLibrary":
        return cls(
            email=re.compile(EMAIL_PATTERN),
            phone=re.compile(PHONE_PATTERN),
            linkedin=re.compile(LINKEDIN_PATTERN, re.IGNORECASE),
            url=re.compile(URL_PATTERN, re.IGNORECASE),
            section_headers=tuple(
                (name, _header_regex(synonyms)) for name, synonyms in section_synonyms
            ),
            quantifier=_quantifier_regex(result_nouns),
            visual_element=re.compile(
                rf"\b(?:{'|'.join(visual_phrases)})\b|{VISUAL_ELEMENT_GLYPHS}",
                re.IGNORECASE,
            ),
            buzzword=re.compile(rf"\b(?:{'|'.join(buzzwords)})\b", re.IGNORECASE),
        )

    @property
    def section_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.section_headers)

    # --- contact ---

    def has_email(self, text: str) -> bool:
        return self.email.search(text) is not None

    def has_phone(self, text: str) -> bool:
        return self.phone.search(text) is not None

    def has_linkedin(self, text: str) -> bool:
        return self.linkedin.search(text) is not None

    # --- sections ---

    def find_section(self, name: str, text: str) -> re.Match | None:
        """Return the first header match for section *name*.

        Raises KeyError for a section name the library does not know.
        """
        for section, pattern in self.section_headers:
            if section == name:
                return pattern.search(text)
        raise KeyError(name)

    def has_section(self, name: str, text: str) -> bool:
        return self.find_section(name, text) is not None

    def skills_window(self, text: str, window: int = 300) -> str:
        """Text right after the skills header, up to *window* chars.

        Stops early at the next recognised section header so the window
        never borrows content from a neighbouring section.
        """
        match = self.find_section("skills", text)
        if match is None:
            return ""
        start = match.end()
        end = min(len(text), start + window)
        for _, pattern in self.section_headers:
            following = pattern.search(text, start, end)
            if following is not None:
                end = min(end, following.start())
        return text[start:end]

    # --- content signals ---

    def count_quantifiers(self, text: str) -> int:
        return sum(1 for _ in self.quantifier.finditer(text))

    def has_visual_element(self, text: str) -> bool:
        # Words inside addresses and links are not layout
        text = self.url.sub(" ", self.email.sub(" ", text))
        return self.visual_element.search(text) is not None

    def find_buzzwords(self, text: str) -> list[str]:
        """Distinct buzzwords in first-seen order, lowercased."""
        found: list[str] = []
        for match in self.buzzword.finditer(text):
            phrase = " ".join(match.group().lower().replace("-", " ").split())
            if phrase not in found:
                found.append(phrase)
        return found

    def has_buzzword(self, text: str) -> bool:
        return self.buzzword.search(text) is not None


DEFAULT_PATTERNS = PatternLibrary.build()
