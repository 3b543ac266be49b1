"""Issue-id naming convention for one-click manual fixes.

An issue whose id starts with a registered prefix can be fixed by the user
typing a single value (an email, a phone number, a section body) instead of
asking the AI for a rewrite. New fixable fields are added to
``QUICK_FIX_PREFIXES`` only.
"""

import logging

from pydantic import BaseModel

from services.ats_patterns import DEFAULT_PATTERNS

logger = logging.getLogger(__name__)

# (issue-id prefix, fixable field). Prefixes ending in "-" carry a suffix.
QUICK_FIX_PREFIXES: tuple[tuple[str, str], ...] = (
    ("missing-email", "email"),
    ("missing-phone", "phone"),
    ("missing-linkedin", "linkedin"),
    ("missing-section-", "section"),
)

CONTACT_FIELDS = frozenset({"email", "phone", "linkedin"})
_CONTACT_SEPARATOR = " | "


class QuickFixError(ValueError):
    """Raised when an issue cannot be fixed with the supplied value."""


class QuickFixTarget(BaseModel):
    issue_id: str
    field: str
    section: str | None = None


def resolve_quick_fix(issue_id: str) -> QuickFixTarget | None:
    """Map an issue id to the field a user can fill in, if any."""
    for prefix, field in QUICK_FIX_PREFIXES:
        if prefix.endswith("-"):
            if issue_id.startswith(prefix) and len(issue_id) > len(prefix):
                return QuickFixTarget(
                    issue_id=issue_id, field=field, section=issue_id[len(prefix):]
                )
        elif issue_id == prefix:
            return QuickFixTarget(issue_id=issue_id, field=field)
    return None


def is_fixable(issue_id: str) -> bool:
    return resolve_quick_fix(issue_id) is not None


def apply_quick_fix(text: str, issue_id: str, value: str) -> str:
    """Return *text* with *value* inserted where the issue expects it.

    Contact values join the existing contact line, or go on a new line
    under the name when there is none; a missing section is appended as a new header followed by *value*.
    """
    target = resolve_quick_fix(issue_id)
    if target is None:
        raise QuickFixError(f"Issue '{issue_id}' has no quick fix")

    value = value.strip()
    if not value:
        raise QuickFixError(f"A value is required to fix '{issue_id}'")

    if target.field in CONTACT_FIELDS:
        fixed = _insert_contact(text, value)
    else:
        fixed = _append_section(text, target.section or "", value)

    logger.info("Applied quick fix %s (field=%s)", issue_id, target.field)
    return fixed


def _is_contact_line(line: str) -> bool:
    return (
        DEFAULT_PATTERNS.has_email(line)
        or DEFAULT_PATTERNS.has_phone(line)
        or DEFAULT_PATTERNS.has_linkedin(line)
    )


def _insert_contact(text: str, value: str) -> str:
    lines = text.split("\n")
    non_empty = [i for i, line in enumerate(lines) if line.strip()]
    if not non_empty:
        return value

    # Only the first few lines can be the header block
    for idx in non_empty[:4]:
        if _is_contact_line(lines[idx]):
            lines[idx] = lines[idx].rstrip() + _CONTACT_SEPARATOR + value
            return "\n".join(lines)

    name_idx = non_empty[0]
    return "\n".join(lines[: name_idx + 1] + [value] + lines[name_idx + 1:])


def _append_section(text: str, section: str, value: str) -> str:
    header = section.replace("-", " ").title()
    body = text.rstrip()
    block = f"{header}\n{value}\n"
    return f"{body}\n\n{block}" if body else block
