import pytest

from services.ats_scorer import score_resume
from services.quick_fix import (
    QuickFixError,
    apply_quick_fix,
    is_fixable,
    resolve_quick_fix,
)


@pytest.mark.parametrize("issue_id,field,section", [
    ("missing-email", "email", None),
    ("missing-phone", "phone", None),
    ("missing-linkedin", "linkedin", None),
    ("missing-section-education", "section", "education"),
    ("missing-section-certifications", "section", "certifications"),
])
def test_resolve_quick_fix(issue_id, field, section):
    target = resolve_quick_fix(issue_id)
    assert target is not None
    assert target.field == field
    assert target.section == section


@pytest.mark.parametrize("issue_id", [
    "no-impact", "too-short", "weak-skills", "missing-section-", "missing-emails",
])
def test_not_fixable(issue_id):
    assert resolve_quick_fix(issue_id) is None
    assert not is_fixable(issue_id)


def test_email_joins_existing_contact_line():
    text = "Jane Smith\n(555) 123-4567\n\nSummary\nEngineer"
    fixed = apply_quick_fix(text, "missing-email", " jane@example.com ")
    assert fixed.split("\n")[1] == "(555) 123-4567 | jane@example.com"
    assert "missing-email" not in score_resume(fixed).issue_ids()


def test_contact_inserted_under_name_without_contact_line():
    text = "Jane Smith\nSummary\nEngineer"
    fixed = apply_quick_fix(text, "missing-phone", "555-123-4567")
    assert fixed.split("\n") == ["Jane Smith", "555-123-4567", "Summary", "Engineer"]
    report = score_resume(fixed)
    assert "missing-phone" not in report.issue_ids()
    assert "summary" in report.score.details.sections_found


def test_contact_on_empty_text():
    assert apply_quick_fix("", "missing-email", "jane@example.com") == "jane@example.com"


def test_section_appended():
    text = "Jane Smith\njane@example.com\n"
    fixed = apply_quick_fix(text, "missing-section-skills", "Python, Go, Docker")
    assert fixed.endswith("\n\nSkills\nPython, Go, Docker\n")
    assert "missing-section-skills" not in score_resume(fixed).issue_ids()


def test_unknown_issue_rejected():
    with pytest.raises(QuickFixError):
        apply_quick_fix("text", "no-impact", "10%")


def test_blank_value_rejected():
    with pytest.raises(QuickFixError):
        apply_quick_fix("text", "missing-email", "   ")


def test_quick_fix_error_is_value_error():
    assert issubclass(QuickFixError, ValueError)
