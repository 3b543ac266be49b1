import pytest

from services.ats_patterns import DEFAULT_PATTERNS, PatternLibrary

P = DEFAULT_PATTERNS


# --- Contact ---

@pytest.mark.parametrize("text", [
    "jane.smith@example.com",
    "Contact: J_Doe+jobs@Mail.Example.CO.UK",
    "email me at a@b.io today",
])
def test_email_detected(text):
    assert P.has_email(text)


@pytest.mark.parametrize("text", [
    "jane.smith@example",
    "jane.smith@example.c",
    "no address here",
    "@example.com",
])
def test_email_rejected(text):
    assert not P.has_email(text)


@pytest.mark.parametrize("text", [
    "(555) 123-4567",
    "555-123-4567",
    "555.123.4567",
    "5551234567",
    "+1 555 123 4567",
    "+44 (555) 123-4567",
])
def test_phone_detected(text):
    assert P.has_phone(text)


@pytest.mark.parametrize("text", ["2019 - 2021", "555-1234", "12345678901234"])
def test_phone_rejected(text):
    assert not P.has_phone(text)


def test_linkedin():
    assert P.has_linkedin("https://www.linkedin.com/in/jane-smith_01")
    assert P.has_linkedin("LinkedIn.com/in/JaneSmith")
    assert not P.has_linkedin("linkedin.com/company/acme")
    assert not P.has_linkedin("linkedin.com/in/")


# --- Section headers ---

@pytest.mark.parametrize("header", [
    "Experience",
    "WORK EXPERIENCE",
    "Professional Experience",
    "Employment History",
    "## Experience",
    "Experience:",
    "  experience  ",
])
def test_experience_header_synonyms(header):
    text = f"Jane Smith\n{header}\nEngineer at Acme"
    assert P.has_section("experience", text)


def test_section_requires_header_line():
    text = "Engineer with 5 years of experience in Python and a strong education."
    assert not P.has_section("experience", text)
    assert not P.has_section("education", text)


@pytest.mark.parametrize("name,header", [
    ("education", "Academic Background"),
    ("skills", "Technical Skills"),
    ("skills", "Core Competencies"),
    ("skills", "Skills: Python, Go"),
    ("summary", "Professional Summary"),
    ("summary", "Career Objective"),
    ("summary", "About Me"),
    ("projects", "Selected Projects"),
    ("certifications", "Licenses & Certifications"),
])
def test_other_section_synonyms(name, header):
    assert P.has_section(name, f"{header}\ncontent")


def test_skill_bar_is_not_a_skills_header():
    assert not P.has_section("skills", "Skill Bar: Python")


def test_unknown_section_raises():
    with pytest.raises(KeyError):
        P.find_section("hobbies", "Hobbies")


def test_section_names_order():
    assert P.section_names == (
        "experience", "education", "skills", "summary", "projects", "certifications",
    )


# --- Skills window ---

def test_skills_window_stops_at_next_header():
    text = "Skills\nPython, Go\n\nEducation\nB.S. Computer Science, State University"
    window = P.skills_window(text)
    assert "Python, Go" in window
    assert "Computer Science" not in window


def test_skills_window_inline_and_bounded():
    text = "Skills: " + "Python, " * 100
    window = P.skills_window(text, window=50)
    assert len(window) == 50
    assert window.lstrip().startswith("Python")


def test_skills_window_without_header():
    assert P.skills_window("Python, Go, Docker") == ""


# --- Quantifiers ---

def test_quantifiers_percentage_and_dollars():
    assert P.count_quantifiers("increased sales by 20% and saved $500") >= 2


@pytest.mark.parametrize("text,expected", [
    ("Grew to 12,000 users", 1),
    ("Served 10k customers", 1),
    ("Managed 20+ projects", 1),
    ("Closed 300 tickets and patched 40 servers", 2),
    ("Budget of $1,250,000.50", 1),
    ("Raised $1.5M in seed funding", 1),
    ("Cut spend by $200k and $3B", 2),
    ("Reduced latency by 12.5%", 1),
    ("Worked there from 2019 to 2021", 0),
    ("No numbers at all", 0),
])
def test_quantifier_counts(text, expected):
    assert P.count_quantifiers(text) == expected


@pytest.mark.parametrize("text,amount", [
    ("Raised $1.5M in seed funding", "$1.5M"),
    ("Cut spend by $200k", "$200k"),
    ("Paid $40 per seat", "$40"),
])
def test_dollar_amount_keeps_suffix(text, amount):
    assert P.quantifier.search(text).group() == amount


# --- Visual elements & buzzwords ---

@pytest.mark.parametrize("text", [
    "Skill Bar: Python ★★★★☆",
    "Strength graph for leadership",
    "Competency scale: 4/5",
    "Python rating: 5",
    "Java ★★★",
    "SQL - skill rating",
    "Go: 4 out of 5 stars",
    "Docker (rated 3/5)",
])
def test_visual_elements(text):
    assert P.has_visual_element(text)


@pytest.mark.parametrize("text", [
    "Operating systems at a StartupCo",
    "- Named Rising Star of the year for 2021",
    "Maintained the firm's credit rating through the refinancing",
    "star@example.com | rating.bot@example.org",
    "https://portfolio.dev/skill-bars/demo",
    "github.com/jane/star-rating",
    "Library with 1,200 GitHub stars",
])
def test_visual_elements_need_layout_context(text):
    assert not P.has_visual_element(text)


def test_buzzwords_found_in_order():
    text = "Hard worker and team-player. A true TEAM PLAYER and hard worker."
    assert P.find_buzzwords(text) == ["hard worker", "team player"]
    assert P.has_buzzword("Known as a go-getter")
    assert not P.has_buzzword("Led a team of five engineers")


def test_hyphenated_buzzword_deduplicated():
    assert P.find_buzzwords("A self-starter and self starter") == ["self starter"]


# --- Extensibility ---

def test_custom_vocabulary():
    lib = PatternLibrary.build(
        section_synonyms=(("hobbies", (r"hobbies", r"interests")),),
        buzzwords=(r"wizard",),
    )
    assert lib.section_names == ("hobbies",)
    assert lib.has_section("hobbies", "Interests\nChess")
    assert lib.has_buzzword("a coding wizard")
    assert not lib.has_buzzword("team player")


def test_library_is_immutable():
    with pytest.raises(AttributeError):
        P.email = None
