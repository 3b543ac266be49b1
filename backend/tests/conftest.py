"""Shared test configuration, fixtures and sample résumés."""

import os

# Must be set before config.settings is instantiated by any test import
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["GEMINI_API_KEY"] = ""

import pytest


STRONG_HEAD = """Jane Smith
jane.smith@example.com | (555) 123-4567 | linkedin.com/in/janesmith

Professional Summary
Backend engineer with eight years of experience building reliable payment and data platforms.

Work Experience
Senior Software Engineer, Acme Corp, Jan 2020 - Present
- Cut infrastructure spend by 30% by consolidating batch workloads
- Grew the self-service API to 12,000 users across three regions
- Delivered a billing rewrite that brought in $1,200,000 in new annual contracts
Software Engineer, StartupCo, Jun 2016 - Dec 2019
- Migrated 40 servers to containers with zero customer-facing downtime
- Reduced support load by 25% through better error reporting
- Closed 300 tickets during the platform stabilisation effort
"""

STRONG_TAIL = """
Education
B.S. Computer Science, State University, 2016

Skills
Python, Go, PostgreSQL, Redis, Docker, Kubernetes, Terraform, AWS, FastAPI

Projects
Open-source request throttling library used in production by several companies.

Certifications
AWS Certified Solutions Architect - Associate
"""

FILLER_BULLET = "- Partnered with product and design to ship dependable features on schedule\n"

# Ten words, no contact details, headers or measurable results
WEAK_SENTENCE = "I worked at a local company doing various office tasks. "


def build_strong_resume(min_words: int = 600) -> str:
    """Well-formed résumé with six quantified results, padded to *min_words*."""
    filler = ""
    while len((STRONG_HEAD + filler + STRONG_TAIL).split()) < min_words:
        filler += FILLER_BULLET
    return STRONG_HEAD + filler + STRONG_TAIL


@pytest.fixture
def strong_resume() -> str:
    return build_strong_resume()


@pytest.fixture
def weak_resume() -> str:
    return WEAK_SENTENCE * 5
