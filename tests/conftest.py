"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ats_checker.analysis.analyzer import ResumeAnalyzer
from ats_checker.catalog.loader import RoleCatalog, default_catalog
from ats_checker.models.role import JobRole


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane.doe@example.com | 555-123-4567

Experience
- Senior Frontend Engineer, Acme Corp (2019 - 2024)
  - Built React and TypeScript dashboards used by 12,000 customers
  - Cut bundle size by 40% with Webpack code splitting

Education
- B.S. Computer Science, State University, 2018

Skills
JavaScript, HTML, CSS, Git, Jest, Redux

Projects
- Accessibility audit tooling (Figma plugin)
"""


@pytest.fixture
def catalog() -> RoleCatalog:
    return default_catalog()


@pytest.fixture
def frontend_role(catalog: RoleCatalog) -> JobRole:
    return catalog.get_role("frontend-developer")


@pytest.fixture
def tiny_role() -> JobRole:
    return JobRole(
        id="tiny",
        name="Tiny Role",
        keywords=("Python", "Git", "Unit Testing", "Docker", "Terraform"),
        priority_keywords={"Python", "Docker"},
    )


@pytest.fixture
def tiny_catalog(tiny_role: JobRole) -> RoleCatalog:
    empty = JobRole(id="empty", name="Empty Role", keywords=())
    return RoleCatalog([tiny_role, empty])


@pytest.fixture
def analyzer() -> ResumeAnalyzer:
    return ResumeAnalyzer()
