"""Tests for the role catalog."""

import pytest
from pydantic import ValidationError

from ats_checker.catalog.loader import RoleCatalog, default_catalog, load_catalog
from ats_checker.models.role import JobRole

EXPECTED_ROLE_IDS = [
    "frontend-developer",
    "backend-developer",
    "fullstack-developer",
    "data-scientist",
    "product-manager",
    "ui-ux-designer",
    "devops-engineer",
    "mobile-developer",
]


class TestBundledCatalog:
    def test_role_order(self, catalog):
        assert [r.id for r in catalog.list_roles()] == EXPECTED_ROLE_IDS

    def test_list_roles_stable(self, catalog):
        assert catalog.list_roles() == catalog.list_roles()

    def test_frontend_role(self, frontend_role):
        assert frontend_role.name == "Frontend Developer"
        assert len(frontend_role.keywords) == 26
        assert frontend_role.priority_keywords == {
            "React", "JavaScript", "TypeScript", "HTML", "CSS", "Git",
        }

    @pytest.mark.parametrize("role_id", EXPECTED_ROLE_IDS)
    def test_keywords_distinct(self, catalog, role_id):
        role = catalog.get_role(role_id)
        assert len(set(role.keywords)) == len(role.keywords)
        assert role.priority_keywords <= set(role.keywords)

    def test_unknown_role(self, catalog):
        assert catalog.get_role("astronaut") is None
        assert "astronaut" not in catalog

    def test_list_choices(self, catalog):
        choices = catalog.list_choices()
        assert choices[0] == {"id": "frontend-developer", "name": "Frontend Developer"}
        assert len(choices) == len(catalog) == 8

    def test_default_catalog_cached(self):
        assert default_catalog() is default_catalog()


class TestRoleCatalog:
    def test_duplicate_ids(self, tiny_role):
        with pytest.raises(ValueError, match="Duplicate role id"):
            RoleCatalog([tiny_role, tiny_role])

    def test_list_roles_is_copy(self, tiny_catalog):
        roles = tiny_catalog.list_roles()
        roles.clear()
        assert len(tiny_catalog) == 2


class TestLoadCatalog:
    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "roles.yaml"
        path.write_text(
            "roles:\n"
            "  - id: writer\n"
            "    name: Technical Writer\n"
            "    keywords: [Markdown, Docs as Code]\n"
            "    priority_keywords: [Markdown]\n",
            encoding="utf-8",
        )
        catalog = load_catalog(path)
        role = catalog.get_role("writer")
        assert isinstance(role, JobRole)
        assert role.keywords == ("Markdown", "Docs as Code")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Role catalog not found"):
            load_catalog(tmp_path / "nope.yaml")

    def test_invalid_priority_rejected(self, tmp_path):
        path = tmp_path / "roles.yaml"
        path.write_text(
            "roles:\n"
            "  - id: writer\n"
            "    name: Technical Writer\n"
            "    keywords: [Markdown]\n"
            "    priority_keywords: [LaTeX]\n",
            encoding="utf-8",
        )
        with pytest.raises(ValidationError, match="LaTeX"):
            load_catalog(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "roles.yaml"
        path.write_text("", encoding="utf-8")
        assert len(load_catalog(path)) == 0
