"""
Tests for skill, education and category normalization.
"""

import pytest

from src.services import (
    SKILL_SYNONYMS,
    EDUCATION_HIERARCHY,
    SkillMapper,
    get_education_level,
    get_match_category,
    load_custom_synonyms,
    meets_education_requirement,
    normalize_skill,
    skills_match,
)


class TestNormalizeSkill:
    """Test skill normalization."""

    def test_lowercases_and_strips_punctuation(self):
        assert normalize_skill("Node.js") == "nodejs"
        assert normalize_skill("C++") == "c"
        assert normalize_skill("  Machine-Learning ") == "machinelearning"

    def test_keeps_digits(self):
        assert normalize_skill("HTML5") == "html5"

    def test_empty_and_none(self):
        assert normalize_skill("") == ""
        assert normalize_skill(None) == ""
        assert normalize_skill("!!!") == ""


class TestSkillsMatch:
    """Test the three-tier skill comparison."""

    def test_synonym_table(self):
        assert skills_match("JavaScript", "js")
        assert skills_match("ecmascript", "ES6")
        assert skills_match("Kubernetes", "k8s")
        assert skills_match("Amazon Web Services", "AWS")

    def test_substring(self):
        assert skills_match("React", "ReactJS")
        assert skills_match("PostgreSQL 14", "postgresql")

    def test_exact_after_normalization(self):
        assert skills_match("Machine Learning", "machine-learning")

    def test_unrelated_skills(self):
        assert not skills_match("Python", "Java")
        assert not skills_match("Rust", "Haskell")

    def test_symmetric(self):
        assert skills_match("js", "JavaScript") == skills_match("JavaScript", "js")
        assert skills_match("Java", "Python") == skills_match("Python", "Java")

    def test_never_raises_on_odd_input(self):
        # Stringhe strane non devono mai far fallire il matching
        for value in ["", "   ", "???", "C#", ".NET", None]:
            skills_match(value, "python")


class TestSkillMapper:
    """Test SkillMapper match types and custom synonyms."""

    def test_match_types(self):
        mapper = SkillMapper()
        assert mapper.match_type("Python", "python") == "exact"
        assert mapper.match_type("golang", "Go") == "synonym"
        assert mapper.match_type("React", "React Native") == "substring"
        assert mapper.match_type("Python", "Java") is None

    def test_find_match_returns_first_talent_skill(self):
        mapper = SkillMapper()
        matched, kind = mapper.find_match("k8s", ["Docker", "Kubernetes", "k8s"])
        assert matched == "Kubernetes"
        assert kind == "synonym"

    def test_find_match_none(self):
        mapper = SkillMapper()
        assert mapper.find_match("haskell", ["python", "java"]) == (None, None)
        assert mapper.find_match("haskell", []) == (None, None)

    def test_default_table_groups(self):
        mapper = SkillMapper()
        assert mapper.group_count == len(SKILL_SYNONYMS)

    def test_custom_table_replaces_default(self):
        mapper = SkillMapper(synonyms={"terraform": ["tf"]})
        assert mapper.match("Terraform", "TF")
        assert not mapper.match("JavaScript", "ecmascript")

    def test_custom_csv_extends_default(self, tmp_path):
        csv_path = tmp_path / "synonyms.csv"
        csv_path.write_text(
            'name,aliases\n'
            'terraform,"tf, hcl"\n'
            'python,"cpython"\n',
            encoding="utf-8",
        )
        mapper = SkillMapper(custom_csv_path=csv_path)

        assert mapper.match_type("Terraform", "HCL") == "synonym"
        # Alias custom aggiunto a un gruppo esistente
        assert mapper.match_type("py", "CPython") == "synonym"
        # La tabella di default resta attiva
        assert mapper.match("JavaScript", "js")

    def test_load_custom_synonyms(self, tmp_path):
        csv_path = tmp_path / "synonyms.csv"
        csv_path.write_text(
            'name,aliases\n'
            'pytorch,torch\n'
            'nlp,\n'
            'pytorch,"pt"\n',
            encoding="utf-8",
        )
        synonyms = load_custom_synonyms(csv_path)
        assert synonyms["pytorch"] == ["torch", "pt"]
        assert synonyms["nlp"] == []

    def test_load_custom_synonyms_requires_name_column(self, tmp_path):
        csv_path = tmp_path / "bad.csv"
        csv_path.write_text("skill,aliases\nx,y\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_custom_synonyms(csv_path)


class TestEducationLevel:
    """Test education ranking heuristic."""

    def test_hierarchy_order(self):
        assert EDUCATION_HIERARCHY == ["high_school", "associate", "bachelor", "master", "phd"]

    @pytest.mark.parametrize("education,level", [
        ("PhD", 4),
        ("Doctorate in Physics", 4),
        ("Master of Science", 3),
        ("MBA", 3),
        ("M.S.", 3),
        ("Bachelor's", 2),
        ("B.S. Computer Science", 2),
        ("BA", 2),
        ("Associate's degree", 1),
        ("A.A.", 1),
        ("High School Diploma", 0),
    ])
    def test_known_labels(self, education, level):
        assert get_education_level(education) == level

    def test_unknown_defaults_to_high_school(self):
        assert get_education_level("self-taught") == 0
        assert get_education_level("") == 0
        assert get_education_level(None) == 0


class TestMeetsEducationRequirement:
    """Test education requirement comparison."""

    def test_no_talent_education(self):
        assert not meets_education_requirement(None, "bachelor")

    def test_higher_degree_meets(self):
        assert meets_education_requirement("PhD", "bachelor")
        assert meets_education_requirement("MBA", "Master's")

    def test_no_requirement(self):
        assert meets_education_requirement("anything", None)
        assert meets_education_requirement(None, None)
        assert meets_education_requirement(None, "")

    def test_lower_degree_fails(self):
        assert not meets_education_requirement("High School", "bachelor")


class TestMatchCategory:
    """Test fixed category thresholds."""

    @pytest.mark.parametrize("score,category", [
        (100, "excellent"),
        (85, "excellent"),
        (84, "good"),
        (70, "good"),
        (69, "fair"),
        (50, "fair"),
        (49, "poor"),
        (0, "poor"),
    ])
    def test_thresholds(self, score, category):
        assert get_match_category(score) == category
