"""
Structure lint tests.
Verify that the package layout follows the component conventions.
"""

from pathlib import Path

from stylekit.manifest.check import check_structure

PROJECT_ROOT = Path(__file__).parent.parent


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_package_passes_structure_check(self) -> None:
        assert check_structure() == []

    def test_components_exist(self) -> None:
        components = PROJECT_ROOT / "stylekit" / "components"
        for name in ("breakpoints", "responsive", "images", "flexgrid", "helpers"):
            assert (components / name / "component.py").is_file()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "stylekit_rules.yaml").is_file()


class TestStructureCheck:
    """The checker reports layout violations."""

    def test_illegal_directory(self, tmp_path: Path) -> None:
        (tmp_path / "stray").mkdir()
        errors = check_structure(tmp_path)
        assert any("Illegal dir" in e and "stray" in e for e in errors)

    def test_missing_init(self, tmp_path: Path) -> None:
        (tmp_path / "domain").mkdir()
        assert check_structure(tmp_path) == ["Missing __init__.py in package: 'domain'"]

    def test_illegal_file(self, tmp_path: Path) -> None:
        (tmp_path / "helpers.py").write_text("")
        errors = check_structure(tmp_path)
        assert any("Illegal file" in e for e in errors)

    def test_component_without_component_module(self, tmp_path: Path) -> None:
        component = tmp_path / "components" / "grid"
        component.mkdir(parents=True)
        (tmp_path / "components" / "__init__.py").write_text("")
        (component / "__init__.py").write_text("")
        assert check_structure(tmp_path) == ["Component 'grid' is missing component.py"]

    def test_missing_package(self, tmp_path: Path) -> None:
        assert check_structure(tmp_path / "nope") != []
