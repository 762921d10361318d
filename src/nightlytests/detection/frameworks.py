"""Test framework detection.

Finds the test runners a project directory uses by analyzing:
- Dependencies in package manifests (pyproject.toml, requirements files,
  package.json, pom.xml, build.gradle)
- Well-known config files (pytest.ini, conftest.py, jest.config.js, ...)

Each detected framework becomes one test task of a directory project.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, List, Set

from nightlytests.core.logging import get_logger

LOGGER = get_logger(__name__)

# Python test frameworks and their package names
PYTHON_TEST_FRAMEWORKS: Dict[str, str] = {
    "pytest": "pytest",
    "nose2": "nose2",
}

# JavaScript test frameworks
JS_TEST_FRAMEWORKS: Dict[str, str] = {
    "jest": "jest",
    "mocha": "mocha",
    "vitest": "vitest",
    "jasmine": "jasmine",
    "playwright": "@playwright/test",
}

# Java test frameworks and their Maven/Gradle identifiers
JAVA_TEST_FRAMEWORKS: Dict[str, List[str]] = {
    "junit5": ["org.junit.jupiter:junit-jupiter", "junit-jupiter"],
    "junit4": ["junit:junit"],
    "testng": ["org.testng:testng"],
    "spock": ["org.spockframework:spock-core"],
}

PYTEST_CONFIG_FILES = ["pytest.ini", "conftest.py", "tox.ini"]
JEST_CONFIG_FILES = ["jest.config.js", "jest.config.ts", "jest.config.mjs"]
PYTHON_REQUIREMENTS_FILES = [
    "requirements.txt",
    "requirements-dev.txt",
    "requirements_dev.txt",
    "dev-requirements.txt",
]


def detect_test_frameworks(project_root: Path) -> List[str]:
    """Detect the test frameworks used in a project directory.

    Args:
        project_root: Path to the project directory.

    Returns:
        Framework names in a stable order (Python, JavaScript, Java).
    """
    found: List[str] = []

    python_deps = _get_python_dependencies(project_root)
    for framework, package in PYTHON_TEST_FRAMEWORKS.items():
        if package in python_deps:
            found.append(framework)

    if "pytest" not in found and any((project_root / name).exists() for name in PYTEST_CONFIG_FILES):
        found.append("pytest")

    # A bare tests/ package without any runner declared still runs with unittest
    if not found and _has_python_test_dir(project_root):
        found.append("unittest")

    js_deps = _get_js_dependencies(project_root)
    for framework, package in JS_TEST_FRAMEWORKS.items():
        if package in js_deps:
            found.append(framework)

    if "jest" not in found and any((project_root / name).exists() for name in JEST_CONFIG_FILES):
        found.append("jest")

    java_deps = _get_java_dependencies(project_root)
    for framework, identifiers in JAVA_TEST_FRAMEWORKS.items():
        if any(identifier in java_deps for identifier in identifiers):
            found.append(framework)

    LOGGER.debug(f"Detected test frameworks in {project_root}: {found}")
    return found


def _has_python_test_dir(project_root: Path) -> bool:
    for name in ("tests", "test"):
        test_dir = project_root / name
        if test_dir.is_dir() and any(test_dir.glob("test_*.py")):
            return True
    return False


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.debug(f"Cannot read {path}: {e}")
        return ""


def _get_python_dependencies(project_root: Path) -> Set[str]:
    """Extract Python dependencies from pyproject.toml or requirements files.

    Args:
        project_root: Project root directory.

    Returns:
        Set of package names (lowercase).
    """
    deps: Set[str] = set()

    pyproject = project_root / "pyproject.toml"
    if pyproject.is_file():
        deps.update(_parse_pyproject_deps(_read_text(pyproject)))

    for name in PYTHON_REQUIREMENTS_FILES:
        requirements = project_root / name
        if requirements.is_file():
            deps.update(_parse_requirements_txt(_read_text(requirements)))

    return deps


def _parse_pyproject_deps(content: str) -> Set[str]:
    """Parse dependencies from pyproject.toml content.

    Looks at ``dependencies = [...]`` arrays (including those of optional
    dependency groups) and at Poetry dependency tables.

    Args:
        content: pyproject.toml file content.

    Returns:
        Set of package names.
    """
    deps: Set[str] = set()

    for section in re.findall(r'dependencies\s*=\s*\[(.*?)\]', content, re.DOTALL):
        deps.update(_extract_package_names(section))

    # [project.optional-dependencies] lists: test = ["pytest>=7"]
    opt_section = re.search(
        r'\[project\.optional-dependencies\](.*?)(?=^\[|\Z)',
        content,
        re.DOTALL | re.MULTILINE,
    )
    if opt_section:
        deps.update(_extract_package_names(opt_section.group(1)))

    # Poetry uses package = "version" format
    for poetry_deps in re.findall(
        r'\[tool\.poetry\.(?:dev-|group\.\w+\.)?dependencies\](.*?)(?=^\[|\Z)',
        content,
        re.DOTALL | re.MULTILINE,
    ):
        package_matches = re.findall(r'^(\w[\w-]*)\s*=', poetry_deps, re.MULTILINE)
        deps.update(p.lower().replace("_", "-") for p in package_matches)

    return deps


def _extract_package_names(text: str) -> Set[str]:
    """Extract package names from a dependencies list.

    Args:
        text: Text containing quoted package specifications.

    Returns:
        Set of normalized package names.
    """
    deps: Set[str] = set()

    for match in re.findall(r'["\']([a-zA-Z][\w.-]*)', text):
        package = re.sub(r'\[.*?\]', '', match).lower()
        deps.add(package.replace("_", "-"))

    return deps


def _parse_requirements_txt(content: str) -> Set[str]:
    """Parse package names from requirements.txt content.

    Args:
        content: requirements.txt file content.

    Returns:
        Set of package names.
    """
    deps: Set[str] = set()

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("-"):
            continue

        match = re.match(r'^([a-zA-Z][\w.-]*)', line)
        if match:
            deps.add(match.group(1).lower().replace("_", "-"))

    return deps


def _get_js_dependencies(project_root: Path) -> Set[str]:
    """Extract JavaScript/TypeScript dependencies from package.json.

    Args:
        project_root: Project root directory.

    Returns:
        Set of package names.
    """
    deps: Set[str] = set()

    package_json = project_root / "package.json"
    if not package_json.is_file():
        return deps

    try:
        data = json.loads(_read_text(package_json) or "{}")
    except json.JSONDecodeError as e:
        LOGGER.warning(f"Invalid package.json in {project_root}: {e}")
        return deps

    if isinstance(data, dict):
        for dep_type in ["dependencies", "devDependencies", "peerDependencies"]:
            section = data.get(dep_type)
            if isinstance(section, dict):
                deps.update(section.keys())

    return deps


def _get_java_dependencies(project_root: Path) -> Set[str]:
    """Extract Java dependencies from pom.xml or build.gradle.

    Args:
        project_root: Project root directory.

    Returns:
        Set of dependency identifiers (groupId:artifactId and artifact names).
    """
    deps: Set[str] = set()

    pom_xml = project_root / "pom.xml"
    if pom_xml.is_file():
        deps.update(_parse_maven_pom(_read_text(pom_xml)))

    for gradle_file in ["build.gradle", "build.gradle.kts"]:
        gradle_path = project_root / gradle_file
        if gradle_path.is_file():
            deps.update(_parse_gradle_build(_read_text(gradle_path)))

    return deps


def _parse_maven_pom(content: str) -> Set[str]:
    """Parse dependencies from Maven pom.xml content.

    Args:
        content: pom.xml file content.

    Returns:
        Set of dependency identifiers.
    """
    deps: Set[str] = set()

    group_pattern = r"<groupId>([^<]+)</groupId>"
    artifact_pattern = r"<artifactId>([^<]+)</artifactId>"

    for dep_match in re.finditer(r"<dependency>(.*?)</dependency>", content, re.DOTALL):
        dep_content = dep_match.group(1)
        group_match = re.search(group_pattern, dep_content)
        artifact_match = re.search(artifact_pattern, dep_content)

        if group_match and artifact_match:
            group_id = group_match.group(1).strip()
            artifact_id = artifact_match.group(1).strip()
            deps.add(f"{group_id}:{artifact_id}")
            deps.add(artifact_id)

    return deps


def _parse_gradle_build(content: str) -> Set[str]:
    """Parse test dependencies from Gradle build file content.

    Args:
        content: build.gradle or build.gradle.kts file content.

    Returns:
        Set of dependency identifiers.
    """
    deps: Set[str] = set()

    # testImplementation 'junit:junit:4.13.2'
    # testImplementation("org.junit.jupiter:junit-jupiter:5.10.0")
    dep_patterns = [
        r"(?:testImplementation|testCompileOnly|testRuntimeOnly)\s*['\"]([^'\"]+)['\"]",
        r"(?:testImplementation|testCompileOnly|testRuntimeOnly)\s*\(\s*['\"]([^'\"]+)['\"]\s*\)",
    ]

    for pattern in dep_patterns:
        for match in re.finditer(pattern, content):
            parts = match.group(1).split(":")
            if len(parts) >= 2:
                deps.add(f"{parts[0]}:{parts[1]}")
                deps.add(parts[1])

    return deps
