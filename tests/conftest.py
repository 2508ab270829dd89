"""Root-level pytest fixtures for the layerconf test suite.

Every test runs in its own empty working directory with the test
environment variables unset, so no stray config.yml, .env or exported
variable can leak into a resolution.
"""

import pytest
from dataclasses import dataclass


TEST_ENV_KEYS = (
    "TEST_STRING",
    "TEST_INT",
    "TEST_BOOL",
    "TEST_SECRET",
    "TEST_FLOAT",
    "NAME",
    "Count",
    "StringVal",
    "IntVal",
    "SERVICE_NAME",
    "SERVICE_PORT",
)


@dataclass
class AppRecord:
    """Target record mirroring FIELD_TABLE."""
    StringVal: str = ""
    IntVal: int = 0
    BoolVal: bool = False
    API_SECRET: str = ""
    FloatVal: float = 0.0


# =============================================================================
# Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run each test in an empty directory with test variables unset.

    setenv before delenv makes monkeypatch restore the original state even
    when a test (or a loaded .env file) sets the variable later.
    """
    monkeypatch.chdir(tmp_path)
    for key in TEST_ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return tmp_path


# =============================================================================
# Field table fixtures
# =============================================================================

@pytest.fixture
def field_table():
    """The canonical field table, one field per scalar kind plus a secret."""
    return [
        {"name": "StringVal", "kind": "text", "default": "defaultStr", "env": "TEST_STRING", "required": True},
        {"name": "IntVal", "kind": "integer", "default": "42", "env": "TEST_INT"},
        {"name": "BoolVal", "kind": "boolean", "default": "true", "env": "TEST_BOOL"},
        {"name": "API_SECRET", "kind": "text", "default": "topsecret", "env": "TEST_SECRET"},
        {"name": "FloatVal", "kind": "float", "default": "0.1", "env": "TEST_FLOAT"},
    ]


@pytest.fixture
def descriptions():
    return {
        "StringVal": "A required string value",
        "IntVal": "An integer value",
        "BoolVal": "A boolean value",
        "API_SECRET": "Should be masked",
    }


@pytest.fixture
def record():
    """Fresh dataclass target record."""
    return AppRecord()


@pytest.fixture
def write_yaml(isolated_workdir):
    """Factory writing a YAML file relative to the working directory.

    Examples
    --------
    >>> def test_file(write_yaml):
    ...     path = write_yaml("IntVal: 1000\\n")
    ...     path = write_yaml("IntVal: 1\\n", "config/config.yaml")
    """
    def _write(content, name="config.yml"):
        path = isolated_workdir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
