"generic fixtures"

import json

import pytest

from yarncomp.completions import resolve
from yarncomp.manifest import ManifestReader

PACKAGE_JSON = {
    "name": "demo",
    "version": "1.0.0",
    "scripts": {
        "build": "tsc -p .",
        "build:watch": "tsc -p . --watch",
        "test": "jest",
    },
    "dependencies": {
        "react": "^18.2.0",
        "@babel/core": "^7.0.0",
    },
    "devDependencies": {
        "jest": "^29.0.0",
        "typescript": "^5.0.0",
    },
}


def pytest_configure():
    "Runs once before all"
    from yarncomp.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True, screen=False)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path_factory):
    "Keeps the user environment out of the tests"
    for var in ("COMP_LINE", "COMP_POINT", "YARNCOMP_CONFIG", "YARNCOMP_LOG", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("yarncomp.config_loader.CONFIG_FILE", tmp_path_factory.mktemp("config") / "missing.toml")


@pytest.fixture
def project_dir(tmp_path):
    "A package with scripts and dependencies"
    (tmp_path / "package.json").write_text(json.dumps(PACKAGE_JSON), encoding="utf-8")
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path):
    "A directory without package.json"
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def complete(project_dir):
    "Completes a line with the cursor at the end, in `project_dir`"

    def _complete(line, cursor=None, directory=None):
        reader = ManifestReader(directory if directory is not None else project_dir)
        return resolve(line, len(line) if cursor is None else cursor, manifest_reader=reader)

    return _complete


@pytest.fixture
def test_logger():
    "A logger for objects requiring one"
    from yarncomp.logging_setup import get_logger

    return get_logger("tests")


@pytest.fixture
def write_config(tmp_path):
    "Writes a TOML configuration file and returns its path"

    def _write(content, name="config.toml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
