"""Version lookup for mediaq."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version from a source checkout's pyproject.toml, else the installed metadata."""
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            data = tomllib.load(f)
        project = data.get("project", {})
        if project.get("name") == "mediaq" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("mediaq")
    except PackageNotFoundError:
        return "0.0.0"
