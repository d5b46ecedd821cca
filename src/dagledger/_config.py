"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from ._errors import ConfigError


@dataclass(slots=True, frozen=True)
class GraphConfig:
    """Defaults for graph algorithms, read from ``[tool.dagledger]``.

    Attributes:
        strict_topological_sort: Whether ``topological_sort`` raises CycleError on
            a cyclic graph instead of returning the partial order.
        project_root: Directory holding the pyproject.toml the config came from.

    """

    strict_topological_sort: bool = True
    project_root: Path | None = None


# TOML key -> GraphConfig field for every boolean option
_BOOL_OPTIONS = {
    "strict-topological-sort": "strict_topological_sort",
}

_active_config = GraphConfig()


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> GraphConfig:
    """Load and validate [tool.dagledger] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphConfig

    Raises:
        ConfigError: If the file is not valid TOML or the section has unknown
            keys or wrongly typed values.

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("dagledger", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.dagledger] configuration: expected a table"
        raise ConfigError(msg)

    unknown = sorted(set(section) - set(_BOOL_OPTIONS))
    if unknown:
        msg = f"Unknown [tool.dagledger] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    values: dict[str, bool] = {}
    for key, field_name in _BOOL_OPTIONS.items():
        if key not in section:
            continue
        value = section[key]
        if not isinstance(value, bool):
            msg = f"Invalid [tool.dagledger].{key}: expected boolean"
            raise ConfigError(msg)
        values[field_name] = value

    return GraphConfig(project_root=project_root, **values)


def get_config() -> GraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphConfig (defaults if no pyproject.toml or no [tool.dagledger] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphConfig()
    return load_config(pyproject_path)


def use_config(config: GraphConfig) -> GraphConfig:
    """Install *config* as the process-wide defaults.

    Returns:
        The previously active config, so callers can restore it.

    """
    global _active_config  # noqa: PLW0603
    previous = _active_config
    _active_config = config
    return previous


def active_config() -> GraphConfig:
    """Return the defaults currently used by graph algorithms."""
    return _active_config
