import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from selvage.spec import MergeConventions

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib


INDEX_CHOICES = ("scan", "hashed")


class ConfigError(Exception):
    pass


@dataclass
class SelvageConfig:
    conventions: MergeConventions = field(default_factory=MergeConventions)
    identity_index: str = "scan"
    sync_namespaces: bool = False
    # target (original) path -> proposed path, both relative to the project root
    documents: Dict[str, str] = field(default_factory=dict)
    root_path: Optional[Path] = None


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _build_conventions(data: Dict[str, Any]) -> MergeConventions:
    defaults = MergeConventions()
    return MergeConventions(
        id_attribute=data.get("id_attribute", defaults.id_attribute),
        fingerprint_attribute=data.get(
            "fingerprint_attribute", defaults.fingerprint_attribute
        ),
        internal_prefix=data.get("internal_prefix", defaults.internal_prefix),
        placeholder_tag=data.get("placeholder_tag", defaults.placeholder_tag),
    )


def load_config_from_path(search_path: Path) -> SelvageConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        # No project file: run with the built-in conventions.
        return SelvageConfig()

    selvage_data: Dict[str, Any] = data.get("tool", {}).get("selvage", {})

    identity_index = selvage_data.get("identity_index", "scan")
    if identity_index not in INDEX_CHOICES:
        raise ConfigError(
            f"Invalid identity_index '{identity_index}' in {config_path}, "
            f"expected one of {', '.join(INDEX_CHOICES)}."
        )

    return SelvageConfig(
        conventions=_build_conventions(selvage_data),
        identity_index=identity_index,
        sync_namespaces=bool(selvage_data.get("sync_namespaces", False)),
        documents={
            str(target): str(proposed)
            for target, proposed in selvage_data.get("documents", {}).items()
        },
        root_path=config_path.parent,
    )
