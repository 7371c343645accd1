"""Target and ingredient document loading.

Reads TOML, YAML or JSON documents (chosen by file suffix) and turns them
into validated `Target` / `Ingredient` records.

Exports
-------
read_document
load_target
load_ingredient
load_catalog

Notes
-----
Every failure is raised as ``ConfigurationError`` with the offending path in
the message; nothing is swallowed here.
"""

import json
import logging
import tomllib
from pathlib import (
    Path,
)

import yaml

from catalog import (
    IngredientCatalog,
)
from errors import (
    ConfigurationError,
)
from models.ingredient import (
    Ingredient,
)
from models.target import (
    Target,
)

logger = logging.getLogger(__name__)


def _read_toml(path: Path):
    with open(path, "rb") as in_file:
        return tomllib.load(in_file)


def _read_yaml(path: Path):
    with open(path, "r", encoding="utf-8") as in_file:
        return yaml.safe_load(in_file)


def _read_json(path: Path):
    with open(path, "r", encoding="utf-8") as in_file:
        return json.load(in_file)


_READERS = {
    ".toml": _read_toml,
    ".yml": _read_yaml,
    ".yaml": _read_yaml,
    ".json": _read_json,
}


def read_document(
    path,
) -> dict:
    """Parse one flat document into a dict.

    Parameters
    ----------
    path : str | os.PathLike
        File to read; the suffix selects the format
        (``.toml``, ``.yml``/``.yaml``, ``.json``).

    Returns
    -------
    dict
        Parsed top-level mapping.

    Raises
    ------
    ConfigurationError
        Missing/unreadable file, unsupported suffix, syntax error, or a
        top level that is not a mapping.
    """
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(
            f"{path}: unsupported document type {path.suffix!r} "
            f"(expected one of {', '.join(sorted(_READERS))})"
        )
    try:
        data = reader(path)
    except OSError as exc:
        raise ConfigurationError(f"{path}: cannot read file ({exc})") from exc
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"{path}: malformed document ({exc})") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: document must be a mapping of fields")
    return data


def load_target(
    path,
) -> Target:
    """Load and validate a target document; log accepted oddities."""
    data = read_document(path)
    try:
        target = Target.from_dict(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc
    for issue in target.data_issues():
        logger.warning("%s: %s", path, issue)
    return target


def load_ingredient(
    path,
) -> Ingredient:
    data = read_document(path)
    try:
        return Ingredient.from_dict(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc


def load_catalog(
    paths,
) -> IngredientCatalog:
    """Load every ingredient document into one catalog.

    Raises
    ------
    ConfigurationError
        On any bad document, or when two documents share a name.
    """
    ingredients = []
    seen: dict[str, str] = {}
    for path in paths:
        ingredient = load_ingredient(path)
        if ingredient.name in seen:
            raise ConfigurationError(
                f"{path}: duplicate ingredient name {ingredient.name!r} "
                f"(already defined in {seen[ingredient.name]})"
            )
        seen[ingredient.name] = str(path)
        logger.debug("Loaded %s", ingredient.debug_string())
        ingredients.append(ingredient)
    return IngredientCatalog(ingredients)
