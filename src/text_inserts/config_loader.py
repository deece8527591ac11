"""Find and read the YAML settings files for text-inserts.

A project file (``.text_inserts/config.yml`` under the working directory)
overrides the user file (``~/.config/text_inserts/config.yml``) one
top-level section at a time. ``TEXT_INSERTS_CONFIG`` names a file that
overrides both. String values may reference environment variables as
``${NAME}`` or ``${NAME:-fallback}``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEXT_INSERTS_CONFIG"
PROJECT_DIR = ".text_inserts"
CONFIG_NAMES = ("config.yml", "config.yaml")

_VAR_REF = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)"
    r"(?::-(?P<fallback>[^}]*))?\}"
)


def expand_env_vars(text: str) -> str:
    """Substitute ``${NAME}`` and ``${NAME:-fallback}`` references in *text*.

    An unset or empty variable expands to its fallback, or to nothing when
    there is none. Text that is not a well-formed reference is kept as is.
    """
    return _VAR_REF.sub(
        lambda m: os.environ.get(m["name"]) or (m["fallback"] or ""), text
    )


def _expand_values(node: Any) -> Any:
    if isinstance(node, str):
        return expand_env_vars(node)
    if isinstance(node, dict):
        return {key: _expand_values(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand_values(item) for item in node]
    return node


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one settings file.

    An empty file reads as ``{}``.

    Raises:
        ValueError: If the document is not a mapping of sections.
        yaml.YAMLError: If the file is not valid YAML.
        OSError: If the file cannot be read.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: expected a mapping of sections, got {type(data).__name__}"
        )
    return data


def discover_config_files() -> list[Path]:
    """Existing settings files, the one that wins first.

    Looks at ``$TEXT_INSERTS_CONFIG``, then ``.text_inserts/config.yml``
    and ``.text_inserts/config.yaml`` in the working directory, then
    ``~/.config/text_inserts/config.yml``.
    """
    candidates: list[Path] = []
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        candidates.append(Path(explicit).expanduser().resolve())
    project = Path.cwd() / PROJECT_DIR
    candidates.extend(project / name for name in CONFIG_NAMES)
    candidates.append(Path.home() / ".config" / "text_inserts" / CONFIG_NAMES[0])
    return [path for path in candidates if path.is_file()]


def load_config_files() -> dict[str, Any]:
    """Merge every discovered file into one dict of sections.

    A section from a higher-precedence file replaces the whole section
    from a lower one. Variable references are expanded after merging.
    Returns ``{}`` when there is nothing to read.
    """
    sections: dict[str, Any] = {}
    for path in reversed(discover_config_files()):
        logger.debug("Reading settings from %s", path)
        sections.update(read_config_file(path))
    return _expand_values(sections)


_STARTER_CONFIG = """\
# text-inserts configuration
#
# Settings can also be given via environment variables:
#   TEXT_INSERTS_TAG_PREFIX, TEXT_INSERTS_ENCODING, TEXT_INSERTS_DEBUG,
#   TEXT_INSERTS_LOG_FILE
#
# tags:
#   prefix: ""          # prepended to markers created by insert-or-add
#   encoding: null      # null detects the encoding of each file
#
# sync:
#   destination: build/generated
#   root: templates
#   include:
#     - "**/*.swift"
#   preserve_sub_path: true
#   mode: if-different  # or: always
#
# logging:
#   level: INFO
#   file: null
#   format: text        # or: json
"""


def ensure_config(target: Path | None = None) -> Path:
    """Return the settings file in use, writing a commented starter if none exists.

    Args:
        target: Where to write the starter file. Defaults to
            ``.text_inserts/config.yml`` in the working directory.
    """
    found = discover_config_files()
    if found:
        return found[0]

    path = target or Path.cwd() / PROJECT_DIR / CONFIG_NAMES[0]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_STARTER_CONFIG, encoding="utf-8")
    logger.info("Wrote starter settings to %s", path)
    return path
