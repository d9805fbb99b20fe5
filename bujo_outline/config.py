"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, DEFAULT_OUTPUT_FORMAT
from .log import get_logger

logger = get_logger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass
class OutlineConfig:
    """Configuration for reading and reporting on journal outlines.

    Attributes:
        max_file_size: Maximum file size in bytes that will be processed.
        max_line_length: Maximum line length allowed when reading files.
        output_format: Report format for the ``check`` command (``"text"``
            or ``"json"``).

    Examples:
        OutlineConfig(max_line_length=500, output_format="json")
    """

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH

    # Reporting
    output_format: str = DEFAULT_OUTPUT_FORMAT


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`output_format` must be one of: text, json")
    """


def load_config(search_path: Path) -> OutlineConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.bujo-outline]`` table from `pyproject.toml` and the
    ``[bujo-outline]`` or ``[tool.bujo-outline]`` table from
    `.bujo-outline.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        OutlineConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is present but is not a mapping or
            contains unsupported keys.

    Examples:
        load_config(Path("journal"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "bujo-outline")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".bujo-outline.toml",
            table_paths=[("bujo-outline",), ("tool", "bujo-outline")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return OutlineConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> OutlineConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.info("config_file_skipped", path=str(config_file), reason=str(error))
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        config = _build_config_from_raw(raw_config, config_file, table_path)
        logger.debug("config_loaded", path=str(config_file), **asdict(config))
        return config

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> OutlineConfig:
    table_display = ".".join(table_path)

    if raw_config is None or raw_config == {}:
        return OutlineConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return OutlineConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: OutlineConfig) -> None:
    """Validate an `OutlineConfig` instance.

    Raises:
        ConfigError: If a limit is not a positive integer or the output format
            is unsupported.

    Examples:
        validate_config(OutlineConfig(output_format="json"))
    """
    limits = {
        "max_file_size": config.max_file_size,
        "max_line_length": config.max_line_length,
    }
    _ensure_integers(limits)
    _ensure_positive(limits)

    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"`output_format` must be one of: {', '.join(OUTPUT_FORMATS)}")


def apply_overrides(config: OutlineConfig, **overrides: object) -> OutlineConfig:
    """Apply override values to an `OutlineConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        OutlineConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `OutlineConfig`.

    Examples:
        updated = apply_overrides(config, output_format="json")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> OutlineConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), output_format="json")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
