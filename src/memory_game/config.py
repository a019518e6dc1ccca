# Area: Shared
"""
memory_game.config — Default settings loading
=============================================

Builds the town's ``DefaultMemoryGameSettings`` from, in increasing
precedence:

1. Built-in defaults (3 lives, 4x4 board, 5s / 15s, 25% targets)
2. An optional JSON file (camelCase or snake_case keys)
3. Environment variables, including those from a ``.env`` file

Environment variables:
    MEMORY_GAME_STARTING_LIVES=3
    MEMORY_GAME_BOARD_ROWS=4
    MEMORY_GAME_BOARD_COLUMNS=4
    MEMORY_GAME_MEMORIZATION_SECONDS=5
    MEMORY_GAME_GUESSING_SECONDS=15
    MEMORY_GAME_INCREASING_DIFFICULTY=true
    MEMORY_GAME_TARGET_PERCENTAGE=0.25
    MEMORY_GAME_PLAYABLE=true
    MEMORY_GAME_TILE_COLOR=white
    MEMORY_GAME_TILE_SHAPE=square
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from pydantic import ValidationError

from .errors import InvalidSettingsError
from .settings import DefaultMemoryGameSettings

logger = logging.getLogger("memory_game.config")


def _env_bool(value: str) -> Any:
    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    # Left as a string so validation reports it
    return value


def _env_number(value: str) -> Any:
    try:
        number = float(value)
    except ValueError:
        return value
    return int(number) if number.is_integer() else number


# env var -> (settings path, converter)
ENV_MAPPINGS: Dict[str, tuple] = {
    "MEMORY_GAME_STARTING_LIVES": (("starting_lives",), _env_number),
    "MEMORY_GAME_BOARD_ROWS": (("starting_board_size", "rows"), _env_number),
    "MEMORY_GAME_BOARD_COLUMNS": (("starting_board_size", "columns"), _env_number),
    "MEMORY_GAME_MEMORIZATION_SECONDS": (("memorization_time_seconds",), _env_number),
    "MEMORY_GAME_GUESSING_SECONDS": (("guessing_time_seconds",), _env_number),
    "MEMORY_GAME_INCREASING_DIFFICULTY": (("increasing_difficulty",), _env_bool),
    "MEMORY_GAME_TARGET_PERCENTAGE": (("target_tiles_percentage",), _env_number),
    "MEMORY_GAME_PLAYABLE": (("is_playable",), _env_bool),
    "MEMORY_GAME_TILE_COLOR": (("unknown_tile_color",), str.strip),
    "MEMORY_GAME_TILE_SHAPE": (("tile_shape",), str.strip),
}


def load_default_settings(
    config_path: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> DefaultMemoryGameSettings:
    """
    Load the competitive default settings.

    Parameters
    ----------
    config_path : str or Path, optional
        JSON file with settings fields. Missing files are ignored.
    env_file : str or Path, optional
        ``.env`` file to load; defaults to searching from the cwd.
        Existing environment variables win over the file.

    Raises
    ------
    InvalidSettingsError
        If the settings file cannot be read, or the merged values fail
        validation.
    """
    load_dotenv(dotenv_path=env_file, override=False)

    data = DefaultMemoryGameSettings().model_dump()
    file_data = _load_json(config_path)
    if not isinstance(file_data, dict):
        raise InvalidSettingsError(
            ["settings file must contain a JSON object"], candidate={"file": str(config_path)},
        )
    for name, value in _normalise_keys(file_data).items():
        if name == "starting_board_size" and isinstance(value, dict):
            value = {**data[name], **value}
        data[name] = value

    for env_key, (path, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            _set_path(data, path, convert(os.environ[env_key]))

    try:
        settings = DefaultMemoryGameSettings.model_validate(data)
    except ValidationError as exc:
        raise InvalidSettingsError(
            [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()],
            candidate=data,
        ) from exc
    logger.debug("Default settings loaded: %s", settings.model_dump())
    return settings


def _load_json(config_path: Optional[Union[str, Path]]) -> Dict[str, Any]:
    if not config_path:
        return {}
    path = Path(config_path)
    if not path.exists():
        logger.warning("Settings file not found: %s", path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and undecodable bytes
        raise InvalidSettingsError(
            [f"could not read settings file: {exc}"], candidate={"file": str(path)},
        ) from exc


def _normalise_keys(file_data: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase wire keys onto field names."""
    aliases = {
        field.alias: name
        for name, field in DefaultMemoryGameSettings.model_fields.items()
        if field.alias
    }
    normalised: Dict[str, Any] = {}
    for key, value in file_data.items():
        normalised[aliases.get(key, key)] = value
    return normalised


def _set_path(data: Dict[str, Any], path: tuple, value: Any) -> None:
    target = data
    for key in path[:-1]:
        target = target.setdefault(key, {})
    target[path[-1]] = value
