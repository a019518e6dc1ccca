# Area: Settings
"""
memory_game.settings — Game settings models and validation
==========================================================

Two kinds of settings records start a game:

* ``DefaultMemoryGameSettings`` — the process-wide competitive defaults,
  owned and edited by the administrator component.
* ``MemoryGameSettings`` — a one-shot record a player supplies for a
  casual game. Untrusted: always run through ``validate_settings``.

Both accept the camelCase wire names (``startingLives``) as well as the
Python field names (``starting_lives``).
"""

from __future__ import annotations

import threading
from typing import Annotated, Any, List, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from .errors import InvalidSettingsError

MAX_BOARD_DIMENSION = 24

UnknownTileColor = Literal[
    "blue", "yellow", "purple", "orange", "pink", "brown", "black", "white",
]
TileShape = Literal["circle", "square"]

DEFAULT_UNKNOWN_TILE_COLOR = "white"
DEFAULT_TILE_SHAPE = "square"


def _reject_non_numeric(value: Any) -> Any:
    # bool is an int subclass; "3" would be coerced in lax mode
    if isinstance(value, (bool, str, bytes)):
        raise ValueError("must be a number")
    return value


def _whole_number(value: Any) -> Any:
    value = _reject_non_numeric(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be a whole number")
        return int(value)
    return value


PositiveInt = Annotated[int, Field(ge=1, strict=True), BeforeValidator(_whole_number)]
PositiveSeconds = Annotated[
    float, Field(gt=0, allow_inf_nan=False), BeforeValidator(_reject_non_numeric),
]
Percentage = Annotated[
    float, Field(ge=0, le=1, allow_inf_nan=False), BeforeValidator(_reject_non_numeric),
]

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    validate_assignment=True,
    extra="ignore",
)


class BoardSize(BaseModel):
    """Board dimensions in rows and columns."""
    model_config = _MODEL_CONFIG

    rows: PositiveInt
    columns: PositiveInt


class MemoryGameSettings(BaseModel):
    """Settings that initialize a game's first level."""
    model_config = _MODEL_CONFIG

    starting_lives: PositiveInt
    starting_board_size: BoardSize
    memorization_time_seconds: PositiveSeconds
    guessing_time_seconds: PositiveSeconds
    # False keeps the board size fixed across levels
    increasing_difficulty: StrictBool
    # Fraction of tiles that are targets; target count rounds up
    target_tiles_percentage: Percentage
    # Only consulted by the command layer at join time
    is_playable: StrictBool = True
    unknown_tile_color: Optional[UnknownTileColor] = None
    tile_shape: Optional[TileShape] = None

    def to_wire(self) -> dict:
        """Serialize with the camelCase field names used on the wire."""
        return self.model_dump(by_alias=True)


class DefaultMemoryGameSettings(MemoryGameSettings):
    """
    Competitive defaults shared by every game area in the process.

    Mutable in place by the administrator component; assignments are
    validated. Bulk edits go through ``replace_with()`` and reads through
    ``snapshot()``; both hold the same lock, so a game never starts on a
    half-applied edit.
    """

    starting_lives: PositiveInt = 3
    starting_board_size: BoardSize = Field(
        default_factory=lambda: BoardSize(rows=4, columns=4)
    )
    memorization_time_seconds: PositiveSeconds = 5
    guessing_time_seconds: PositiveSeconds = 15
    increasing_difficulty: StrictBool = True
    target_tiles_percentage: Percentage = 0.25
    is_playable: StrictBool = True
    unknown_tile_color: Optional[UnknownTileColor] = DEFAULT_UNKNOWN_TILE_COLOR
    tile_shape: Optional[TileShape] = DEFAULT_TILE_SHAPE

    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    def snapshot(self) -> MemoryGameSettings:
        """Copy the current values out into an independent record."""
        with self._lock:
            return MemoryGameSettings.model_validate(self.model_dump())

    def replace_with(self, settings: MemoryGameSettings) -> None:
        """Overwrite every settings field as one update."""
        with self._lock:
            for name in MemoryGameSettings.model_fields:
                setattr(self, name, getattr(settings, name))

    def set_playable(self, playable: bool) -> None:
        with self._lock:
            self.is_playable = playable


def validate_settings(
    candidate: Union[MemoryGameSettings, Mapping[str, Any], Any],
) -> MemoryGameSettings:
    """
    Validate a candidate settings record.

    Parameters
    ----------
    candidate : MemoryGameSettings or Mapping
        Settings from a player (wire dict) or an already built model.

    Returns
    -------
    MemoryGameSettings
        A fresh, validated record independent of ``candidate``.

    Raises
    ------
    InvalidSettingsError
        If any field is missing, mistyped, or out of range.
    """
    if isinstance(candidate, DefaultMemoryGameSettings):
        data: Any = candidate.snapshot().model_dump()
    elif isinstance(candidate, BaseModel):
        data = candidate.model_dump()
    else:
        data = candidate

    if not isinstance(data, Mapping):
        raise InvalidSettingsError(
            [f"Expected settings object, got {type(candidate).__name__}"],
        )

    try:
        return MemoryGameSettings.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidSettingsError(
            _format_validation_errors(exc), candidate=dict(data),
        ) from exc


def _format_validation_errors(exc: ValidationError) -> List[str]:
    errors: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        errors.append(f"{location}: {error.get('msg', 'invalid value')}")
    return errors


def clamp_board_size(rows: int, columns: int) -> BoardSize:
    """Cap both dimensions at the 24x24 hard ceiling."""
    return BoardSize(
        rows=min(MAX_BOARD_DIMENSION, rows),
        columns=min(MAX_BOARD_DIMENSION, columns),
    )
