"""Core domain models.

A dream is a value: a description, the creature seen in it, the set of
effects that creature shows, and how many creatures there were. The list
model is the ordered collection of dreams behind the list screen.

Both know how to encode themselves into a loosely typed string-keyed mapping
(the shape kept in the key-value store) and how to decode that mapping back.
Pydantic is used for validation at both boundaries; anything that does not
match the stored shape exactly raises DecodeError.

Stored shape:

    {"description": str, "creature": 0..5, "effects": [0..5, ...],
     "numberOfCreatures": int >= 1}

    {"dreams": [<dream>, ...], "favoriteCreature": 0..5}
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class DecodeError(ValueError):
    """A stored mapping cannot be turned back into a valid record."""


class UnicornColor(str, Enum):
    YELLOW = "yellow"
    PINK = "pink"
    WHITE = "white"


class Creature(IntEnum):
    """The six creatures a dream can hold. Values are the stored codes."""

    UNICORN_YELLOW = 0
    UNICORN_PINK = 1
    UNICORN_WHITE = 2
    CRUSTY = 3
    SHARK = 4
    DRAGON = 5

    @classmethod
    def unicorn(cls, color: UnicornColor) -> Creature:
        return _UNICORNS_BY_COLOR[color]

    @property
    def is_unicorn(self) -> bool:
        return self in _UNICORN_COLORS

    @property
    def unicorn_color(self) -> UnicornColor | None:
        return _UNICORN_COLORS.get(self)

    @property
    def display_name(self) -> str:
        """User-presentable name, e.g. "Pink unicorn"."""
        color = self.unicorn_color
        if color is not None:
            return f"{color.value.capitalize()} unicorn"
        return self.name.capitalize()


_UNICORN_COLORS: dict[Creature, UnicornColor] = {
    Creature.UNICORN_YELLOW: UnicornColor.YELLOW,
    Creature.UNICORN_PINK: UnicornColor.PINK,
    Creature.UNICORN_WHITE: UnicornColor.WHITE,
}
_UNICORNS_BY_COLOR = {color: creature for creature, color in _UNICORN_COLORS.items()}


class Effect(IntEnum):
    """Visual effects attachable to a dream, coded by declaration order."""

    FIRE_BREATHING = 0
    LASER_FOCUS = 1
    MAGIC = 2
    FIREFLIES = 3
    RAIN = 4
    SNOW = 5


# ---------------------------------------------------------------------------
# Stored shapes
# ---------------------------------------------------------------------------


class _DreamMapping(BaseModel):
    model_config = ConfigDict(strict=True)

    description: str
    creature: int
    effects: list[int]
    number_of_creatures: int = Field(alias="numberOfCreatures")


class _DreamListMapping(BaseModel):
    model_config = ConfigDict(strict=True)

    dreams: list[Any]
    favorite_creature: int | None = Field(default=None, alias="favoriteCreature")


def _as_dict(mapping: Any) -> dict[str, Any]:
    if not isinstance(mapping, Mapping):
        raise DecodeError(f"Expected a mapping, got {type(mapping).__name__}")
    return dict(mapping)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )


def _reject_loose_code(value: Any) -> None:
    if isinstance(value, (str, bool)):
        raise ValueError(f"expected an enum member or integer code, got {value!r}")


def _decode_code(enum_cls: type[IntEnum], code: int, field: str) -> Any:
    try:
        return enum_cls(code)
    except ValueError:
        raise DecodeError(f"{field}: unknown code {code}") from None


# ---------------------------------------------------------------------------
# Domain values
# ---------------------------------------------------------------------------


class Dream(BaseModel):
    """One dream. Immutable; use replace() to derive a changed copy."""

    model_config = ConfigDict(frozen=True)

    description: str
    creature: Creature
    effects: frozenset[Effect]
    number_of_creatures: int = Field(default=1, ge=1)

    @field_validator("creature", mode="before")
    @classmethod
    def _check_creature(cls, value: Any) -> Any:
        _reject_loose_code(value)
        return value

    @field_validator("effects", mode="before")
    @classmethod
    def _check_effects(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            for effect in value:
                _reject_loose_code(effect)
        return value

    def replace(self, **changes: Any) -> Dream:
        return type(self).model_validate({**self.model_dump(), **changes})

    def encode(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "creature": int(self.creature),
            "effects": sorted(int(effect) for effect in self.effects),
            "numberOfCreatures": self.number_of_creatures,
        }

    @classmethod
    def decode(cls, mapping: Any) -> Dream:
        try:
            raw = _DreamMapping.model_validate(_as_dict(mapping))
        except ValidationError as e:
            raise DecodeError(f"Invalid dream: {_describe(e)}") from e

        creature = _decode_code(Creature, raw.creature, "creature")
        effects = set()
        for code in raw.effects:
            effects.add(_decode_code(Effect, code, "effects"))

        try:
            return cls(
                description=raw.description,
                creature=creature,
                effects=frozenset(effects),
                number_of_creatures=raw.number_of_creatures,
            )
        except ValidationError as e:
            raise DecodeError(f"Invalid dream: {_describe(e)}") from e


class DreamListModel(BaseModel):
    """The dreams shown by the list screen, in order, plus its UI state."""

    model_config = ConfigDict(frozen=True)

    dreams: tuple[Dream, ...] = ()
    favorite_creature: Creature = Creature.UNICORN_PINK

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self.dreams):
            raise IndexError(f"Dream index {index} out of range")

    def with_dream(self, dream: Dream) -> DreamListModel:
        return self.model_copy(update={"dreams": (*self.dreams, dream)})

    def without_dream(self, index: int) -> DreamListModel:
        self._check_index(index)
        dreams = self.dreams[:index] + self.dreams[index + 1:]
        return self.model_copy(update={"dreams": dreams})

    def replacing_dream(self, index: int, dream: Dream) -> DreamListModel:
        self._check_index(index)
        dreams = self.dreams[:index] + (dream,) + self.dreams[index + 1:]
        return self.model_copy(update={"dreams": dreams})

    def with_favorite_creature(self, creature: Creature) -> DreamListModel:
        return self.model_copy(update={"favorite_creature": Creature(creature)})

    def encode(self) -> dict[str, Any]:
        return {
            "dreams": [dream.encode() for dream in self.dreams],
            "favoriteCreature": int(self.favorite_creature),
        }

    @classmethod
    def decode(cls, mapping: Any) -> DreamListModel:
        """Rebuild a list model, failing on the first dream that won't decode."""
        try:
            raw = _DreamListMapping.model_validate(_as_dict(mapping))
        except ValidationError as e:
            raise DecodeError(f"Invalid dream list: {_describe(e)}") from e

        dreams = []
        for i, item in enumerate(raw.dreams):
            try:
                dreams.append(Dream.decode(item))
            except DecodeError as e:
                raise DecodeError(f"dreams[{i}]: {e}") from e

        fields: dict[str, Any] = {"dreams": tuple(dreams)}
        if raw.favorite_creature is not None:
            fields["favorite_creature"] = _decode_code(
                Creature, raw.favorite_creature, "favoriteCreature"
            )
        return cls(**fields)
