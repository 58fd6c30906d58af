"""Module: rename_command.py

Author: Michael Economou
Date: 2026-10-02

Rename commands: one mode plus its configuration record.

The caller sends commands as plain dictionaries,
    {"mode": "Serial", "config": {"prefix": "Img_", "number": 1, "pad": 3, ...}}
and RenameCommand.from_payload turns them into typed, immutable objects.
Malformed payloads raise CommandError before any file is touched.
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, fields, replace
from enum import Enum
from typing import Any

from dropname.config import DEFAULT_KEEP_EXTENSION


class CommandError(ValueError):
    """Raised when a command payload cannot be turned into a RenameCommand."""


class RenameMode(str, Enum):
    """The rename modes. Exactly one is active per command."""

    FIXED = "Fixed"
    SERIAL = "Serial"
    REPLACE = "Replace"
    ADD = "Add"
    TRIM = "Trim"
    EXTENSION = "Extension"
    CASE = "Case"
    CONVERT = "Convert"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> RenameMode:
        """Match a mode name case-insensitively ("serial", "Serial")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if mode.value.lower() == value.strip().lower():
                    return mode
        raise CommandError(f"Unknown rename mode: {value!r}")


class Position(str, Enum):
    """Side of the stem that Add and Trim operate on."""

    START = "start"
    END = "end"

    def __str__(self) -> str:
        return self.value


class CaseMode(str, Enum):
    UPPER = "upper"
    LOWER = "lower"

    def __str__(self) -> str:
        return self.value


class WidthMode(str, Enum):
    """Full-width (zenkaku) or half-width (hankaku) character conversion."""

    ZENKAKU = "zenkaku"
    HANKAKU = "hankaku"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FixedConfig:
    name: str
    keep_ext: bool = DEFAULT_KEEP_EXTENSION


@dataclass(frozen=True)
class SerialConfig:
    """Serial numbering: prefix + [original stem] + padded number + suffix."""

    prefix: str = ""
    suffix: str = ""
    number: int = 1
    pad: int = 0
    keep_ext: bool = DEFAULT_KEEP_EXTENSION
    keep_original: bool = False


@dataclass(frozen=True)
class ReplaceConfig:
    """Replace every occurrence of from_text in the stem.

    The payload keys are "from" and "to".
    """

    from_text: str
    to_text: str = ""
    use_regex: bool = False


@dataclass(frozen=True)
class AddConfig:
    text: str
    position: Position = Position.END


@dataclass(frozen=True)
class TrimConfig:
    count: int
    position: Position = Position.END


@dataclass(frozen=True)
class ExtensionConfig:
    new_ext: str


@dataclass(frozen=True)
class CaseConfig:
    mode: CaseMode


@dataclass(frozen=True)
class ConvertConfig:
    mode: WidthMode


ModeConfig = (
    FixedConfig
    | SerialConfig
    | ReplaceConfig
    | AddConfig
    | TrimConfig
    | ExtensionConfig
    | CaseConfig
    | ConvertConfig
)

CONFIG_TYPES: dict[RenameMode, type] = {
    RenameMode.FIXED: FixedConfig,
    RenameMode.SERIAL: SerialConfig,
    RenameMode.REPLACE: ReplaceConfig,
    RenameMode.ADD: AddConfig,
    RenameMode.TRIM: TrimConfig,
    RenameMode.EXTENSION: ExtensionConfig,
    RenameMode.CASE: CaseConfig,
    RenameMode.CONVERT: ConvertConfig,
}

# Payload key -> dataclass field, where they differ
_PAYLOAD_ALIASES = {"from": "from_text", "to": "to_text"}
_FIELD_ALIASES = {field: key for key, field in _PAYLOAD_ALIASES.items()}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "position": Position,
}
_MODE_FIELD_ENUMS: dict[RenameMode, type[Enum]] = {
    RenameMode.CASE: CaseMode,
    RenameMode.CONVERT: WidthMode,
}


def _coerce_enum(enum_type: type[Enum], value: Any, field_name: str) -> Enum:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(member.value for member in enum_type)
    raise CommandError(f"Invalid {field_name} {value!r} (expected one of: {choices})")


def _coerce_value(mode: RenameMode, field_name: str, annotation: str, value: Any) -> Any:
    enum_type = _ENUM_FIELDS.get(field_name)
    if field_name == "mode":
        enum_type = _MODE_FIELD_ENUMS[mode]
    if enum_type is not None:
        return _coerce_enum(enum_type, value, field_name)

    if annotation == "bool":
        if not isinstance(value, bool):
            raise CommandError(f"{mode.value}.{field_name} must be a boolean, got {value!r}")
        return value
    if annotation == "int":
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise CommandError(f"{mode.value}.{field_name} must be an integer, got {value!r}")
        return value
    if annotation == "str":
        if not isinstance(value, str):
            raise CommandError(f"{mode.value}.{field_name} must be a string, got {value!r}")
        return value
    return value


@dataclass(frozen=True)
class RenameCommand:
    """A rename mode together with its configuration record."""

    mode: RenameMode
    config: ModeConfig

    def __post_init__(self) -> None:
        expected = CONFIG_TYPES[self.mode]
        if not isinstance(self.config, expected):
            raise CommandError(
                f"{self.mode.value} command needs {expected.__name__}, "
                f"got {type(self.config).__name__}"
            )
        if isinstance(self.config, TrimConfig) and self.config.count < 0:
            raise CommandError(f"Trim.count must be >= 0, got {self.config.count}")
        if isinstance(self.config, SerialConfig) and self.config.pad < 0:
            raise CommandError(f"Serial.pad must be >= 0, got {self.config.pad}")

    @classmethod
    def of(cls, config: ModeConfig) -> RenameCommand:
        """Build a command from a config record, inferring the mode."""
        for mode, config_type in CONFIG_TYPES.items():
            if isinstance(config, config_type):
                return cls(mode, config)
        raise CommandError(f"Not a rename config: {config!r}")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RenameCommand:
        """Parse the {"mode": ..., "config": {...}} dictionary sent by a caller.

        Raises:
            CommandError: unknown mode, missing or mistyped field, unknown key.

        """
        if not isinstance(payload, dict):
            raise CommandError(f"Command payload must be an object, got {type(payload).__name__}")
        if "mode" not in payload:
            raise CommandError("Command payload has no 'mode'")

        mode = RenameMode.parse(payload["mode"])
        raw_config = payload.get("config") or {}
        if not isinstance(raw_config, dict):
            raise CommandError(f"{mode.value} config must be an object")

        config_type = CONFIG_TYPES[mode]
        config_fields = {field.name: field for field in fields(config_type)}
        kwargs: dict[str, Any] = {}

        for key, value in raw_config.items():
            field_name = _PAYLOAD_ALIASES.get(key, key)
            field = config_fields.get(field_name)
            if field is None:
                raise CommandError(f"Unknown {mode.value} option: {key!r}")
            kwargs[field_name] = _coerce_value(mode, field_name, str(field.type), value)

        try:
            config = config_type(**kwargs)
        except TypeError as e:
            missing = [
                _FIELD_ALIASES.get(name, name)
                for name, field in config_fields.items()
                if name not in kwargs
                and field.default is MISSING
                and field.default_factory is MISSING
            ]
            raise CommandError(f"{mode.value} config is missing: {', '.join(missing)}") from e

        return cls(mode, config)

    def to_payload(self) -> dict[str, Any]:
        """Inverse of from_payload."""
        config: dict[str, Any] = {}
        for field in fields(self.config):
            value = getattr(self.config, field.name)
            if isinstance(value, Enum):
                value = value.value
            config[_FIELD_ALIASES.get(field.name, field.name)] = value
        return {"mode": self.mode.value, "config": config}

    def with_number(self, number: int) -> RenameCommand:
        """Copy of a Serial command using number; other modes are returned unchanged."""
        if isinstance(self.config, SerialConfig):
            return RenameCommand(self.mode, replace(self.config, number=number))
        return self
