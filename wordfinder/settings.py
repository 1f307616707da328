import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    MAX_STREAM_WORDS: int = 100_000

    DEFAULT_MATRIX: str = "abcd,efgh,ijkl,mnop"
    DEFAULT_WORDS: str = "abcd,efgh,ijkl,mnop,bcde,fghi,jklm,nopq,cdef,ghij,klmn,opqr"

    def __post_init__(self):
        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed at runtime via /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "LOG_LEVEL": str,
    "DEBUG": bool,
    "MAX_STREAM_WORDS": int,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply runtime edits. Returns a mapping of field name to error message.

    Fields that validate are applied even when others fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value: {e}"
            continue
        if name == "LOG_LEVEL":
            coerced = coerced.upper()
            if not isinstance(logging.getLevelName(coerced), int):
                errors[name] = f"unknown log level: {value}"
                continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
