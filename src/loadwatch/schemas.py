"""
Boundary parsing of plain records into engine types.

The storage/sync layer hands over JSON-like dictionaries keyed by ISO date
strings. This module validates the date keys, accepts both the English
field names and the French ones used by exported snapshots
(``seances``/``bienEtre``/``seuils``, ``duree``/``rpe``, ``sommeil`` ...),
and builds ordered AthleteRecord mappings. Numeric values stay lenient:
anything non-numeric becomes 0 rather than a validation error.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .config import Thresholds
from .exceptions import ErrorCode, RecordValidationError, SnapshotError
from .models import AthleteRecord, DailyWellness, Session, coerce_number
from .weeks import to_date

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

INVALID_DATE_KEY = "invalid_date_key"


def _validate_date_keys(value: Dict[str, Any]) -> Dict[str, Any]:
    for key in value:
        if not isinstance(key, str) or not _ISO_DATE.match(key):
            raise PydanticCustomError(
                INVALID_DATE_KEY,
                "Date key '{key}' must be in YYYY-MM-DD format",
                {"key": key},
            )
        try:
            to_date(key)
        except ValueError:
            raise PydanticCustomError(
                INVALID_DATE_KEY,
                "Date key '{key}' is not a valid calendar date",
                {"key": key},
            ) from None
    return value


class SessionIn(BaseModel):
    """One session as stored by the persistence layer."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    duration: float = Field(default=0.0, validation_alias=AliasChoices("duration", "duree"))
    intensity: float = Field(default=0.0, validation_alias=AliasChoices("intensity", "rpe"))

    @field_validator("duration", "intensity", mode="before")
    @classmethod
    def lenient_number(cls, v: Any) -> float:
        return coerce_number(v)

    def to_session(self) -> Session:
        return Session(duration=self.duration, intensity=self.intensity)


class WellnessIn(BaseModel):
    """One day's wellness entry; absent fields stay None."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sleep_quality: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("sleep_quality", "sleepQuality", "sommeil")
    )
    energy: Optional[float] = Field(default=None, validation_alias=AliasChoices("energy", "energie"))
    pain: Optional[float] = Field(default=None, validation_alias=AliasChoices("pain", "douleurs"))
    stress: Optional[float] = Field(default=None, validation_alias=AliasChoices("stress"))
    mood: Optional[float] = Field(default=None, validation_alias=AliasChoices("mood", "humeur"))
    sleep_duration: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sleep_duration", "sleepDuration", "sommeilDuree"),
    )
    illness: Optional[float] = Field(default=None, validation_alias=AliasChoices("illness", "maladie"))

    @field_validator("*", mode="before")
    @classmethod
    def lenient_optional_number(cls, v: Any) -> Optional[float]:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return coerce_number(v)

    def to_wellness(self) -> DailyWellness:
        return DailyWellness(**self.model_dump())


class AthleteRecordIn(BaseModel):
    """An athlete's date-keyed sessions and wellness entries."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sessions: Dict[str, List[SessionIn]] = Field(
        default_factory=dict, validation_alias=AliasChoices("sessions", "seances")
    )
    wellness: Dict[str, WellnessIn] = Field(
        default_factory=dict, validation_alias=AliasChoices("wellness", "bienEtre")
    )

    @field_validator("sessions", "wellness", mode="before")
    @classmethod
    def validate_keys(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return _validate_date_keys(v)
        return v

    def to_record(self) -> AthleteRecord:
        return AthleteRecord(
            sessions={
                to_date(key): [s.to_session() for s in items]
                for key, items in sorted(self.sessions.items())
            },
            wellness={
                to_date(key): entry.to_wellness()
                for key, entry in sorted(self.wellness.items())
            },
        )


class UserIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "nom"))
    role: str = "athlete"


class SnapshotIn(BaseModel):
    """Full export: users, per-athlete data and the shared thresholds."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    users: Dict[str, UserIn] = Field(default_factory=dict)
    data: Dict[str, AthleteRecordIn] = Field(
        default_factory=dict, validation_alias=AliasChoices("data", "athletes")
    )
    thresholds: Thresholds = Field(
        default_factory=Thresholds, validation_alias=AliasChoices("thresholds", "seuils")
    )


@dataclass
class Snapshot:
    """Parsed snapshot, ready for the engine."""
    records: Dict[str, AthleteRecord] = field(default_factory=dict)
    names: Dict[str, str] = field(default_factory=dict)
    thresholds: Thresholds = field(default_factory=Thresholds)

    @property
    def athlete_ids(self) -> List[str]:
        return list(self.records)

    def name_of(self, athlete_id: str) -> str:
        return self.names.get(athlete_id) or athlete_id


def _raise_validation(exc: ValidationError, what: str) -> NoReturn:
    errors = exc.errors(include_url=False, include_context=False)
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    code = (
        ErrorCode.INVALID_DATE_KEY
        if first.get("type") == INVALID_DATE_KEY
        else ErrorCode.RECORD_VALIDATION_ERROR
    )
    raise RecordValidationError(
        f"Invalid {what}: {first.get('msg', str(exc))}",
        field=location or None,
        details={"errors": [{"loc": list(e["loc"]), "msg": e["msg"]} for e in errors]},
        code=code,
    ) from exc


def parse_record(payload: Dict[str, Any]) -> AthleteRecord:
    """
    Parse one athlete's plain record into an AthleteRecord.

    Raises:
        RecordValidationError: If a date key is not ISO ``YYYY-MM-DD`` or the
            payload does not have the expected shape
    """
    try:
        parsed = AthleteRecordIn.model_validate(payload)
    except ValidationError as exc:
        _raise_validation(exc, "athlete record")
    return parsed.to_record()


def parse_snapshot(payload: Dict[str, Any]) -> Snapshot:
    """
    Parse a full snapshot ``{users, data, thresholds}``.

    Athletes present in ``data`` are always included. Users with the athlete
    role but no data get an empty record; staff users are ignored.

    Raises:
        RecordValidationError: If any record or the thresholds are malformed
    """
    try:
        parsed = SnapshotIn.model_validate(payload)
    except ValidationError as exc:
        _raise_validation(exc, "snapshot")

    records = {athlete_id: rec.to_record() for athlete_id, rec in parsed.data.items()}
    names: Dict[str, str] = {}
    for user_id, user in parsed.users.items():
        if user.role != "athlete":
            continue
        records.setdefault(user_id, AthleteRecord())
        if user.name:
            names[user_id] = user.name

    logger.debug("Parsed snapshot with %d athletes", len(records))
    return Snapshot(records=records, names=names, thresholds=parsed.thresholds)


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """
    Read and parse a JSON snapshot file.

    Raises:
        SnapshotError: If the file is missing or is not valid JSON
        RecordValidationError: If the content is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SnapshotError(
            f"Snapshot file not found: {path}",
            path=str(path),
            code=ErrorCode.SNAPSHOT_NOT_FOUND,
        )
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}", path=str(path)) from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot {path} is not valid JSON: {exc.msg}", path=str(path)) from exc

    if not isinstance(payload, dict):
        raise SnapshotError(f"Snapshot {path} must contain a JSON object", path=str(path))

    logger.info("Loaded snapshot from %s", path)
    return parse_snapshot(payload)
