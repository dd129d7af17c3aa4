"""
Parsing and rendering of metadata sidecar documents.

A sidecar is a JSON object describing one media item. `parse` turns its bytes
into a `MetadataRecord`, `serialize` renders the record back as indented JSON
and `validate` checks the fields the renamer depends on.

Behavior notes:
- Fields are rendered in schema order, followed by any keys the schema does
  not know, in the order they appeared in the input. Unknown keys are kept
  both at the top level and inside `files` / `provider_id`.
- Every schema field is rendered. Missing and null typed fields take their
  zero value ("" for strings, 0 for numbers).
- Flexible fields (`title`, `files.mp4`, `files.mxf`) may be a string or a
  richer structure depending on the source; they are kept verbatim.
- A typed field holding the wrong JSON type is a parse error rather than
  being coerced.
"""
import json
import math
from dataclasses import dataclass, field, fields
from typing import Any

from tnt.rename.errors import ItemParseError, ItemValidationError
from tnt.utils import JSON_ENCODING, JSON_INDENT

STR = "str"
INT = "int"
ANY = "any"
STR_LIST = "str_list"
NESTED = "nested"

MAX_DEPTH = 64


def _field(kind: str, default=None, default_factory=None):
    if default_factory is not None:
        return field(default_factory=default_factory, metadata={"kind": kind})
    return field(default=default, metadata={"kind": kind})


@dataclass
class Files:
    """File references of a media item."""

    mp4: Any = _field(ANY)
    md5: str = _field(STR, "")
    mxf: Any = _field(ANY)
    extra: dict = field(default_factory=dict)


@dataclass
class ProviderId:
    """Identifiers assigned by the content provider."""

    project_id: int = _field(INT, 0)
    season_id: int = _field(INT, 0)
    program_id: str = _field(STR, "")
    content_id: str = _field(STR, "")
    extra: dict = field(default_factory=dict)


@dataclass
class MetadataRecord:
    """Descriptive metadata of one media item, in schema order."""

    project: str = _field(STR, "")
    project_en: str = _field(STR, "")
    season: int = _field(INT, 0)
    season_title: str = _field(STR, "")
    episode: int = _field(INT, 0)
    episode_global: int = _field(INT, 0)
    title: Any = _field(ANY)
    description: str = _field(STR, "")
    pg: str = _field(STR, "")
    duration: str = _field(STR, "")
    files: Files = _field(NESTED, default_factory=Files)
    provider_id: ProviderId = _field(NESTED, default_factory=ProviderId)
    efir_date: str = _field(STR, "")
    start_date: str = _field(STR, "")
    end_date: str = _field(STR, "")
    countries: list[str] | None = _field(STR_LIST)
    generation_date: str = _field(STR, "")
    extra: dict = field(default_factory=dict)


def _schema_fields(cls):
    return [f for f in fields(cls) if f.name != "extra"]


def _check(kind: str, value: Any, where: str) -> Any:
    """Return `value` if it has the JSON type `kind` requires, else raise."""
    if kind == ANY:
        return value
    if kind == STR and isinstance(value, str):
        return value
    if kind == INT and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind == STR_LIST and isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ItemParseError(f"{where}: expected {kind}, got {type(value).__name__}")


def _load(cls, data: Any, where: str):
    if not isinstance(data, dict):
        raise ItemParseError(f"{where}: expected object, got {type(data).__name__}")

    values = {}
    known = set()
    for f in _schema_fields(cls):
        known.add(f.name)
        value = data.get(f.name)
        if value is None:
            continue
        path = f"{where}.{f.name}"
        if f.metadata["kind"] == NESTED:
            values[f.name] = _load(f.type, value, path)
        else:
            values[f.name] = _check(f.metadata["kind"], value, path)

    values["extra"] = {k: v for k, v in data.items() if k not in known}
    return cls(**values)


def _dump(obj) -> dict:
    out = {}
    for f in _schema_fields(type(obj)):
        value = getattr(obj, f.name)
        out[f.name] = _dump(value) if f.metadata["kind"] == NESTED else value
    out.update(obj.extra)
    return out


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _check_value(value: Any, depth: int = 0) -> None:
    """Reject values that cannot be rendered back: lone surrogates, deep nesting."""
    if depth > MAX_DEPTH:
        raise ValueError(f"document is nested deeper than {MAX_DEPTH} levels")
    if isinstance(value, str):
        value.encode(JSON_ENCODING)
    elif isinstance(value, dict):
        for key, item in value.items():
            key.encode(JSON_ENCODING)
            _check_value(item, depth + 1)
    elif isinstance(value, list):
        for item in value:
            _check_value(item, depth + 1)


def parse(data: bytes) -> MetadataRecord:
    """
    Parse a metadata document.

    Raises:
        ItemParseError: The bytes are not valid UTF-8 JSON, the document is
            not an object, nests too deeply, holds a non-finite number or a
            lone surrogate, or a typed field has the wrong type.
    """
    try:
        document = json.loads(data, parse_constant=_reject_constant, parse_float=_finite_float)
        _check_value(document)
    except RecursionError as e:
        raise ItemParseError("malformed JSON: document is nested too deeply") from e
    except ValueError as e:
        raise ItemParseError(f"malformed JSON: {e}") from e
    return _load(MetadataRecord, document, "$")


def serialize(record: MetadataRecord) -> bytes:
    """Render `record` as indented JSON, schema fields first."""
    text = json.dumps(_dump(record), indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
    return text.encode(JSON_ENCODING)


def validate(record: MetadataRecord) -> None:
    """
    Check the fields the canonical filename is built from.

    Raises:
        ItemValidationError: `project` is empty, or `season` / `episode` is
            below 1. Fields are checked in that order.
    """
    if not record.project:
        raise ItemValidationError("project", "JSON: project is missing or empty")
    if record.season < 1:
        raise ItemValidationError("season", f"JSON: season is missing or invalid ({record.season})")
    if record.episode < 1:
        raise ItemValidationError("episode", f"JSON: episode is missing or invalid ({record.episode})")
