from __future__ import annotations

import csv
import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .convert import normalize_color
from .models import ReferenceEntry
from .parse import InvalidColorFormat

logger = logging.getLogger(__name__)

DEFAULT_PALETTE_PATH = Path(__file__).resolve().parent / "data" / "color_names.csv"


class PaletteValidationError(ValueError):
    pass


@dataclass(frozen=True)
class ReferenceDataset:
    entries: tuple[ReferenceEntry, ...]
    source: str
    lab: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lab = np.asarray(
            [
                (entry.color.oklab.L, entry.color.oklab.a, entry.color.oklab.b)
                for entry in self.entries
            ],
            dtype=np.float64,
        ).reshape(-1, 3)
        lab.setflags(write=False)
        object.__setattr__(self, "lab", lab)

    def __len__(self) -> int:
        return len(self.entries)


def load_reference_palette(path_like: str | Path | None = None) -> ReferenceDataset:
    path = Path(path_like) if path_like is not None else DEFAULT_PALETTE_PATH
    if not path.exists():
        raise PaletteValidationError(f"palette file does not exist: {path}")

    if path.suffix.lower() == ".csv":
        entries = _load_csv(path)
    elif path.suffix.lower() == ".json":
        entries = _load_json(path)
    else:
        raise PaletteValidationError(
            f"unsupported palette format '{path.suffix}'. Use .csv or .json"
        )

    if not entries:
        raise PaletteValidationError(f"palette has no usable entries: {path}")

    logger.debug("loaded %d reference colors from %s", len(entries), path)
    return ReferenceDataset(entries=tuple(entries), source=str(path))


_default_palette: ReferenceDataset | None = None
_default_palette_lock = threading.Lock()


def default_reference_palette() -> ReferenceDataset:
    """Return the packaged dataset, building it exactly once per process."""
    global _default_palette
    palette = _default_palette
    if palette is not None:
        return palette

    with _default_palette_lock:
        if _default_palette is None:
            _default_palette = load_reference_palette(DEFAULT_PALETTE_PATH)
        return _default_palette


def _load_csv(path: Path) -> list[ReferenceEntry]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise PaletteValidationError(f"palette csv has no header: {path}")

        entries: list[ReferenceEntry] = []
        for idx, row in enumerate(reader, start=2):
            entries.append(_parse_entry(row, f"{path}:{idx}"))
        return entries


def _load_json(path: Path) -> list[ReferenceEntry]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PaletteValidationError(f"palette json at {path} is malformed") from exc

    if isinstance(payload, dict):
        if "colors" not in payload or not isinstance(payload["colors"], list):
            raise PaletteValidationError(
                f"json palette at {path} must be a list or include a 'colors' list"
            )
        records = payload["colors"]
    elif isinstance(payload, list):
        records = payload
    else:
        raise PaletteValidationError(
            f"json palette at {path} must be a list or object with 'colors'"
        )

    entries: list[ReferenceEntry] = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            raise PaletteValidationError(
                f"invalid palette entry at {path}:{idx} (expected object)"
            )
        entries.append(_parse_entry(record, f"{path}:{idx}"))
    return entries


def _parse_entry(raw_entry: dict[str, object], location: str) -> ReferenceEntry:
    normalized: dict[str, object] = {
        str(key).strip().lower(): value
        for key, value in raw_entry.items()
        if key is not None
    }

    name = _as_clean_str(normalized.get("name"))
    if not name:
        raise PaletteValidationError(f"{location}: missing required field 'name'")

    hex_value = _as_clean_str(normalized.get("hex"))
    if not hex_value:
        raise PaletteValidationError(f"{location}: missing required field 'hex'")

    try:
        color = normalize_color(hex_value)
    except InvalidColorFormat as exc:
        raise PaletteValidationError(
            f"{location}: invalid hex color '{hex_value}'"
        ) from exc

    return ReferenceEntry(hex=color.hex, name=name, color=color)


def _as_clean_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None
