from __future__ import annotations

import csv
import json
import re
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from .errors import InputValidationError, ValidationErrorKind

Workload = Tuple[List[int], List[int]]

_SEQUENCE_RE = re.compile(r"^(?:\d+,\d+;)*\d+,\d+$")

# Built-in sample sequences of (arrival, burst) pairs.
PRESET_WORKLOADS: Dict[int, List[Tuple[int, int]]] = {
    1: [(0, 1), (1, 11), (3, 3), (4, 1), (8, 6), (14, 2), (25, 1)],
    2: [(0, 7), (1, 5), (2, 3), (3, 1), (4, 2), (5, 1)],
    3: [(0, 2), (1, 4), (12, 4), (15, 5), (21, 10)],
}


def split_pairs(pairs: Sequence[Sequence[int]]) -> Workload:
    """Turn [(arrival, burst), ...] into parallel arrival and burst lists."""
    arrival_times = [pair[0] for pair in pairs]
    burst_times = [pair[1] for pair in pairs]
    return arrival_times, burst_times


def preset_workload(number: int) -> Workload:
    try:
        return split_pairs(PRESET_WORKLOADS[number])
    except KeyError:
        choices = ", ".join(str(k) for k in PRESET_WORKLOADS)
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Unknown preset {number} (choose from {choices})",
        ) from None


def parse_process_string(text: str) -> Workload:
    """
    Parse the compact ``"arrival,burst;arrival,burst"`` format, e.g.
    ``"0,1;1,11;3,3"``. Digits only, no spaces, no trailing semicolon.
    """
    if text == "":
        raise InputValidationError(ValidationErrorKind.EMPTY_INPUT, "Input cannot be empty")
    if re.search(r"\s", text):
        raise InputValidationError(ValidationErrorKind.WHITESPACE, "Input must not contain whitespace")
    if re.search(r"[a-zA-Z]", text):
        raise InputValidationError(ValidationErrorKind.LETTERS, "Input must not contain letters")
    if not _SEQUENCE_RE.match(text):
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Input is not in the form 'arrival,burst;arrival,burst': {text!r}",
        )

    return split_pairs([tuple(int(v) for v in pair.split(",")) for pair in text.split(";")])


def format_process_string(arrival_times: Sequence[int], burst_times: Sequence[int]) -> str:
    return ";".join(f"{a},{b}" for a, b in zip(arrival_times, burst_times))


def load_workload(path: str | Path) -> Workload:
    """
    Load a workload from a JSON or CSV file into parallel arrival and burst
    time lists.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise InputValidationError(
        ValidationErrorKind.MALFORMED_TEXT,
        f"Unsupported workload format: {suffix} (use .json or .csv)",
    )


def _load_json(path: Path) -> Workload:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Cannot read workload file {path}: {exc.strerror or exc}",
        ) from exc
    except json.JSONDecodeError as exc:
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Workload file {path} is not valid JSON: {exc.msg} (line {exc.lineno})",
        ) from exc

    if not isinstance(raw, list):
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            "JSON workload must be a list of process objects or [arrival, burst] pairs",
        )

    return split_pairs([_pair_from_entry(entry, _json_int) for entry in raw])


def _load_csv(path: Path) -> Workload:
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            pairs = [_pair_from_entry(row, int) for row in reader]
    except OSError as exc:
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Cannot read workload file {path}: {exc.strerror or exc}",
        ) from exc
    return split_pairs(pairs)


def _json_int(value) -> int:
    # JSON floats and booleans are rejected, not rounded.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputValidationError(
            ValidationErrorKind.NOT_AN_INTEGER,
            f"Arrival and burst times must be integers, got {value!r}",
        )
    return value


def _pair_from_entry(entry, convert: Callable[[object], int]) -> Tuple[int, int]:
    try:
        if isinstance(entry, dict):
            return convert(entry["arrival_time"]), convert(entry["burst_time"])
        arrival, burst = entry
        return convert(arrival), convert(burst)
    except InputValidationError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise InputValidationError(
            ValidationErrorKind.MALFORMED_TEXT,
            f"Invalid process entry: {entry!r}",
        ) from exc
