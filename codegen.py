"""Offline table generator – rewrite the Colo member block in colos.py.

Reads two upstream snapshots:
  * components.json – Cloudflare status page components; colo names and codes
  * where.durableobjects.live.json – measured latency from each colo to an
    object placed with each location hint

and assigns every colo the hint with the lowest measured latency.

Standalone: python codegen.py [--components PATH] [--latency PATH] [--output PATH]
Module:     from codegen import run_codegen
"""

from __future__ import annotations

import json
import logging
import re
import sys
from collections import Counter
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, Strict, ValidationError

from location_hints import LocationHint

# ---------------------------------------------------------------------------
# Configuration constants (adjust as needed)
# ---------------------------------------------------------------------------

COMPONENTS_PATH: str = "data/components.json"
LATENCY_PATH: str = "data/where.durableobjects.live.json"
OUTPUT_PATH: str = "colos.py"

BEGIN_MARKER: str = "# BEGIN GENERATED COLOS"
END_MARKER: str = "# END GENERATED COLOS"
MEMBER_INDENT: str = "    "

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ComponentsFile(BaseModel):
    """Top-level shape of components.json; records are validated one by one."""
    model_config = ConfigDict(extra="ignore")

    components: list


class Component(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    group: bool = False


class LatencyFile(BaseModel):
    """Top-level shape of where.durableobjects.live.json."""
    model_config = ConfigDict(extra="ignore")

    colos: list


class LatencyRecord(BaseModel):
    """Measured latency (ms) from one colo to each hint region.

    Latencies are strict: JSON numbers only, no bools or numeric strings.
    """
    model_config = ConfigDict(extra="ignore")

    colo: str
    hints: dict[str, Annotated[NonNegativeFloat, Strict()]]


class ColoEntry(BaseModel):
    """One resolved row of the generated table."""
    code: str
    display_name: str
    location_hint: LocationHint | None


class CodegenSummary(BaseModel):
    colo_count: int
    classified_count: int
    unclassified: list[str]
    hint_counts: dict[str, int]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

logger = logging.getLogger(__name__)

_COMPONENT_NAME_PATTERN = re.compile(r"^(?P<name>.+?)\s+-\s+\((?P<code>[A-Z]{3})\)$")

_HINT_ORDER: dict[LocationHint, int] = {h: i for i, h in enumerate(LocationHint)}


def _parse_component_name(raw: str) -> tuple[str, str] | None:
    """'Los Angeles, CA, United States - (LAX)' → ('LAX', 'Los Angeles, CA, United States').

    Returns None for components that are not colos (no code suffix).
    """
    m = _COMPONENT_NAME_PATTERN.match(raw.strip())
    if m is None:
        return None
    return m.group("code"), m.group("name").strip()


def _read_json(path: str) -> object:
    if not Path(path).is_file():
        raise FileNotFoundError(f"Input snapshot not found: {path}")
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _best_hint(latencies: dict[LocationHint, float]) -> LocationHint | None:
    """Lowest latency wins; ties go to the hint declared first."""
    if not latencies:
        return None
    return min(latencies, key=lambda h: (latencies[h], _HINT_ORDER[h]))


def _find_markers(lines: list[str]) -> tuple[int, int]:
    """Indices of the BEGIN/END marker lines.  Raises if absent or misordered."""
    begins = [i for i, line in enumerate(lines) if line.strip() == BEGIN_MARKER]
    ends = [i for i, line in enumerate(lines) if line.strip() == END_MARKER]
    if len(begins) != 1 or len(ends) != 1:
        raise ValueError(
            f"Expected exactly one '{BEGIN_MARKER}' and one '{END_MARKER}', "
            f"found {len(begins)} and {len(ends)}"
        )
    if ends[0] < begins[0]:
        raise ValueError(f"'{END_MARKER}' appears before '{BEGIN_MARKER}'")
    return begins[0], ends[0]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _load_components(path: str) -> dict[str, str]:
    """Return {code: display_name} for every colo component in the listing."""
    try:
        listing = ComponentsFile.model_validate(_read_json(path))
    except ValidationError as e:
        raise ValueError(f"{path}: unexpected structure: {e}") from e

    names: dict[str, str] = {}
    for i, item in enumerate(listing.components):
        try:
            component = Component.model_validate(item)
        except ValidationError as e:
            logger.warning("Component %d: structural validation failed: %s. Dropped.", i, e)
            continue
        if component.group:
            continue

        parsed = _parse_component_name(component.name)
        if parsed is None:
            logger.debug("Component %d: '%s' has no colo code, skipped", i, component.name)
            continue

        code, display_name = parsed
        if code in names:
            logger.warning(
                "Component %d: duplicate colo code %s ('%s'), keeping '%s'",
                i, code, display_name, names[code],
            )
            continue
        names[code] = display_name

    logger.info("codegen: %d colos read from %s", len(names), path)
    return names


def _load_latencies(path: str) -> dict[str, dict[LocationHint, float]]:
    """Return {code: {hint: latency_ms}} from the latency snapshot."""
    try:
        snapshot = LatencyFile.model_validate(_read_json(path))
    except ValidationError as e:
        raise ValueError(f"{path}: unexpected structure: {e}") from e

    latencies: dict[str, dict[LocationHint, float]] = {}
    for i, item in enumerate(snapshot.colos):
        try:
            record = LatencyRecord.model_validate(item)
        except ValidationError as e:
            logger.warning("Latency record %d: structural validation failed: %s. Dropped.", i, e)
            continue

        code = record.colo.strip().upper()
        if code in latencies:
            logger.warning("Latency record %d: duplicate colo %s, keeping first", i, code)
            continue

        by_hint: dict[LocationHint, float] = {}
        for hint_code, latency in record.hints.items():
            hint = LocationHint.parse(hint_code)
            if hint is None:
                logger.warning("Latency record %d: unknown hint '%s' for %s, ignored", i, hint_code, code)
                continue
            by_hint[hint] = latency
        latencies[code] = by_hint

    logger.info("codegen: latency data for %d colos read from %s", len(latencies), path)
    return latencies


# ---------------------------------------------------------------------------
# Resolution and rendering
# ---------------------------------------------------------------------------


def resolve_entries(
    names: dict[str, str],
    latencies: dict[str, dict[LocationHint, float]],
) -> list[ColoEntry]:
    """Join names with latency data, one entry per named colo, sorted by code."""
    for code in sorted(set(latencies) - set(names)):
        logger.warning("codegen: %s has latency data but no component name, skipped", code)

    return [
        ColoEntry(
            code=code,
            display_name=names[code],
            location_hint=_best_hint(latencies.get(code, {})),
        )
        for code in sorted(names)
    ]


def render_member_line(entry: ColoEntry) -> str:
    hint = "None" if entry.location_hint is None else f"LocationHint.{entry.location_hint.name}"
    return (
        f"{MEMBER_INDENT}{entry.code} = ("
        f"{json.dumps(entry.code)}, {json.dumps(entry.display_name, ensure_ascii=False)}, {hint})"
    )


def extract_generated_block(source: str) -> list[str]:
    """Lines strictly between the markers of a module's text, without line endings."""
    lines = source.splitlines(keepends=True)
    begin, end = _find_markers(lines)
    return [line.rstrip("\r\n") for line in lines[begin + 1:end]]


def replace_generated_block(source: str, block: list[str]) -> str:
    """Swap the lines between the markers for ``block``; the rest is untouched.

    New lines take the line ending of the BEGIN marker line.
    """
    lines = source.splitlines(keepends=True)
    begin, end = _find_markers(lines)
    marker = lines[begin]
    newline = marker[len(marker.rstrip("\r\n")):] or "\n"
    return "".join(lines[:begin + 1] + [line + newline for line in block] + lines[end:])


def _summarize(entries: list[ColoEntry]) -> CodegenSummary:
    counts = Counter(e.location_hint.code for e in entries if e.location_hint is not None)
    unclassified = [e.code for e in entries if e.location_hint is None]
    return CodegenSummary(
        colo_count=len(entries),
        classified_count=len(entries) - len(unclassified),
        unclassified=unclassified,
        hint_counts={h.code: counts.get(h.code, 0) for h in LocationHint},
    )


# ---------------------------------------------------------------------------
# Public entry-point
# ---------------------------------------------------------------------------


def run_codegen(
    components_path: str | None = None,
    latency_path: str | None = None,
    output_path: str | None = None,
) -> CodegenSummary:
    """Regenerate the Colo member block of ``output_path`` in place.

    Raises FileNotFoundError for missing inputs and ValueError for malformed
    snapshots, an empty colo listing, or a target without markers.
    """
    components_path = components_path or COMPONENTS_PATH
    latency_path = latency_path or LATENCY_PATH
    output_path = output_path or OUTPUT_PATH

    names = _load_components(components_path)
    if not names:
        raise ValueError(f"No colos found in {components_path}; refusing to write an empty table")
    latencies = _load_latencies(latency_path)

    entries = resolve_entries(names, latencies)

    if not Path(output_path).is_file():
        raise FileNotFoundError(f"Target module not found: {output_path}")
    # newline="" keeps the target's own line endings through the round trip
    with open(output_path, encoding="utf-8", newline="") as fh:
        source = fh.read()
    updated = replace_generated_block(source, [render_member_line(e) for e in entries])
    with open(output_path, "w", encoding="utf-8", newline="") as fh:
        fh.write(updated)

    summary = _summarize(entries)
    logger.info(
        "codegen: wrote %s (%d colos, %d classified, %d unclassified)",
        output_path,
        summary.colo_count,
        summary.classified_count,
        len(summary.unclassified),
    )
    return summary


# ---------------------------------------------------------------------------
# Standalone entry-point
# ---------------------------------------------------------------------------


def _arg_value(flag: str) -> str | None:
    if flag in sys.argv:
        idx = sys.argv.index(flag)
        if idx + 1 < len(sys.argv):
            return sys.argv[idx + 1]
    return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    summary = run_codegen(
        components_path=_arg_value("--components"),
        latency_path=_arg_value("--latency"),
        output_path=_arg_value("--output"),
    )
    for code, count in summary.hint_counts.items():
        logger.info("codegen: %-4s %d colos", code, count)
    if summary.unclassified:
        logger.info("codegen: unclassified: %s", ", ".join(summary.unclassified))
