"""Tests for codegen.py – name parsing, hint resolution, block rewriting."""

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from codegen import (  # noqa: E402
    ColoEntry,
    _best_hint,
    _load_components,
    _load_latencies,
    _parse_component_name,
    extract_generated_block,
    render_member_line,
    replace_generated_block,
    resolve_entries,
    run_codegen,
)
from location_hints import LocationHint  # noqa: E402


# ---------------------------------------------------------------------------
# Component name parsing
# ---------------------------------------------------------------------------


class TestParseComponentName:
    def test_city_state_country(self):
        assert _parse_component_name("Los Angeles, CA, United States - (LAX)") == (
            "LAX", "Los Angeles, CA, United States",
        )

    def test_hyphenated_city(self):
        assert _parse_component_name("Port-au-Prince, Haiti - (PAP)") == ("PAP", "Port-au-Prince, Haiti")

    def test_surrounding_whitespace(self):
        assert _parse_component_name("  Singapore, Singapore - (SIN) ") == ("SIN", "Singapore, Singapore")

    def test_no_code_suffix(self):
        assert _parse_component_name("Cloudflare Sites and Services") is None

    def test_lowercase_code_rejected(self):
        assert _parse_component_name("Somewhere - (lax)") is None


# ---------------------------------------------------------------------------
# Hint resolution
# ---------------------------------------------------------------------------


class TestBestHint:
    def test_lowest_latency_wins(self):
        assert _best_hint({LocationHint.WEUR: 9.0, LocationHint.EEUR: 4.5}) is LocationHint.EEUR

    def test_tie_goes_to_first_declared(self):
        latencies = {LocationHint.AFR: 10.0, LocationHint.WEUR: 10.0, LocationHint.EEUR: 10.0}
        assert _best_hint(latencies) is LocationHint.WEUR

    def test_empty(self):
        assert _best_hint({}) is None


class TestResolveEntries:
    def test_sorted_and_joined(self, caplog):
        names = {"SIN": "Singapore, Singapore", "LAX": "Los Angeles, CA, United States"}
        latencies = {"LAX": {LocationHint.WNAM: 11.0}, "ZZZ": {LocationHint.WEUR: 1.0}}
        with caplog.at_level(logging.WARNING):
            entries = resolve_entries(names, latencies)
        assert [e.code for e in entries] == ["LAX", "SIN"]
        assert entries[0].location_hint is LocationHint.WNAM
        assert entries[1].location_hint is None
        assert "ZZZ" in caplog.text


# ---------------------------------------------------------------------------
# Loading snapshots
# ---------------------------------------------------------------------------


class TestLoadComponents:
    def test_groups_and_non_colos_skipped(self, snapshot_paths):
        names = _load_components(snapshot_paths["components"])
        assert names == {
            "LAX": "Los Angeles, CA, United States",
            "IAD": "Ashburn, VA, United States",
            "SIN": "Singapore, Singapore",
            "PAP": "Port-au-Prince, Haiti",
        }

    def test_duplicate_keeps_first(self, tmp_path, caplog):
        path = tmp_path / "components.json"
        path.write_text(json.dumps({"components": [
            {"name": "Los Angeles, CA, United States - (LAX)"},
            {"name": "Elsewhere - (LAX)"},
        ]}))
        with caplog.at_level(logging.WARNING):
            names = _load_components(str(path))
        assert names == {"LAX": "Los Angeles, CA, United States"}
        assert "duplicate" in caplog.text

    def test_malformed_record_dropped(self, tmp_path, caplog):
        path = tmp_path / "components.json"
        path.write_text(json.dumps({"components": [
            {"id": "no-name"},
            "not an object",
            {"name": "Lima, Peru - (LIM)"},
        ]}))
        with caplog.at_level(logging.WARNING):
            names = _load_components(str(path))
        assert names == {"LIM": "Lima, Peru"}
        assert "Dropped" in caplog.text

    def test_bad_top_level_raises(self, tmp_path):
        path = tmp_path / "components.json"
        path.write_text(json.dumps({"page": {}}))
        with pytest.raises(ValueError):
            _load_components(str(path))

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _load_components(str(tmp_path / "absent.json"))


class TestLoadLatencies:
    def test_unknown_hint_ignored(self, snapshot_paths, caplog):
        with caplog.at_level(logging.WARNING):
            latencies = _load_latencies(snapshot_paths["latency"])
        assert latencies["SIN"] == {LocationHint.APAC: 3.0, LocationHint.OC: 92.7}
        assert "antarctica" in caplog.text

    def test_code_normalized(self, tmp_path):
        path = tmp_path / "latency.json"
        path.write_text(json.dumps({"colos": [{"colo": " lax ", "hints": {"wnam": 1.0}}]}))
        assert _load_latencies(str(path)) == {"LAX": {LocationHint.WNAM: 1.0}}

    def test_negative_latency_dropped(self, tmp_path, caplog):
        path = tmp_path / "latency.json"
        path.write_text(json.dumps({"colos": [
            {"colo": "LAX", "hints": {"wnam": -1.0}},
            {"colo": "SEA", "hints": {"wnam": 2.0}},
        ]}))
        with caplog.at_level(logging.WARNING):
            latencies = _load_latencies(str(path))
        assert list(latencies) == ["SEA"]
        assert "Dropped" in caplog.text

    def test_bool_and_string_latencies_dropped(self, tmp_path, caplog):
        path = tmp_path / "latency.json"
        path.write_text(json.dumps({"colos": [
            {"colo": "AAA", "hints": {"wnam": True, "enam": 5.0}},
            {"colo": "BBB", "hints": {"wnam": "3.5"}},
            {"colo": "CCC", "hints": {"weur": 7}},
        ]}))
        with caplog.at_level(logging.WARNING):
            latencies = _load_latencies(str(path))
        assert latencies == {"CCC": {LocationHint.WEUR: 7.0}}
        assert caplog.text.count("Dropped") == 2


# ---------------------------------------------------------------------------
# Rendering and block replacement
# ---------------------------------------------------------------------------


class TestRendering:
    def test_classified_line(self):
        entry = ColoEntry(code="LAX", display_name="Los Angeles, CA, United States", location_hint=LocationHint.WNAM)
        assert render_member_line(entry) == (
            '    LAX = ("LAX", "Los Angeles, CA, United States", LocationHint.WNAM)'
        )

    def test_unclassified_line(self):
        entry = ColoEntry(code="PEK", display_name="Beijing, China", location_hint=None)
        assert render_member_line(entry) == '    PEK = ("PEK", "Beijing, China", None)'

    def test_non_ascii_kept(self):
        entry = ColoEntry(code="ZRH", display_name="Zürich, Switzerland", location_hint=LocationHint.WEUR)
        assert "Zürich" in render_member_line(entry)


class TestReplaceBlock:
    SOURCE = "head\n    # BEGIN GENERATED COLOS\n    OLD = 1\n    # END GENERATED COLOS\ntail\n"

    def test_replaces_only_between_markers(self):
        updated = replace_generated_block(self.SOURCE, ["    NEW = 2", "    NEWER = 3"])
        assert updated == (
            "head\n    # BEGIN GENERATED COLOS\n    NEW = 2\n    NEWER = 3\n"
            "    # END GENERATED COLOS\ntail\n"
        )

    def test_extract(self):
        assert extract_generated_block(self.SOURCE) == ["    OLD = 1"]

    def test_crlf_endings_preserved(self):
        source = self.SOURCE.replace("\n", "\r\n")
        updated = replace_generated_block(source, ["    NEW = 2"])
        assert updated == (
            "head\r\n    # BEGIN GENERATED COLOS\r\n    NEW = 2\r\n"
            "    # END GENERATED COLOS\r\ntail\r\n"
        )
        assert extract_generated_block(updated) == ["    NEW = 2"]

    def test_missing_marker(self):
        with pytest.raises(ValueError):
            replace_generated_block("no markers here\n", [])

    def test_misordered_markers(self):
        source = "# END GENERATED COLOS\n# BEGIN GENERATED COLOS\n"
        with pytest.raises(ValueError):
            extract_generated_block(source)


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------


class TestRunCodegen:
    def test_rewrites_target(self, snapshot_paths):
        summary = run_codegen(
            components_path=snapshot_paths["components"],
            latency_path=snapshot_paths["latency"],
            output_path=snapshot_paths["output"],
        )
        source = Path(snapshot_paths["output"]).read_text(encoding="utf-8")
        assert extract_generated_block(source) == [
            '    IAD = ("IAD", "Ashburn, VA, United States", LocationHint.ENAM)',
            '    LAX = ("LAX", "Los Angeles, CA, United States", LocationHint.WNAM)',
            '    PAP = ("PAP", "Port-au-Prince, Haiti", None)',
            '    SIN = ("SIN", "Singapore, Singapore", LocationHint.APAC)',
        ]
        assert "OLD" not in source
        assert "def __init__" in source

        assert summary.colo_count == 4
        assert summary.classified_count == 3
        assert summary.unclassified == ["PAP"]
        assert summary.hint_counts["wnam"] == 1
        assert summary.hint_counts["weur"] == 0
        assert len(summary.hint_counts) == 9

    def test_crlf_target_stays_crlf(self, snapshot_paths):
        target = Path(snapshot_paths["output"])
        crlf = target.read_text(encoding="utf-8").replace("\n", "\r\n").encode("utf-8")
        target.write_bytes(crlf)
        run_codegen(
            components_path=snapshot_paths["components"],
            latency_path=snapshot_paths["latency"],
            output_path=snapshot_paths["output"],
        )
        raw = target.read_bytes()
        assert b'    LAX = ("LAX", "Los Angeles, CA, United States", LocationHint.WNAM)\r\n' in raw
        assert raw.count(b"\n") == raw.count(b"\r\n")

    def test_empty_listing_refused(self, snapshot_paths):
        Path(snapshot_paths["components"]).write_text(json.dumps({"components": []}))
        before = Path(snapshot_paths["output"]).read_text(encoding="utf-8")
        with pytest.raises(ValueError):
            run_codegen(
                components_path=snapshot_paths["components"],
                latency_path=snapshot_paths["latency"],
                output_path=snapshot_paths["output"],
            )
        assert Path(snapshot_paths["output"]).read_text(encoding="utf-8") == before

    def test_missing_target(self, snapshot_paths, tmp_path):
        with pytest.raises(FileNotFoundError):
            run_codegen(
                components_path=snapshot_paths["components"],
                latency_path=snapshot_paths["latency"],
                output_path=str(tmp_path / "missing.py"),
            )
