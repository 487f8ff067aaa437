"""Tests for palette_clash.core.ranking — pairwise ranking, filtering, end-to-end report."""

import logging

import pytest
from palette_clash.core.colour import hex_to_lab
from palette_clash.core.ranking import build_report, compute_report, convert_colours, filter_below, rank
from palette_clash.core.types import LAB, DiffEntry, NamedColour

RGB_SET = {'A': '#FF0000', 'B': '#FE0000', 'C': '#00FF00'}


class TestConvertColours:
    def test_all_valid(self) -> None:
        converted, skipped = convert_colours(RGB_SET)
        assert [c.name for c in converted] == ['A', 'B', 'C']
        assert skipped == {}
        assert converted[0] == NamedColour('A', '#FF0000', hex_to_lab('#FF0000'))

    def test_skips_malformed(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger='palette_clash.core.ranking'):
            converted, skipped = convert_colours({'A': '#FF0000', 'B': 'notacolor', 'C': '#GG0000'})
        assert [c.name for c in converted] == ['A']
        assert set(skipped) == {'B', 'C'}
        assert 'skipping B' in caplog.text


class TestRank:
    def test_excludes_self(self) -> None:
        converted, _ = convert_colours(RGB_SET)
        ranked = rank(converted)
        for name, entries in ranked.items():
            assert name not in [e.name for e in entries]
            assert len(entries) == 2

    def test_sorted_ascending(self) -> None:
        converted, _ = convert_colours(RGB_SET)
        ranked = rank(converted)
        assert [e.name for e in ranked['A']] == ['B', 'C']
        for entries in ranked.values():
            diffs = [e.diff for e in entries]
            assert diffs == sorted(diffs)

    def test_deterministic(self) -> None:
        converted, _ = convert_colours(RGB_SET)
        assert rank(converted) == rank(converted)

    def test_accepts_mapping_of_lab(self) -> None:
        ranked = rank({'grey': LAB(50.0, 0.0, 0.0), 'red': LAB(50.0, 50.0, 0.0)})
        assert ranked['grey'] == [DiffEntry('red', pytest.approx(50.0))]
        assert ranked['red'][0].diff == pytest.approx(50.0 / 3.25)

    def test_ties_all_present(self) -> None:
        ranked = rank({'x': LAB(50.0, 0.0, 0.0), 'y': LAB(60.0, 0.0, 0.0), 'z': LAB(60.0, 0.0, 0.0)})
        assert {e.name for e in ranked['x']} == {'y', 'z'}
        assert ranked['x'][0].diff == ranked['x'][1].diff

    def test_empty(self) -> None:
        assert rank({}) == {}

    def test_single_colour(self) -> None:
        assert rank({'only': LAB(1.0, 2.0, 3.0)}) == {'only': []}


class TestFilterBelow:
    def test_prefix_below_threshold(self) -> None:
        entries = [DiffEntry('a', 1.0), DiffEntry('b', 2.0), DiffEntry('c', 12.0)]
        assert filter_below(entries, 10.0) == entries[:2]

    def test_threshold_is_exclusive(self) -> None:
        entries = [DiffEntry('a', 1.0), DiffEntry('b', 10.0)]
        assert filter_below(entries, 10.0) == [DiffEntry('a', 1.0)]

    def test_stops_at_first_entry_over(self) -> None:
        # Input is assumed sorted; nothing after the first stop is inspected
        entries = [DiffEntry('a', 1.0), DiffEntry('b', 11.0), DiffEntry('c', 2.0)]
        assert filter_below(entries, 10.0) == [DiffEntry('a', 1.0)]

    def test_empty_result(self) -> None:
        assert filter_below([DiffEntry('a', 15.0)], 10.0) == []

    def test_idempotent(self) -> None:
        entries = [DiffEntry('a', 1.0), DiffEntry('b', 5.0), DiffEntry('c', 20.0)]
        once = filter_below(entries, 10.0)
        assert filter_below(once, 10.0) == once


class TestComputeReport:
    def test_near_neighbours(self) -> None:
        report = compute_report(RGB_SET, 10)
        assert [e.name for e in report['A']] == ['B']
        assert [e.name for e in report['B']] == ['A']
        assert report['A'][0].diff < 1.0
        assert report['C'] == []

    def test_malformed_entry_dropped(self) -> None:
        report = compute_report({'A': '#FF0000', 'B': 'notacolor'}, 10)
        assert report == {'A': []}

    def test_entries_are_name_diff_pairs(self) -> None:
        report = compute_report(RGB_SET, 10)
        name, diff = report['A'][0]
        assert name == 'B'
        assert isinstance(diff, float)


class TestBuildReport:
    def test_default_selection_sorted(self) -> None:
        report = build_report({'b': '#FE0000', 'a': '#FF0000', 'c': '#00FF00'}, 10)
        assert report.names == ['a', 'b', 'c']
        assert [name for name, _ in report.selected()] == ['a', 'b']

    def test_explicit_selection_keeps_order(self) -> None:
        report = build_report(RGB_SET, 10, names=['B', 'C', 'A'])
        assert [name for name, _ in report.selected()] == ['B', 'A']

    def test_records_skipped(self) -> None:
        report = build_report({'A': '#FF0000', 'B': 'notacolor'}, 10)
        assert 'B' in report.skipped
        assert 'B' not in report.colours
        assert report.selected() == []

    def test_unknown_name_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger='palette_clash.core.ranking'):
            report = build_report(RGB_SET, 10, names=['Cobol'])
        assert report.selected() == []
        assert 'unknown language requested: Cobol' in caplog.text

    def test_clash_count(self) -> None:
        assert build_report(RGB_SET, 10).clash_count == 2
        assert build_report(RGB_SET, 0.0).clash_count == 0
