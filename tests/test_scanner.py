import logging

import pytest

from nopx.errors import InvalidMagnitude
from nopx.scan import (
    KEEP_ALL,
    CancellationToken,
    IgnorePolicy,
    PixelLiteral,
    SourceUnit,
    scan,
)


def test_scan_collects_literals_in_file_order() -> None:
    corpus = [
        ("styles/a.css", "a { width: 16px; }\nb { margin: 8px 24px; }\n"),
        ("styles/b.scss", "$x: 32px;\n"),
    ]

    result = scan(corpus, IgnorePolicy.by_threshold(1))

    by_path = {path: [lit for lit in result.literals if lit.path == path] for path, _ in corpus}
    assert [(lit.raw_value, lit.line, lit.column) for lit in by_path["styles/a.css"]] == [
        ("16px", 1, 12),
        ("8px", 2, 13),
        ("24px", 2, 17),
    ]
    assert [lit.magnitude for lit in by_path["styles/b.scss"]] == [32.0]
    assert result.skipped == ()
    assert result.cancelled is False
    assert result.paths == frozenset({"styles/a.css", "styles/b.scss"})


def test_threshold_boundary_excludes_equal_and_includes_greater() -> None:
    corpus = [("a.css", "a { top: 2px; left: 2.01px; right: 1.99px; }")]

    result = scan(corpus, IgnorePolicy.by_threshold(2))

    assert [lit.raw_value for lit in result.literals] == ["2.01px"]


def test_exact_exclusion_only_drops_identical_raw_values() -> None:
    corpus = [("a.css", "a { border: 1px solid; outline: 1.0px; margin: 0px; }")]

    result = scan(corpus, IgnorePolicy.by_exact({"1px"}))

    assert [lit.raw_value for lit in result.literals] == ["1.0px", "0px"]


def test_combined_policy_applies_both_rules() -> None:
    policy = IgnorePolicy(threshold=1, excluded_values=frozenset({"100px"}))
    corpus = [("a.css", "a { top: 1px; left: 100px; right: 50px; }")]

    result = scan(corpus, policy)

    assert policy.kind == "combined"
    assert [lit.raw_value for lit in result.literals] == ["50px"]


def test_policy_kinds() -> None:
    assert KEEP_ALL.kind == "none"
    assert IgnorePolicy.by_threshold(1).kind == "threshold"
    assert IgnorePolicy.by_exact(["1px"]).kind == "exact"


def test_non_finite_threshold_ignores_nothing() -> None:
    policy = IgnorePolicy(threshold=float("nan"))

    assert policy.ignores("0px", 0.0) is False


def test_scan_skips_unreadable_units_and_continues(caplog: pytest.LogCaptureFixture) -> None:
    def vanished() -> str:
        raise FileNotFoundError("gone")

    corpus = [
        SourceUnit(path="a.css", source="a { top: 4px; }"),
        SourceUnit(path="broken.css", source=b"\xff\xfe\xfa"),
        SourceUnit(path="missing.css", source=vanished),
        SourceUnit(path="c.css", source=lambda: b"c { top: 6px; }"),
    ]

    with caplog.at_level(logging.WARNING, logger="nopx.scan.scanner"):
        result = scan(corpus, KEEP_ALL)

    assert [lit.path for lit in result.literals] == ["a.css", "c.css"]
    assert [skipped.path for skipped in result.skipped] == ["broken.css", "missing.css"]
    assert "gone" in result.skipped[1].reason
    assert "Skipping broken.css" in caplog.text


def test_scan_decodes_bytes_and_strips_bom() -> None:
    result = scan([SourceUnit(path="a.css", source="\ufeffa{top:4px}".encode("utf-8"))], KEEP_ALL)

    assert [(lit.raw_value, lit.column) for lit in result.literals] == [("4px", 7)]


def test_scan_normalizes_windows_paths() -> None:
    result = scan([("styles\\a.css", "a{top:4px}")], KEEP_ALL)

    assert result.literals[0].path == "styles/a.css"


def test_cancelled_scan_discards_partial_results() -> None:
    token = CancellationToken()

    def corpus():
        yield ("a.css", "a{top:4px}")
        token.cancel()
        yield ("b.css", "b{top:8px}")

    result = scan(corpus(), KEEP_ALL, cancellation=token)

    assert result.cancelled is True
    assert result.literals == ()
    assert result.skipped == ()


def test_cancellation_after_last_unit_still_discards() -> None:
    token = CancellationToken()

    def corpus():
        yield ("a.css", "a{top:4px}")
        token.cancel()

    result = scan(corpus(), KEEP_ALL, cancellation=token)

    assert result.cancelled is True
    assert result.literals == ()


def test_pixel_literal_derives_magnitude_from_raw_value() -> None:
    literal = PixelLiteral(raw_value="12.5px", path="a.css", line=1, column=1, context="x")

    assert literal.magnitude == 12.5


def test_pixel_literal_rejects_unparsable_raw_value() -> None:
    with pytest.raises(InvalidMagnitude):
        PixelLiteral(raw_value="-2px", path="a.css", line=1, column=1, context="x")


def test_scan_skips_unit_with_oversized_literal_and_continues(caplog: pytest.LogCaptureFixture) -> None:
    corpus = [
        ("a.css", "a{top:" + "1" * 400 + "px}"),
        ("b.css", "b{top:8px}"),
    ]

    with caplog.at_level(logging.WARNING, logger="nopx.scan.scanner"):
        result = scan(corpus, IgnorePolicy.by_threshold(1))

    assert [(lit.path, lit.raw_value) for lit in result.literals] == [("b.css", "8px")]
    assert [skipped.path for skipped in result.skipped] == ["a.css"]
    assert "Invalid px value" in result.skipped[0].reason
    assert result.cancelled is False
    assert "Skipping a.css" in caplog.text
