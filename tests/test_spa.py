"""Tests for the .spa parser.

Copyright © 2026 Pixelgen Technologies AB.
"""

import io

import pydantic
import pytest

from kmatools.exception import (
    FieldCountError,
    MalformedHeaderError,
    MissingHeaderError,
    NumericParseError,
)
from kmatools.models import SpaRecord
from kmatools.spa import SPA_COLUMNS, SPA_HEADER, parse_spa


def test_spa_header_has_all_columns():
    assert SPA_HEADER.split("\t") == list(SPA_COLUMNS)
    assert len(SPA_COLUMNS) == 13


def test_parse_spa(spa_text):
    records = parse_spa(io.StringIO(spa_text), "sample.spa")

    assert len(records) == 2
    assert [r.template for r in records] == ["tmplA", "tmplB"]

    first = records[0]
    assert first == SpaRecord(
        template="tmplA",
        num=1,
        score=100,
        expected=5,
        tlen=1000,
        qcov=0.5723,
        tcov=0.9,
        depth=3.5,
        total_qcov=0.5723,
        total_tcov=0.9,
        total_depth=3.5,
        qval=0.01,
        pval=0.02,
    )

    second = records[1]
    assert second.tcov == 1.0
    assert second.total_tcov == round(99.87 / 100, 6)
    assert second.qval == 2400.5
    assert second.pval == 1.0e-26


def test_parse_spa_header_only():
    assert parse_spa(io.StringIO(SPA_HEADER + "\n"), "empty.spa") == []


def test_parse_spa_header_with_surrounding_whitespace():
    text = "  " + SPA_HEADER + " \r\n"
    assert parse_spa(io.StringIO(text), "sample.spa") == []


def test_parse_spa_accepts_list_of_lines(spa_text):
    from_list = parse_spa(spa_text.splitlines(), "sample.spa")
    from_stream = parse_spa(io.StringIO(spa_text), "sample.spa")
    assert from_list == from_stream


def test_parse_spa_is_idempotent(spa_text):
    assert parse_spa(io.StringIO(spa_text), "a") == parse_spa(
        io.StringIO(spa_text), "a"
    )


def test_parse_spa_missing_header():
    with pytest.raises(MissingHeaderError) as excinfo:
        parse_spa(io.StringIO(""), "empty.spa")
    assert excinfo.value.label == "empty.spa"
    assert "empty.spa" in str(excinfo.value)


def test_parse_spa_malformed_header():
    header = SPA_HEADER.replace("Num", "Number")
    with pytest.raises(MalformedHeaderError) as excinfo:
        parse_spa(io.StringIO(header + "\n"), "bad.spa")
    assert excinfo.value.label == "bad.spa"
    assert excinfo.value.line == header


def test_parse_spa_reordered_columns_are_rejected():
    columns = SPA_HEADER.split("\t")
    columns[1], columns[2] = columns[2], columns[1]
    with pytest.raises(MalformedHeaderError):
        parse_spa(io.StringIO("\t".join(columns) + "\n"), "bad.spa")


def test_parse_spa_too_few_fields_reports_line_number(spa_text):
    text = spa_text + "\n" + "tmplC\t1\t2\n"
    with pytest.raises(FieldCountError) as excinfo:
        parse_spa(io.StringIO(text), "sample.spa")
    # header, record, blank, record, blank, bad record
    assert excinfo.value.line_number == 6
    assert excinfo.value.expected == 13
    assert excinfo.value.actual == 3
    assert "line 6" in str(excinfo.value)


def test_parse_spa_too_many_fields():
    line = "tmplA\t1\t100\t5\t1000\t57.23\t90.00\t3.5\t57.23\t90.00\t3.5\t0.01\t0.02\t9"
    with pytest.raises(FieldCountError) as excinfo:
        parse_spa(io.StringIO(SPA_HEADER + "\n" + line + "\n"), "sample.spa")
    assert excinfo.value.line_number == 2
    assert excinfo.value.actual == 14


def test_parse_spa_negative_integer():
    line = "tmplA\t-1\t100\t5\t1000\t57.23\t90.00\t3.5\t57.23\t90.00\t3.5\t0.01\t0.02"
    with pytest.raises(NumericParseError) as excinfo:
        parse_spa(io.StringIO(SPA_HEADER + "\n" + line + "\n"), "sample.spa")
    assert excinfo.value.line_number == 2
    assert excinfo.value.field == "-1"


def test_parse_spa_records_are_frozen(spa_text):
    record = parse_spa(io.StringIO(spa_text), "sample.spa")[0]
    with pytest.raises(pydantic.ValidationError):
        record.score = 3


def test_spa_record_field_names():
    assert SpaRecord.field_names() == (
        "template",
        "num",
        "score",
        "expected",
        "tlen",
        "qcov",
        "tcov",
        "depth",
        "total_qcov",
        "total_tcov",
        "total_depth",
        "qval",
        "pval",
    )
