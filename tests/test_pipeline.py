"""Tests for the module-level entry points and the command line runner."""

import json

import pytest

from travel_catalog import create_slug
from travel_catalog.pipeline import (
    aggregate_destinations,
    destination_summary,
    normalize_package,
    run_pipeline,
)


@pytest.fixture
def export_file(tmp_path, raw_packages):
    path = tmp_path / "packages.json"
    path.write_text(json.dumps({"data": raw_packages}), encoding="utf-8")
    return path


def test_create_slug():
    assert create_slug("Goa Beach Escape!") == "goa-beach-escape"
    assert create_slug(None) == ""


def test_destination_summary(raw_packages):
    packages = [normalize_package(raw) for raw in raw_packages[:1]]
    [goa] = aggregate_destinations(packages)

    summary = destination_summary(goa)

    assert summary["key"] == "goa"
    assert summary["type"] == "domestic"
    assert summary["region"] == "India"
    assert summary["min_price"] == 18000
    assert summary["duration"] == "4D/3N"
    assert summary["packages"] == 1
    assert summary["activities"] == sorted(goa.activities)


def test_run_pipeline_text_output(export_file, capsys):
    assert run_pipeline([str(export_file)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Goa")
    assert "(1 packages)" in lines[0]


def test_run_pipeline_json_output(export_file, capsys):
    assert run_pipeline([str(export_file), "--json", "--status", "draft"]) == 0

    summaries = json.loads(capsys.readouterr().out)
    assert [s["key"] for s in summaries] == ["goa"]
    assert summaries[0]["min_price"] == 9000


def test_run_pipeline_limit(export_file, capsys):
    assert run_pipeline([str(export_file), "--json", "--limit", "2"]) == 0

    summaries = json.loads(capsys.readouterr().out)
    assert [s["key"] for s in summaries] == ["goa", "france"]


def test_run_pipeline_missing_file(tmp_path, capsys):
    assert run_pipeline([str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().out == ""


def test_run_pipeline_warns_when_export_spans_several_pages(
    export_file, capsys, caplog
):
    assert run_pipeline([str(export_file), "--json", "--limit", "2"]) == 0

    capsys.readouterr()
    assert "Aggregated page 1 of 2 (4 packages in total)" in caplog.text


def test_run_pipeline_page(export_file, capsys):
    argv = [str(export_file), "--json", "--limit", "2", "--page", "2"]
    assert run_pipeline(argv) == 0

    summaries = json.loads(capsys.readouterr().out)
    assert [s["key"] for s in summaries] == ["france", "indonesia"]


def test_run_pipeline_single_page_does_not_warn(export_file, capsys, caplog):
    assert run_pipeline([str(export_file), "--json"]) == 0

    capsys.readouterr()
    assert "Aggregated page" not in caplog.text


def test_run_pipeline_empty_status_disables_filter(export_file, capsys):
    assert run_pipeline([str(export_file), "--json", "--status", ""]) == 0

    summaries = json.loads(capsys.readouterr().out)
    goa = summaries[0]
    assert goa["key"] == "goa"
    assert goa["packages"] == 2
