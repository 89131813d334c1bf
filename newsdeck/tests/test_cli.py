import json

from click.testing import CliRunner

from newsdeck.cli import main


def test_query_prints_page_and_canonical_params(dataset_file):
    runner = CliRunner()
    result = runner.invoke(main, ["query", str(dataset_file), "--params", "tags=ai&pageSize=10"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "Showing 1–3 of 3"
    assert "AI regulation debate (Tech Daily)" in lines[1]
    assert lines[-1] == "?page=1&pageSize=10&tags=ai"


def test_query_json_output(dataset_file):
    runner = CliRunner()
    result = runner.invoke(
        main, ["query", str(dataset_file), "--params", "?sort=title_az&page=2&pageSize=10", "--json"]
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["page"] == 1
    assert payload["query"]["sort"] == "title_az"
    assert payload["items"][0]["title"] == "AI regulation debate"


def test_query_reports_empty_result(dataset_file):
    runner = CliRunner()
    result = runner.invoke(main, ["query", str(dataset_file), "--params", "q=zzz"])

    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "Showing 0 results"


def test_missing_dataset_exits_with_error(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, ["query", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "failed to load" in result.output


def test_facets_command_lists_counts(dataset_file):
    runner = CliRunner()
    result = runner.invoke(main, ["facets", str(dataset_file), "--group", "languages"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["[languages]", "  en: 3", "  es: 1", "  fr: 1"]
