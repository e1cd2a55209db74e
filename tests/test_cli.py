"""
Test the kmatools CLI.

Copyright © 2026 Pixelgen Technologies AB.
"""

import pandas as pd
from click.testing import CliRunner

from kmatools import cli


def test_list_formats():
    runner = CliRunner()
    cmd = runner.invoke(cli.main_cli, ["--list-formats"])
    assert cmd.exit_code == 0
    assert "spa\t" in cmd.output
    assert "res\t" in cmd.output
    assert "mat\t" in cmd.output


def test_summary_res(kma_files):
    runner = CliRunner()
    cmd = runner.invoke(cli.main_cli, ["summary", str(kma_files["res"])])
    assert cmd.exit_code == 0, cmd.output
    assert "format\tres" in cmd.output
    assert "records\t2" in cmd.output


def test_summary_mat(kma_files):
    runner = CliRunner()
    cmd = runner.invoke(cli.main_cli, ["summary", str(kma_files["mat"])])
    assert cmd.exit_code == 0, cmd.output
    assert "sections\t2" in cmd.output
    assert "rows\t3" in cmd.output


def test_convert_spa_to_csv(kma_files, tmp_path):
    output = tmp_path / "out" / "sample.csv"
    runner = CliRunner()
    cmd = runner.invoke(
        cli.main_cli, ["convert", str(kma_files["spa"]), "--output", str(output)]
    )
    assert cmd.exit_code == 0, cmd.output

    df = pd.read_csv(output)
    assert df["template"].tolist() == ["tmplA", "tmplB"]
    assert df["tcov"].tolist() == [0.9, 1.0]


def test_convert_mat_to_tsv(kma_files, tmp_path):
    output = tmp_path / "sample.tsv"
    runner = CliRunner()
    cmd = runner.invoke(
        cli.main_cli, ["convert", str(kma_files["mat"]), "--output", str(output)]
    )
    assert cmd.exit_code == 0, cmd.output

    df = pd.read_csv(output, sep="\t")
    assert df["section"].tolist() == ["seq1", "seq1", "seq3"]
    assert df["C"].tolist() == [0, 7, 0]


def test_convert_with_explicit_format(tmp_path, res_text):
    input_file = tmp_path / "results.txt"
    input_file.write_text(res_text)
    output = tmp_path / "results.csv"

    runner = CliRunner()
    cmd = runner.invoke(
        cli.main_cli,
        ["convert", str(input_file), "--format", "res", "--output", str(output)],
    )
    assert cmd.exit_code == 0, cmd.output
    assert len(pd.read_csv(output)) == 2


def test_undetectable_format(tmp_path, res_text):
    input_file = tmp_path / "results.txt"
    input_file.write_text(res_text)

    runner = CliRunner()
    cmd = runner.invoke(cli.main_cli, ["summary", str(input_file)])
    assert cmd.exit_code == 2
    assert "--format" in cmd.output


def test_parse_error_exits_with_message(tmp_path, spa_text):
    input_file = tmp_path / "broken.spa"
    input_file.write_text(spa_text + "x\ty\n")

    runner = CliRunner()
    cmd = runner.invoke(cli.main_cli, ["summary", str(input_file)])
    assert cmd.exit_code == 1
    assert "Incorrect number of fields" in cmd.output
    assert "line 5" in cmd.output


def test_log_file(kma_files, tmp_path):
    log_file = tmp_path / "kmatools.log"
    output = tmp_path / "sample.csv"
    runner = CliRunner()
    cmd = runner.invoke(
        cli.main_cli,
        [
            "--verbose",
            "--log-file",
            str(log_file),
            "convert",
            str(kma_files["res"]),
            "--output",
            str(output),
        ],
    )
    assert cmd.exit_code == 0, cmd.output
    log_content = log_file.read_text()
    assert "Start kmatools convert" in log_content
    assert "Finished kmatools convert" in log_content
