"""
Tests for the command-line driver
"""

import csv

import pytest

import main


def read_rows(filename):
    with open(filename, newline='') as csvfile:
        return list(csv.reader(csvfile))


class TestMain:

    def test_single_node(self, capsys):
        assert main.main(["--technode", "130", "--levelOutput", "8"]) == 0
        out = capsys.readouterr().out
        assert "MultilevelSenseAmp (130nm LP)" in out
        assert "Read Dynamic Energy" in out

    def test_missing_area_constraint(self, capsys):
        assert main.main(["--width", "0", "--height", "0"]) == 1
        assert "No width or height" in capsys.readouterr().err

    def test_unsupported_node(self, capsys):
        assert main.main(["--technode", "28"]) == 2
        assert "Unsupported technology node" in capsys.readouterr().err

    def test_override_with_one_dimension(self, capsys):
        assert main.main(["--width", "20e-6", "--height", "0", "--layout", "override"]) == 1
        assert "OverrideLayout needs both" in capsys.readouterr().err

    def test_no_temperature_option(self, capsys):
        with pytest.raises(SystemExit):
            main.main(["--temp", "400"])
        assert "unrecognized arguments: --temp" in capsys.readouterr().err

    def test_sweep_records_every_node(self, tmp_path):
        record = tmp_path / "records.csv"
        assert main.main(["--sweep", "--roadmap", "HP", "--record", str(record)]) == 0
        rows = read_rows(record)
        assert len(rows) == 1 + 9
        assert rows[1][0] == "MultilevelSenseAmp_130nm_HP"
        assert rows[-1][0] == "MultilevelSenseAmp_7nm_HP"

    def test_config_and_columns_files(self, tmp_path):
        config = tmp_path / "config.csv"
        config.write_text("technode,90\nlevelOutput,4\nparallel,true\nlayout,magic\nheight,5e-6\n")
        columns = tmp_path / "columns.csv"
        columns.write_text("1000,20000\n50000\n")
        record = tmp_path / "records.csv"
        assert main.main(["--config", str(config), "--columns", str(columns), "--record", str(record)]) == 0
        rows = read_rows(record)
        assert rows[1][0] == "MultilevelSenseAmp_90nm_LP"
        # magic layout pins the height to 5um
        assert float(rows[1][1]) == pytest.approx(5.0)

    def test_load_column_resistances(self, tmp_path):
        columns = tmp_path / "columns.csv"
        columns.write_text("1000, 2000\n\n3000\n")
        assert main.load_column_resistances(columns) == [1000.0, 2000.0, 3000.0]
