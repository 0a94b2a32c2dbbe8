"""Tests for the command line entry point."""

from pathlib import Path

import orjson
import pytest

from sr2map.__main__ import main, parse_args
from sr2map.settings import AppSettings
from sr2map.userdata import DataSet, UserDataStore


class TestArguments:
    """Test command line parsing."""

    def test_defaults(self) -> None:
        """Test no arguments means the GUI with the default profile."""
        args = parse_args([])
        assert args.profile == "default"
        assert args.settings_file is None
        assert args.export is None
        assert args.datasets == (DataSet.PLOTS, DataSet.PINS, DataSet.FOUND)

    def test_dataset_list(self) -> None:
        """Test datasets are parsed into canonical order."""
        args = parse_args(["--export", "out", "--datasets", "found, plots"])
        assert args.datasets == (DataSet.PLOTS, DataSet.FOUND)

    def test_unknown_dataset(self) -> None:
        """Test an unknown dataset name is a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["--datasets", "pins,gordos"])


class TestHeadlessExport:
    """Test exporting a backup without the GUI."""

    def test_export_pins(
        self, settings_file: Path, tmp_path: Path, restore_root_logging: None
    ) -> None:
        """Test --export writes the selected datasets to a directory."""
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.logging.console_logging = False
        settings_obj.storage.userdata_file = str(tmp_path / "userdata.ini")
        pins = [{"icon": "a", "pos": {"x": 1, "y": 2}, "dimension": "sr2"}]
        UserDataStore(settings_obj.open_user_data_store()).write_pins(pins)

        out_dir = tmp_path / "backups"
        out_dir.mkdir()
        code = main(
            [
                "--settings-file",
                str(settings_file),
                "--export",
                str(out_dir),
                "--datasets",
                "pins",
            ]
        )

        assert code == 0
        backup = orjson.loads((out_dir / "user_pins.json").read_bytes())
        assert backup == {"plots": None, "pins": pins, "found": None}

    def test_export_invalid_configuration(
        self, settings_file: Path, tmp_path: Path, restore_root_logging: None
    ) -> None:
        """Test an invalid configuration stops the export."""
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.logging.console_logging = False
        settings_obj.settings.setValue("storage/backend", "cloud")
        settings_obj.sync()

        code = main(["--settings-file", str(settings_file), "--export", str(tmp_path)])

        assert code == 1
        assert not (tmp_path / "sr2_interactivemap_backup.json").exists()
