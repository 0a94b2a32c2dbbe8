"""
Main entry point for SR2 Interactive Map.
Usage: python -m sr2map [--profile NAME] [--settings-file INI]
       python -m sr2map --export PATH [--datasets plots,pins,found]
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .errors import UserDataError
from .settings import AppSettings
from .userdata import (
    DataSet,
    StateSyncBridge,
    UserDataCodec,
    UserDataStore,
    ordered_selection,
)
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _dataset_list(value: str) -> Tuple[DataSet, ...]:
    try:
        return ordered_selection(part.strip() for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"unknown dataset in '{value}' (choose from plots, pins, found)"
        ) from None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sr2map",
        description="Slime Rancher 2 interactive map: pins, plot plans and found collectables.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--profile", default="default", help="settings profile to use")
    parser.add_argument(
        "--settings-file",
        type=Path,
        help="INI file to use instead of the platform settings location",
    )
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="write a user data backup to PATH (file or directory) and exit",
    )
    parser.add_argument(
        "--datasets",
        type=_dataset_list,
        default="plots,pins,found",
        help="comma separated datasets for --export (default: all)",
    )
    return parser.parse_args(argv)


def export_backup(
    settings: AppSettings, target: Path, datasets: Sequence[DataSet]
) -> Path:
    """Export user data without starting the GUI.

    Returns:
        Path of the written backup
    """
    store = UserDataStore(settings.open_user_data_store())
    # No in-memory state exists here, so there is nothing to reload
    codec = UserDataCodec(store, StateSyncBridge(reload=lambda: None))
    return codec.export(datasets).save(target)


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def _log_validation(settings: AppSettings) -> bool:
    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"Configuration warning: {warning}")
    for error in validation.errors:
        logger.error(f"Configuration error: {error}")
    return validation.is_valid


def _run_export(settings: AppSettings, target: Path, datasets: Sequence[DataSet]) -> int:
    setup_logging(settings)
    if not _log_validation(settings):
        return 1
    try:
        path = export_backup(settings, target, datasets)
    except (UserDataError, OSError) as e:
        logger.error(f"Export failed: {e}")
        return 1
    logger.info(f"Backup written to {path}")
    return 0


def _run_gui(settings: AppSettings) -> int:
    app = QApplication(sys.argv[:1])
    app.setApplicationName("sr2_interactivemap")
    app.setApplicationVersion(__version__)
    app.setOrganizationName("sr2map")

    setup_logging(settings)

    logger.info("Starting SR2 Interactive Map")
    logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

    if not _log_validation(settings):
        show_error_dialog(
            "Configuration Error",
            "Configuration validation failed. Please check your settings.",
            "\n".join(settings.validate().errors),
        )
        return 1

    app.setStyle("Fusion")

    # Imported late so that logging is configured before widgets log
    from .gui.main_window import MainWindow

    main_window = MainWindow(settings)
    main_window.show()
    if settings.is_first_run:
        settings.set_first_run_complete()

    logger.info("Application started successfully")
    return app.exec()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    try:
        settings = AppSettings(args.profile, args.settings_file)
        if args.export is not None:
            return _run_export(settings, args.export, args.datasets)
        return _run_gui(settings)

    except Exception as e:
        logger.exception("Unhandled exception in main")
        if args.export is None:
            show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
