"""Точка входа dcon: аргументы, рабочая директория, настройки, логирование."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dcon import __version__
from dcon.app import create_application
from dcon.i18n.translator import set_language, translate
from dcon.settings.config import AppConfig
from dcon.settings.exceptions import SettingsError
from dcon.settings.registry import SettingsRegistry
from dcon.utils.logger import configure_logging
from dcon.utils.paths import CONFIG_FILE_NAME, LEGACY_CONFIG_FILE_NAME, resolve_base_dir

LOGGER = logging.getLogger(__name__)


def build_parser(base_dir: Path) -> argparse.ArgumentParser:
    """Парсер аргументов; справка включает клавиши интерактивного режима."""

    parser = argparse.ArgumentParser(
        prog="dcon",
        description=translate("cli.description"),
        epilog=translate("cli.epilog", config_dir=base_dir),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("container", nargs="?", help=translate("cli.container_help"))
    parser.add_argument("-v", "--verbose", action="store_true", help=translate("cli.verbose_help"))
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт каталог состояния и подкаталог логов."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Cannot initialize working directory %s: %s", base_dir, exc)
        return False


def initialize_settings(base_dir: Path) -> SettingsRegistry:
    """Загружает config.json, при первом запуске переносит старый config."""

    registry = SettingsRegistry(
        base_dir / CONFIG_FILE_NAME,
        legacy_path=base_dir / LEGACY_CONFIG_FILE_NAME,
    )
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(
    base_dir: Path, settings: SettingsRegistry, *, verbose: bool = False
) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled") and not verbose:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
        console=verbose,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Основная точка входа: готовит окружение и запускает сессию."""

    base_dir = resolve_base_dir()
    args = build_parser(base_dir).parse_args(argv)

    if not initialize_workdir(base_dir):
        print(translate("errors.workdir", path=base_dir), file=sys.stderr)
        return 1

    try:
        settings = initialize_settings(base_dir)
    except SettingsError as exc:
        print(translate("errors.settings", reason=exc.message), file=sys.stderr)
        return 1
    setup_logging_from_settings(base_dir, settings, verbose=args.verbose)

    config = AppConfig.from_settings(settings, base_dir)
    set_language(config.language)
    LOGGER.info("Starting dcon %s (theme=%s)", __version__, config.theme)
    return create_application(config).run(args.container)


if __name__ == "__main__":
    sys.exit(main())
