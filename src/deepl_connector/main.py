"""Main entry point for the DeepL connector command line."""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from deepl_connector.plugin import EngineRegistry, load_plugins
from deepl_connector.services import (
    DeepLTranslationService,
    FileTranslationCache,
    InMemoryTranslationCache,
    MachineTranslateError,
    SettingsManager,
)
from deepl_connector.ui import DeepLConfigDialog

logger = logging.getLogger("deepl_connector")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepl-connector",
        description="Translate text with DeepL the way the CAT tool plugin does.",
    )
    parser.add_argument(
        "--env-dir",
        type=Path,
        default=None,
        help="Directory holding the .env file (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate = subparsers.add_parser("translate", help="Translate a text")
    translate.add_argument("text", help="Text to translate")
    translate.add_argument("--from", dest="source", required=True, help="Source language, e.g. de-DE")
    translate.add_argument("--to", dest="target", required=True, help="Target language, e.g. en-US")
    translate.add_argument("--key", default=None, help="Temporary API key, not stored")
    translate.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Persist translations in this directory",
    )

    usage = subparsers.add_parser("usage", help="Show character usage for the API key")
    usage.add_argument("--key", default=None, help="Temporary API key, not stored")

    subparsers.add_parser("configure", help="Open the configuration dialog")
    return parser


def run_translate(args, engine_class, settings: SettingsManager) -> int:
    cache = FileTranslationCache(args.cache_dir) if args.cache_dir else InMemoryTranslationCache()
    service = engine_class(settings=settings, cache=cache, temporary_key=args.key)
    result = service.translate(args.source, args.target, args.text)
    if result.is_error:
        logger.error("Translation failed: %s", result.error)
        return 1
    print(result.text)
    return 0


def run_usage(args, engine_class, settings: SettingsManager) -> int:
    service = engine_class(settings=settings, temporary_key=args.key)
    try:
        usage = service.get_usage()
    except MachineTranslateError as e:
        logger.error("Could not fetch usage: %s", e.message)
        return 1
    print(f"{usage.character_count} / {usage.character_limit} characters used")
    if usage.limit_reached:
        print("Character limit reached.")
    return 0


def run_configure(engine_class, settings: SettingsManager) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("DeepL Connector")

    dialog = DeepLConfigDialog(settings, engine_class.name)
    dialog.exec()
    return 0


def main(argv=None) -> int:
    """
    Bootstrap the connector outside a host tool.

    The registry is populated the same way the host does it, then the engine
    is looked up by name.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = SettingsManager(project_root=args.env_dir)

    registry = EngineRegistry()
    load_plugins(registry)
    logger.debug("Available engines: %s", registry.names())
    engine_class = registry.get(DeepLTranslationService.name)

    if args.command == "translate":
        return run_translate(args, engine_class, settings)
    if args.command == "usage":
        return run_usage(args, engine_class, settings)
    return run_configure(engine_class, settings)


if __name__ == "__main__":
    sys.exit(main())
