"""Command line tools for guidebook documents."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from guidebook.config import LOG_LEVELS, Settings, get_settings
from guidebook.errors import GuidebookError
from guidebook.interfaces.game_registry import IGameRegistry
from guidebook.loader import BookLoader
from guidebook.repository import JsonBookRepository
from guidebook.sample import SampleGuideBook, sample_game_registry
from guidebook.schemas import ObjectCatalogPayload, describe_validation_error, validate_payload
from guidebook.serialization import BookCodec, VariantRegistries
from guidebook.utils.in_memory import InMemoryGameRegistry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guidebook", description="Work with guidebook documents")
    parser.add_argument(
        "--objects",
        type=Path,
        help=(
            "JSON catalog {\"blocks\": [...], \"items\": [...]} of known game objects; "
            "not accepted by 'sample', which uses its own objects"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured logging level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Load documents and report errors")
    validate.add_argument("paths", nargs="+", type=Path)

    fmt = sub.add_parser("format", help="Rewrite a document in canonical form")
    fmt.add_argument("path", type=Path)
    fmt.add_argument("--output", type=Path, help="Write here instead of in place")

    sample = sub.add_parser(
        "sample", help="Write the sample book (uses the built-in sample objects)"
    )
    sample.add_argument("path", type=Path)

    sub.add_parser("list", help="List books in the configured books directory")
    return parser


def load_catalog(path: Path) -> InMemoryGameRegistry:
    """Build an in-memory game registry from a JSON object catalog."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, RecursionError) as exc:
        raise GuidebookError(f"object catalog '{path}' is not valid JSON: {exc}") from exc
    catalog = validate_payload(ObjectCatalogPayload, data, where="object catalog")
    return InMemoryGameRegistry(blocks=catalog.blocks, items=catalog.items)


def _loader(settings: Settings, game_registry: IGameRegistry) -> BookLoader:
    codec = BookCodec(
        VariantRegistries.with_builtins(), game_registry, indent=settings.json_indent
    )
    return BookLoader(codec)


def _validate(loader: BookLoader, paths: list[Path]) -> int:
    failures = 0
    for path in paths:
        try:
            loader.load_from_file(path)
        except GuidebookError as exc:
            failures += 1
            print(f"{path}: {type(exc).__name__}: {exc}")
        else:
            print(f"{path}: ok")
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        parser.error(f"invalid settings: {describe_validation_error(exc)}")
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "sample" and args.objects is not None:
        parser.error("--objects cannot be combined with 'sample'")

    game_registry: IGameRegistry = InMemoryGameRegistry()
    if args.objects is not None:
        try:
            game_registry = load_catalog(args.objects)
        except FileNotFoundError:
            parser.error(f"object catalog '{args.objects}' not found")
        except OSError as exc:
            parser.error(f"cannot read object catalog '{args.objects}': {exc}")
        except GuidebookError as exc:
            parser.error(str(exc))

    if args.command == "sample":
        game_registry = sample_game_registry()
    loader = _loader(settings, game_registry)

    if args.command == "validate":
        return _validate(loader, args.paths)

    try:
        if args.command == "format":
            book = loader.load_from_file(args.path)
            target = loader.save_to_file(book, args.output or args.path)
            print(target)
        elif args.command == "sample":
            book = loader.load_from_definition(SampleGuideBook(game_registry))
            print(loader.save_to_file(book, args.path))
        elif args.command == "list":
            repository = JsonBookRepository(settings.books_dir, loader)
            for name in repository.list_books():
                print(name)
    except GuidebookError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    raise SystemExit(main())
