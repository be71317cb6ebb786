"""Entry point: python -m cookbook"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cookbook import config
from cookbook.catalog import content_files, load
from cookbook.helpers import (
    filter_recipes,
    sort_recipes,
    validate_record,
    with_statuses,
)
from cookbook.models import Recipe, RecipeView
from cookbook.status import JsonFileStorage, StatusStore

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    level = value.upper()
    if level not in config.LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid level {value!r}, expected one of {', '.join(config.LOG_LEVELS)}"
        )
    return level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cookbook",
        description="Browse recipes and track what you cooked or gifted.",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help=(
            "Recipe JSON directory "
            f"(default: $COOKBOOK_CONTENT_DIR or {config.DEFAULT_CONTENT_DIR})"
        ),
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help=(
            "Status file "
            f"(default: $COOKBOOK_STATE_FILE or {config.DEFAULT_STATE_FILE})"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="Logging level (default: $COOKBOOK_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List recipes with their status")
    ls.add_argument("--category")
    ls.add_argument("--source")
    ls.add_argument("--favourite", metavar="NAME")
    ls.add_argument("--search", metavar="TEXT")
    ls.add_argument("--cooked", dest="cooked", action="store_const", const=True)
    ls.add_argument("--not-cooked", dest="cooked", action="store_const", const=False)
    ls.add_argument("--gifted", dest="gifted", action="store_const", const=True)
    ls.add_argument("--not-gifted", dest="gifted", action="store_const", const=False)
    ls.add_argument("--sort", default="name")
    ls.add_argument("--reverse", action="store_true")
    ls.add_argument(
        "--json", action="store_true", help="Print JSON instead of a table"
    )

    for flag in ("cooked", "gifted"):
        p = sub.add_parser(flag, help=f"Mark a recipe as {flag}")
        p.add_argument("recipe_id")
        p.add_argument(
            "--off", action="store_true", help=f"Clear the {flag} flag instead"
        )

    status = sub.add_parser("status", help="Show one recipe's status")
    status.add_argument("recipe_id")

    sub.add_parser("check", help="Validate every recipe file")
    sub.add_parser(
        "prune", help="Drop statuses for recipes no longer in the catalog"
    )
    sub.add_parser("reset", help="Forget every status")
    return parser


def _format_row(view: RecipeView) -> str:
    marks = f"[{'C' if view.cooked else ' '}{'G' if view.gifted else ' '}]"
    category = view.recipe_category or "-"
    line = f"{marks} {view.id:<24} {view.name} ({category}, {view.sell_price}g)"
    if view.favourite_of:
        line += f" fav: {view.favourite_of}"
    return line


def _known_recipe(recipe_id: str, recipes: list[Recipe]) -> bool:
    if recipe_id in {r.id for r in recipes}:
        return True
    print(f"Unknown recipe: {recipe_id!r}", file=sys.stderr)
    return False


def _cmd_list(
    args: argparse.Namespace, recipes: list[Recipe], store: StatusStore
) -> int:
    views = filter_recipes(
        with_statuses(recipes, store.all()),
        query=args.search,
        category=args.category,
        source=args.source,
        favourite_of=args.favourite,
        cooked=args.cooked,
        gifted=args.gifted,
    )
    try:
        views = sort_recipes(views, key=args.sort, reverse=args.reverse)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps([v.model_dump(by_alias=True) for v in views], indent=2))
    elif not views:
        print("No recipes.")
    else:
        for view in views:
            print(_format_row(view))
    return 0


def _cmd_set_flag(
    args: argparse.Namespace, recipes: list[Recipe], store: StatusStore
) -> int:
    if not _known_recipe(args.recipe_id, recipes):
        return 1
    value = not args.off
    if args.command == "cooked":
        status = store.set_cooked(args.recipe_id, value)
    else:
        status = store.set_gifted(args.recipe_id, value)
    print(f"{args.recipe_id}: cooked={status.cooked} gifted={status.gifted}")
    return 0


def _cmd_status(
    args: argparse.Namespace, recipes: list[Recipe], store: StatusStore
) -> int:
    if not _known_recipe(args.recipe_id, recipes):
        return 1
    status = store.get(args.recipe_id)
    print(f"{args.recipe_id}: cooked={status.cooked} gifted={status.gifted}")
    return 0


def _cmd_check(content_dir: Path) -> int:
    try:
        paths = content_files(content_dir)
    except OSError as e:
        print(f"Cannot read {content_dir}: {e}", file=sys.stderr)
        return 1

    bad = 0
    for path in paths:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            RecursionError,
        ) as e:
            errors = [f"invalid JSON ({e})"]
        else:
            errors = validate_record(data)
        if errors:
            bad += 1
            for err in errors:
                print(f"{path.name}: {err}")
    print(f"{len(paths) - bad}/{len(paths)} recipe file(s) valid")
    return 1 if bad else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level or config.log_level(),
        format=config.LOG_FORMAT,
    )

    content_dir = args.content_dir or config.content_dir()
    if args.command == "check":
        return _cmd_check(content_dir)

    recipes = load(content_dir)
    store = StatusStore(JsonFileStorage(args.state_file or config.state_file()))

    if args.command == "list":
        return _cmd_list(args, recipes, store)
    if args.command in ("cooked", "gifted"):
        return _cmd_set_flag(args, recipes, store)
    if args.command == "status":
        return _cmd_status(args, recipes, store)
    if args.command == "prune":
        if not recipes:
            logger.warning("Catalog is empty, not pruning statuses")
            return 1
        removed = store.prune(r.id for r in recipes)
        noun = "entry" if len(removed) == 1 else "entries"
        print(f"Removed {len(removed)} orphaned status {noun}")
        return 0
    if args.command == "reset":
        store.clear()
        print("All statuses cleared.")
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
