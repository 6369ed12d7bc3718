# ww_cli/display.py
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from adapters.filemaker import FileMakerResponseError, categories_from_response
from config.loader import DEFAULT_CONFIG, load_config, log_level_from, tables_path_from
from resolver.rules import DisplayTablesError
from resolver.service import DisplayService
from ww_core.models import Category
from ww_utils.logging_setup import setup_logging

LOGGER = logging.getLogger("wwdisplay")


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        "wwdisplay", description="Resolve category icons and colors"
    )
    p.add_argument(
        "names",
        nargs="*",
        help="Category names to resolve (no stored icon/color)",
    )
    p.add_argument(
        "--records",
        default=None,
        help="FileMaker _find response JSON file with category records",
    )
    p.add_argument(
        "--owner",
        default=None,
        help="Owner id stamped on decoded categories (default: from record)",
    )
    p.add_argument(
        "--tables",
        default=None,
        help="Display tables YAML (overrides [display] tables_path in config)",
    )
    p.add_argument(
        "--config",
        default=None,
        help=f"Config TOML path (default: {DEFAULT_CONFIG.name} if present)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output JSON object to stdout instead of human-readable text (ignored with --jsonl)",
    )
    p.add_argument(
        "--jsonl",
        action="store_true",
        help="Stream JSON lines (one record per line). Overrides --json output shape.",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info logs; only warnings/errors.",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose logging.",
    )
    return p


def _setup_logging(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    level = log_level_from(cfg)
    if args.quiet:
        level = "WARNING"
    if args.verbose:
        level = "DEBUG"
    setup_logging(level)


def _load_cfg(config_arg: Optional[str]) -> Dict[str, Any]:
    """Explicit --config must exist; the default config.toml is optional."""
    if config_arg:
        return load_config(Path(config_arg))
    try:
        return load_config()
    except FileNotFoundError:
        LOGGER.debug("No %s; using built-in defaults.", DEFAULT_CONFIG)
        return {}


def _read_records(path_str: str, owner_id: Optional[str]) -> List[Category]:
    p = Path(path_str)
    if not p.is_file():
        raise FileNotFoundError(f"Records file does not exist: {path_str}")
    payload = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object with 'response' and 'messages'")
    return categories_from_response(payload, owner_id=owner_id)


def _result_row(svc: DisplayService, cat: Category) -> Dict[str, str]:
    attrs = svc.resolve(cat)
    return {"id": cat.id, "name": cat.name, "icon": attrs.icon, "color": attrs.color}


def _print_human(rows: List[Dict[str, str]]) -> None:
    for row in rows:
        print("-" * 60)
        print(f"Category : {row['name']}")
        if row["id"]:
            print(f"Record   : {row['id']}")
        print(f"Icon     : {row['icon']}")
        print(f"Color    : {row['color']}")


def _print_json(rows: List[Dict[str, str]]) -> None:
    payload = {"schema_version": "1.0", "results": rows}
    print(json.dumps(payload, ensure_ascii=True))


def _print_jsonl(rows: List[Dict[str, str]]) -> None:
    for row in rows:
        print(json.dumps({"schema_version": "1.0", "result": row}, ensure_ascii=True))


def run(args: argparse.Namespace) -> int:
    try:
        cfg = _load_cfg(args.config)
    except (FileNotFoundError, ValueError) as e:
        setup_logging("ERROR")
        LOGGER.error("Could not load config: %s", e)
        return 3
    _setup_logging(args, cfg)

    tables_arg = args.tables or tables_path_from(cfg)
    try:
        svc = DisplayService(tables_path=tables_arg)
    except DisplayTablesError as e:
        LOGGER.error("Invalid display tables: %s", e)
        return 4

    categories = [Category(id="", name=n) for n in args.names]
    if args.records:
        try:
            categories.extend(_read_records(args.records, args.owner))
        except FileNotFoundError as e:
            LOGGER.error(str(e))
            return 3
        except (OSError, ValueError) as e:
            LOGGER.error("Could not read records from %s: %s", args.records, e)
            return 3
        except FileMakerResponseError as e:
            LOGGER.error(str(e))
            return 4

    if not categories:
        LOGGER.warning("Nothing to resolve: pass category names or --records.")
        return 2

    rows = [_result_row(svc, c) for c in categories]

    if args.jsonl:
        _print_jsonl(rows)
    elif args.json:
        _print_json(rows)
    else:
        _print_human(rows)

    return 0


def main() -> int:
    return run(make_parser().parse_args())


if __name__ == "__main__":
    raise SystemExit(main())
