from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import build_options, load_config
from .engine import run_analysis
from .errors import BcovUserError
from .io import is_script_asset, load_profile
from .jsonic import dumps as jdumps
from .log import setup_logging
from .render import build_report, render_run
from .types import RunOptions
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bcov",
        description="Unused modules and packages of a JS bundle by runtime coverage",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--debug", action="store_true", help="отладочный лог в stderr (также BCOV_DEBUG=1)")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_file(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("-f", "--file", required=True, help="файл покрытия (JSON) для обработки")

    # Общие аргументы для render/report
    def add_common(sp: argparse.ArgumentParser) -> None:
        add_file(sp)
        sp.add_argument(
            "-r", "--root",
            help="корень проекта, используется для вычисления размеров модулей",
        )
        sp.add_argument(
            "--include",
            action="append",
            metavar="PATTERN",
            help="gitwildmatch-паттерн пути URL ассета (можно указать несколько)",
        )
        sp.add_argument(
            "--exclude",
            action="append",
            metavar="PATTERN",
            help="исключить ассеты по паттерну пути URL (можно указать несколько)",
        )
        sp.add_argument(
            "--show-zero",
            action="store_true",
            default=None,
            help="показывать модули с нулевым размером",
        )
        sp.add_argument(
            "--normalize-ranges",
            action="store_true",
            default=None,
            help="отсортировать и слить перекрывающиеся диапазоны перед сверкой",
        )
        sp.add_argument(
            "--config",
            metavar="PATH",
            help="путь к bcov.yaml (по умолчанию ищется в текущем каталоге)",
        )

    sp_render = sub.add_parser("render", help="Текстовые таблицы неиспользованных модулей и пакетов")
    add_common(sp_render)

    sp_report = sub.add_parser("report", help="JSON-отчёт")
    add_common(sp_report)

    sp_list = sub.add_parser("list", help="Списки сущностей (JSON)")
    sp_list.add_argument("what", choices=["assets"], help="что вывести")
    add_file(sp_list)

    return p


def _opts(ns: argparse.Namespace) -> RunOptions:
    cfg_path = getattr(ns, "config", None)
    cfg = load_config(Path.cwd(), Path(cfg_path) if cfg_path else None)
    return build_options(
        cfg,
        root=ns.root,
        include=ns.include,
        exclude=ns.exclude,
        show_zero=ns.show_zero,
        normalize_ranges=ns.normalize_ranges,
    )


def _list_assets(file: Path) -> Dict[str, Any]:
    items: List[Dict[str, Any]] = []
    for asset in load_profile(file):
        items.append({
            "url": asset.url,
            "script": is_script_asset(asset),
            "ranges": len(asset.ranges),
            "textLength": len(asset.text),
        })
    return {"assets": items}


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    setup_logging(debug=bool(ns.debug))

    try:
        if ns.cmd == "render":
            run = run_analysis(Path(ns.file), _opts(ns))
            sys.stdout.write(render_run(run))
            return 0

        if ns.cmd == "report":
            run = run_analysis(Path(ns.file), _opts(ns))
            sys.stdout.write(jdumps(build_report(run).model_dump(mode="json")) + "\n")
            return 0

        if ns.cmd == "list":
            if ns.what == "assets":
                sys.stdout.write(jdumps(_list_assets(Path(ns.file))) + "\n")
                return 0
            raise ValueError(f"Unknown list target: {ns.what}")

    except BcovUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
