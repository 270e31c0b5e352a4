#!/usr/bin/env python3
"""Inspect and drive a printer fleet from the terminal.

Loads the fleet through :class:`printfleet.PrinterFleet`, so every guard
the library applies (reachability, running jobs, operator confirmation)
is exercised exactly as an application would see it.

Usage
-----
Set environment variables and run::

    export PRINTFLEET_BASE_URL="http://fleet.local:4000"
    export PRINTFLEET_ACCESS_TOKEN="..."
    python scripts/fleet_console.py

Options::

    --files ID           Also list the files of printer ID
    --recursive          List files recursively
    --print ID PATH      Select PATH on printer ID and start it
    --stop ID            Stop the job on printer ID (asks for confirmation)
    --reprint ID [ID..]  Batch reprint on the given printers
    --json               Output as machine-readable JSON
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from printfleet import FleetApiClient, FleetConfig, FleetError, PrinterFleet  # noqa: E402


def _ask_terminal(message: str) -> bool:
    answer = input(f"{message} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def _printer_row(printer: Any) -> dict[str, Any]:
    return {
        "id": printer.id,
        "name": printer.name,
        "reachable": printer.reachable,
        "operational": printer.flags.operational.name,
        "printing": printer.flags.printing.name,
    }


async def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect and drive a printer fleet.")
    parser.add_argument("--files", metavar="ID", help="List the files of this printer")
    parser.add_argument("--recursive", action="store_true", help="List files recursively")
    parser.add_argument("--print", nargs=2, metavar=("ID", "PATH"), dest="print_args", help="Print a file")
    parser.add_argument("--stop", metavar="ID", help="Stop the running job")
    parser.add_argument("--reprint", nargs="+", metavar="ID", help="Batch reprint on these printers")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = FleetConfig.from_env()
    result: dict[str, Any] = {"base_url": config.base_url}

    async with FleetApiClient(config) as api:
        fleet = PrinterFleet(api, api, api, confirm=_ask_terminal)
        await fleet.load_printers()
        result["printers"] = [_printer_row(p) for p in fleet.printers]

        if args.files:
            file_list = await fleet.load_printer_files(args.files, args.recursive)
            result["files"] = [{"path": f.path, "date": f.date} for f in file_list.files]

        try:
            if args.print_args:
                printer_id, path = args.print_args
                outcome = await fleet.print_file(printer_id, path)
                result["print"] = outcome.model_dump()
            if args.stop:
                outcome = await fleet.stop_job(args.stop)
                result["stop"] = outcome.model_dump()
            if args.reprint:
                for printer_id in args.reprint:
                    printer = fleet.printer(printer_id)
                    if printer is not None:
                        fleet.toggle_selected_printer(printer)
                reprint = await fleet.batch_reprint_files()
                result["reprint"] = reprint.raw
        except FleetError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if args.json_mode:
        print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
        return 0

    print(f"Fleet at {result['base_url']}")
    for row in result["printers"]:
        state = "online" if row["reachable"] else "offline"
        print(f"  {row['id']:<26} {row['name']:<24} {state:<8} printing={row['printing']}")
    for entry in result.get("files", []):
        print(f"  {entry['date']!s:<32} {entry['path']}")
    for key in ("print", "stop"):
        if key in result:
            outcome = result[key]
            print(f"{key}: {outcome['outcome']} {outcome['message']}".rstrip())
    if "reprint" in result:
        print(f"reprint: {json.dumps(result['reprint'], default=str)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
