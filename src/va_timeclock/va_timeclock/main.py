from __future__ import annotations

import argparse
import importlib
import logging
from types import ModuleType
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .auth.model import CurrentUser
from .common.datetime_utils import format_iso_date, parse_iso_date
from .common.logging_utils import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_EXPORT_FILENAME, DISPLAY_TIME_FORMAT
from .core.exceptions import DomainError
from .timelogs.model import TimeLog, TimeLogFilter
from .timelogs.queries import total_hours_by_worker

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="va-timeclock", description="Clock in/out and read VA time logs.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="Show today's clock status")
    sub.add_parser("clock-in", help="Clock in for today")
    sub.add_parser("clock-out", help="Clock out for today")

    def add_filter_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--start", type=parse_iso_date, help="Start date (YYYY-MM-DD), inclusive")
        p.add_argument("--end", type=parse_iso_date, help="End date (YYYY-MM-DD), inclusive")
        p.add_argument("--worker", help="Worker id (admins only)")

    logs = sub.add_parser("logs", help="List time logs")
    add_filter_args(logs)

    summary = sub.add_parser("summary", help="Hours and clocked-in count for one day")
    summary.add_argument("--date", type=parse_iso_date, help="Day (YYYY-MM-DD), default today")

    export = sub.add_parser("export", help="Download the CSV export (admins only)")
    add_filter_args(export)
    export.add_argument("--output", help="Destination file")

    return parser


def _print_log(log: Optional[TimeLog]) -> None:
    if log is None:
        print("No time log for today.")
        return
    print(f"Clock in:    {log.clock_in.strftime(DISPLAY_TIME_FORMAT) if log.clock_in else 'Not set'}")
    print(f"Clock out:   {log.clock_out.strftime(DISPLAY_TIME_FORMAT) if log.clock_out else 'Not set'}")
    print(f"Total hours: {log.total_hours:.2f}")


def _run(args: argparse.Namespace, container: Container, user: CurrentUser, settings: ModuleType) -> None:
    svc = container.time_log_service

    if args.command == "status":
        status = svc.current_status_for(user.user_id)
        print(f"Status: {status.label}")
        _print_log(svc.get_today(user.user_id))
    elif args.command == "clock-in":
        log = svc.clock_in(user.user_id, current_user=user)
        print("Clocked in.")
        _print_log(log)
    elif args.command == "clock-out":
        log = svc.clock_out(user.user_id, current_user=user)
        print("Clocked out.")
        _print_log(log)
    elif args.command == "logs":
        flt = TimeLogFilter(start_date=args.start, end_date=args.end, worker_id=args.worker)
        logs = svc.list_time_logs(flt, current_user=user)
        rows = svc.history_rows(logs)
        if not rows:
            print("No time logs found for the selected criteria.")
            return
        for r in rows:
            print(f"{r.date}  {r.name:<24} {r.clock_in:>8}  {r.clock_out:>8}  {r.total_hours:>6} h  {r.status}")
        if user.is_admin:
            print()
            for s in total_hours_by_worker(logs):
                print(f"{s['worker_name'] or s['worker_id']:<24} {s['total_hours']:.2f} h")
    elif args.command == "summary":
        s = svc.summarize_day(args.date, current_user=user)
        print(f"Date:           {format_iso_date(s.work_date)}")
        print(f"Total hours:    {s.total_hours:.2f}")
        print(f"Active workers: {s.active_workers}")
        print(f"Clocked in now: {s.clocked_in_now}")
        print(f"Completed:      {s.completed}")
    elif args.command == "export":
        flt = TimeLogFilter(start_date=args.start, end_date=args.end, worker_id=args.worker)
        output = args.output or getattr(settings, "EXPORT_FILENAME", DEFAULT_EXPORT_FILENAME)
        path = svc.export_csv(flt, output, current_user=user)
        print(f"OK: Exported to {path}")


def _logout(container: Container) -> None:
    try:
        container.auth_gateway.logout()
    except DomainError as e:
        logger.warning("Logout failed: %s", e)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    container: Optional[Container] = None,
    settings: Optional[ModuleType] = None,
) -> int:
    load_dotenv(override=False)
    settings = settings or importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    args = build_parser().parse_args(argv)
    container = container or build_container(api_config=getattr(settings, "API_CONFIG"))

    try:
        user = container.auth_gateway.login(
            getattr(settings, "API_USERNAME", ""),
            getattr(settings, "API_PASSWORD", ""),
        )
        try:
            _run(args, container, user, settings)
        finally:
            _logout(container)
    except DomainError as e:
        logger.debug("Command %s rejected: %r", args.command, e)
        print(f"Error: {e}")
        return 1
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
