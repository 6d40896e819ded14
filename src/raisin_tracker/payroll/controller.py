from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_date_arg, week_start
from ..common.http import error_response, iso
from ..container import Container
from ..core.exceptions import ValidationError
from ..daily_work.controller import entry_json
from ..daily_work.model import WorkTotals
from .service import WeeklySummary


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _per_day_json(daily: dict[date, WorkTotals]) -> dict:
    return {iso(d): {"kgs": t.total_kgs, "earnings": t.total_earnings} for d, t in sorted(daily.items())}


def weekly_json(summary: WeeklySummary) -> list[dict]:
    out: list[dict] = []
    for r in summary.rows:
        row = {
            "employeeId": r.employee_id,
            "name": r.name,
            "totalKgs": r.total_kgs,
            "totalEarnings": r.total_earnings,
        }
        if summary.detailed:
            row["dailyWork"] = _per_day_json(r.daily)
        out.append(row)
    return out


def _daily_cells(summary: WeeklySummary, daily: dict[date, WorkTotals]) -> dict:
    cells: dict = {}
    for d in summary.dates:
        t = daily.get(d)
        cells[f"{iso(d)}_kgs"] = t.total_kgs if t else ""
        cells[f"{iso(d)}_earnings"] = t.total_earnings if t else ""
    return cells


def weekly_csv(summary: WeeklySummary) -> str:
    """One row per employee plus a Total row; per-day columns in the detailed view."""
    fieldnames = ["employee_id", "name"]
    if summary.detailed:
        for d in summary.dates:
            fieldnames += [f"{iso(d)}_kgs", f"{iso(d)}_earnings"]
    fieldnames += ["total_kgs", "total_earnings"]

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames)
    writer.writeheader()
    for r in summary.rows:
        line = {
            "employee_id": r.employee_id,
            "name": r.name,
            "total_kgs": r.total_kgs,
            "total_earnings": r.total_earnings,
        }
        if summary.detailed:
            line.update(_daily_cells(summary, r.daily))
        writer.writerow(line)

    total = {"employee_id": "", "name": "Total", "total_kgs": summary.total_kgs, "total_earnings": summary.total_earnings}
    if summary.detailed:
        total.update(_daily_cells(summary, summary.daily_totals))
    writer.writerow(total)
    return out.getvalue()


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service

    def _currency() -> str:
        return str(app.config.get("CURRENCY_SYMBOL", "₹"))

    def _weekly_from_args() -> WeeklySummary:
        start = parse_date_arg(
            request.args.get("week_start"),
            field_name="week_start",
            default=week_start(now_local().date()),
        )
        return service.weekly_summary(start, detailed=_flag(request.args.get("detailed")))

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        try:
            stats = service.dashboard()
            return jsonify(
                {
                    "totalEmployees": stats.total_employees,
                    "totalKgsToday": stats.today.total_kgs,
                    "totalEarningsToday": stats.today.total_earnings,
                    "weeklyStats": {
                        "totalKgs": stats.week.total_kgs,
                        "totalEarnings": stats.week.total_earnings,
                    },
                }
            )
        except Exception:
            app.logger.exception("Error fetching dashboard stats")
            return error_response("Failed to fetch dashboard stats", 500)

    @app.route("/api/daily-summary", methods=["GET"], endpoint="daily_summary")
    def daily_summary():
        try:
            work_date = parse_date_arg(request.args.get("date"), field_name="date", default=now_local().date())
            summary = service.daily_summary(work_date)
            return jsonify(
                {
                    "date": iso(summary.work_date),
                    "entries": [entry_json(e) for e in summary.entries],
                    "totalKgs": summary.total_kgs,
                    "totalEarnings": summary.total_earnings,
                    "currency": _currency(),
                }
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("Error fetching daily summary")
            return error_response("Failed to fetch daily summary", 500)

    @app.route("/api/weekly-summary", methods=["GET"], endpoint="weekly_summary")
    def weekly_summary():
        try:
            summary = _weekly_from_args()
            body = {
                "weekStart": iso(summary.week_start),
                "dates": [iso(d) for d in summary.dates],
                "rows": weekly_json(summary),
                "totalKgs": summary.total_kgs,
                "totalEarnings": summary.total_earnings,
                "currency": _currency(),
            }
            if summary.detailed:
                body["dailyTotals"] = _per_day_json(summary.daily_totals)
            return jsonify(body)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("Error fetching weekly summary")
            return error_response("Failed to fetch weekly summary", 500)

    @app.route("/api/weekly-summary.csv", methods=["GET"], endpoint="weekly_summary_csv")
    def weekly_summary_csv():
        try:
            summary = _weekly_from_args()
            filename = f"weekly_summary_{summary.week_start.strftime('%Y%m%d')}.csv"
            csv_bytes = weekly_csv(summary).encode("utf-8-sig")
            return app.response_class(
                csv_bytes,
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("Error exporting weekly summary")
            return error_response("Failed to export weekly summary", 500)
