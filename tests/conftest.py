from __future__ import annotations

import csv
import io
from datetime import date, datetime

import httpx
import pytest
from flask import Flask, jsonify, request, session

from va_timeclock.container import build_container


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 9, 0, 0)


class BackendClock:
    def __init__(self, now: datetime):
        self.now = now


def _user_json(u: dict) -> dict:
    return {k: u[k] for k in ("id", "username", "first_name", "last_name", "role")}


def create_stub_backend(clock: BackendClock) -> Flask:
    """Minimal stand-in for the REST backend's /api routes."""

    app = Flask(__name__)
    app.secret_key = "test-secret"

    users = {
        1: {"id": 1, "username": "va1", "password": "pw", "first_name": "Ana", "last_name": "Cruz", "role": "va"},
        2: {"id": 2, "username": "admin", "password": "pw", "first_name": "Ada", "last_name": "Min", "role": "admin"},
    }
    logs: list[dict] = []
    app.config["LOGS"] = logs

    def current():
        uid = session.get("user_id")
        return users.get(uid) if uid else None

    def log_json(log: dict) -> dict:
        out = dict(log)
        u = users[log["user_id"]]
        out["user"] = {"first_name": u["first_name"], "last_name": u["last_name"]}
        return out

    def today_log(user_id: int):
        today = clock.now.date().isoformat()
        for log in logs:
            if log["user_id"] == user_id and log["date"] == today:
                return log
        return None

    @app.post("/api/auth/login")
    def login():
        data = request.get_json() or {}
        for u in users.values():
            if u["username"] == data.get("username") and u["password"] == data.get("password"):
                session["user_id"] = u["id"]
                return jsonify({"user": _user_json(u)})
        return jsonify({"error": "Invalid credentials"}), 401

    @app.post("/api/auth/logout")
    def logout():
        if app.config.get("FAIL_LOGOUT"):
            return jsonify({"error": "Logout failed"}), 500
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.get("/api/auth/me")
    def me():
        u = current()
        if not u:
            return jsonify({"error": "Not authenticated"}), 401
        return jsonify({"user": _user_json(u)})

    @app.post("/api/time-logs/clock-in")
    def clock_in():
        u = current()
        if not u:
            return jsonify({"error": "Not authenticated"}), 401
        if today_log(u["id"]):
            return jsonify({"error": "Already clocked in today"}), 400
        log = {
            "id": len(logs) + 1,
            "user_id": u["id"],
            "date": clock.now.date().isoformat(),
            "clock_in": clock.now.isoformat(),
            "clock_out": None,
            "total_hours": None,
        }
        logs.append(log)
        return jsonify({"time_log": log_json(log)}), 201

    @app.post("/api/time-logs/clock-out")
    def clock_out():
        u = current()
        if not u:
            return jsonify({"error": "Not authenticated"}), 401
        log = today_log(u["id"])
        if not log or log["clock_out"]:
            return jsonify({"error": "Not clocked in"}), 400
        log["clock_out"] = clock.now.isoformat()
        started = datetime.fromisoformat(log["clock_in"])
        log["total_hours"] = round((clock.now - started).total_seconds() / 3600, 2)
        return jsonify({"time_log": log_json(log)})

    def filtered(u: dict) -> list[dict]:
        start = request.args.get("start_date")
        end = request.args.get("end_date")
        user_id = request.args.get("user_id")
        out = []
        for log in logs:
            if u["role"] != "admin" and log["user_id"] != u["id"]:
                continue
            if user_id and str(log["user_id"]) != user_id:
                continue
            if start and log["date"] < start:
                continue
            if end and log["date"] > end:
                continue
            out.append(log)
        return out

    @app.get("/api/time-logs")
    def list_logs():
        u = current()
        if not u:
            return jsonify({"error": "Not authenticated"}), 401
        return jsonify({"time_logs": [log_json(log) for log in filtered(u)]})

    @app.get("/api/time-logs/today")
    def today():
        u = current()
        if not u:
            return jsonify({"error": "Not authenticated"}), 401
        log = today_log(u["id"])
        return jsonify({"time_log": log_json(log) if log else None})

    @app.get("/api/time-logs/export")
    def export():
        u = current()
        if not u or u["role"] != "admin":
            return jsonify({"error": "Admin access required"}), 403
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(["Date", "User", "Clock In", "Clock Out", "Total Hours"])
        for log in filtered(u):
            writer.writerow([log["date"], log["user_id"], log["clock_in"], log["clock_out"] or "", log["total_hours"] or 0])
        return app.response_class(out.getvalue(), mimetype="text/csv")

    return app


@pytest.fixture
def backend_clock() -> BackendClock:
    return BackendClock(datetime(2024, 1, 15, 9, 0, 0))


@pytest.fixture
def backend_app(backend_clock) -> Flask:
    return create_stub_backend(backend_clock)


@pytest.fixture
def container(backend_app, backend_clock):
    c = build_container(
        api_config={"base_url": "http://testserver/api", "timeout": 2.0},
        transport=httpx.WSGITransport(app=backend_app),
        clock=lambda: backend_clock.now,
    )
    yield c
    c.close()


@pytest.fixture
def seed_logs(backend_app):
    def _seed(*rows: tuple[int, date, datetime | None, datetime | None]) -> None:
        logs = backend_app.config["LOGS"]
        for user_id, work_date, clock_in, clock_out in rows:
            logs.append(
                {
                    "id": len(logs) + 1,
                    "user_id": user_id,
                    "date": work_date.isoformat(),
                    "clock_in": clock_in.isoformat() if clock_in else None,
                    "clock_out": clock_out.isoformat() if clock_out else None,
                    "total_hours": None,
                }
            )

    return _seed
