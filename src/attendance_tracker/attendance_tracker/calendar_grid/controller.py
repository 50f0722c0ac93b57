from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request, session

from ..common.decorators import profile_required
from ..core.exceptions import DomainError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/home", endpoint="home")
    @profile_required
    def home():
        user_id = int(session["user_id"])
        try:
            view = container.dashboard_service.home(user_id, year=request.args.get("year", type=int))
        except ValidationError as e:
            return str(e), 404
        except DomainError:
            logger.exception("Dashboard failed for user %s", user_id)
            return "Error loading dashboard", 500
        return render_template("home.html", title="Attendance Tracker", view=view)

    @app.route("/attendance/month/<int:month>", endpoint="month_details")
    @profile_required
    def month_details(month: int):
        user_id = int(session["user_id"])
        try:
            view = container.dashboard_service.month_detail(
                user_id, month, year=request.args.get("year", type=int)
            )
        except ValidationError as e:
            return str(e), 404
        except DomainError:
            logger.exception("Month %s failed for user %s", month, user_id)
            return "Error loading month details", 500
        return render_template("attendance_month.html", view=view)

    @app.route("/attendance/week", endpoint="week_details")
    @profile_required
    def week_details():
        user_id = int(session["user_id"])
        try:
            view = container.dashboard_service.week_detail(user_id)
        except DomainError:
            logger.exception("Week view failed for user %s", user_id)
            return "Error loading weekly data", 500
        return render_template("attendance_week.html", title="This Week's Attendance", view=view)

    @app.route("/attendance/data", endpoint="attendance_data")
    @profile_required
    def attendance_data():
        user_id = int(session["user_id"])
        try:
            data = container.dashboard_service.records_feed(user_id)
        except DomainError:
            logger.exception("Data feed failed for user %s", user_id)
            return jsonify({"error": "Error loading attendance data"}), 500
        return jsonify({"data": data})
