from __future__ import annotations

from flask import Flask, flash, redirect, request, session, url_for

from ..common.decorators import profile_required
from ..container import Container


def _back():
    # Return to the page that posted the form (dashboard by default).
    return redirect(request.referrer or url_for("home"))


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/punch-in", methods=["POST"], endpoint="punch_in")
    @profile_required
    def punch_in():
        record = container.punch_service.punch_in(int(session["user_id"]))
        if record:
            flash("Punched in", "success")
        else:
            flash("You are already punched in", "warning")
        return _back()

    @app.route("/attendance/punch-out", methods=["POST"], endpoint="punch_out")
    @profile_required
    def punch_out():
        record = container.punch_service.punch_out(int(session["user_id"]))
        if record:
            flash("Punched out", "success")
        else:
            flash("No active punch-in found", "warning")
        return _back()
