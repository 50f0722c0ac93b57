from __future__ import annotations

from functools import wraps

from flask import flash, redirect, session, url_for


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            flash("Please log in to view this resource", "warning")
            return redirect(url_for("signin"))
        return view(*args, **kwargs)

    return wrapper


def profile_required(view):
    """Login plus a completed profile (attendance pages)."""

    @wraps(view)
    @login_required
    def wrapper(*args, **kwargs):
        if not session.get("profile_completed"):
            return redirect(url_for("profile_complete"))
        return view(*args, **kwargs)

    return wrapper
