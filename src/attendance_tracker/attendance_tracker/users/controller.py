from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.decorators import login_required
from ..core.exceptions import AuthenticationError, DomainError, ValidationError
from ..container import Container
from .service import SessionUser

logger = logging.getLogger(__name__)


def _start_session(s_user: SessionUser) -> None:
    session.clear()
    session["user_id"] = s_user.user_id
    session["name"] = s_user.name
    session["role"] = s_user.role.value
    session["profile_completed"] = s_user.profile_completed


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        if "user_id" not in session:
            return redirect(url_for("signin"))
        return redirect(url_for("home"))

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        email = request.form.get("email", "")
        username = request.form.get("username", "")

        if request.method == "POST":
            try:
                container.auth_service.register(
                    email=email,
                    username=username,
                    password=request.form.get("password", ""),
                    confirm_password=request.form.get("confirmPassword", ""),
                )
                flash("Registered successfully. Please sign in.", "success")
                return redirect(url_for("signin"))
            except ValidationError as e:
                flash(str(e), "danger")
            except DomainError:
                logger.exception("Sign-up failed for %s", email)
                flash("Server error", "danger")

        # Send back the same values so the form stays filled after an error.
        return render_template("signup.html", email=email, username=username)

    @app.route("/signin", methods=["GET", "POST"], endpoint="signin")
    def signin():
        if "user_id" in session:
            return redirect(url_for("home"))

        email = request.form.get("email", "")
        if request.method == "POST":
            try:
                s_user = container.auth_service.authenticate(email, request.form.get("password", ""))
                _start_session(s_user)
                return redirect(url_for("home"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except DomainError:
                logger.exception("Sign-in failed for %s", email)
                flash("Server error", "danger")

        return render_template("signin.html", email=email)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Logged out", "info")
        return redirect(url_for("signin"))

    @app.route("/profile/complete", methods=["GET", "POST"], endpoint="profile_complete")
    @login_required
    def profile_complete():
        user_id = int(session["user_id"])

        if request.method == "POST":
            try:
                profile = container.profile_service.prepare_profile(
                    user_id,
                    full_name=request.form.get("full_name", ""),
                    address=request.form.get("address"),
                    mobile=request.form.get("mobile"),
                    emp_id=request.form.get("emp_id"),
                    position=request.form.get("position"),
                    type_of_work=request.form.get("type_of_work"),
                )

                # Nothing touches the disk until the form itself is valid.
                upload = request.files.get("profile_image")
                if upload and upload.filename:
                    filename = container.profile_service.image_filename(user_id, upload.filename)
                    upload_dir = Path(app.config["UPLOAD_DIR"])
                    upload_dir.mkdir(parents=True, exist_ok=True)
                    upload.save(upload_dir / filename)
                    image_url = f"{app.config['UPLOAD_URL_PREFIX'].rstrip('/')}/{filename}"
                    profile = replace(profile, profile_image=image_url)

                s_user = container.profile_service.save_profile(user_id, profile)
                _start_session(s_user)
                flash("Profile completed successfully.", "success")
                return redirect(url_for("home"))
            except ValidationError as e:
                flash(str(e), "danger")
            except DomainError:
                logger.exception("Profile save failed for user %s", user_id)
                flash("Failed to save profile", "danger")

        user = container.profile_service.get_user(user_id)
        return render_template("complete_profile.html", user=user)
