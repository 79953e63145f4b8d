from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError
from .service import SessionIdentity

SESSION_KEY = "identity"


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_identity():
        g.identity = SessionIdentity.from_session(session.get(SESSION_KEY))

    @app.context_processor
    def inject_identity():
        return {"identity": g.get("identity")}

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.identity is not None:
            return redirect(url_for("tracker"))

        mode = request.values.get("mode", "employee")
        if mode not in {"employee", "admin"}:
            mode = "employee"

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                identity = container.auth_service.login(email, password, as_admin=mode == "admin")

                session.clear()
                session[SESSION_KEY] = identity.to_session()

                if identity.is_admin:
                    flash("Signed in as admin.", "success")
                else:
                    flash(f"Welcome, {identity.employee.name}", "success")
                return redirect(url_for("tracker"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Error signing in")
                flash("System error while signing in", "danger")

        return render_template("login.html", mode=mode)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))
