from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, render_template, url_for


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if g.get("identity") is None:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = g.get("identity")
        if identity is None:
            return redirect(url_for("login"))

        if not identity.is_admin:
            return render_template("403.html"), 403

        return view(*args, **kwargs)

    return wrapper
