from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, render_template, request, session, url_for

from ..common.form_tokens import consume_form_token
from .resolver import ManagerView


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not g.resolver.is_authenticated:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not g.resolver.is_authenticated:
            return redirect(url_for("login"))

        if not isinstance(g.resolver.view, ManagerView):
            return render_template("403.html"), 403

        return view(*args, **kwargs)

    return wrapper


def single_submit(view):
    """Reject a POST whose one-shot form token was already used (or never issued)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not consume_form_token(session, request.form.get("csrf_token")):
            flash("That form was already submitted.", "warning")
            return redirect(url_for("dashboard"))
        return view(*args, **kwargs)

    return wrapper
