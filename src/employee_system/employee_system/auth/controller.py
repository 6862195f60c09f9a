from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.form_tokens import issue_form_token
from ..core.exceptions import AuthError, RemoteOperationError
from ..container import Container

logger = logging.getLogger(__name__)

AUTH_SESSION_KEY = "auth"


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: issue_form_token(session)

    @app.before_request
    def resolve_session():
        if request.endpoint == "static":
            return None

        services = container.for_request(session.get(AUTH_SESSION_KEY))
        resolver = services.session_resolver()
        resolver.start()

        g.services = services
        g.resolver = resolver
        return None

    @app.after_request
    def keep_session_tokens(response):
        resolver = g.get("resolver")
        if resolver is not None and resolver.session is not None:
            tokens = resolver.session.tokens()
            if session.get(AUTH_SESSION_KEY) != tokens:
                session[AUTH_SESSION_KEY] = tokens
        return response

    @app.teardown_request
    def release_resolver(_exc):
        resolver = g.pop("resolver", None)
        if resolver is not None:
            resolver.close()

    @app.context_processor
    def inject_identity():
        resolver = g.get("resolver")
        if resolver is None:
            return {"current_session": None, "current_profile": None}
        return {"current_session": resolver.session, "current_profile": resolver.profile}

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.resolver.is_authenticated:
            return redirect(url_for("dashboard"))

        email = ""
        error = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                new_session = g.services.auth_service.sign_in(email, password)

                session.permanent = True
                session[AUTH_SESSION_KEY] = new_session.tokens()

                return redirect(url_for("dashboard"))
            except AuthError as e:
                error = str(e)
            except RemoteOperationError:
                logger.exception("sign in failed")
                error = "Sign-in is unavailable right now"

        return render_template("login.html", email=email, error=error)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        try:
            g.services.auth_service.sign_out()
        except RemoteOperationError:
            logger.exception("remote sign out failed, clearing local session anyway")

        g.resolver.resolve(None)
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))
