"""Registration, login and logout routes."""

from __future__ import annotations

from flask import (
    Blueprint,
    current_app,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from ..common.services import DuplicateEmailError


auth_bp = Blueprint("bookflow_auth", __name__)

SESSION_ACCOUNT_KEY = "bookflow_account_id"


def _components() -> dict:
    return current_app.extensions["bookflow_components"]


def current_account_id():
    return session.get(SESSION_ACCOUNT_KEY)


def require_login():
    """Return a redirect to the login form unless a live account is logged in.

    A session naming an account that no longer exists (e.g. after the database
    was reset) is cleared.
    """
    account_id = current_account_id()
    if account_id and _components()["account_service"].exists(account_id):
        return None
    session.pop(SESSION_ACCOUNT_KEY, None)
    return redirect(url_for("bookflow_auth.login_form"))


@auth_bp.get("/register")
def register_form():
    return render_template("register.html")


@auth_bp.post("/register")
def register_submit():
    email = request.form.get("email", "")
    password = request.form.get("password", "")
    try:
        _components()["account_service"].register(email=email, password=password)
    except DuplicateEmailError as exc:
        return render_template("register.html", error_message=str(exc), email=email), 409
    except ValueError as exc:
        return render_template("register.html", error_message=str(exc), email=email), 400
    return redirect(url_for("bookflow_auth.login_form"))


@auth_bp.get("/login")
def login_form():
    return render_template("login.html")


@auth_bp.post("/login")
def login_submit():
    email = request.form.get("email", "")
    password = request.form.get("password", "")
    account = _components()["account_service"].authenticate(email=email, password=password)
    if account is None:
        return render_template(
            "login.html",
            error_message="Incorrect email or password.",
            email=email,
        ), 401
    session.clear()
    session[SESSION_ACCOUNT_KEY] = account["id"]
    return redirect(url_for("bookflow_shop.catalog_page"))


@auth_bp.get("/logout")
def logout():
    session.pop(SESSION_ACCOUNT_KEY, None)
    return redirect(url_for("bookflow_auth.login_form"))
