"""Catalog page and cart routes."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, session, url_for

from .auth import SESSION_ACCOUNT_KEY, current_account_id, require_login


shop_bp = Blueprint("bookflow_shop", __name__)


def _components() -> dict:
    return current_app.extensions["bookflow_components"]


@shop_bp.before_request
def guard_cart_routes():
    if request.endpoint and request.endpoint.startswith("bookflow_shop.cart_"):
        return require_login()
    return None


@shop_bp.get("/")
def catalog_page():
    items = _components()["catalog_service"].list_items()
    return render_template("catalog.html", items=items, logged_in=bool(current_account_id()))


@shop_bp.get("/cart")
def cart_view():
    cart = _components()["cart_service"].get_cart(account_id=current_account_id())
    return jsonify(cart)


@shop_bp.post("/cart/add/<int:item_id>")
def cart_add(item_id: int):
    cart_service = _components()["cart_service"]
    try:
        result = cart_service.add_item(account_id=current_account_id(), catalog_item_id=item_id)
    except PermissionError:
        session.pop(SESSION_ACCOUNT_KEY, None)
        return redirect(url_for("bookflow_auth.login_form"))
    except LookupError as exc:
        return jsonify({"error": str(exc)}), 404
    return jsonify(
        {
            "status": "ok",
            "message": "Book added to cart",
            "cart_item_id": result["cart_item_id"],
        }
    )
