"""JSON catalog API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify


api_bp = Blueprint("bookflow_api", __name__, url_prefix="/api")


def _catalog():
    return current_app.extensions["bookflow_components"]["catalog_service"]


@api_bp.get("/books")
def list_books():
    return jsonify({"items": _catalog().list_items()})


@api_bp.get("/books/<int:item_id>")
def get_book(item_id: int):
    item = _catalog().get_item(item_id)
    if not item:
        return jsonify({"error": f"catalog item {item_id} not found"}), 404
    return jsonify(item)
