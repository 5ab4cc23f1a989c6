from typing import Any, Dict


def to_catalog_item_dto(row: Any) -> Dict:
    return {
        "id": getattr(row, "id", None),
        "title": getattr(row, "title", None),
        "price": float(getattr(row, "price", 0) or 0),
    }


def to_cart_item_dto(row: Any) -> Dict:
    item = getattr(row, "catalog_item", None)
    return {
        "id": getattr(row, "id", None),
        "catalog_item_id": getattr(row, "catalog_item_id", None),
        "title": getattr(item, "title", None),
        "price": float(getattr(item, "price", 0) or 0),
    }


def to_account_dto(row: Any) -> Dict:
    # password_hash stays out of every response
    return {
        "id": getattr(row, "id", None),
        "email": getattr(row, "email", None),
    }
