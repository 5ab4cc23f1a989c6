from typing import Dict, Iterable, List, Mapping

from ..db.session import SessionFactory
from ..models.catalog_item import CatalogItem
from ..utils.dto import to_catalog_item_dto
from ..utils.validators import ensure_item_id, ensure_price, is_storable_id
from .logging import log_event


DEFAULT_BOOKS = [
    {"title": "Clean Code", "price": "32.99"},
    {"title": "Fluent Python", "price": "54.50"},
    {"title": "The Pragmatic Programmer", "price": "41.00"},
    {"title": "Designing Data-Intensive Applications", "price": "45.90"},
]


class CatalogService:
    """Read access to the book catalog, plus seeding.

    Items are never edited through the web app; they are loaded with
    ``seed_items`` (the ``seed-catalog`` command).
    """

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_items(self) -> List[Dict]:
        with self._session_factory() as session:
            rows = session.query(CatalogItem).order_by(CatalogItem.title, CatalogItem.id).all()
            return [to_catalog_item_dto(r) for r in rows]

    def get_item(self, item_id: int) -> Dict:
        """Return the item DTO, or an empty dict when it does not exist."""
        if not is_storable_id(item_id):
            return {}
        with self._session_factory() as session:
            row = session.get(CatalogItem, item_id)
            return to_catalog_item_dto(row) if row else {}

    def seed_items(self, items: Iterable[Mapping]) -> int:
        """Insert catalog items, skipping ids that already exist.

        Each entry needs ``title`` and ``price``; ``id`` is optional. All
        entries are validated before anything is written, and an id may
        appear only once per batch.
        """
        prepared = []
        seen_ids = set()
        for position, raw in enumerate(items, start=1):
            if not isinstance(raw, Mapping):
                raise ValueError(f"entry {position} must be an object")
            title = str(raw.get("title") or "").strip()
            if not title:
                raise ValueError(f"entry {position}: title required")
            price = ensure_price(raw.get("price"))
            item_id = raw.get("id")
            if item_id is not None:
                item_id = ensure_item_id(item_id)
                if item_id in seen_ids:
                    raise ValueError(f"entry {position}: id {item_id} repeated")
                seen_ids.add(item_id)
            prepared.append((item_id, title, price))

        created = 0
        with self._session_factory() as session:
            for item_id, title, price in prepared:
                if item_id is not None and session.get(CatalogItem, item_id) is not None:
                    continue
                session.add(CatalogItem(id=item_id, title=title, price=price))
                created += 1
            session.flush()
        log_event("info", "catalog.seeded", created=created)
        return created
