"""BookFlow Flask application."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click
from flask import Flask, current_app
from flask.cli import with_appcontext

from .common.db.session import build_engine, create_schema, make_session_factory
from .common.services import AccountService, CartService, CatalogService
from .common.services.catalog_service import DEFAULT_BOOKS
from .common.services.logging import log_event, set_log_level
from .common.utils.passwords import PasswordHasher
from .config import BookFlowConfig
from .routes import api, auth, shop


def create_app(config: Optional[BookFlowConfig] = None) -> Flask:
    config = config or BookFlowConfig.load()
    set_log_level(config.log_level)

    app = Flask(
        __name__,
        template_folder=str(Path(__file__).parent / "templates"),
    )
    app.config["SECRET_KEY"] = config.secret_key
    app.config["BOOKFLOW_CONFIG"] = config

    engine = build_engine(config.database_url)
    create_schema(engine)
    session_factory = make_session_factory(engine)

    components = {
        "engine": engine,
        "account_service": AccountService(session_factory, PasswordHasher(config.bcrypt_rounds)),
        "catalog_service": CatalogService(session_factory),
        "cart_service": CartService(session_factory),
    }
    app.extensions["bookflow_components"] = components

    app.register_blueprint(auth.auth_bp)
    app.register_blueprint(shop.shop_bp)
    app.register_blueprint(api.api_bp)

    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_catalog_command)

    return app


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    create_schema(current_app.extensions["bookflow_components"]["engine"])
    click.echo("Database ready.")


@click.command("seed-catalog")
@click.option(
    "--file",
    "seed_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON list of {id?, title, price} objects. Defaults to a few sample books.",
)
@with_appcontext
def seed_catalog_command(seed_file: Optional[Path]):
    """Load catalog items into the database."""
    try:
        if seed_file is None:
            items = DEFAULT_BOOKS
        else:
            # JSONDecodeError is a ValueError
            items = json.loads(seed_file.read_text(encoding="utf-8"))
            if not isinstance(items, list):
                raise click.ClickException("seed file must contain a JSON list")
        created = current_app.extensions["bookflow_components"]["catalog_service"].seed_items(items)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Added {created} catalog item(s).")


def main() -> None:
    app = create_app()
    log_event("info", "app.started", port=5000)
    app.run(host="127.0.0.1", port=5000, debug=False)


if __name__ == "__main__":
    main()
