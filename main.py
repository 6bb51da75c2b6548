import click
import yaml
from pathlib import Path
from doc_catalog.core.logging import get_logger
from doc_catalog.core.config import settings
import uvicorn

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent


@click.group()
def cli():
    """Doc catalog CLI"""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0")
@click.option("--port", default=8000)
@click.option("--workers", default=1)
@click.option("--production", is_flag=True, help="Run in production mode")
def serve(host, port, workers, production):
    """Start the API server"""
    reload = settings.DEBUG and not production  # Auto-reload in debug unless production mode

    uvicorn.run(
        "doc_catalog.api.web_app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if production else 1,
        log_level="info" if production else "debug",
    )


@cli.command("init-db")
@click.option("--revision", default="head", help="Alembic revision to upgrade to")
def init_db(revision):
    """Create or upgrade the database schema with Alembic"""
    import alembic.command
    import alembic.config

    alembic_cfg = alembic.config.Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    alembic.command.upgrade(alembic_cfg, revision)
    click.echo(f"Database upgraded to {revision}")


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False))
def seed(path):
    """Load categories and docs from a YAML file"""
    from doc_catalog.core.dependencies import session_scope
    from doc_catalog.core.exceptions import CatalogError
    from doc_catalog.services.seed_service import SeedService

    path = path or settings.SEED_DATA_PATH
    if not Path(path).is_file():
        raise click.ClickException(f"Seed file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    try:
        with session_scope() as db_session:
            counts = SeedService(db_session).seed(data)
    except CatalogError as e:
        logger.error(f"Seeding failed: {e.message}")
        raise click.ClickException(f"{e.message} ({e.key})")

    click.echo(f"Seeded {path}")
    for line in SeedService.summarize(counts):
        click.echo(f"  - {line}")


@cli.command("list-categories")
def list_categories():
    """List all categories"""
    from doc_catalog.core.dependencies import session_scope
    from doc_catalog.services.category_service import CategoryService

    with session_scope() as db_session:
        categories = CategoryService(db_session).list_categories()

    if not categories:
        click.echo("No categories")
        return

    click.echo("Categories:")
    for category in categories:
        click.echo(f"  - {category.category_name} ({category.slug}) [id={category.id}]")


if __name__ == "__main__":
    cli()
