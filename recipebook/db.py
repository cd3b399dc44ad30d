import logging

from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from . import crud, models, schemas

logger = logging.getLogger(__name__)


SAMPLE_RECIPES = [
    schemas.RecipeCreate(
        name="Vanilla Bean",
        ingredients=(
            "2 cups heavy cream\n1 cup milk\n3/4 cup sugar\n"
            "1 vanilla bean\n6 egg yolks"
        ),
        instructions=(
            "Heat cream and milk\nWhisk egg yolks with sugar\n"
            "Temper eggs with hot cream\nCook until thick\n"
            "Strain and chill\nChurn in ice cream maker"
        ),
        prep_time=45,
    ),
    schemas.RecipeCreate(
        name="Chocolate Fudge",
        ingredients=(
            "2 cups heavy cream\n1 cup milk\n3/4 cup sugar\n"
            "1/2 cup cocoa powder\n6 egg yolks\n1/2 cup fudge sauce"
        ),
        instructions=(
            "Whisk cocoa with sugar\nHeat cream and milk\nWhisk egg yolks\n"
            "Temper eggs with hot cream mixture\nCook until thick\n"
            "Add fudge swirls\nChurn in ice cream maker"
        ),
        prep_time=50,
    ),
]


class Database:
    """Owns the engine and session factory for one SQLite database."""

    def __init__(self, url: str):
        self.url = url
        connect_args = {}
        engine_kwargs = {}
        if url.startswith("sqlite"):
            # sync routes run on a thread pool
            connect_args["check_same_thread"] = False
            if url in ("sqlite://", "sqlite:///:memory:"):
                # share one in-memory database across connections
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(
            url, connect_args=connect_args, **engine_kwargs
        )
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def migrate(self):
        """Create the schema if it does not exist yet. Safe to repeat."""
        models.Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()


def seed_sample_data(db: Session) -> int:
    """Insert the sample recipes when the table is empty.

    Returns the number of recipes inserted (0 when rows already exist).
    """
    count = db.scalar(select(func.count()).select_from(models.Recipe))
    if count:
        return 0
    for recipe in SAMPLE_RECIPES:
        crud.create_recipe(db, recipe)
    return len(SAMPLE_RECIPES)


def init_db(database: Database, seed: bool = True):
    """Migrate the schema and optionally seed it.

    Any failure is fatal for the caller: it is logged and re-raised.
    """
    logger.info("Opening database %s", database.url)
    try:
        database.migrate()
        if seed:
            with database.session() as db:
                added = seed_sample_data(db)
            if added:
                logger.info("Seeded %d sample recipe(s)", added)
    except Exception:
        logger.critical("Could not initialize database %s", database.url)
        raise
