import logging
import sys
from pathlib import Path

from recipebook import crud
from recipebook.config import Settings
from recipebook.db import Database, init_db
from recipebook.main import configure_logging
from recipebook.recipes import load_recipes, to_recipe_create

logger = logging.getLogger("import_data")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    if argv:
        p = Path(argv[0])
    else:
        p = Path(__file__).resolve().parents[1] / 'data' / 'recipes.json'
    if not p.exists():
        logger.error('%s not found', p)
        return 1
    database = Database(settings.database_url)
    init_db(database, seed=False)
    added = 0
    with database.session() as db:
        for entry in load_recipes(p):
            if not entry.get('name'):
                continue
            crud.create_recipe(db, to_recipe_create(entry))
            added += 1
    database.dispose()
    logger.info('Imported %d recipes', added)
    return 0


if __name__ == '__main__':
    sys.exit(main())
