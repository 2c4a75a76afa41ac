# scripts/init_db.py

import logging

from invoicing.config import get_settings
from invoicing.db.engine import get_engine
from invoicing.db.schema import metadata
from invoicing.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")


if __name__ == "__main__":
    main()
