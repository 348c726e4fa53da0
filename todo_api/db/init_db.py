import logging
from sqlalchemy.engine import Engine
from ..db.base import Base

logger = logging.getLogger(__name__)

def init_db(bind: Engine) -> None:
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database schema created or already present: {bind.url.render_as_string(hide_password=True)}")
