from todo_api.core.config import settings
from todo_api.core.logging_config import setup_logging
from todo_api.db.init_db import init_db
from todo_api.db.session import engine
if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    init_db(engine)
