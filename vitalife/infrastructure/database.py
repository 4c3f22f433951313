import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


class Store:
    """Explicitly constructed handle over one SQLAlchemy engine.

    Nothing here is global: the management command builds a store from
    settings, hands it to repositories, and closes it when the run ends.
    """

    def __init__(self, url: str, **engine_kwargs) -> None:
        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.closed = False

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Yield a connection whose work is committed when the block exits."""
        conn = self.engine.connect()
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def close(self) -> None:
        if not self.closed:
            self.engine.dispose()
            self.closed = True
            logger.debug("Store connection pool released")


@contextmanager
def open_store(url: str, **engine_kwargs) -> Iterator[Store]:
    """Acquire a store for the duration of a run and always release it."""
    store = Store(url, **engine_kwargs)
    try:
        yield store
    finally:
        store.close()
