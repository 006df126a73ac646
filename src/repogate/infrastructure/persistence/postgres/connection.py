"""PostgreSQL connection pool."""

from psycopg_pool import ConnectionPool


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> ConnectionPool:
    """Create connection pool.

    Pool is created with open=False. Caller must call pool.open() before use
    (e.g. via LifespanMiddleware in ASGI lifespan).
    """
    return ConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )
