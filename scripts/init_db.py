"""Create the project tables from the ORM metadata (development databases only).

Usage:
    uv run python -m scripts.init_db
No migrations ship with this service; production schemas are managed outside it.
"""

import asyncio
import sys

from app.infrastructure.persistence import database, models  # noqa: F401  (registers tables)
from app.infrastructure.persistence.database import Base


async def main() -> None:
    database._ensure_engine()
    if database.engine is None:
        print("DATABASE_URL is not set", file=sys.stderr)
        sys.exit(1)
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await database.engine.dispose()
    print(f"Created {len(Base.metadata.tables)} tables")


if __name__ == "__main__":
    asyncio.run(main())
