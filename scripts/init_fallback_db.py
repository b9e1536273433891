"""Initialize the local fallback store and print collection sizes.

Creates the data directory and seeds any missing collection files with the
test accounts (researcher, participant, admin), sample studies, applications,
wallet and transactions. Existing files are left untouched.

Usage:
    python -m scripts.init_fallback_db [path/to/data-dir]

Default path: FALLBACK_DATA_DIR (settings), relative to the working directory.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from fallback_store.core.config import get_settings
from fallback_store.domain.exceptions import BootstrapFailureException
from fallback_store.infrastructure.local_store.bootstrap import bootstrap_fallback_store
from fallback_store.shared.logging import setup_logging


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees FALLBACK_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(data_dir: Path | None) -> int:
    _load_env()
    setup_logging()
    try:
        client = await bootstrap_fallback_store(data_dir)
    except BootstrapFailureException as e:
        print(f"{e.message}: {e.details.get('reason')}", file=sys.stderr)
        return 1

    print(f"Fallback store: {client.store.data_dir}")
    for collection in client.store.collections:
        response = await client.from_(collection).select("id").execute()
        if response.error is not None:
            print(f"  {collection}: error ({response.error.message})", file=sys.stderr)
            return 1
        print(f"  {collection}: {response.count} record(s)")
    return 0


def main() -> None:
    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    sys.exit(asyncio.run(run(data_dir)))


if __name__ == "__main__":
    main()
