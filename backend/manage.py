import argparse
import logging

from player_directory.logging_config import setup_logging
from player_directory.settings import load_settings
from player_directory.db import configure_db, init_db, session_scope

from player_directory.seed import load_seed_file, seed_accounts, seed_from_json
from player_directory.store import PlayerStore


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Player directory management commands")
    sub = p.add_subparsers(dest="cmd", required=True)

    p.add_argument("--secrets", default="./secrets.json")
    p.add_argument("--db-url")
    p.add_argument("--log-level")

    seed = sub.add_parser("seed", help="Import players from JSON")
    seed.add_argument("--file", required=True, help="Path to seed JSON file")

    sub.add_parser("bootstrap", help="Create the configured supervisor/admin accounts")
    sub.add_parser("list", help="Print all players")

    return p.parse_args()


def main() -> None:
    args = parse_args()

    settings = load_settings(
        secrets_path=args.secrets,
        db_url=args.db_url,
        log_level=args.log_level,
    )
    setup_logging(settings.log_level)

    configure_db(settings.db_url)
    init_db()

    log = logging.getLogger(__name__)

    with session_scope() as s:
        if args.cmd == "seed":
            seed_accounts(s, settings)
            res = seed_from_json(s, load_seed_file(args.file))
            log.info("Seed complete: %s", res)
        elif args.cmd == "bootstrap":
            log.info("Bootstrap complete: %s", seed_accounts(s, settings))
        elif args.cmd == "list":
            for p in PlayerStore(s).get_all():
                print(f"{p.id:>6}  {p.role:<10}  {p.login:<20}  {p.screen_name}")


if __name__ == "__main__":
    main()
