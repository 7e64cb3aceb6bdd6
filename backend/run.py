import argparse
import uvicorn
from player_directory.settings import load_settings

def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Player directory backend")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=8080)
    p.add_argument("--reload", action="store_true")
    p.add_argument("--secrets", default="./secrets.json")

    # Optional overrides (override secrets.json)
    p.add_argument("--db-url")
    p.add_argument("--jwt-secret")
    p.add_argument("--log-level")
    p.add_argument("--admin-can-delete-admin", action="store_true", default=None)
    return p.parse_args()

def app_factory():
    # executed in the uvicorn worker process (including reload)
    args = parse_args()
    settings = load_settings(
        secrets_path=args.secrets,
        db_url=args.db_url,
        jwt_secret=args.jwt_secret,
        log_level=args.log_level,
        admin_can_delete_admin=args.admin_can_delete_admin,
    )
    from player_directory.main import create_app
    return create_app(settings)

def main() -> None:
    args = parse_args()
    uvicorn.run(
        "run:app_factory",
        host=args.host,
        port=args.port,
        reload=args.reload,
        factory=True,
        log_config=None,
    )

if __name__ == "__main__":
    main()
