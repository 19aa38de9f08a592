"""CLI entry point: serve the API or run a single query against the profile store."""

import argparse
import json
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from me_api.config import AppConfig, load_config, validate_config
from me_api.errors import StoreUnavailable
from me_api.models import create_db_engine, create_session_factory, init_db
from me_api.search.service import QueryService
from me_api.storage.repository import SqlProfileRepository
from me_api.utils.logging_config import setup_logging

logger = logging.getLogger("me_api")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Me API - personal profile store with search and skill queries",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument("--host", help="Override server.host")
    parser.add_argument("--port", type=int, help="Override server.port")

    queries = parser.add_mutually_exclusive_group()
    queries.add_argument(
        "--search", metavar="Q",
        help="Print profiles matching a keyword and exit",
    )
    queries.add_argument(
        "--skill", metavar="SKILL",
        help="Print projects tagged with a skill and exit",
    )
    queries.add_argument(
        "--top-skills", metavar="N", type=int, nargs="?", const=0,
        help="Print the most used project skills and exit (default count from config)",
    )
    queries.add_argument(
        "--show", action="store_true",
        help="Print a summary of the stored profile and exit",
    )
    return parser.parse_args(argv)


def run_query(config: AppConfig, args: argparse.Namespace) -> str:
    """Run the one-off query selected on the command line and return its output."""
    engine = create_db_engine(config.database.url, echo=config.database.echo)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        engine.dispose()
        raise StoreUnavailable(f"Could not open database: {type(e).__name__}") from e

    session = create_session_factory(engine)()
    try:
        repository = SqlProfileRepository(session)
        service = QueryService(repository, top_skills_limit=config.query.top_skills_limit)

        if args.show:
            profile = repository.find_first()
            return profile.to_summary_string() if profile else "No profile stored."
        if args.search is not None:
            payload = service.search_payload(args.search)
        elif args.skill is not None:
            payload = service.projects_payload(args.skill)
        else:
            payload = service.top_skills_payload(args.top_skills or None)
        return json.dumps(payload, indent=2, ensure_ascii=False)
    finally:
        session.close()
        engine.dispose()


def serve(config: AppConfig):
    import uvicorn

    from me_api.web.app import create_app

    logger.info("Starting server on %s:%d", config.server.host, config.server.port)
    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port, log_config=None)


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port

    setup_logging(config.log_dir, config.log_level)

    # Validate config and print warnings
    for w in validate_config(config):
        logger.warning("Config: %s", w)

    if args.show or args.search is not None or args.skill is not None or args.top_skills is not None:
        try:
            print(run_query(config, args))
        except StoreUnavailable as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    serve(config)


if __name__ == "__main__":
    main()
