"""Command-line interface for article-presenter."""

import argparse
import json
import logging
import sys
from pathlib import Path

from article_presenter.config import PresenterConfig
from article_presenter.presenters import ArticleCollectionPresenter, ArticlePresenter
from article_presenter.presenters.article_presenter import DEFAULT_PLACEMENT
from schemas.article import Article


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def load_config(args: argparse.Namespace) -> PresenterConfig:
    """Build the presenter config from --app-domain or the environment."""
    if args.app_domain:
        return PresenterConfig(app_domain=args.app_domain)
    return PresenterConfig.from_env()


def load_records(path: Path) -> dict | list:
    """Read an article record (or a list of records) from a JSON file."""
    return json.loads(path.read_text())


def present(args: argparse.Namespace) -> int:
    """Execute the present command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    article_path = args.article.resolve()
    if not article_path.exists():
        logger.error(f"Article file not found: {article_path}")
        return 1

    try:
        config = load_config(args)
        records = load_records(article_path)

        if isinstance(records, list):
            articles = [Article.model_validate(record) for record in records]
            presenter = ArticleCollectionPresenter(articles, config)
            logger.debug(f"Presenting {len(articles)} articles")
        else:
            presenter = ArticlePresenter(Article.model_validate(records), config)

        result = presenter.as_json(only=args.only, methods=args.methods)
        print(json.dumps(result, indent=2))
        return 0

    except Exception as e:
        logger.error(f"Failed to present article: {e}")
        return 1


def utm_params(args: argparse.Namespace) -> int:
    """Execute the utm-params command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    article_path = args.article.resolve()
    if not article_path.exists():
        logger.error(f"Article file not found: {article_path}")
        return 1

    try:
        config = load_config(args)
        article = Article.model_validate(load_records(article_path))
        print(ArticlePresenter(article, config).internal_utm_params(args.place))
        return 0

    except Exception as e:
        logger.error(f"Failed to build UTM params: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="article-presenter",
        description="Derive display values from article records",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    present_parser = subparsers.add_parser(
        "present",
        help="Serialize article fields and derived values as JSON",
        description="Read an article record (or a JSON list of records) and print the selected raw fields and derived values as JSON.",
    )
    present_parser.add_argument(
        "--article",
        type=Path,
        required=True,
        help="Path to a JSON article record or list of records",
    )
    present_parser.add_argument(
        "--only",
        nargs="*",
        default=None,
        help="Raw fields to include (default: all fields)",
    )
    present_parser.add_argument(
        "--methods",
        nargs="*",
        default=None,
        help="Derived values to include, e.g. url description_and_tags",
    )
    present_parser.add_argument(
        "--app-domain",
        type=str,
        default=None,
        help="Application host name (default: $APP_DOMAIN)",
    )
    present_parser.set_defaults(func=present)

    utm_parser = subparsers.add_parser(
        "utm-params",
        help="Print internal UTM tracking parameters for an article",
        description="Build the internal campaign-tracking query string for an article shown in a given placement.",
    )
    utm_parser.add_argument(
        "--article",
        type=Path,
        required=True,
        help="Path to a JSON article record",
    )
    utm_parser.add_argument(
        "--place",
        type=str,
        default=DEFAULT_PLACEMENT,
        help=f"Placement the link is shown in (default: {DEFAULT_PLACEMENT})",
    )
    utm_parser.add_argument(
        "--app-domain",
        type=str,
        default=None,
        help="Application host name (default: $APP_DOMAIN)",
    )
    utm_parser.set_defaults(func=utm_params)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
