"""Command-line interface for released-frame."""

import argparse
import logging
import sys
from pathlib import Path

from released_frame.clients import ReleaseClientError, ReleasedClient
from released_frame.config import FrameConfig
from released_frame.frame import FrameController, is_unbound_route
from released_frame.paging import drop_leading_placeholder, paginate
from released_frame.renderers import FrameHTMLRenderer, SVGCardRenderer
from schemas.frame import FrameRequest, NotFoundResult
from schemas.page import TextElement


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def parse_route(route: str) -> tuple[str, str]:
    """Split a frame route like ``gh/owner/repo`` into owner and repo.

    Raises:
        ValueError: If the route does not name an owner and a repo
    """
    parts = [p for p in route.strip("/").split("/") if p]
    if parts and parts[0] == "gh":
        parts = parts[1:]
    if len(parts) != 2:
        raise ValueError(f"Expected a route like gh/<owner>/<repo>, got '{route}'")
    return parts[0], parts[1]


def build_config(args: argparse.Namespace) -> FrameConfig:
    return FrameConfig.from_env(
        api_base_url=args.base_url,
        page_capacity=args.capacity,
    )


def render_frame(args: argparse.Namespace) -> int:
    """Execute the render command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        owner, repo = parse_route(args.route)
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    request = FrameRequest(
        owner=owner,
        repo=repo,
        tag=args.tag,
        button=args.button,
        state=args.state,
    )

    try:
        with ReleasedClient(config.client_config()) as client:
            controller = FrameController(client, config)
            result = controller.handle(request)
    except ReleaseClientError as e:
        logger.error(f"Failed to fetch release {owner}/{repo}: {e}")
        return 1

    card_renderer = SVGCardRenderer(size=config.image_size)
    if args.format == "svg":
        document = card_renderer.render(result)
    else:
        document = FrameHTMLRenderer(config.origin, card_renderer=card_renderer).render(result)

    if args.output is None:
        sys.stdout.write(document)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(document, encoding="utf-8")
        logger.info(f"  Output: {args.output}")

    if isinstance(result, NotFoundResult):
        logger.info(f"Release not found: {owner}/{repo} @ {request.tag}")
    else:
        logger.info(f"Rendered {result.release.title}")
        logger.info(f"  Page: {result.page_index + 1}/{result.page_count}")
        logger.info(f"  Buttons: {', '.join(c.label for c in result.controls)}")
        logger.info(f"  State: {result.state}")

    return 0


def show_pages(args: argparse.Namespace) -> int:
    """Execute the pages command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if is_unbound_route(args.owner, args.repo):
        logger.error(f"Release not found: {args.owner}/{args.repo} @ {args.tag}")
        return 1

    try:
        with ReleasedClient(config.client_config()) as client:
            release = client.fetch(args.owner, args.repo, args.tag)
    except ReleaseClientError as e:
        logger.error(f"Failed to fetch release {args.owner}/{args.repo}: {e}")
        return 1

    pages = paginate(drop_leading_placeholder(release.items), config.page_capacity)

    logger.info(f"{release.title} ({release.tag})")
    logger.info(f"  Pages: {len(pages)} at {config.page_capacity} per page")
    for number, page in enumerate(pages, start=1):
        logger.info(f"  Page {number}: {len(page)} elements")
        for element in page:
            if isinstance(element, TextElement):
                marker = "*" if element.emphasized else "-"
                logger.info(f"    {marker} {element.text}")
            else:
                logger.info("    (blank line)")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="released-frame",
        description="Render paginated release-notes frames from released.fyi",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Render one frame interaction",
        description="Fetch a release, apply a button press to the signed state, and render the resulting frame.",
    )
    render_parser.add_argument(
        "route",
        help="Frame route, e.g. gh/<owner>/<repo>",
    )
    render_parser.add_argument(
        "--tag",
        default="latest",
        help="Release tag (default: latest)",
    )
    render_parser.add_argument(
        "--button",
        choices=["next", "prev"],
        default=None,
        help="Button pressed in the previous frame",
    )
    render_parser.add_argument(
        "--state",
        default=None,
        help="Signed state token returned by the previous render",
    )
    render_parser.add_argument(
        "--format",
        choices=["html", "svg"],
        default="html",
        help="Output the frame document or only its image (default: html)",
    )
    render_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File to write to (default: stdout)",
    )
    render_parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Changelog lines per page",
    )
    render_parser.add_argument(
        "--base-url",
        default=None,
        help="Release API base URL",
    )
    render_parser.set_defaults(func=render_frame)

    pages_parser = subparsers.add_parser(
        "pages",
        help="Show how a release's changelog is paged",
        description="Fetch a release and log each page's elements.",
    )
    pages_parser.add_argument("owner", help="Repository owner")
    pages_parser.add_argument("repo", help="Repository name")
    pages_parser.add_argument(
        "--tag",
        default="latest",
        help="Release tag (default: latest)",
    )
    pages_parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Changelog lines per page",
    )
    pages_parser.add_argument(
        "--base-url",
        default=None,
        help="Release API base URL",
    )
    pages_parser.set_defaults(func=show_pages)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
