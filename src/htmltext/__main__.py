"""Command line front end: ``python -m htmltext page.html``."""

import argparse
import logging
import sys
from pathlib import Path

from . import ExtractorOpts, HtmlExtractText, HtmlHyperlinkParser, HtmlUrlFormat, StrictModeError, parse_charset

logger = logging.getLogger("htmltext")


def read_document(path):
    """Read `path` and decode it with its declared charset (UTF-8 otherwise)."""
    raw = Path(path).read_bytes()
    charset = parse_charset(raw)
    if charset:
        try:
            return raw.decode(charset, errors="replace")
        except LookupError:
            logger.warning("Unknown charset %r declared in %s; using UTF-8", charset, path)
    return raw.decode("utf-8", errors="replace")


def build_parser():
    parser = argparse.ArgumentParser(prog="htmltext", description="Extract plain text from an HTML file")
    parser.add_argument("file", help="HTML file to read")
    parser.add_argument(
        "--no-outer-text",
        action="store_true",
        help="Drop text before the first tag and after the last one",
    )
    parser.add_argument(
        "--preserve-newlines",
        action="store_true",
        help="Keep line breaks as written (treat the whole file as preformatted)",
    )
    parser.add_argument("--metadata", action="store_true", help="Also print title, author, and other metadata")
    parser.add_argument("--links", action="store_true", help="Also print the links found in the page")
    parser.add_argument("--base-url", metavar="URL", help="Resolve printed links against this URL")
    parser.add_argument("--strict", action="store_true", help="Fail on the first markup problem")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        html = read_document(args.file)
    except OSError as e:
        print(f"htmltext: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    extractor = HtmlExtractText(ExtractorOpts(strict=args.strict))
    try:
        text = extractor.extract(
            html,
            include_outer_text=not args.no_outer_text,
            preserve_newlines=args.preserve_newlines,
        )
    except StrictModeError as e:
        print(f"htmltext: {e.diagnostic.message} (at {e.diagnostic.position})", file=sys.stderr)
        return 1

    print(text or "")

    if args.metadata:
        print()
        for field in ("title", "author", "description", "keywords", "subject"):
            value = getattr(extractor, field)
            if value:
                print(f"{field}: {value}")

    if args.links:
        links = HtmlHyperlinkParser(html)
        base_url = args.base_url or links.base_url
        formatter = HtmlUrlFormat(base_url) if base_url else None
        print()
        for link in links:
            url = formatter.resolve(link.url, link.is_image) if formatter else link.url
            print(url)

    for message in extractor.log:
        print(f"warning: {message}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
