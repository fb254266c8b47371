#!/usr/bin/env python3
"""
Random fuzzer for htmltext.
Generates broken markup and checks that extraction and link discovery never
raise or hang on it.
"""

import argparse
import random
import string
import sys
import time
import traceback

from htmltext import HtmlExtractText, HtmlHyperlinkParser, HtmlUrlFormat, strip_hyperlinks

# Elements the extractor dispatches on, plus a few it only passes through
TAGS = [
    "p", "div", "span", "a", "img", "table", "tr", "td", "dl", "dt", "dd", "ul", "ol", "li",
    "br", "hr", "h1", "h2", "h3", "pre", "sup", "sub", "font", "b", "i", "input", "button",
    "select", "option", "script", "style", "noscript", "annotation", "annotation-xml",
    "meta", "title", "subject", "link", "area", "frame", "iframe", "base", "head", "body",
]

ATTRIBUTES = [
    "href", "src", "name", "content", "class", "style", "face", "data-type", "http-equiv",
    "page-break-before", "font-family", "charset", "id", "alt",
]

ATTRIBUTE_VALUES = [
    "mailto:me@example.com", "tel:555", "FooterLink", "hidden", "os-caption", "os-term-section",
    "BookBanner", "newline", "footnote-ref-content", "Symbol", "font-family: Symbol",
    "page-break-before: always", "refresh", "5; url=next.html", "author", "description",
    "../up.html", "./here.html", "/root.html", "//cdn.example.com/x.js", "?q=1#frag",
    "http://example.com/a b.html", "photos/", "",
]

SPECIAL_CHARS = [
    "\x00", "\x0b", "\x0c", "\x7f",  # Control chars
    "\ufffd",  # Replacement character
    "\u00a0",  # Non-breaking space
    "\u00ad",  # Soft hyphen
    "\u2028", "\u200b",  # Line separator, zero-width space
    "\ufeff",  # BOM
]

ENTITIES = [
    "&amp;", "&lt;", "&gt;", "&quot;", "&apos;", "&nbsp;", "&shy;", "&copy;", "&le;",
    "&", "& ", "&amp", "&amp;le;", "&amp;bogus;", "&am", "&#", "&#x", "&#x;", "&#123",
    "&#173;", "&#xFB01;", "&#0;", "&#128;", "&#x9F;", "&#xD800;", "&#x110000;",
    "&#99999999999999999999;", "&unknown;", "&AMP;", "&LT",
    "${placeholder}", "${", "$",
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_whitespace():
    ws = [" ", "\t", "\n", "\r", "\r\n", "\f", ""]
    return "".join(random.choices(ws, k=random.randint(0, 4)))


def fuzz_tag_name():
    strategies = [
        lambda: random.choice(TAGS),
        lambda: random.choice(TAGS).upper(),
        lambda: random.choice(TAGS) + random_string(1, 3),
        lambda: random_string(1, 8),
        lambda: "",
        lambda: random.choice(TAGS) + random.choice(SPECIAL_CHARS),
        lambda: "&nbsp;",
    ]
    return random.choice(strategies)()


def fuzz_attribute():
    """Generate a possibly malformed attribute."""
    name = random.choice(ATTRIBUTES + [random_string(1, 8), "", "=", '"', "'", "<", ">"])
    value = random.choice(
        [
            lambda: random.choice(ATTRIBUTE_VALUES),
            lambda: random_string(0, 30),
            lambda: random.choice(ENTITIES),
            lambda: "<b>" + random_string() + "</b>",
            lambda: "x" * random.randint(100, 500),
        ]
    )()
    quote_start, quote_end = random.choice(
        [('="', '"'), ("='", "'"), ("=", ""), (": ", ";"), ("", ""), ('="', ""), ("='", ""), ("==", "")]
    )
    return f"{name}{quote_start}{value}{quote_end}"


def fuzz_open_tag():
    attrs = " ".join(fuzz_attribute() for _ in range(random.randint(0, 4)))
    closing = random.choice([">", "/>", " >", "/ >", "", ">>", "<>"])
    opening = random.choice(["<", "< ", "<<", "<!", "</"]) if random.random() < 0.2 else "<"
    return f"{opening}{fuzz_tag_name()}{random_whitespace()} {attrs}{random_whitespace()}{closing}"


def fuzz_close_tag():
    tag = fuzz_tag_name()
    return random.choice([f"</{tag}>", f"</ {tag}>", f"</{tag} >", f"</{tag}", f"</{tag}/>", f"<//{tag}>"])


def fuzz_comment():
    content = random_string(0, 40)
    return random.choice(
        [
            f"<!--{content}-->",
            f"<!--{content}",
            f"<!--{content}->",
            f"<!---->",
            f"<!-->",
            f"<!--{content}<p>{content}-->",
        ]
    )


def fuzz_cdata():
    content = random_string(0, 30) + random.choice(ENTITIES)
    return random.choice(
        [
            f"<![CDATA[{content}]]>",
            f"<![CDATA[{content}",
            f"<![CDATA[{content}]>",
            f"<![cdata[{content}]]>",
            "<![CDATA[]]>",
        ]
    )


def fuzz_skipped_element():
    """Script-like elements, closed, unclosed or closed in the wrong case."""
    tag = random.choice(["script", "style", "noscript", "annotation", "annotation-xml"])
    content = random.choice(['var u = "images/pic.gif";', random_string(0, 30), "</p><p>"])
    return random.choice(
        [
            f"<{tag}>{content}</{tag}>",
            f"<{tag}>{content}",
            f"<{tag}>{content}</{tag.upper()}>",
            f"<{tag} src='x.js'>{content}</{tag}",
        ]
    )


def fuzz_metadata():
    value = fuzz_text()
    return random.choice(
        [
            f"<title>{value}</title>",
            f"<title>{value}",
            f"<subject>{value}</subject>",
            f'<meta name="{random.choice(["author", "description", "keywords"])}" content="{value}">',
            f'<meta http-equiv="refresh" content="0; url={random.choice(ATTRIBUTE_VALUES)}">',
            f'<meta charset="{random_string(0, 10)}">',
        ]
    )


def fuzz_inline_modes():
    """Nested pre/sup/sub/font sections with stray closers."""
    tag = random.choice(["pre", "sup", "sub", "font face=Symbol", "span style='font-family: Symbol'"])
    name = tag.split()[0]
    return random.choice(
        [
            f"<{tag}>{fuzz_text()}</{name}>",
            f"<{tag}>{fuzz_text()}",
            f"</{name}>{fuzz_text()}",
            f"<{tag}><{tag}>{fuzz_text()}</{name}>",
        ]
    )


def fuzz_text():
    strategies = [
        lambda: random_string(1, 50),
        lambda: random.choice(ENTITIES),
        lambda: "".join(random.choices(SPECIAL_CHARS, k=random.randint(1, 5))),
        lambda: "< " + random_string(1, 5),  # Stray <
        lambda: "&" + random_string(1, 10),  # Incomplete entity
        lambda: random_string() + ">" + random_string(),  # Stray >
        lambda: "\r\n" * random.randint(1, 5),
        lambda: '"' + random_string() + "'",  # Unbalanced quotes
    ]
    return random.choice(strategies)()


def fuzz_nested_structure(depth=0, max_depth=8):
    if depth >= max_depth or random.random() < 0.3:
        return fuzz_text()
    tag = random.choice(TAGS)
    children = "".join(fuzz_nested_structure(depth + 1, max_depth) for _ in range(random.randint(0, 3)))
    return random.choice([f"<{tag}>{children}</{tag}>", f"<{tag}>{children}", f"{children}</{tag}>"])


def generate_fuzzed_html():
    """Generate a complete fuzzed HTML document."""
    parts = []
    if random.random() < 0.1:
        parts.append("\ufeff")
    for _ in range(random.randint(1, 20)):
        element_type = random.choices(
            [
                fuzz_open_tag,
                fuzz_close_tag,
                fuzz_comment,
                fuzz_text,
                fuzz_cdata,
                fuzz_skipped_element,
                fuzz_metadata,
                fuzz_inline_modes,
                fuzz_nested_structure,
            ],
            weights=[20, 10, 5, 20, 3, 5, 5, 6, 8],
        )[0]
        parts.append(element_type())
    return "".join(parts)


def _extract(html):
    extractor = HtmlExtractText()
    extractor.extract(html, include_outer_text=random.random() < 0.8, preserve_newlines=random.random() < 0.2)
    return extractor.text


def _links(html):
    parser = HtmlHyperlinkParser(html, include_image_links=random.random() < 0.8)
    fmt = HtmlUrlFormat(parser.base_url or "http://example.com/dir/page.php?image=pic.jpg")
    urls = [fmt.resolve(link.url, link.is_image) for link in parser]
    return urls, strip_hyperlinks(html)


TARGETS = {
    "extract": _extract,
    "links": _links,
}


# Seconds one document may take before it counts as a hang
HANG_SECONDS = 5.0


def _check(run_fn, html):
    """Return a failure record for one document, or None if it went through."""
    started = time.perf_counter()
    try:
        run_fn(html)
    except Exception as e:
        return {"kind": "crash", "html": html, "detail": f"{type(e).__name__}: {e}", "trace": traceback.format_exc()}
    elapsed = time.perf_counter() - started
    if elapsed > HANG_SECONDS:
        return {"kind": "hang", "html": html, "detail": f"took {elapsed:.2f}s", "trace": ""}
    return None


def _save(failures, target, seed):
    path = f"fuzz_failures_{target}_{int(time.time())}.txt"
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"target={target} seed={seed}\n\n")
        for num, failure in failures:
            f.write(f"--- #{num} {failure['kind']}: {failure['detail']}\n{failure['html']}\n{failure['trace']}\n")
    return path


def run_fuzzer(target, num_tests, seed=None, verbose=False, save_failures=False):
    """Feed `num_tests` generated documents to one entry point; True if none failed."""
    if seed is not None:
        random.seed(seed)
    run_fn = TARGETS[target]
    failures = []

    began = time.time()
    for num in range(num_tests):
        failure = _check(run_fn, generate_fuzzed_html())
        if failure is None:
            continue
        failures.append((num, failure))
        if verbose:
            print(f"#{num} {failure['kind']}: {failure['detail']}")
    took = time.time() - began

    crashes = sum(1 for _, failure in failures if failure["kind"] == "crash")
    print(f"{target}: {num_tests} documents in {took:.2f}s, {crashes} crashes, {len(failures) - crashes} hangs")
    for num, failure in failures[:10]:
        print(f"  #{num} {failure['kind']}: {failure['detail']}\n    {failure['html'][:200]!r}")

    if save_failures and failures:
        print(f"Failures written to {_save(failures, target, seed)}")
    return not failures


def main():
    parser = argparse.ArgumentParser(description="Fuzz htmltext with broken markup")
    parser.add_argument(
        "--target",
        "-t",
        choices=sorted(TARGETS),
        default="extract",
        help="Entry point to fuzz (default: extract)",
    )
    parser.add_argument(
        "--num-tests",
        "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--save-failures", action="store_true", help="Save failures to a file")
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed HTML documents (no extraction)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i + 1} ===")
            print(generate_fuzzed_html())
            print()
        return

    success = run_fuzzer(
        args.target,
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
