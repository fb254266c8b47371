"""Resolution of links found in a page against the page's own URL."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ABSOLUTE_URL_PREFIXES, PROTOCOL_PREFIXES
from .scan import find_first_of, find_ignore_case


@dataclass(frozen=True, slots=True)
class DomainParts:
    """A URL's host split three ways.

    For ``http://www.sales.example.com/x``: ``full_domain`` is
    ``http://www.sales.example.com``, ``domain`` is ``example.com`` and
    ``subdomain`` is ``sales.example.com``. Without a third label (or when
    it is ``www``) the subdomain equals the domain.
    """

    full_domain: str = ""
    domain: str = ""
    subdomain: str = ""


def _find_last_directory(url: str) -> tuple[str, int, int]:
    """Return ``(url, last_slash, query)`` for a page URL.

    `last_slash` is the separator before the page name (ignoring slashes in
    the query string). A URL naming only a host gets a trailing slash.
    """
    query = url.rfind("?")
    last_slash = url.rfind("/")
    if query > 0 and last_slash > query:
        last_slash = url.rfind("/", 0, query)
    if last_slash == -1 or (last_slash > 0 and url[last_slash - 1] == "/"):
        if query != -1:
            url = f"{url[:query]}/{url[query:]}"
            last_slash = query
            query += 1
        else:
            url += "/"
            last_slash = len(url) - 1
    return url, last_slash, query


class HtmlUrlFormat:
    """Turns links from a page into absolute URLs.

    Construct with the URL of the page the links came from, then call
    ``resolve`` (or the instance) once per link. The most recent result and
    its domain parts stay available through the ``current_*`` properties.
    """

    __slots__ = ("_current", "_current_url", "_image_name", "_last_slash", "_query", "_root", "_root_url")

    def __init__(self, root_url: str | None = None) -> None:
        root_url = root_url or ""
        self._current_url = root_url
        self._root_url, self._last_slash, self._query = _find_last_directory(root_url)
        self._root = self.parse_domain(self._root_url)
        self._current = self.parse_domain(self._current_url)
        self._image_name = self.parse_image_name_from_url(self._root_url) if self.has_query else ""

    def __call__(self, path: str, is_image: bool = False) -> str:
        return self.resolve(path, is_image)

    @property
    def root_url(self) -> str:
        return self._root_url

    @property
    def current_url(self) -> str:
        return self._current_url

    @property
    def root_full_domain(self) -> str:
        return self._root.full_domain

    @property
    def root_domain(self) -> str:
        return self._root.domain

    @property
    def root_subdomain(self) -> str:
        return self._root.subdomain

    @property
    def current_full_domain(self) -> str:
        return self._current.full_domain

    @property
    def current_domain(self) -> str:
        return self._current.domain

    @property
    def current_subdomain(self) -> str:
        return self._current.subdomain

    @property
    def image_name(self) -> str:
        return self._image_name

    @property
    def has_query(self) -> bool:
        return self._query != -1

    def resolve(self, path: str, is_image: bool = False) -> str:
        """Return `path` as an absolute URL ("" for an empty path).

        Handles absolute and protocol-relative links, query-only links,
        root-relative, ``./`` and ``../`` paths (never climbing above the
        host), and plain relative names. Fragments are dropped and spaces
        are encoded as ``%20``. An image link that resolves to a directory
        gets the page's ``image=`` query value appended.
        """
        if not path:
            return ""
        root = self._root_url
        if self.is_absolute_url(path):
            current = path
        elif path.startswith("//"):
            scheme_end = root.find("://")
            scheme = root[: scheme_end + 1] if scheme_end > 0 else "http:"
            current = scheme + path
        elif path[0] == "?" and self._query != -1:
            current = root[: self._query] + path
        elif path[0] == "/":
            base = self._root.full_domain
            if len(base) > 1 and not base.endswith("/"):
                base += "/"
            current = base + path[1:]
        elif path.startswith("./"):
            current = root[: self._last_slash + 1] + path[2:]
        elif path.startswith("../"):
            rest = path
            levels = 0
            while rest.startswith("../"):
                rest = rest[3:]
                levels += 1
            last = self._last_slash
            for _ in range(levels):
                previous = root.rfind("/", 0, last)
                if previous == -1:
                    break
                last = previous
            # too many "../": stop at the first slash after the protocol
            if 0 < last < len(root) - 2 and "/" in (root[last - 1], root[last + 1]):
                last = root.find("/", last + 2)
            current = (root if last == -1 else root[: last + 1]) + rest
        else:
            current = root[: self._last_slash + 1] + path

        bookmark = current.rfind("#")
        if bookmark != -1:
            current = current[:bookmark]

        # PHP galleries link to the folder and name the picture in the page query
        if is_image and len(current) > 1 and current.endswith("/"):
            current += self._image_name

        self._current = self.parse_domain(current)
        self._current_url = current.replace(" ", "%20")
        return self._current_url

    def get_directory_path(self) -> str:
        """Current URL without its protocol and page name."""
        url = self._current_url
        prefix = 0
        for protocol in PROTOCOL_PREFIXES:
            if url[: len(protocol)].lower() == protocol:
                prefix = len(protocol)
                break
        url, last_slash, _query = _find_last_directory(url)
        return url[prefix:last_slash]

    @staticmethod
    def is_absolute_url(url: str) -> bool:
        lowered = url[:12].lower()
        return lowered.startswith(ABSOLUTE_URL_PREFIXES)

    @staticmethod
    def parse_image_name_from_url(url: str) -> str:
        """Value of the ``image=`` query parameter, or ""."""
        if not url:
            return ""
        query = url.find("?")
        if query == -1:
            return ""
        start = find_ignore_case(url, "image=", query)
        if start == -1:
            return ""
        start += 6
        stop = url.find("&", start)
        return url[start:] if stop == -1 else url[start:stop]

    @staticmethod
    def parse_top_level_domain_from_url(url: str) -> str:
        """Everything after the first dot of the host (after any ``www.``)."""
        if not url:
            return ""
        www = find_ignore_case(url, "www.")
        start = www + 4 if www != -1 else 0
        dot = url.find(".", start)
        if dot == -1 or dot + 1 >= len(url):
            return ""
        stop = find_first_of(url, "/?", dot + 1)
        return url[dot + 1 :] if stop == -1 else url[dot + 1 : stop]

    @staticmethod
    def is_url_top_level_domain(url: str) -> bool:
        """True when `url` names only a host (an optional trailing slash is fine)."""
        if not url:
            return False
        protocol = url.find("//")
        start = protocol + 2 if protocol != -1 else 0
        slash = url.find("/", start)
        return slash == -1 or slash == len(url) - 1

    @staticmethod
    def parse_domain(url: str) -> DomainParts:
        if not url:
            return DomainParts()
        start = 0
        lowered = url[:8].lower()
        for protocol in PROTOCOL_PREFIXES:
            if lowered.startswith(protocol):
                start = len(protocol)
                break
        slash = url.find("/", start)
        full_domain = url if slash == -1 else url[:slash]
        labels = full_domain[start:].split(".")
        if len(labels) < 2 or not labels[0]:
            return DomainParts(full_domain)
        domain = ".".join(labels[-2:])
        if len(labels) > 2 and labels[-3].lower() != "www":
            subdomain = ".".join(labels[-3:])
        else:
            subdomain = domain
        return DomainParts(full_domain, domain, subdomain)
