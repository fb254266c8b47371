class Diagnostic:
    """A recoverable markup anomaly noticed while extracting text."""

    __slots__ = ("message", "position")

    def __init__(self, message, position=None):
        self.message = message
        self.position = position

    def __repr__(self):
        if self.position is not None:
            return f"Diagnostic({self.message!r}, position={self.position})"
        return f"Diagnostic({self.message!r})"

    def __str__(self):
        return self.message

    def __eq__(self, other):
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return self.message == other.message and self.position == other.position

    __hash__ = None  # Unhashable since we define __eq__


class Hyperlink:
    """A link found in markup: its span in the source plus the link text."""

    __slots__ = ("is_image", "is_javascript", "length", "start", "url")

    def __init__(self, start, length, url, is_image=False, is_javascript=False):
        self.start = start
        self.length = length
        self.url = url
        self.is_image = bool(is_image)
        self.is_javascript = bool(is_javascript)

    def __repr__(self):
        flags = ""
        if self.is_image:
            flags += ", is_image=True"
        if self.is_javascript:
            flags += ", is_javascript=True"
        return f"Hyperlink({self.start}, {self.length}, {self.url!r}{flags})"

    def __str__(self):
        return self.url

    def __eq__(self, other):
        if not isinstance(other, Hyperlink):
            return NotImplemented
        return (
            self.start == other.start
            and self.length == other.length
            and self.url == other.url
            and self.is_image == other.is_image
            and self.is_javascript == other.is_javascript
        )

    __hash__ = None
