"""Items found in a Bear note: tags, file attachments and embedded images."""

import re
from dataclasses import dataclass, field
from urllib.parse import quote, unquote

# Characters that URL path segment escaping leaves as they are, on top of
# the unreserved ones.
PATH_SEGMENT_SAFE = "$&+:=@"


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of offsets into the note content."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start : self.end]

    @classmethod
    def of(cls, match: re.Match[str]) -> "Span":
        """Build the span of a whole regex match."""
        return cls(match.start(), match.end())


def escape_path(path: str) -> str:
    """URL encode a path, one component at a time.

    Slashes separate the components and are never encoded.

    Args:
        path: Decoded path, e.g. ``note/my file.pdf``

    Returns:
        Encoded path, e.g. ``note/my%20file.pdf``
    """
    return "/".join(quote(component, safe=PATH_SEGMENT_SAFE) for component in path.split("/"))


def unescape_path(path: str) -> str:
    """Decode a percent-encoded path.

    Malformed escapes are kept verbatim. If the decoded bytes are not valid
    UTF-8, the raw path is returned instead.
    """
    try:
        return unquote(path, errors="strict")
    except UnicodeDecodeError:
        return path


# str.isspace also accepts the information separators, which are not
# Unicode White_Space.
INFORMATION_SEPARATORS = "\x1c\x1d\x1e\x1f"


def _is_boundary(char: str) -> bool:
    return char == "" or (char.isspace() and char not in INFORMATION_SEPARATORS)


@dataclass
class Tag:
    """A Bear tag (``#foo/bar``).

    Attributes:
        name: Tag name without the leading hash. An empty name removes the
            tag when the note is written back.
        span: Position of the match in the note, boundary characters included
        before: Character matched right before the hash, if any
        after: Character matched right after the name, if any
    """

    name: str
    span: Span = field(default=Span(0, 0), compare=False)
    before: str = ""
    after: str = ""

    def render(self) -> str:
        if not self.name:
            return f"{self.before}{self.after}"
        return f"{self.before}#{self.name}{self.after}"


@dataclass
class FileRef:
    """A file attachment, written back as a regular Markdown link."""

    location: str
    display_name: str
    span: Span = field(default=Span(0, 0), compare=False)

    def render(self) -> str:
        return f"[{self.display_name}]({escape_path(self.location)})"


@dataclass
class ImageRef:
    """An embedded image."""

    location: str
    description: str
    span: Span = field(default=Span(0, 0), compare=False)

    def render(self) -> str:
        return f"![{self.description}]({escape_path(self.location)})"


def build_tag(match: re.Match[str]) -> Tag | None:
    """Create a Tag from a tag pattern match.

    A tag is only valid when surrounded by whitespace or by nothing at all
    (start or end of the note). ``part#word`` and ``#tag#trap`` are rejected.

    Args:
        match: Match of the tag pattern

    Returns:
        The tag, or None if the match is not a valid tag
    """
    before, name, after = match.group(1, 2, 3)
    # The pattern lets through numerals such as "½" as the first character
    if not name[0].isalpha():
        return None
    if not (_is_boundary(before) and _is_boundary(after)):
        return None
    return Tag(name=name, span=Span.of(match), before=before, after=after)


def build_file(match: re.Match[str]) -> FileRef:
    """Create a FileRef from a file attachment pattern match."""
    return FileRef(
        location=unescape_path(match.group(1)),
        display_name=match.group(2),
        span=Span.of(match),
    )


def build_image(match: re.Match[str]) -> ImageRef:
    """Create an ImageRef from an image pattern match."""
    return ImageRef(
        location=unescape_path(match.group(2)),
        description=match.group(1),
        span=Span.of(match),
    )
