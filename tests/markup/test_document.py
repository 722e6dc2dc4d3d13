"""Tests for parsing whole notes."""

from bearmigrate.markup import parse

SAMPLE_NOTE = """# Sample Markdown title (not a tag)

## Files

<a href='note/my%20file.pdf'>my file.pdf</a>
<a href='note/my%20other%20file.pdf'>my other file.pdf</a>

## Images

![an image](note/image%202.jpg)
![](note/no-alt.jpg)
![](note_with_nested(parenthesis)/test.jpg)

## Tags

this is a paragraph with a #tag

And some tags in a list

- #foo
- #foo/bar@baz
- #and-a_very%special$one/avec/des/éèà

[it's a trap](https://www.perdu.com/#trap)

Another trap: https://www.perdu.com/#trap 

another trap: world #1

Traps, traps, traps... #trap#trap 

#two-tags #one-after-another

#end"""

EXPECTED_NOTE = """# Sample Markdown title (not a tag)

## Files

[my file.pdf](note2/my%20file.pdf)
[my other file.pdf](note2/my%20other%20file.pdf)

## Images

![an image](note2/image%202.jpg)
![](note2/no-alt.jpg)
![](note_with_nested(parenthesis)/test.jpg)

## Tags

this is a paragraph with a #tag

And some tags in a list

- 
- #foo/bar@baz
- #and-a_very%special$one/avec/des/éèà

[it's a trap](https://www.perdu.com/#trap)

Another trap: https://www.perdu.com/#trap 

another trap: world #1

Traps, traps, traps... #trap#trap 

#two-tags #one-after-another

#not-really"""


def test_load_note() -> None:
    """Test parsing, editing and writing back a full note."""
    note = parse(SAMPLE_NOTE)

    assert [tag.name for tag in note.tags] == [
        "tag",
        "foo",
        "foo/bar@baz",
        "and-a_very%special$one/avec/des/éèà",
        "two-tags",
        "one-after-another",
        "end",
    ]
    assert [file.display_name for file in note.files] == ["my file.pdf", "my other file.pdf"]
    assert [image.location for image in note.images] == ["note/image 2.jpg", "note/no-alt.jpg"]

    note.tags[1].name = ""
    note.tags[6].name = "not-really"
    note.files[0].location = "note2/my file.pdf"
    note.files[1].location = "note2/my other file.pdf"
    note.images[0].location = "note2/image 2.jpg"
    note.images[1].location = "note2/no-alt.jpg"

    assert note.render() == EXPECTED_NOTE


def test_parse_empty_note() -> None:
    """Test that an empty note has no items."""
    note = parse("")

    assert note.content == ""
    assert note.tags == []
    assert note.files == []
    assert note.images == []


def test_parse_single_tag() -> None:
    """Test a note made of a single tag."""
    note = parse("#test/123")

    assert len(note.tags) == 1
    assert note.tags[0].name == "test/123"


def test_parse_glued_tag() -> None:
    """Test that a hash glued to a word is not a tag."""
    assert parse("a#b").tags == []


def test_parse_trailing_hash() -> None:
    """Test that a tag followed by a hash is not a tag."""
    assert parse(" #trap#").tags == []


def test_parse_adjacent_tags() -> None:
    """Test two tags separated by a single space."""
    note = parse("#one #two")

    assert [tag.name for tag in note.tags] == ["one", "two"]
    assert [tag.span.slice(note.content) for tag in note.tags] == ["#one ", "#two"]


def test_parse_file_attachment() -> None:
    """Test that file locations are decoded."""
    note = parse("<a href='note/my%20file.pdf'>my file.pdf</a>")

    assert len(note.files) == 1
    assert note.files[0].location == "note/my file.pdf"
    assert note.files[0].display_name == "my file.pdf"
    assert note.render() == "[my file.pdf](note/my%20file.pdf)"


def test_collections_are_independent() -> None:
    """Test that each collection follows document order on its own."""
    content = "![b](b.png) #x <a href='f.pdf'>f</a> ![c](c.png) #y"
    note = parse(content)

    assert [tag.name for tag in note.tags] == ["x", "y"]
    assert [file.location for file in note.files] == ["f.pdf"]
    assert [image.location for image in note.images] == ["b.png", "c.png"]
    assert [image.span.start for image in note.images] == [0, content.index("![c]")]
