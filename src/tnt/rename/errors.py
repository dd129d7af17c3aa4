"""
Exceptions raised by the renaming pipeline.

`ListFileError` is fatal for a whole run. Every `ItemError` subclass is
recovered per batch item: the item is reported as failed and the batch moves
on to the next path.
"""


class RenameError(Exception):
    """Base exception for metadata renaming errors."""

    pass


class ListFileError(RenameError):
    """The path-list file is missing, unreadable or empty."""

    pass


class ItemError(RenameError):
    """Base exception for failures scoped to a single batch item."""

    kind = "item"


class ItemReadError(ItemError):
    """The metadata file could not be read."""

    kind = "read"


class ItemParseError(ItemError):
    """The metadata file is not a well-formed metadata document."""

    kind = "parse"


class ItemValidationError(ItemError):
    """A field required for renaming is missing or invalid."""

    kind = "validation"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class TranslitError(ItemError):
    """The project name could not be transliterated."""

    kind = "translit"


class UnsupportedCharacterError(TranslitError):
    """A character has no transliteration rule."""

    def __init__(self, char: str, position: int):
        super().__init__(f"unsupported character {char!r} (U+{ord(char):04X}) at position {position}")
        self.char = char
        self.position = position


class EmptyTransliterationError(TranslitError):
    """Transliteration produced nothing usable as a name."""

    pass


class ItemWriteError(ItemError):
    """The renamed metadata file could not be written."""

    kind = "write"
