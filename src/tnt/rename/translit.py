"""
Transliteration of project names into Latin, filesystem-safe identifiers.

The rules are a fixed table, so the same input always produces the same
output. Characters without a rule are rejected instead of being dropped,
because a silently shortened project name would produce a wrong filename.

Rules, per character:
- Russian, Ukrainian and Belarusian Cyrillic letters use `CYRILLIC_TABLE`
  (uppercase letters produce a capitalised transliteration, e.g. "Ж" -> "Zh").
- ASCII letters and digits are kept.
- Whitespace and "_" become "_"; "-" is kept.
- Punctuation in `REMOVED_PUNCTUATION` is removed; `SYMBOL_TABLE` spells
  out a few symbols.
- Latin letters with diacritics fall back to their ASCII base letter.

Example:
    transliterate("Кот в сапогах") -> "Kot_v_sapogah"
"""
import re
import unicodedata

from tnt.rename.errors import EmptyTransliterationError, UnsupportedCharacterError

CYRILLIC_TABLE = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
    # Ukrainian / Belarusian
    "є": "ye", "і": "i", "ї": "yi", "ґ": "g", "ў": "u",
}

SYMBOL_TABLE = {
    "&": "and",
    "+": "plus",
    "№": "N",
}

REMOVED_PUNCTUATION = frozenset(".,!?:;'\"«»„“”‘’`()[]{}…")

_UNDERSCORES = re.compile(r"_+")


def _translit_char(char: str, position: int) -> str:
    lower = char.lower()
    if lower in CYRILLIC_TABLE:
        latin = CYRILLIC_TABLE[lower]
        return latin.capitalize() if char != lower else latin
    if char.isascii() and char.isalnum():
        return char
    if char.isspace() or char == "_":
        return "_"
    if char == "-":
        return char
    if char in REMOVED_PUNCTUATION:
        return ""
    if char in SYMBOL_TABLE:
        return SYMBOL_TABLE[char]

    # é -> e, Å -> A: keep the base letter when only combining marks remain
    decomposed = unicodedata.normalize("NFKD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    if base and base != char and base.isascii() and base.isalnum():
        return base

    raise UnsupportedCharacterError(char, position)


def transliterate(text: str) -> str:
    """
    Transliterate `text` into an ASCII name made of letters, digits, '_' and '-'.

    Raises:
        UnsupportedCharacterError: A character has no transliteration rule.
        EmptyTransliterationError: Nothing usable remains after transliteration.
    """
    normalized = unicodedata.normalize("NFC", text)
    result = "".join(_translit_char(char, pos) for pos, char in enumerate(normalized))
    result = _UNDERSCORES.sub("_", result).strip("_-")
    if not result:
        raise EmptyTransliterationError(f"transliteration of {text!r} is empty")
    return result


def capitalize_first(text: str) -> str:
    """Uppercase the first character of `text`, leaving the rest untouched."""
    return text[:1].upper() + text[1:]
