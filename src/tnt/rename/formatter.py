# python
"""
Utilities to build canonical filenames for renamed metadata files.

This module provides a single helper producing names of the form:

- "Project_s01e03_stem.ext"

Notes:
- `project` is used verbatim. Callers transliterate and capitalise it first
  (see `tnt.rename.translit`).
- Season and episode numbers are zero-padded to two digits and grow wider
  when the number needs more digits; they are never truncated.
- `ext` keeps its leading dot; pass an empty string when the original file
  had no extension.

Example:
    build_filename("Kot", 1, 3, "source", ".json") -> "Kot_s01e03_source.json"
"""
from tnt.utils import MIN_NUMBER_WIDTH, NAME_SEPARATOR


def build_filename(project: str, season: int, episode: int, stem: str, ext: str) -> str:
    """
    Build the canonical filename for one metadata file.

    Parameters:
    - project (str): Transliterated, capitalised project name. Must not be empty.
    - season (int): Season number, 1 or greater.
    - episode (int): Episode number, 1 or greater.
    - stem (str): Original filename without its extension.
    - ext (str): Original extension including the dot, or "".

    Returns:
    - str: "{project}_s{season:02d}e{episode:02d}_{stem}{ext}"

    Raises:
    - ValueError: When `project` is empty or a number is below 1.

    Examples:
    - build_filename("Sled", 2, 11, "clip", ".json") -> "Sled_s02e11_clip.json"
    - build_filename("Sled", 1, 104, "clip", ".json") -> "Sled_s01e104_clip.json"
    """
    if not project:
        raise ValueError("project must not be empty")
    if season < 1 or episode < 1:
        raise ValueError(f"season and episode must be >= 1, got s={season} e={episode}")

    width = MIN_NUMBER_WIDTH
    tag = f"s{season:0{width}d}e{episode:0{width}d}"
    return NAME_SEPARATOR.join((project, tag, stem)) + ext
