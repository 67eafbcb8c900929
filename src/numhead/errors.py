"""Error types raised by numhead"""


class NumHeadError(Exception):
    """Base class for all numhead failures."""


class FrontmatterError(NumHeadError, ValueError):
    """The document's frontmatter block exists but cannot be read as a mapping."""


class SettingsKeyNotFoundError(NumHeadError):
    """Frontmatter reports the settings key but no line in the block starts with it.

    Raised instead of writing, since a blind insert would duplicate the key.
    """

    def __init__(self, key: str, start_line: int) -> None:
        super().__init__(f'"{key}" key exists in frontmatter but no line starting with it was found')
        self.key = key
        self.start_line = start_line
