from typing import NamedTuple


class Stream(NamedTuple):
    text: str
    offset: int = 0

    def __repr__(self) -> str:
        return "Stream(offset={!r}, rest={!r})".format(self.offset, self.rest)

    @property
    def rest(self) -> str:
        return self.text[self.offset:]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def advance(self, count: int) -> "Stream":
        if count == 0:
            return self
        return Stream(self.text, self.offset + count)

    def skip_to_end(self) -> "Stream":
        return Stream(self.text, len(self.text))
