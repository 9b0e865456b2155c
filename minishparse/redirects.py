"""Insert spaces around unquoted redirection operators."""

from .quotes import UNQUOTED, quote_state
from .scan import count_real_char


class _RedirectSpacer:
    """Walk a segment and cut it apart around redirect operators."""

    def __init__(self, text):
        self.text = text
        self.pos = -1
        self.mark = 0
        self.pending = False
        self.count = 0
        self.pieces = []

    def _at(self, index):
        if 0 <= index < len(self.text):
            return self.text[index]
        return ""

    def _unquoted(self, index):
        return quote_state(self.text, index) == UNQUOTED

    def _split_before(self, index, width):
        self.pieces.append(
            self.text[self.mark:index] + " " + self.text[index:index + width]
        )
        self.mark = index + width
        self.count += 1
        self.pending = True

    def _split_after(self, index):
        self.pieces.append(self.text[self.mark:index] + " ")
        self.mark = index
        self.pos = index
        self.count += 1

    def _settle(self):
        if self.pending:
            self.pos = self.mark
            self.pending = False

    def _double(self, symbol):
        r = self.pos
        if (
            self._at(r) == symbol
            and self._unquoted(r)
            and self._at(r + 1) == symbol
            and r - 1 >= 0
            and self.text[r - 1] != " "
        ):
            self._split_before(r, 2)
        r = self.pos
        if (
            self._at(r) == symbol
            and self._unquoted(r)
            and self._at(r + 1) == symbol
            and self._at(r + 2) not in ("", " ")
        ):
            self.pos += 1
            self._split_after(self.pos + 1)
        self._settle()

    def _single(self, symbol):
        r = self.pos
        if (
            self._at(r) == symbol
            and self._unquoted(r)
            and self._at(r + 1) not in ("", symbol)
            and r - 1 >= 0
            and self.text[r - 1] not in (" ", symbol)
        ):
            self._split_before(r, 1)
        r = self.pos
        if (
            self._at(r) == symbol
            and self._unquoted(r)
            and self._at(r + 1) not in ("", " ", symbol)
        ):
            self._split_after(r + 1)
        self._settle()

    def run(self):
        size = len(self.text)
        while True:
            self.pos += 1
            if self.pos >= size:
                break
            self._double("<")
            self._double(">")
            self._single(">")
            self._single("<")
        if not self.count:
            return self.text
        if self.pos != self.mark:
            self.pieces.append(self.text[self.mark:self.pos])
        return "".join(self.pieces)


def space_redirects(segment):
    """Return ``segment`` with spaces around each unquoted ``<``, ``>``, ``<<`` and ``>>``."""
    if count_real_char(segment, ">") or count_real_char(segment, "<"):
        return _RedirectSpacer(segment).run()
    return segment


def space_all_redirects(segments):
    """Apply :func:`space_redirects` to every segment."""
    return [space_redirects(segment) for segment in segments]