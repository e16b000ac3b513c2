from dataclasses import dataclass


@dataclass(frozen=True)
class TextGrid:
    rows: tuple[str, ...]  # one string per row, `width` glyphs each
    width: int

    @property
    def height(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        """Every row followed by a newline; empty string for a zero-row grid."""
        return "".join(row + "\n" for row in self.rows)
