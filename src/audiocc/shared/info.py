# Where: audiocc.shared.info
# What: Canonical Info record filled by path, filename and tag heuristics.
# Why: Every feature reads and renders the same metadata shape.

from dataclasses import dataclass

UNTITLED: str = "Untitled"


@dataclass
class Info:
    """Canonical metadata for one recording.

    Year, month and day are either all empty, year-only, or a valid date.
    Disc and track keep the digits exactly as captured.
    """

    artist: str = ""
    album: str = ""
    year: str = ""
    month: str = ""
    day: str = ""
    disc: str = ""
    track: str = ""
    title: str = ""

    def has_date(self) -> bool:
        """Return True when year, month and day are all present."""
        return bool(self.year and self.month and self.day)

    def to_album(self) -> str:
        """Render the album folder name, also used as the embedded album tag."""
        if not self.year:
            return self.album
        if self.has_date():
            prefix = f"{self.year}-{self.month}-{self.day}"
        else:
            prefix = self.year
        if not self.album:
            return prefix
        return f"{prefix} {self.album}"

    def to_file(self) -> str:
        """Render the base file name without extension."""
        title = self.title or UNTITLED
        if self.track and self.disc:
            return f"{self.disc}-{self.track} {title}"
        if self.track:
            return f"{self.track} {title}"
        return title


__all__ = ["Info", "UNTITLED"]
