"""
Window-count predicate used inside workspace selectors: ``w[tv1-3]``.
"""

from attrs import field, frozen

from hyprdsl.core.text_utils import parse_or_default, parse_uint
from hyprdsl.exceptions import ConverterParseError

FLAG_CHARACTERS = "tfgvp"


@frozen
class WorkspaceSelectorWindowCountFlags:
    """
    Which windows are counted: tiled, floating, grouped, visible, pinned.

    Formats as one letter per set flag, always in ``t f g v p`` order.
    """

    tiled: bool = False
    floating: bool = False
    groups: bool = False
    visible: bool = False
    pinned: bool = False

    @classmethod
    def from_str(cls, text: str) -> "WorkspaceSelectorWindowCountFlags":
        """
        Parse a run of flag letters.

        Raises:
            ConverterParseError: If a letter outside "tfgvp" is present
        """
        letters = text.strip()
        invalid = [char for char in letters if char not in FLAG_CHARACTERS]
        if invalid:
            raise ConverterParseError(
                "WorkspaceSelectorWindowCountFlags", text, f"invalid flag: {invalid[0]}"
            )
        return cls(
            tiled="t" in letters,
            floating="f" in letters,
            groups="g" in letters,
            visible="v" in letters,
            pinned="p" in letters,
        )

    def __str__(self) -> str:
        set_flags = (self.tiled, self.floating, self.groups, self.visible, self.pinned)
        return "".join(
            char for char, is_set in zip(FLAG_CHARACTERS, set_flags) if is_set
        )


class WorkspaceSelectorWindowCount:
    """A window count, either exact ("v3") or an inclusive range ("t1-3")."""

    @classmethod
    def from_str(cls, text: str) -> "WindowCountSingle | WindowCountRange":
        """
        Parse flags followed by a count or a range.

        Unknown flag letters reset the flags to none rather than failing.

        Params:
            text: Flag letters then "<n>" or "<a>-<b>", e.g. "tv1-3"

        Returns:
            WindowCountSingle or WindowCountRange

        Raises:
            ConverterParseError: If the count or either range bound is not an
                unsigned integer
        """
        stripped = text.strip()
        split_at = next(
            (index for index, char in enumerate(stripped) if not char.isalpha()),
            len(stripped),
        )
        flags = parse_or_default(
            WorkspaceSelectorWindowCountFlags.from_str,
            stripped[:split_at],
            WorkspaceSelectorWindowCountFlags(),
        )
        count_text = stripped[split_at:].strip().strip("-")

        if "-" in count_text:
            start_text, end_text = count_text.split("-", 1)
            start = parse_uint(start_text.strip())
            end = parse_uint(end_text.strip())
            if start is None or end is None:
                raise ConverterParseError(
                    "WorkspaceSelectorWindowCount", text, "invalid range"
                )
            return WindowCountRange(flags, start, end)

        count = parse_uint(count_text)
        if count is None:
            raise ConverterParseError("WorkspaceSelectorWindowCount", text, "invalid count")
        return WindowCountSingle(flags, count)


@frozen
class WindowCountSingle(WorkspaceSelectorWindowCount):
    flags: WorkspaceSelectorWindowCountFlags = field(
        factory=WorkspaceSelectorWindowCountFlags
    )
    count: int = 0

    def __str__(self) -> str:
        return f"{self.flags}{self.count}"


@frozen
class WindowCountRange(WorkspaceSelectorWindowCount):
    flags: WorkspaceSelectorWindowCountFlags = field(
        factory=WorkspaceSelectorWindowCountFlags
    )
    range_start: int = 0
    range_end: int = 0

    def __str__(self) -> str:
        return f"{self.flags}{self.range_start}-{self.range_end}"
