"""Parsing of user-facing (1-based) page specifications."""

from __future__ import annotations

from pdflayout.core.errors import InvalidPageRange, PageOutOfRange


def _parse_number(value: str, what: str = "page number") -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise InvalidPageRange(f"Invalid {what}: {value}") from None


def parse_page_range(pages: str, total_pages: int) -> list[int]:
    """Turn ``"1-3,7"`` or ``"all"`` into 0-based page indices.

    Pages come back in the order given, duplicates included.
    """
    pages = pages.strip().lower()
    if pages == "all":
        return list(range(total_pages))

    result: list[int] = []
    for part in pages.split(","):
        part = part.strip()
        if "-" in part:
            bounds = part.split("-")
            if len(bounds) != 2:
                raise InvalidPageRange(f"Invalid range: {part}")
            start = _parse_number(bounds[0], "number")
            end = _parse_number(bounds[1], "number")
            if start == 0 or end == 0:
                raise InvalidPageRange("Page numbers are 1-based")
            if start > end:
                raise InvalidPageRange(f"Start ({start}) > end ({end})")
            for p in range(start, end + 1):
                if p > total_pages:
                    raise PageOutOfRange(p, total_pages)
                result.append(p - 1)
        else:
            p = _parse_number(part)
            if p == 0:
                raise InvalidPageRange("Page numbers are 1-based")
            if p > total_pages:
                raise PageOutOfRange(p, total_pages)
            result.append(p - 1)
    return result
