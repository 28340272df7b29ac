"""Dashed section headers."""

REPORT_WIDTH = 66


def section_header(title: str, width: int = REPORT_WIDTH) -> str:
    """``-- title --`` padded with dashes to roughly ``width`` characters.

    Always at least one dash on each side, even when the title is too long.
    """
    dashes = "-"
    while 2 * len(dashes) + len(title) < width:
        dashes += "-"
    return f"{dashes} {title} {dashes}"
