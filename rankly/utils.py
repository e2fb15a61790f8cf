from datetime import datetime, timezone

from rankly.models.actions import RawItem


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_item_lines(text: str, separator: str = "    ") -> list[RawItem]:
    """
    Parse free text into raw items, one per line.

    Each line is ``name<separator>image-url``; the image part is optional and
    anything after a second separator is ignored. The raw line is split before
    trimming, so a line that starts with the separator has an empty name. Lines
    where both name and image are blank are dropped.

    Args:
        text: Multi-line text as typed by the user
        separator: Column separator (four spaces by default)

    Returns:
        Raw items in the order they appeared
    """
    items: list[RawItem] = []
    for row in (text or "").splitlines():
        name, _, rest = row.partition(separator)
        image = rest.split(separator, 1)[0].strip()
        name = name.strip()
        if not name and not image:
            continue
        items.append(RawItem(name=name, image=image or None))
    return items
