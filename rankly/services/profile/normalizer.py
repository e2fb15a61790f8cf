from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from rankly.models.actions import RawItem
from rankly.models.profile import Candidate
from rankly.services.profile.constants import INITIAL_SCORE
from rankly.shared.ids import candidate_id


class CandidateNormalizer:
    """
    Turns raw (name, image) entries into a deduplicated candidate mapping.

    Pure function: no side effects, easy to test.
    """

    @staticmethod
    def coerce_item(item: Any) -> RawItem:
        """
        Accept the shapes callers hand us: RawItem, plain names, dicts, or
        anything with `name` / `image` attributes (e.g. existing candidates).
        """
        if isinstance(item, RawItem):
            return item
        if isinstance(item, str):
            return RawItem(name=item)
        if isinstance(item, Mapping):
            return RawItem.model_validate(item)
        return RawItem(name=item.name, image=getattr(item, "image", None))

    @staticmethod
    def normalize(raw_items: Iterable[Any]) -> dict[str, Candidate]:
        """
        Normalize raw items into candidates keyed by their derived id.

        Later entries with the same id overwrite earlier ones. Blank names are
        dropped and blank images become None. Every candidate starts at the
        initial score.

        Args:
            raw_items: Items as entered by the user

        Returns:
            Mapping of candidate id to Candidate
        """
        candidates: dict[str, Candidate] = {}
        for raw in raw_items:
            item = CandidateNormalizer.coerce_item(raw)
            name = item.name.strip()
            if not name:
                logger.debug(f"Dropping item without a name (image={item.image!r})")
                continue

            cid = candidate_id(name)
            if cid in candidates:
                logger.debug(f"Duplicate candidate '{cid}', keeping the later entry")

            image = (item.image or "").strip() or None
            candidates[cid] = Candidate(id=cid, name=name, image=image, score=INITIAL_SCORE)
        return candidates
