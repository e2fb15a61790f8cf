import json
import random
import string
import time
from collections.abc import Callable

# Strategy signature for profile ids: profile name -> fresh id
ProfileIdGenerator = Callable[[str], str]

_BASE36 = string.digits + string.ascii_lowercase


def candidate_id(name: str) -> str:
    """Derive the stable candidate id from a display name.

    Surrounding whitespace is not significant, so " Pizza " and "Pizza" are the same candidate.
    """
    return name.strip()


def pair_id(first_id: str, second_id: str) -> str:
    """Order-independent id for the pair of two candidate ids.

    pair_id(a, b) == pair_id(b, a). The id is the JSON encoding of the sorted
    ids, so no combination of names can produce the same id as another one.
    """
    return json.dumps(sorted((first_id, second_id)), ensure_ascii=False)


def make_timestamp_id_generator(
    prefix_length: int = 10,
    suffix_length: int = 2,
    rng: random.Random | None = None,
) -> ProfileIdGenerator:
    """Build the default profile id strategy.

    Ids have the form ``<first N chars of name>_<epoch millis>_<random base36>``.
    """
    rng = rng or random.Random()

    def generate(name: str) -> str:
        millis = int(time.time() * 1000)
        suffix = "".join(rng.choice(_BASE36) for _ in range(suffix_length))
        return f"{name[:prefix_length]}_{millis}_{suffix}"

    return generate
