"""Text highlighting - splits a sentence into emphasized and plain runs."""

import re
from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Segment:
    """A run of text and whether it matched one of the target forms."""

    text: str
    emphasized: bool = False


def highlight(text: str, targets: Sequence[str]) -> List[Segment]:
    """
    Split text around case-insensitive occurrences of any target.

    Rules:
    - Targets are escaped, so punctuation inside a form is matched literally
    - Longer targets win over their prefixes ("perros" before "perro")
    - Empty targets are ignored
    - Joining every segment's text gives back the original text

    Args:
        text: Sentence to split.
        targets: Word forms to emphasize.

    Returns:
        Ordered list of Segment objects.
    """
    forms = sorted({target for target in targets if target}, key=len, reverse=True)
    if not forms:
        return [Segment(text, False)]

    pattern = re.compile("(" + "|".join(re.escape(form) for form in forms) + ")", re.IGNORECASE)
    return [
        Segment(piece, pattern.fullmatch(piece) is not None)
        for piece in pattern.split(text)
        if piece
    ]
