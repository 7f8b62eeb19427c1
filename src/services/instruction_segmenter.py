# cocktail_browser/src/services/instruction_segmenter.py
from __future__ import annotations

import re
from typing import List

# sentence body + its terminal punctuation; a trailing unterminated fragment still counts
_RE_SENTENCE = re.compile(r"[^.!?]+[.!?]*")


def segment(text: str | None) -> List[str]:
    if not text:
        return []

    steps: List[str] = []
    for line in text.splitlines():
        for m in _RE_SENTENCE.finditer(line):
            s = m.group(0).strip()
            if s:
                steps.append(s)
    return steps
