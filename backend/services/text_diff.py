"""Word-level diff between two revisions of a résumé."""

import difflib
import re

from models.responses import DiffSegment

_TOKEN_RE = re.compile(r"\s+|\S+")


def tokenize(text: str) -> list[str]:
    """Split into alternating word / whitespace tokens (lossless)."""
    return _TOKEN_RE.findall(text)


def diff_words(before: str, after: str) -> list[DiffSegment]:
    """Diff *before* against *after*.

    Joining the ``equal`` and ``delete`` segments reproduces *before*;
    joining ``equal`` and ``insert`` reproduces *after*.
    """
    old, new = tokenize(before), tokenize(after)
    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)

    segments: list[DiffSegment] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _push(segments, "equal", "".join(old[i1:i2]))
            continue
        if tag in ("delete", "replace"):
            _push(segments, "delete", "".join(old[i1:i2]))
        if tag in ("insert", "replace"):
            _push(segments, "insert", "".join(new[j1:j2]))
    return segments


def _push(segments: list[DiffSegment], op: str, text: str) -> None:
    if not text:
        return
    if segments and segments[-1].op == op:
        segments[-1] = DiffSegment(op=op, text=segments[-1].text + text)
    else:
        segments.append(DiffSegment(op=op, text=text))
