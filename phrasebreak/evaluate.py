"""Comparison of generated phrase breaks against a reference segmentation."""
from __future__ import annotations
from typing import Any, Dict, List, Sequence, Tuple


def breaks_from_segmented(line: str, sep: str = " ") -> Tuple[str, List[int]]:
    """
    Turns a reference line with phrases separated by `sep` into text and offsets.

    Args:
        line: A segmented line such as "私は 東京に 行きます".
        sep: The separator placed between phrases.

    Returns:
        The unsegmented text and the offsets of the breaks inside it.
    """
    phrases = [p for p in line.split(sep) if p]
    text = "".join(phrases)
    offsets = []
    pos = 0
    for phrase in phrases[:-1]:
        pos += len(phrase)
        offsets.append(pos)
    return text, offsets


def compare_breaks(generated: Sequence[int], reference: Sequence[int], text: str = "") -> Dict[str, Any]:
    """
    Scores generated break offsets against reference offsets for one line.

    Args:
        generated: Break offsets produced by the engine.
        reference: Break offsets from the human segmentation.
        text: The line text, used to show context in disagreements.

    Returns:
        A dictionary with "scores" (true/false positives, false negatives,
        precision, recall, f1) and "disagreements", one entry per offset the
        two segmentations disagree on.
    """
    gen, ref = set(generated), set(reference)
    tp = len(gen & ref)
    fp = len(gen - ref)
    fn = len(ref - gen)
    precision = tp / (tp + fp) if tp + fp else 1.0
    recall = tp / (tp + fn) if tp + fn else 1.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0

    disagreements = []
    for offset in sorted(gen ^ ref):
        disagreements.append({
            "offset": offset,
            "context": f"{text[max(0, offset - 3):offset]}|{text[offset:offset + 3]}" if text else "",
            "generated": offset in gen,
            "reference": offset in ref,
        })

    return {
        "scores": {"tp": tp, "fp": fp, "fn": fn, "precision": precision, "recall": recall, "f1": f1},
        "disagreements": disagreements,
    }
