"""Command-line script for evaluating a phrase-break model against a reference.

The reference file holds one segmented line per row, with phrases separated
by a single space (or `--sep`). The script removes the separators, runs the
engine on the bare text, and compares the breaks it finds with the reference
breaks:

-   **Micro metrics**: precision, recall and F1 over all breaks in the file.
-   **Macro F1**: the mean of the per-line F1 scores.
-   **Disagreements**: optionally, a CSV with every offset the engine and the
    reference disagree on, with a little context around it.
"""
import argparse
import json
import sys
from pathlib import Path

import numpy as np
import pandas as pd
from tqdm import tqdm

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.config import load_config
from phrasebreak.engine import MlBreakEngine
from phrasebreak.errors import PhraseBreakError
from phrasebreak.evaluate import breaks_from_segmented, compare_breaks
from phrasebreak.io_utils import load_lines


def evaluate_lines(engine: MlBreakEngine, lines: list[str], sep: str = " ") -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Runs the engine over segmented reference lines.

    Returns:
        A tuple of two DataFrames: one row of scores per line, and one row
        per disagreement (with the line number it came from).
    """
    score_rows = []
    disagreement_rows = []
    for line_no, line in enumerate(tqdm(lines, desc="Evaluating"), start=1):
        text, reference = breaks_from_segmented(line, sep)
        if not text:
            continue
        report = compare_breaks(engine.segment(text), reference, text)
        score_rows.append({"line": line_no, **report["scores"]})
        for d in report["disagreements"]:
            disagreement_rows.append({"line": line_no, **d})
    columns = ["line", "offset", "context", "generated", "reference"]
    return pd.DataFrame(score_rows), pd.DataFrame(disagreement_rows, columns=columns)


def summarize(scores: pd.DataFrame) -> dict:
    """Aggregates per-line scores into micro and macro metrics."""
    if scores.empty:
        return {"lines": 0, "precision": 0.0, "recall": 0.0, "f1": 0.0, "macro_f1": 0.0}
    tp, fp, fn = (int(scores[c].sum()) for c in ("tp", "fp", "fn"))
    precision = tp / (tp + fp) if tp + fp else 1.0
    recall = tp / (tp + fn) if tp + fn else 1.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {
        "lines": int(len(scores)),
        "precision": round(precision, 4),
        "recall": round(recall, 4),
        "f1": round(f1, 4),
        "macro_f1": round(float(np.mean(scores["f1"].to_numpy())), 4),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate phrase-break performance against a segmented reference.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--reference", required=True, help="Path to the segmented reference text file.")
    parser.add_argument("--config", default="config.yaml", help="Path to the configuration YAML file.")
    parser.add_argument("--model", help="Path to a model resource; overrides paths.model from the config.")
    parser.add_argument("--sep", default=" ", help="Phrase separator used in the reference file.")
    parser.add_argument("--disagreements-out", help="Optional: Path to write a detailed disagreements CSV file.")
    args = parser.parse_args()

    try:
        print("Loading files...")
        cfg = load_config(args.config)
        engine = MlBreakEngine.from_config(cfg, model=args.model)
        lines = load_lines(args.reference)

        scores, disagreements = evaluate_lines(engine, lines, args.sep)

        print("\n--- Comparison Metrics (vs. Reference) ---")
        print(json.dumps(summarize(scores), indent=2))

        if args.disagreements_out and not disagreements.empty:
            Path(args.disagreements_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(disagreements)} disagreements to {args.disagreements_out}...")
            disagreements.to_csv(args.disagreements_out, index=False, encoding="utf-8")

    except (FileNotFoundError, ValueError, KeyError, PhraseBreakError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
