"""Prints summary statistics of a model's weights, grouped by feature family.

A feature family is the part of the key before its content: `UW4` for
`UW4:の`, `pos(-1)` for `pos(-1)=A`. Looking at the families side by side is
a quick way to confirm that a model matches the key scheme it claims, since a
scheme mismatch shows up as families the scheme never generates.
"""
import argparse
import re
import sys
from pathlib import Path

import numpy as np
import pandas as pd

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.errors import ModelLoadError
from phrasebreak.model_store import ModelStore, load_model

_FAMILY = re.compile(r"^(.*?)[:=]")


def feature_family(key: str) -> str:
    m = _FAMILY.match(key)
    return m.group(1) if m else key


def weight_table(store: ModelStore) -> pd.DataFrame:
    """One row per feature with its family and weight."""
    items = list(store.model.weights.items())
    return pd.DataFrame(
        {
            "family": [feature_family(k) for k, _ in items],
            "key": [k for k, _ in items],
            "weight": np.array([w for _, w in items], dtype=np.int64),
        }
    )


def family_summary(table: pd.DataFrame) -> pd.DataFrame:
    return (
        table.groupby("family")["weight"]
        .agg(count="count", mean="mean", min="min", max="max", abs_sum=lambda s: int(np.abs(s).sum()))
        .sort_values("abs_sum", ascending=False)
    )


def main():
    parser = argparse.ArgumentParser(
        description="Summarize the weights of a phrase-break model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("model", help="Path to the model resource.")
    parser.add_argument("--scheme", help="Override the key scheme named by the model.")
    parser.add_argument("--top", type=int, default=10, help="Number of strongest features to list.")
    args = parser.parse_args()

    try:
        store = load_model(args.model, scheme=args.scheme)
    except ModelLoadError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

    table = weight_table(store)
    print(f"Model: {store.source}")
    print(f"Scheme: {store.model.scheme}  Features: {len(store)}  Bias: {store.bias()}")
    print("\n--- Weights by feature family ---")
    print(family_summary(table).to_string())
    print(f"\n--- Top {args.top} features by |weight| ---")
    top = table.reindex(table["weight"].abs().sort_values(ascending=False).index).head(args.top)
    print(top.to_string(index=False))


if __name__ == "__main__":
    main()
