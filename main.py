import argparse
import sys
from pathlib import Path

from tqdm import tqdm

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.config import load_config
from phrasebreak.engine import MlBreakEngine
from phrasebreak.errors import PhraseBreakError
from phrasebreak.io_utils import load_lines, save_breaks


def main():
    """
    Main command-line interface for the phrase-break engine.

    This script segments a plain-text file line by line:
    1.  Loads the configuration file (`config.yaml`) and the model it names,
        or the model given with `--model`.
    2.  Reads the input text, one line per item to segment.
    3.  Runs the engine over every line to find its phrase breaks.
    4.  Writes the breaks and phrases as JSON, and optionally prints each line
        with its phrases joined by a separator.
    """
    parser = argparse.ArgumentParser(
        description="Find phrase breaks in unsegmented text with a trained linear model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the input UTF-8 text file, one line per item."
    )
    parser.add_argument(
        "--output",
        required=True,
        help="Path to write the output JSON file with breaks and phrases."
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "--model",
        help="Path to a model resource; overrides paths.model from the config."
    )
    parser.add_argument(
        "--print-sep",
        help="Also print every segmented line with phrases joined by this separator."
    )
    args = parser.parse_args()

    try:
        print(f"Loading configuration from {args.config}...")
        cfg = load_config(args.config)

        model_path = args.model or cfg.model_path
        print(f"Loading model from {model_path}...")
        engine = MlBreakEngine.from_config(cfg, model=args.model)

        print(f"Loading text from {args.input}...")
        lines = load_lines(args.input)

        all_breaks = []
        for line in tqdm(lines, desc="Segmenting"):
            all_breaks.append(engine.segment(line))

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_breaks(str(output_path), lines, all_breaks)
        print(f"\nSuccessfully wrote {len(lines)} segmented lines to {args.output}")

        if args.print_sep is not None:
            for line, breaks in zip(lines, all_breaks):
                cuts = [0, *breaks, len(line)]
                print(args.print_sep.join(line[a:b] for a, b in zip(cuts, cuts[1:]) if b > a))

    except (FileNotFoundError, ValueError, TypeError, KeyError, PhraseBreakError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
