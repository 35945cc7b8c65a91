"""Generate a post thread for a YouTube video from the command line."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.thread_config import ThreadConfig
from src.threads.errors import ThreadGenerationError
from src.threads.pipeline import generate_thread
from src.threads.segmenting import build_thread
from src.ui.formatting import number_segments


def run(url: str | None, length: int, transcript_file: str | None = None) -> int:
    """Print the numbered thread; returns the process exit code."""
    config = ThreadConfig.from_settings()

    if transcript_file:
        # Offline mode: segment a transcript saved to disk, no captions fetch.
        try:
            text = Path(transcript_file).read_text(encoding="utf-8")
            threads = build_thread(text, length, config)
        except (OSError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        try:
            threads = generate_thread(url, length, config)
        except ThreadGenerationError as e:
            print(f"ERROR: {e.message}", file=sys.stderr)
            return 1

    print("\n\n".join(number_segments(threads)))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("url", nargs="?", default=None, help="YouTube URL or 11-character video ID")
    parser.add_argument("--length", type=int, default=settings.default_thread_length)
    parser.add_argument("--transcript-file", default=None, help="Segment this text file instead")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args.url, args.length, args.transcript_file))
