"""reelsmith command line entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys

from .core import config
from .core.workflow import run_workflow

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reelsmith", description="Generate a short styled video from a text prompt")
    parser.add_argument("prompt", nargs="?", help="What the video should be about")
    parser.add_argument("--style", choices=config.VIDEO_STYLES, help="Skip triage and use this style")
    parser.add_argument("--output-dir", dest="output_dir", help=f"Output directory (default: {config.OUTPUT_DIR})")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if not args.prompt or not args.prompt.strip():
        print("Please provide a prompt as a command line argument", file=sys.stderr)
        print("Example: reelsmith 'my video prompt'", file=sys.stderr)
        return 1

    prompt = args.prompt.strip()
    logger.info(f"[SCRIPT] Starting video generation for prompt: {prompt}")

    try:
        state = run_workflow(prompt, style=args.style, output_dir=args.output_dir)
    except Exception as exc:
        logger.error(f"[SCRIPT] Error in video generation: {exc}")
        return 1

    if state.get("error"):
        logger.error(f"[SCRIPT] Error in video generation: {state['error']}")
        if state.get("error_details"):
            logger.error(f"[SCRIPT] Details: {state['error_details']}")
        return 1

    if state.get("final_answer") and not state.get("file_paths"):
        print(f"\nFINAL OUTPUT: {state['final_answer']}")
        print("No video was generated.")
        return 0

    video_path = state.get("video_path")
    image_path = state.get("image_path")
    if video_path:
        print(f"\nVIDEO GENERATED: {video_path}")
        if len(state.get("file_paths", [])) > 1:
            for clip in state["file_paths"]:
                print(f"  clip: {clip}")
    if image_path:
        print(f"IMAGE GENERATED: {image_path}")
    if not video_path:
        print("No video was generated.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
