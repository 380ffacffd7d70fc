import os
import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from ..models.gallery_entry import GalleryEntry
from ..pipeline.batch_extract import extract_paths
from ..services.image_service import ImageService
from ..services.preview_service import PreviewService

# Load environment variables first
load_dotenv()

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gradient-extract",
        description="Extract the dominant two-color linear gradient of images.",
    )
    parser.add_argument("paths", nargs="+", help="image files or directories")
    parser.add_argument("--recursive", action="store_true",
                        help="descend into sub-directories")
    parser.add_argument("--format", choices=("json", "css", "text"), default="json",
                        help="output format (default: json)")
    parser.add_argument("--preview", metavar="DIR",
                        help="write a PNG preview of every extracted gradient into DIR")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "WARNING"))
    return parser.parse_args(argv)


def _collect_paths(raw_paths: List[str], recursive: bool, image_service: ImageService) -> List[str]:
    paths = []
    for raw in raw_paths:
        if Path(raw).is_dir():
            paths.extend(str(p) for p in image_service.stream_paths(raw, recursive=recursive))
        else:
            paths.append(raw)
    return paths


def _format_entry(entry: GalleryEntry, fmt: str) -> str:
    result = entry.result
    if fmt == "css":
        return f"{entry.path}: {result.to_css()}"
    if fmt == "text":
        return f"{entry.path}\t{result.start_color}\t{result.end_color}\t{result.angle:.2f}"
    return json.dumps({"path": str(entry.path), **result.to_dict()})


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    image_service = ImageService()
    entries = extract_paths(_collect_paths(args.paths, args.recursive, image_service),
                            image_service=image_service)

    preview_service = PreviewService() if args.preview else None
    if preview_service:
        Path(args.preview).mkdir(parents=True, exist_ok=True)

    failures = 0
    for entry in entries:
        if not entry.ok:
            failures += 1
            print(f"{entry.path}: error: {entry.error}", file=sys.stderr)
            continue
        print(_format_entry(entry, args.format))
        if preview_service:
            out = preview_service.save(entry.result, Path(args.preview) / f"{entry.path.stem}_gradient.png")
            logger.info(f"Preview written to {out}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
