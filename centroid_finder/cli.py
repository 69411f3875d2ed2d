"""
Command line entry point.

Usage:
    centroid-finder video input.mp4 output.csv FFA200 164
    centroid-finder image squares.jpg FFA200 164 --output-dir ./out
"""

import argparse
import logging
import time
from typing import List, Optional

from .config import STRATEGIES, ImageSummaryConfig, TrackingConfig
from .errors import ConfigError
from .imaging import DistanceImageBinarizer, make_group_finder
from .utils import write_groups_csv, write_trajectory_csv
from .video import extract_trajectory, read_image, write_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='centroid-finder',
        description='Track the largest region of a target color through a video')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    subparsers = parser.add_subparsers(dest='command', required=True)

    video = subparsers.add_parser('video', help='Write the time,x,y trajectory of a video to CSV')
    video.add_argument('input_video', type=str, help='Path to the input mp4 video')
    video.add_argument('output_csv', type=str, help='Path of the CSV file to write')
    video.add_argument('hex_target_color', type=str, help='Target color as RRGGBB hex')
    video.add_argument('threshold', type=str, help='Non-negative color distance threshold')
    video.add_argument('--strategy', type=str, default='bfs', choices=STRATEGIES,
                       help='Connected component strategy')
    video.add_argument('--no-progress', action='store_true',
                       help='Hide the frame progress bar')

    image = subparsers.add_parser('image', help='Binarize one image and list its groups')
    image.add_argument('input_image', type=str, help='Path to the input image')
    image.add_argument('hex_target_color', type=str, help='Target color as RRGGBB hex')
    image.add_argument('threshold', type=str, help='Non-negative color distance threshold')
    image.add_argument('--output-dir', type=str, default='.',
                       help='Directory for binarized.png and groups.csv')
    image.add_argument('--strategy', type=str, default='bfs', choices=STRATEGIES,
                       help='Connected component strategy')

    return parser


def run_video(config: TrackingConfig) -> int:
    """Extract the trajectory described by ``config`` and write it out."""
    start = time.time()
    logger.info(f"Processing video: {config.video_path}")

    coords = extract_trajectory(config.video_path, config.target_color, config.threshold,
                                strategy=config.strategy, show_progress=config.show_progress)
    write_trajectory_csv(config.output_path, coords)

    logger.info(f"Video processing complete in {time.time() - start:.2f}s")
    return len(coords)


def run_image(config: ImageSummaryConfig) -> int:
    """Binarize one image, save the mask as an image and its groups as CSV."""
    binarizer = DistanceImageBinarizer()
    component_finder = make_group_finder(config.strategy)

    image = read_image(config.image_path)
    mask = binarizer.to_binary_mask(image, config.target_color, config.threshold)
    write_image(str(config.binarized_path), binarizer.to_frame(mask))

    groups = component_finder.find_groups(mask)
    write_groups_csv(config.groups_path, groups)

    logger.info(f"Found {len(groups)} groups in {config.image_path}")
    return len(groups)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == 'video':
            config = TrackingConfig.from_strings(
                args.input_video, args.output_csv, args.hex_target_color, args.threshold,
                strategy=args.strategy, show_progress=not args.no_progress)
        else:
            config = ImageSummaryConfig.from_strings(
                args.input_image, args.hex_target_color, args.threshold,
                output_dir=args.output_dir, strategy=args.strategy)
    except ConfigError as e:
        parser.error(str(e))

    if args.command == 'video':
        run_video(config)
    else:
        run_image(config)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
