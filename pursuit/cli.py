# pursuit/cli.py
"""
Command-line interface for replaying target tracks through the predictor.
"""

import argparse
import json
import logging
import sys

from pursuit.estimation.factory import EstimatorFactory
from pursuit.replay import TrackReplay, load_track
from pursuit.utils.errors import PursuitError, format_error
from pursuit.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def print_frame(frame):
    """Print one replay frame in a readable format"""
    p, q, hit = frame.position, frame.predicted, frame.intercept
    status = f"T-{hit.time_to_intercept:.2f}s" if hit.feasible else "no intercept"
    print(
        f"t={frame.timestamp:8.3f}  "
        f"pos=({p.x:8.2f}, {p.y:8.2f}, {p.z:8.2f})  "
        f"pred=({q.x:8.2f}, {q.y:8.2f}, {q.z:8.2f})  "
        f"aim=({hit.point.x:8.2f}, {hit.point.y:8.2f}, {hit.point.z:8.2f})  {status}"
    )


def cmd_replay(args):
    track = load_track(args.track)
    track.config = track.config.replace(
        estimator=args.estimator,
        prediction_horizon=args.horizon,
    )
    speed = args.follower_speed if args.follower_speed is not None else track.follower_speed

    replay = TrackReplay.from_track(track)
    frames = 0
    for frame in replay.run(track.samples, track.follower_position, speed):
        frames += 1
        if args.json:
            print(json.dumps(frame.to_dict()))
        else:
            print_frame(frame)

    logger.info(f"Replayed {frames} samples with {replay.service.estimator.name} estimator")
    return 0


def cmd_estimators(args):
    print(EstimatorFactory.get_help())
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pursuit",
        description="Predict maneuvering targets and compute intercept points"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Log file or directory (default: console only)")
    subparsers = parser.add_subparsers(dest="command")

    replay = subparsers.add_parser("replay", help="Replay a recorded track file (YAML or JSON)")
    replay.add_argument("track", help="Path to track file")
    replay.add_argument("--estimator", choices=EstimatorFactory.list_estimators(),
                        help="Override the configured estimator")
    replay.add_argument("--horizon", type=float, help="Prediction horizon in seconds")
    replay.add_argument("--follower-speed", type=float, help="Follower speed")
    replay.add_argument("--json", action="store_true", help="Emit one JSON object per sample")
    replay.set_defaults(func=cmd_replay)

    estimators = subparsers.add_parser("estimators", help="List available estimators")
    estimators.set_defaults(func=cmd_estimators)

    return parser


def main(argv=None):
    """Main program entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(args.log_file, level=level, to_file=bool(args.log_file))

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except PursuitError as e:
        print(format_error(type(e).__name__.upper(), str(e)), file=sys.stderr)
        return 2
    except OSError as e:
        print(format_error("IO_ERROR", str(e), "Check the track file path"), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
