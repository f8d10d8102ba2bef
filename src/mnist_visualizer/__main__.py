"""Command entrypoint for the mnist_visualizer package."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from mnist_visualizer.model.network import format_network_summary, initialize_network
from mnist_visualizer.ui.settings import VisualizationSettings


logger = logging.getLogger("mnist_visualizer")


def build_parser() -> argparse.ArgumentParser:
    defaults = VisualizationSettings()
    parser = argparse.ArgumentParser(description="MNIST network visualizer with random weights")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the weight initializer (random each session if omitted).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the network architecture and exit instead of launching the UI.",
    )
    parser.add_argument("--max-connections", type=int, default=defaults.max_connections)
    parser.add_argument("--weak-threshold", type=float, default=defaults.weak_threshold)
    parser.add_argument("--line-thickness", type=float, default=defaults.line_thickness)
    parser.add_argument("--brush-size", type=int, default=defaults.brush_size)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = VisualizationSettings(
            max_connections=args.max_connections,
            weak_threshold=args.weak_threshold,
            line_thickness=args.line_thickness,
            brush_size=args.brush_size,
        )
    except ValueError as exc:
        parser.error(str(exc))

    params = initialize_network(np.random.default_rng(args.seed))
    logger.info(
        "Initialized network weights (seed=%s, %d parameters)",
        "random" if args.seed is None else args.seed,
        params.parameter_count,
    )

    if args.summary:
        print(format_network_summary(params))
        return

    # Deferred so --summary works without a display.
    from mnist_visualizer.app import main as ui_main

    ui_main(params, settings)


if __name__ == "__main__":
    main()
