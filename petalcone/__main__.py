"""Command-line interface: build a petal cone and print a summary."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .cone import ConeMesh, build_cone
from .config import ConeConfig, ConfigError, ShapeParams
from .geometry import polyline_length
from .logging_config import setup_logging

logger = logging.getLogger("petalcone")

_DEF_HELP = """
Examples:
  python -m petalcone --demo
  python -m petalcone --samples 60 --inner 0.5 --outer 2.5 --layers 7 --sectors 96
  python -m petalcone --samples 40 --sweep 20 -v
"""


def _parser() -> argparse.ArgumentParser:
    defaults = ShapeParams()
    p = argparse.ArgumentParser(prog="petalcone", description="petalcone: lofted Bézier petal cone generator",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--demo", action="store_true", help="Use the reference scene (ignores shape options)")
    p.add_argument("--length", type=float, default=defaults.axial_length, help="Petal plane offset along X")
    p.add_argument("--samples", type=int, default=defaults.samples, help="Bézier samples per petal")
    p.add_argument("--inner", type=float, default=defaults.inner_radius, help="Inner radius")
    p.add_argument("--outer", type=float, default=defaults.outer_radius, help="Outer (bulge) radius")
    p.add_argument("--sweep", type=float, default=defaults.sweep_deg, help="Start/end sweep angle in degrees")
    p.add_argument("--layers", type=int, help="Ring intervals from apex to base (default: samples)")
    p.add_argument("--sectors", type=int, default=-1, help="Resampled vertices per ring (<= 0: no resampling)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
    p.add_argument("--log-file", help="Also write the log to this file")
    return p


def config_from_args(args: argparse.Namespace) -> ConeConfig:
    if args.demo:
        return ConeConfig.demo()
    shape = ShapeParams(axial_length=args.length, samples=args.samples, inner_radius=args.inner,
                        outer_radius=args.outer, sweep_deg=args.sweep)
    return ConeConfig(shape=shape, layers=args.layers, sectors=args.sectors)


def summarize(cone: ConeMesh) -> List[str]:
    mesh = cone.to_mesh()
    lo, hi = mesh.bounds()
    return [
        f"rings:        {cone.layers + 1}",
        f"sectors:      {cone.sectors}" + (" (resampled)" if cone.config.resampled else ""),
        f"base length:  {polyline_length(cone.base, closed=True):.4f}",
        f"vertices:     {len(mesh.vertices)}",
        f"triangles:    {len(mesh.faces)}",
        f"bounds min:   ({lo[0]:.4f}, {lo[1]:.4f}, {lo[2]:.4f})",
        f"bounds max:   ({hi[0]:.4f}, {hi[1]:.4f}, {hi[2]:.4f})",
        f"surface area: {mesh.surface_area():.4f}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.info(f"Building petal cone: {config}")
    cone = build_cone(config)
    for line in summarize(cone):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
