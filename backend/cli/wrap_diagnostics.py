#!/usr/bin/env python3
"""
Print how the board's portal edges behave for a given wrap axis.

For a fixed set of probe cases (edge cell + heading) this shows whether the
step wraps, where the head lands, the heading it leaves with, and whether the
landing cell is on the board. With --all-edges every boundary cell is probed
with every heading that leaves the board.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Add backend to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import BOARD_RADIUS  # noqa: E402
from domain.heading import Heading, step  # noqa: E402
from domain.hex_geometry import HexCell, iter_board_cells  # noqa: E402
from domain.topology import BoardTopology, StepKind, WrapAxis  # noqa: E402


logger = logging.getLogger(__name__)


@dataclass
class WrapProbe:
    description: str
    cell: HexCell
    heading: Heading
    kind: StepKind
    landing: Optional[HexCell]
    new_heading: Optional[Heading]
    landing_valid: bool


def probe_cases(radius: int) -> List[Tuple[HexCell, Heading, str]]:
    """Edge probes covering each pair of edges, including off-centre cells."""
    return [
        (HexCell(-radius, 0), Heading.LEFT, "left edge heading left"),
        (HexCell(radius, 0), Heading.RIGHT, "right edge heading right"),
        (HexCell(0, radius), Heading.DOWN_LEFT, "lower-left edge heading down-left"),
        (HexCell(0, -radius), Heading.UP_RIGHT, "upper-right edge heading up-right"),
        (HexCell(0, radius), Heading.UP_LEFT, "lower-left edge heading up-left"),
        (HexCell(0, -radius), Heading.DOWN_RIGHT, "upper-right edge heading down-right"),
        (HexCell(-2, radius), Heading.UP_RIGHT, "lower-left edge, third cell, heading up-right"),
        (HexCell(2, -radius), Heading.DOWN_LEFT, "upper-right edge, third cell, heading down-left"),
    ]


def probe(topology: BoardTopology, cell: HexCell, heading: Heading, description: str = "") -> WrapProbe:
    outcome = topology.classify_step(cell, heading)
    return WrapProbe(
        description=description,
        cell=cell,
        heading=heading,
        kind=outcome.kind,
        landing=outcome.cell,
        new_heading=outcome.heading,
        landing_valid=outcome.cell is not None and topology.is_on_board(outcome.cell),
    )


def build_wrap_report(topology: BoardTopology, all_edges: bool = False) -> List[WrapProbe]:
    if not all_edges:
        return [probe(topology, c, h, d) for c, h, d in probe_cases(topology.radius)]

    report = []
    for cell in iter_board_cells(topology.radius):
        if not topology.is_boundary_cell(cell):
            continue
        for heading in Heading:
            if topology.is_on_board(step(cell, heading)):
                continue
            report.append(probe(topology, cell, heading))
    return report


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Show where each portal edge leads for a wrap axis",
    )
    parser.add_argument(
        "--axis",
        type=str,
        default=WrapAxis.HORIZONTAL.value,
        choices=[a.value for a in WrapAxis],
        help="Wrap axis to inspect (default: horizontal)",
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=BOARD_RADIUS,
        help=f"Board radius (default: {BOARD_RADIUS})",
    )
    parser.add_argument(
        "--all-edges",
        dest="all_edges",
        action="store_true",
        help="Probe every boundary cell instead of the fixed cases",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    topology = BoardTopology(WrapAxis.from_name(args.axis), args.radius)
    logger.info("=== Wrap diagnostics: axis=%s radius=%d ===", topology.axis.value, topology.radius)

    report = build_wrap_report(topology, all_edges=args.all_edges)
    wraps = 0
    for p in report:
        if p.kind is StepKind.PORTAL:
            wraps += 1
            logger.info(
                "%-48s %s %-10s -> wrap to %s heading %-10s valid=%s",
                p.description, p.cell, p.heading.name, p.landing, p.new_heading.name, p.landing_valid,
            )
        else:
            logger.info(
                "%-48s %s %-10s -> %s",
                p.description, p.cell, p.heading.name, p.kind.value,
            )

    logger.info("=== %d probes, %d wrap ===", len(report), wraps)


if __name__ == "__main__":
    main()
