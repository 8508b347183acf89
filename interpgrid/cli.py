"""
Console front end for defining an interpolation grid.

Usage:
    python -m interpgrid.cli --seed grid.json --points points.csv

Commands read from standard input:
    show                   print mode and field values
    mode <name>            default | resolution | explicit
    set <field> [text]     e.g. "set x_spacing 10"; no text clears the field
    ok                     commit
    cancel                 dismiss without changing the grid
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

import numpy as np
from pydantic import ValidationError as PydanticValidationError

from interpgrid.components.grid_builder import GridBuilder
from interpgrid.components.grid_session import GridDefinitionSession, define_grid
from interpgrid.core.enums import DialogAction, FieldName, GridMode, LogLevel, FIELD_LABELS, MODE_LABELS
from interpgrid.core.exceptions import GridDefinitionException, ValidationError
from interpgrid.core.grid_constants import GRID_CONSTANTS
from interpgrid.models.grid_descriptor import GridDescriptor
from interpgrid.models.grid_schema import GridDescriptorSchema
from interpgrid.models.i_grid_dialog import IGridDialog

logger = logging.getLogger(__name__)


class ConsoleGridDialog(IGridDialog):
    """Line-oriented dialog reading commands from a prompt function"""

    PROMPT = "grid> "

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None
    ):
        self._input = input_fn or input
        self._out = out or sys.stdout

    def wait_for_action(self, session: GridDefinitionSession) -> DialogAction:
        self._print(GRID_CONSTANTS.DIALOG_TITLE)
        self._show(session)

        while True:
            try:
                line = self._input(self.PROMPT)
            except EOFError:
                return DialogAction.CANCEL

            parts = line.strip().split(maxsplit=2)
            if not parts:
                continue
            command = parts[0].lower()

            if command == "ok":
                return DialogAction.COMMIT
            if command == "cancel":
                return DialogAction.CANCEL
            if command == "show":
                self._show(session)
            elif command == "mode" and len(parts) >= 2:
                self._select_mode(session, parts[1])
            elif command == "set" and len(parts) >= 2:
                text = parts[2] if len(parts) == 3 else ""
                try:
                    session.set_field(parts[1].lower(), text)
                except ValueError as e:
                    self._print(f"{e}")
            else:
                self._print(f"Unknown command: {line.strip()}")

    def show_error(self, error: ValidationError) -> None:
        self._print(f"{error.title}: {error.message}")
        if error.detail:
            self._print(f"  {error.detail}")

    def _select_mode(self, session: GridDefinitionSession, name: str) -> None:
        try:
            session.select_mode(name.lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in GridMode)
            self._print(f"Unknown mode '{name}'. Valid: {choices}")
            return
        self._show(session)

    def _show(self, session: GridDefinitionSession) -> None:
        self._print(f"Define grid using: {MODE_LABELS[session.mode]}")
        for name in FieldName:
            state = "" if session.mode_state.is_active(name) else " (disabled)"
            self._print(f"  {name.value:<10} {FIELD_LABELS[name]}{state}: {session.field_text(name)}")

    def _print(self, text: str) -> None:
        print(text, file=self._out)


EXIT_CANCELLED = 1
EXIT_ERROR = 2


def load_points(path: Path) -> np.ndarray:
    """Load x, y columns from a comma-separated file"""
    return np.loadtxt(path, delimiter=",", ndmin=2, usecols=(0, 1))


def load_seed(path: Path) -> GridDescriptor:
    """Load a JSON grid descriptor"""
    return GridDescriptorSchema.model_validate_json(path.read_text()).to_descriptor()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Define the interpolation grid interactively"
    )
    parser.add_argument("--seed", type=Path, help="JSON grid descriptor to start from")
    parser.add_argument("--points", type=Path, help="CSV of x,y point data to build the grid over")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARNING.value,
        help="Logging level"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    grid = None
    if args.seed is not None:
        try:
            grid = load_seed(args.seed)
        except PydanticValidationError as e:
            logger.error(f"Invalid grid descriptor in {args.seed}: {e}")
            return EXIT_ERROR
        except OSError as e:
            logger.error(f"Could not read seed file {args.seed}: {e}")
            return EXIT_ERROR
        logger.info(f"Seeded from {args.seed}: {grid}")

    points = None
    if args.points is not None:
        try:
            points = load_points(args.points)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load points from {args.points}: {e}")
            return EXIT_ERROR

    descriptor = define_grid(ConsoleGridDialog(), grid)
    if descriptor is None:
        print("cancelled")
        return EXIT_CANCELLED

    print(GridDescriptorSchema.from_descriptor(descriptor).model_dump_json(indent=2))

    if points is not None:
        try:
            geometry = GridBuilder.build(descriptor, points)
        except (ValueError, GridDefinitionException) as e:
            logger.error(f"Could not build grid over {args.points}: {e}")
            return EXIT_ERROR
        rows, cols = geometry.shape
        x_min, x_max, y_min, y_max = geometry.bounds
        print(
            f"Grid: {rows} rows x {cols} cols, "
            f"x [{x_min:g}, {x_max:g}], y [{y_min:g}, {y_max:g}], "
            f"cell {geometry.x_resolution:g} x {geometry.y_resolution:g}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
