import sys
from typing import Optional, Sequence, TextIO

from ..diff.assembler import tabularize_diff
from ..diff.units import pick_unit_sample, resolve_unit
from ..errors import NoColumnsError, NotEnoughProfilesError
from ..loader.profile_loader import load_profile
from ..schemas import DisplayUnit, StatColumn
from ..table.grid import Table
from ..utils.logger import get_logger
from ..utils.terminal import supports_color

log = get_logger("DiffLoop")


def run_diff(profile_paths: Sequence[str], columns: Sequence[StatColumn],
             unit: DisplayUnit = DisplayUnit.MS, threshold: float = 0.0,
             out: Optional[TextIO] = None, color: Optional[bool] = None) -> Table:
    """
    Load every profile, compare them against the first one and write the table.

    Nothing is written unless all validation and loading succeeds.

    Raises:
        NotEnoughProfilesError: fewer than two profile paths.
        NoColumnsError: empty column list.
        ProfileLoadError: a profile could not be read.
    """
    if len(profile_paths) < 2:
        raise NotEnoughProfilesError()
    if not columns:
        raise NoColumnsError()

    log.info(f"=== Diffing {len(profile_paths)} profiles ===")
    log.info(f"Columns: {[c.value for c in columns]}, threshold: {threshold}")

    profiles = [load_profile(path) for path in profile_paths]

    scale = resolve_unit(unit, pick_unit_sample(profiles))
    log.info(f"Display unit: {scale.unit.value} (requested {DisplayUnit(unit).value})")

    table = tabularize_diff(profiles, columns, threshold=threshold, unit=scale.unit)
    log.info(f"Table ready: {len(table.rows)} rows x {table.num_cols} columns")

    out = out if out is not None else sys.stdout
    strip_ansi = not supports_color(out, color)
    log.debug(f"Writing table (strip_ansi={strip_ansi})")
    table.write(out, strip_ansi=strip_ansi)
    return table
