#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from pathlib import Path

import hydra
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from recurring_dates.constants import CONFIGS_ROOT, WEEKDAY_NAMES
from recurring_dates.engine import RecurrenceEngine
from recurring_dates.schema import DateRange, GenerationResult, parse_recurrence_spec
from recurring_dates.time_utils import weekday_index
from recurring_dates.writers import save_json

logger = logging.getLogger(__name__)


def run_preview(cfg: DictConfig) -> tuple[str, GenerationResult]:
    """Build the engine, spec and range described by `cfg` and expand them.

    Returns
    -------
    The summary of the spec and the generation result.
    """
    engine: RecurrenceEngine = instantiate(cfg.engine)
    spec = parse_recurrence_spec(OmegaConf.to_container(cfg.spec, resolve=True))
    date_range = DateRange(start=cfg.start, end=cfg.end)
    return engine.describe(spec), engine.run(spec, date_range)


def render(summary: str, result: GenerationResult, console: Console) -> None:
    if not result.ok:
        console.print(f"[bold red]{result.message}[/bold red]")
        return
    table = Table(title=summary, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Date", style="white")
    table.add_column("Weekday", style="dim")
    for ix, d in enumerate(result.sequence):
        table.add_row(str(ix + 1), d.isoformat(), WEEKDAY_NAMES[weekday_index(d)])
    console.print(table)
    console.print(f"{len(result.sequence)} dates")


@hydra.main(
    config_name="preview",
    config_path=f"pkg://{CONFIGS_ROOT}",
    version_base=None,
)
def preview(cfg: DictConfig):
    try:
        summary, result = run_preview(cfg)
    except ValidationError as e:
        logger.error(f"Invalid recurrence spec: {e}")
        raise SystemExit(1) from e
    render(summary, result, Console())
    if cfg.out_file:
        out_file = Path(cfg.out_file)
        save_json(
            {
                "summary": summary,
                "error": result.message or None,
                "dates": result.sequence,
            },
            out_file,
        )
        logger.info(f"Dates written to {out_file}")


if __name__ == "__main__":
    preview()
