"""Generate a batch of star systems, record them to CSV and plot their distributions."""
from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .core.model import PlanetType, Universe
from .core.universe import build_universe

logger = logging.getLogger(__name__)

SYSTEMS_FILENAME = "systems.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"


class SurveyWriter:
    """Buffered writer storing one CSV row per generated planet."""

    HEADER = [
        "seed",
        "system",
        "star_type",
        "luminosity",
        "hz_inner",
        "hz_outer",
        "planet",
        "planet_type",
        "orbit_radius",
        "size",
        "atmosphere",
        "moons",
        "surface_temperature",
        "in_habitable_zone",
        "hospitable",
    ]

    def __init__(
        self,
        root_dir: str | Path = "data/surveys",
        run_id: Optional[str] = None,
        *,
        flush_threshold: int = 200,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        base = run_id or f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_survey"
        candidate = base
        suffix = 1
        while (self.root_dir / candidate).exists():
            candidate = f"{base}_{suffix:02d}"
            suffix += 1

        self.run_id = candidate
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)
        self.systems_path = self.run_dir / SYSTEMS_FILENAME
        self.meta_path = self.run_dir / META_FILENAME

        self._file = self.systems_path.open("w", newline="", encoding="utf-8")
        self._file.write(",".join(self.HEADER) + "\n")
        self._buffer: list[str] = []
        self._threshold = max(1, flush_threshold)

    def log_universe(self, seed: int, universe: Universe) -> None:
        star = universe.star
        zone = star.habitable_zone
        for index, planet in enumerate(universe.system):
            details = universe.details[index]
            self._append(
                [
                    seed,
                    universe.system_name,
                    star.spectral_type.value,
                    star.luminosity,
                    zone.inner_boundary,
                    zone.outer_boundary,
                    index + 1,
                    planet.planet_type.value,
                    planet.orbit_radius,
                    planet.size,
                    planet.atmosphere.value,
                    planet.moons,
                    details.surface_temperature,
                    int(universe.in_habitable_zone(index)),
                    int(universe.is_hospitable(index)),
                ]
            )

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def close(self) -> None:
        self._flush()
        self._file.close()

    def _append(self, values: Sequence[object]) -> None:
        self._buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._buffer) >= self._threshold:
            self._flush()

    def _flush(self) -> None:
        if self._buffer:
            self._file.write("\n".join(self._buffer) + "\n")
            self._file.flush()
            self._buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, float):
            return f"{value:.10g}"
        return str(value)

    def __enter__(self) -> "SurveyWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


def plot_planet_types(fig_dir: Path, counts: Counter) -> Path:
    labels = [t.value for t in PlanetType]
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(labels, [counts.get(label, 0) for label in labels], color="tab:blue")
    ax.set_ylabel("Planets")
    ax.set_title("Planet types")
    ax.tick_params(axis="x", rotation=20)
    fig.tight_layout()
    path = fig_dir / "planet_types.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def plot_orbit_vs_size(fig_dir: Path, radii: np.ndarray, sizes: np.ndarray) -> Path:
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.scatter(radii, sizes, s=8, alpha=0.6)
    ax.set_xscale("log")
    ax.set_xlabel("Orbit radius [AU]")
    ax.set_ylabel("Size")
    ax.set_title("Orbit radius vs. size")
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    path = fig_dir / "orbit_vs_size.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def summarize(universes: Sequence[Universe]) -> dict:
    planets_per_system = np.array([len(u.system) for u in universes], dtype=float)
    temperatures = np.array([d.surface_temperature for u in universes for d in u.details], dtype=float)
    hospitable = sum(u.is_hospitable(i) for u in universes for i in range(len(u.system)))
    return {
        "systems": len(universes),
        "planets": int(planets_per_system.sum()),
        "mean_planets": float(planets_per_system.mean()),
        "median_temperature_c": float(np.median(temperatures)),
        "min_temperature_c": float(temperatures.min()),
        "max_temperature_c": float(temperatures.max()),
        "hospitable_planets": int(hospitable),
    }


def run_survey(count: int, seed: int, out_dir: str | Path) -> tuple[Path, dict]:
    """Generate *count* systems from seeds ``seed .. seed+count-1``; return run dir and summary."""
    if count < 1:
        raise ValueError("count must be at least 1")
    universes: list[Universe] = []
    with SurveyWriter(out_dir) as writer:
        for offset in range(count):
            universe = build_universe(seed=seed + offset)
            writer.log_universe(seed + offset, universe)
            universes.append(universe)
        summary = summarize(universes)
        writer.write_meta({"count": count, "first_seed": seed, "summary": summary})
        run_dir = writer.run_dir

    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    type_counts = Counter(p.planet_type.value for u in universes for p in u.system)
    radii = np.array([p.orbit_radius for u in universes for p in u.system])
    sizes = np.array([p.size for u in universes for p in u.system])
    plot_planet_types(fig_dir, type_counts)
    plot_orbit_vs_size(fig_dir, radii, sizes)
    logger.info("Survey of %d systems written to %s", count, run_dir)
    return run_dir, summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate many star systems and chart the results.")
    parser.add_argument("--count", type=int, default=100, help="Number of systems to generate")
    parser.add_argument("--seed", type=int, default=1, help="Seed of the first system")
    parser.add_argument("--out", default="data/surveys", help="Directory for survey runs")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.count < 1:
        parser.error("--count must be at least 1")

    run_dir, summary = run_survey(args.count, args.seed, args.out)
    print(f"Survey: {run_dir}")
    print(f" Systems: {summary['systems']}, planets: {summary['planets']}")
    print(f" Mean planets per system: {summary['mean_planets']:.2f}")
    print(
        f" Surface temperature C: median {summary['median_temperature_c']:.1f},"
        f" range {summary['min_temperature_c']:.1f} .. {summary['max_temperature_c']:.1f}"
    )
    print(f" Hospitable planets: {summary['hospitable_planets']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
