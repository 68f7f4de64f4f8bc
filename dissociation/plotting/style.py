"""Centralized plotting style, labels, legend text and save helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..schema import LABELS

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 10.0
    LEGEND_FONTSIZE: float = 10.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.0
    MARKERSIZE: float = 10.0
    MARKER_EDGE_WIDTH: float = 1.5
    GRID_ALPHA: float = 0.35
    FIGSIZE_DIAGRAM: tuple[float, float] = (9.5, 6.5)


STYLE = StyleConfig()

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}

LEGEND_LABELS = {
    LABELS.acid: "Acid Species",
    LABELS.basic: "Basic Species",
    LABELS.water_h: r"Water H$^{+}$",
    LABELS.water_oh: r"Water OH$^{-}$",
}

MATH_LABELS = {
    "ph": r"pH",
    "log_conc": r"$\log_{10}$ of concentration (M)",
}

MARKER_STYLE = {"marker": "+", "color": "black", "linestyle": "none"}


def legend_label(label: str) -> str:
    """Return legend text for a curve label.

    Amphiprotic labels map to ``"1st Amphiprotic Species"`` and so on.
    """
    if label in LEGEND_LABELS:
        return LEGEND_LABELS[label]
    prefix = f"{LABELS.amphiprotic}_"
    if label.startswith(prefix):
        k = int(label[len(prefix):])
        ordinal = _ORDINALS.get(k, f"{k}th")
        return rf"{ordinal[:-2]}$^{{{ordinal[-2:]}}}$ Amphiprotic Species"
    raise KeyError(f"No legend text for curve label {label!r}")


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib rcParams scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": True,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def sanitize_filename(name: str) -> str:
    """Normalize a filename component into a stable, filesystem-safe token."""
    text = re.sub(r"\s+", "_", str(name).strip())
    text = re.sub(r"[^A-Za-z0-9._-]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("._")
    return text or "figure"


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
    *,
    bbox_inches: str = "tight",
    pad_inches: float = 0.12,
) -> str:
    """Save a figure to several formats sharing one base path.

    Args:
        fig (matplotlib.figure.Figure): Figure to serialize.
        savepath_base (str | Path): Output path; any suffix is dropped and
            replaced by each format extension.
        formats (Sequence[str]): Extensions to write. Defaults to PNG, PDF
            and SVG.
        dpi (int): Resolution used for raster output only.

    Returns:
        str: Path of the first file written (the PNG by default).

    Raises:
        ValueError: If ``formats`` is empty or names an unsupported format.
    """
    unsupported = [ext for ext in formats if ext not in OUTPUT_FORMATS]
    if not formats or unsupported:
        raise ValueError(
            f"Unsupported figure formats {list(formats)}. "
            f"Expected a subset of {OUTPUT_FORMATS}."
        )

    base = Path(savepath_base)
    if base.suffix:
        base = base.with_suffix("")
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        fig.savefig(
            str(base.with_suffix(f".{ext}")),
            dpi=dpi if ext == "png" else None,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
        )
    return str(base.with_suffix(f".{formats[0]}"))
