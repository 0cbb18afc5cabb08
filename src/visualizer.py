from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from export.MatrixExporter import MatrixExporter
from matrix.MatrixErrors import MatrixError
from matrix.MatrixParser import MatrixParser
from matrix.Presets import AXES, Presets
from matrix.TransformEngine import TransformEngine


def _read_text(text: Optional[str], path: Optional[str]) -> Optional[str]:
    if path:
        if path == "-":
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    return text


def _preset_from_args(args: argparse.Namespace) -> Optional[np.ndarray]:
    """Compose every preset option given, applied in the order rotate, scale, shear, translate."""
    mats = []
    if args.rotate is not None:
        mats.append(Presets.build("rotation", args.mode, args.homogeneous, angle=args.rotate, axis=args.axis))
    if args.scale is not None:
        sx, sy, *rest = args.scale
        mats.append(Presets.build("scale", args.mode, args.homogeneous, sx=sx, sy=sy, sz=rest[0] if rest else 1.0))
    if args.shear is not None:
        mats.append(Presets.build("shear", args.mode, args.homogeneous, shx=args.shear[0], shy=args.shear[1]))
    if args.translate is not None:
        tx, ty, *rest = args.translate
        mats.append(Presets.build("translation", args.mode, args.homogeneous, tx=tx, ty=ty, tz=rest[0] if rest else 0.0))
    if not mats:
        return None
    m = mats[0]
    for nxt in mats[1:]:
        m = nxt @ m
    return m


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Apply a transform matrix to a point set and view original vs transformed points")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--points", help="Points as text, rows separated by ';' or newlines (e.g. '1 0; 0 1')")
    src.add_argument("--points-file", metavar="PATH", help="Read points from a text file ('-' for stdin)")
    tr = ap.add_mutually_exclusive_group()
    tr.add_argument("--transform", help="Transform matrix as text, same syntax as --points")
    tr.add_argument("--transform-file", metavar="PATH", help="Read the transform matrix from a text file")
    ap.add_argument("--mode", choices=("2D", "3D"), default="2D", help="Dimensionality for defaults, presets and viewer (default: 2D)")
    ap.add_argument("--homogeneous", action="store_true", help="Use homogeneous coordinates ((d+1)x(d+1) transform)")
    ap.add_argument("--rotate", type=float, metavar="DEG", help="Rotation preset angle in degrees")
    ap.add_argument("--axis", choices=AXES, default="z", help="Rotation axis in 3D mode (default: z)")
    ap.add_argument("--scale", type=float, nargs="+", metavar="S", help="Scale preset: SX SY [SZ]")
    ap.add_argument("--translate", type=float, nargs="+", metavar="T", help="Translation preset: TX TY [TZ] (homogeneous only)")
    ap.add_argument("--shear", type=float, nargs=2, metavar=("SHX", "SHY"), help="Shear preset (2D only)")
    ap.add_argument("--connect", action="store_true", help="Connect points in order in the 2D viewer")
    ap.add_argument("--close", action="store_true", help="Close the connected polygon in the 2D viewer")
    ap.add_argument("--export-json", metavar="PATH", help="Write points and transformed points to JSON (use '-' for stdout)")
    ap.add_argument("--export-txt", metavar="PATH", help="Write transformed points as text (use '-' for stdout)")
    ap.add_argument("--no-view", action="store_true", help="Do not open the plot viewer")
    ap.add_argument("--gui", action="store_true", help="Open the interactive visualizer window")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.gui:
        from app.App import App
        from app.AppModel import AppModel
        App(AppModel(mode=args.mode, homogeneous=args.homogeneous,
                     transform_text=Presets.default_transform(args.mode, args.homogeneous),
                     points_text=Presets.default_points(args.mode))).mainloop()
        return 0

    for name, values in (("--scale", args.scale), ("--translate", args.translate)):
        if values is not None and len(values) not in (2, 3):
            ap.error(f"{name} takes 2 or 3 values")

    try:
        points_text = _read_text(args.points, args.points_file)
        transform_text = _read_text(args.transform, args.transform_file)
    except OSError as ex:
        print(f"Could not read input: {ex}", file=sys.stderr)
        return 1

    try:
        preset = _preset_from_args(args)
        if transform_text is not None and preset is not None:
            ap.error("use either a transform matrix or preset options, not both")
        transform = preset if preset is not None else (
            transform_text or Presets.default_transform(args.mode, args.homogeneous))
        result = TransformEngine.apply_transform(
            points_text or Presets.default_points(args.mode), transform, args.homogeneous)
    except (MatrixError, ValueError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    print("Original:")
    print(MatrixExporter.format_text(result.points))
    print("Transformed:")
    print(MatrixExporter.format_text(result.transformed))

    # Exports
    try:
        if args.export_json:
            t = transform if isinstance(transform, np.ndarray) else MatrixParser.parse(transform)
            MatrixExporter.export_json(result, args.export_json, args.mode, args.homogeneous, t)
        if args.export_txt:
            MatrixExporter.export_txt(result, args.export_txt)
    except OSError as ex:
        print(f"Could not write export: {ex}", file=sys.stderr)
        return 1

    if not args.no_view:
        if args.mode == "2D":
            from view.Plot2D import Plot2D
            Plot2D.visualize(result.points, result.transformed, args.connect, args.close)
        else:
            from view.Plot3D import Plot3D
            Plot3D.visualize(result.points, result.transformed)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
