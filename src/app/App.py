from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401 - ensures 3D support is loaded

from app.AppModel import AppModel
from export.MatrixExporter import MatrixExporter
from matrix.MatrixErrors import MatrixError
from matrix.Presets import AXES
from matrix.TransformEngine import TransformResult
from view.Plot2D import Plot2D
from view.Plot3D import Plot3D

ERROR_COLOR = "#b91c1c"


class App(tk.Tk):
    def __init__(self, model: Optional[AppModel] = None):
        super().__init__()
        self.title("Matrix Transform Visualizer")
        self.geometry("1200x800")
        self.minsize(900, 600)
        try:
            self.tk.call("tk", "scaling", 1.2)  # slightly larger UI if supported
        except tk.TclError:
            pass

        style = ttk.Style(self)
        if "clam" in style.theme_names():
            style.theme_use("clam")

        # Shared state
        self.model = model or AppModel()
        self.mode_var = tk.StringVar(value=self.model.mode)
        self.hom_var = tk.BooleanVar(value=self.model.homogeneous)
        self.connect_var = tk.BooleanVar(value=True)
        self.close_var = tk.BooleanVar(value=True)
        self.points_label_var = tk.StringVar()
        self.transform_label_var = tk.StringVar()
        self.error_var = tk.StringVar()
        self.angle_var = tk.DoubleVar(value=30.0)
        self.angle_text_var = tk.StringVar(value="30")
        self.axis_var = tk.StringVar(value="z")
        self.param_vars: Dict[str, tk.StringVar] = {
            "sx": tk.StringVar(value="1.5"), "sy": tk.StringVar(value="1.5"), "sz": tk.StringVar(value="1.5"),
            "tx": tk.StringVar(value="1"), "ty": tk.StringVar(value="1"), "tz": tk.StringVar(value="1"),
            "shx": tk.StringVar(value="0.5"), "shy": tk.StringVar(value="0"),
        }
        self.result: Optional[TransformResult] = None

        # Layout: PanedWindow with controls on the left and the plot on the right
        paned = ttk.Panedwindow(self, orient=tk.HORIZONTAL)
        paned.pack(fill=tk.BOTH, expand=True)

        left = ttk.Frame(paned, width=360, padding=8)
        right = ttk.Frame(paned)
        paned.add(left, weight=0)
        paned.add(right, weight=1)

        self._build_controls(left)

        self.figure = Figure(figsize=(6, 5), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.figure, master=right)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        self.sync_from_model()
        self.render_all()

    # Layout
    def _build_controls(self, parent: ttk.Frame):
        topbar = ttk.Frame(parent)
        topbar.pack(fill=tk.X)
        ttk.Radiobutton(topbar, text="2D", value="2D", variable=self.mode_var,
                        command=self.on_mode_change).pack(side=tk.LEFT)
        ttk.Radiobutton(topbar, text="3D", value="3D", variable=self.mode_var,
                        command=self.on_mode_change).pack(side=tk.LEFT, padx=(6, 0))
        ttk.Checkbutton(topbar, text="Homogeneous", variable=self.hom_var,
                        command=self.on_homogeneous_change).pack(side=tk.LEFT, padx=(12, 0))
        ttk.Button(topbar, text="Export", command=self.export_dialog).pack(side=tk.RIGHT)

        # Points
        row = ttk.Frame(parent)
        row.pack(fill=tk.X, pady=(8, 0))
        ttk.Label(row, textvariable=self.points_label_var).pack(side=tk.LEFT)
        ttk.Button(row, text="Reset", command=self.on_reset_points).pack(side=tk.RIGHT)
        self.points_text = tk.Text(parent, height=8, width=36, wrap=tk.NONE)
        self.points_text.pack(fill=tk.X)
        self.points_text.bind("<KeyRelease>", lambda e: self.on_text_edit())

        # Transform
        row = ttk.Frame(parent)
        row.pack(fill=tk.X, pady=(8, 0))
        ttk.Label(row, textvariable=self.transform_label_var).pack(side=tk.LEFT)
        ttk.Button(row, text="Reset", command=self.on_reset_transform).pack(side=tk.RIGHT)
        self.transform_text = tk.Text(parent, height=5, width=36, wrap=tk.NONE)
        self.transform_text.pack(fill=tk.X)
        self.transform_text.bind("<KeyRelease>", lambda e: self.on_text_edit())

        self._build_presets(parent)

        # 2D polygon options
        self.poly_opts = ttk.Frame(parent)
        self.poly_opts.pack(fill=tk.X, pady=(8, 0))
        ttk.Checkbutton(self.poly_opts, text="Connect points", variable=self.connect_var,
                        command=self.render_all).pack(side=tk.LEFT)
        ttk.Checkbutton(self.poly_opts, text="Close polygon", variable=self.close_var,
                        command=self.render_all).pack(side=tk.LEFT, padx=(8, 0))

        self.error_label = ttk.Label(parent, textvariable=self.error_var, foreground=ERROR_COLOR,
                                     wraplength=340)
        self.error_label.pack(fill=tk.X, pady=(8, 0))

        # Numeric output
        out = ttk.Frame(parent)
        out.pack(fill=tk.BOTH, expand=True, pady=(8, 0))
        out.columnconfigure(0, weight=1)
        out.columnconfigure(1, weight=1)
        out.rowconfigure(1, weight=1)
        ttk.Label(out, text="Original").grid(row=0, column=0, sticky="w")
        ttk.Label(out, text="Transformed").grid(row=0, column=1, sticky="w")
        self.out_original = tk.Text(out, height=8, width=16, wrap=tk.NONE, state=tk.DISABLED)
        self.out_original.grid(row=1, column=0, sticky="nsew", padx=(0, 4))
        self.out_transformed = tk.Text(out, height=8, width=16, wrap=tk.NONE, state=tk.DISABLED)
        self.out_transformed.grid(row=1, column=1, sticky="nsew")

    def _build_presets(self, parent: ttk.Frame):
        box = ttk.LabelFrame(parent, text="Presets", padding=6)
        box.pack(fill=tk.X, pady=(8, 0))

        row = ttk.Frame(box)
        row.grid(row=0, column=0, sticky="ew")
        ttk.Label(row, text="Angle").pack(side=tk.LEFT)
        ttk.Scale(row, from_=-180, to=180, variable=self.angle_var,
                  command=lambda v: self.angle_text_var.set(f"{float(v):.0f}")).pack(side=tk.LEFT, fill=tk.X, expand=True)
        ttk.Label(row, textvariable=self.angle_text_var, width=5).pack(side=tk.LEFT)

        self.axis_row = ttk.Frame(box)
        self.axis_row.grid(row=1, column=0, sticky="ew")
        ttk.Label(self.axis_row, text="Axis").pack(side=tk.LEFT)
        ttk.Combobox(self.axis_row, textvariable=self.axis_var, values=AXES, width=4,
                     state="readonly").pack(side=tk.LEFT, padx=(4, 0))

        self.param_rows: Dict[str, ttk.Frame] = {}
        for i, (key, label) in enumerate([("scale", "Scale"), ("translate", "Translate")]):
            row = ttk.Frame(box)
            row.grid(row=2 + i, column=0, sticky="ew")
            ttk.Label(row, text=label, width=9).pack(side=tk.LEFT)
            prefix = "s" if key == "scale" else "t"
            for c in "xyz":
                name = prefix + c
                entry_wrap = ttk.Frame(row)
                entry_wrap.pack(side=tk.LEFT)
                ttk.Label(entry_wrap, text=c).pack(side=tk.LEFT)
                ttk.Entry(entry_wrap, textvariable=self.param_vars[name], width=5).pack(side=tk.LEFT)
                self.param_rows[name] = entry_wrap

        self.shear_row = ttk.Frame(box)
        self.shear_row.grid(row=4, column=0, sticky="ew")
        ttk.Label(self.shear_row, text="Shear", width=9).pack(side=tk.LEFT)
        for name in ("shx", "shy"):
            ttk.Label(self.shear_row, text=name[-1]).pack(side=tk.LEFT)
            ttk.Entry(self.shear_row, textvariable=self.param_vars[name], width=5).pack(side=tk.LEFT)

        buttons = ttk.Frame(box)
        buttons.grid(row=5, column=0, sticky="ew", pady=(6, 0))
        ttk.Button(buttons, text="Rotation", command=lambda: self.on_preset("rotation")).pack(side=tk.LEFT)
        ttk.Button(buttons, text="Scale", command=lambda: self.on_preset("scale")).pack(side=tk.LEFT)
        ttk.Button(buttons, text="Translation", command=lambda: self.on_preset("translation")).pack(side=tk.LEFT)
        self.shear_button = ttk.Button(buttons, text="Shear", command=lambda: self.on_preset("shear"))
        self.shear_button.pack(side=tk.LEFT)

    # Model <-> widgets
    @staticmethod
    def safe_float(s: str, default: float = 0.0) -> float:
        """Safely convert string to floating point, return default value if it fails."""
        try:
            return float(s)
        except ValueError:
            return default

    @staticmethod
    def _set_text(widget: tk.Text, text: str, readonly: bool = False):
        if readonly:
            widget.configure(state=tk.NORMAL)
        widget.delete("1.0", tk.END)
        widget.insert("1.0", text)
        if readonly:
            widget.configure(state=tk.DISABLED)

    @staticmethod
    def _get_text(widget: tk.Text) -> str:
        # Text widgets always end with a newline
        return widget.get("1.0", "end-1c")

    def sync_from_model(self):
        m = self.model
        self.mode_var.set(m.mode)
        self.hom_var.set(m.homogeneous)
        self.points_label_var.set(m.points_label)
        self.transform_label_var.set(m.transform_label)
        self._set_text(self.points_text, m.points_text)
        self._set_text(self.transform_text, m.transform_text)

        is_2d = m.mode == "2D"
        # show/hide 2D/3D-only controls
        if is_2d:
            self.axis_row.grid_remove()
            self.param_rows["sz"].pack_forget()
            self.param_rows["tz"].pack_forget()
            self.shear_row.grid()
            self.shear_button.state(["!disabled"])
            self.poly_opts.pack(fill=tk.X, pady=(8, 0), before=self.error_label)
        else:
            self.axis_row.grid()
            self.param_rows["sz"].pack(side=tk.LEFT)
            self.param_rows["tz"].pack(side=tk.LEFT)
            self.shear_row.grid_remove()
            self.shear_button.state(["disabled"])
            self.poly_opts.pack_forget()

    def sync_to_model(self):
        self.model.points_text = self._get_text(self.points_text)
        self.model.transform_text = self._get_text(self.transform_text)

    # Events
    def on_mode_change(self):
        self.sync_to_model()
        self.model.set_mode(self.mode_var.get())
        self.sync_from_model()
        self.render_all()

    def on_homogeneous_change(self):
        self.sync_to_model()
        self.model.set_homogeneous(self.hom_var.get())
        self.sync_from_model()
        self.render_all()

    def on_reset_points(self):
        self.model.reset_points()
        self._set_text(self.points_text, self.model.points_text)
        self.render_all()

    def on_reset_transform(self):
        self.model.reset_transform()
        self._set_text(self.transform_text, self.model.transform_text)
        self.render_all()

    def on_text_edit(self):
        self.sync_to_model()
        self.render_all()

    def on_preset(self, kind: str):
        params = {name: self.safe_float(var.get(), 1.0 if name in ("sx", "sy", "sz") else 0.0)
                  for name, var in self.param_vars.items()}
        params["angle"] = self.angle_var.get()
        params["axis"] = self.axis_var.get()
        try:
            self.model.apply_preset(kind, params)
        except ValueError as e:
            messagebox.showerror("Error", str(e))
            return
        self._set_text(self.transform_text, self.model.transform_text)
        self.render_all()

    # Drawing
    def render_all(self):
        res = self.model.compute()
        self.error_var.set(res.error or "")
        self.result = None if res.error else TransformResult(res.points, res.transformed)

        self._set_text(self.out_original, MatrixExporter.format_text(res.points), readonly=True)
        self._set_text(self.out_transformed, MatrixExporter.format_text(res.transformed), readonly=True)

        self.figure.clf()
        if self.model.mode == "2D":
            ax = self.figure.add_subplot(111)
            Plot2D.draw(ax, res.points, res.transformed, self.connect_var.get(), self.close_var.get())
        else:
            ax = self.figure.add_subplot(111, projection="3d")
            Plot3D.draw(ax, res.points, res.transformed)
        self.canvas.draw_idle()

    def export_dialog(self):
        if self.result is None:
            messagebox.showerror("Error", "Nothing to export: fix the input errors first.")
            return
        path = filedialog.asksaveasfilename(
            title="Export transformed points",
            defaultextension=".json",
            filetypes=[
                ("JSON Files", "*.json"),
                ("Text Files", "*.txt"),
                ("All Files", "*.*"),
            ],
        )
        if not path:
            return
        try:
            if Path(path).suffix.lower() == ".txt":
                MatrixExporter.export_txt(self.result, path)
            else:
                transform = self.model.compute_transform()
                MatrixExporter.export_json(self.result, path, self.model.mode, self.model.homogeneous, transform)
        except (OSError, MatrixError) as e:
            messagebox.showerror("Error", f"Failed to export {path}:\n{e}")


def main() -> int:
    app = App()
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
