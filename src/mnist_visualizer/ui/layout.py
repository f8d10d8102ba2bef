"""Layout, style, and key-binding helpers for the visualizer UI."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from mnist_visualizer.ui.constants import (
    COLOR_BG,
    COLOR_CARD,
    COLOR_CLEAR_BTN,
    COLOR_CLEAR_BTN_HOVER,
    COLOR_EDGE,
    COLOR_INK,
    COLOR_SCENE_BG,
    COLOR_STATUS_INFO_BG,
    COLOR_STATUS_INFO_FG,
    COLOR_SUB,
    DRAW_CANVAS_SIZE,
    MAX_CONNECTIONS_LIMIT,
)


# (settings field, label, min, max, step, value format)
SLIDER_DEFS = [
    ("max_connections", "Max connections per neuron", 1, MAX_CONNECTIONS_LIMIT, 1, "{:.0f}"),
    ("weak_threshold", "Hide weights weaker than", 0.0, 1.0, 0.05, "{:.2f}"),
    ("line_thickness", "Line thickness", 0.5, 5.0, 0.5, "{:.1f}"),
    ("brush_size", "Brush size", 1, 5, 1, "{:.0f}"),
]


def snap_to_step(value: float, minimum: float, step: float) -> float:
    """Round a raw slider value to the nearest step above minimum."""
    return minimum + round((value - minimum) / step) * step


def configure_styles(root: tk.Tk) -> None:
    """Define ttk style rules so widgets share one visual language."""
    style = ttk.Style(root)
    style.theme_use("clam")

    style.configure("App.TFrame", background=COLOR_BG)
    style.configure("Card.TFrame", background=COLOR_CARD)

    style.configure(
        "Title.TLabel",
        background=COLOR_BG,
        foreground="#8b7cf6",
        font=("Avenir Next", 20, "bold"),
    )
    style.configure(
        "Subtitle.TLabel",
        background=COLOR_BG,
        foreground=COLOR_SUB,
        font=("Avenir Next", 11),
    )
    style.configure(
        "Mono.TLabel",
        background=COLOR_BG,
        foreground="#888888",
        font=("Menlo", 10),
    )
    style.configure(
        "Section.TLabel",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        font=("Avenir Next", 12, "bold"),
    )
    style.configure(
        "Body.TLabel",
        background=COLOR_CARD,
        foreground=COLOR_SUB,
        font=("Avenir Next", 10),
    )

    style.configure(
        "Card.TLabelframe",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        bordercolor=COLOR_EDGE,
        borderwidth=2,
        relief="solid",
    )
    style.configure(
        "Card.TLabelframe.Label",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        font=("Avenir Next", 11, "bold"),
    )

    style.configure(
        "Clear.TButton",
        background=COLOR_CLEAR_BTN,
        foreground="#ffffff",
        borderwidth=0,
        font=("Avenir Next", 10, "bold"),
        padding=(16, 8),
    )
    style.map(
        "Clear.TButton",
        background=[("active", COLOR_CLEAR_BTN_HOVER), ("pressed", COLOR_CLEAR_BTN_HOVER)],
    )

    style.configure("Card.Horizontal.TScale", background=COLOR_CARD, troughcolor=COLOR_BG)


def bind_shortcuts(ui: object) -> None:
    """Register keyboard shortcuts for fast interaction."""
    ui.root.bind("c", lambda _e: ui.clear_drawing())
    ui.root.bind("C", lambda _e: ui.clear_drawing())
    ui.root.bind("<Escape>", lambda _e: ui.clear_drawing())
    ui.root.bind("<space>", lambda _e: ui.toggle_rotation())


def build_layout(ui: object) -> None:
    """Create top-level layout containers and major UI sections."""
    outer = ttk.Frame(ui.root, padding=14, style="App.TFrame")
    outer.pack(fill="both", expand=True)

    _build_header(outer)
    _build_top_area(ui, outer)
    _build_network_area(ui, outer)
    _build_status(ui, outer)


def _build_header(parent: ttk.Frame) -> None:
    header = ttk.Frame(parent, style="App.TFrame")
    header.pack(fill="x", pady=(0, 10))

    ttk.Label(header, text="MNIST Neural Network Visualizer", style="Title.TLabel").pack()
    ttk.Label(
        header,
        text="Interactive 3D view of a multi-layer perceptron processing a handwritten digit",
        style="Subtitle.TLabel",
    ).pack(pady=(2, 0))
    ttk.Label(
        header,
        text="Architecture: 784 -> 64 (ReLU) -> 32 (ReLU) -> 10 (Softmax)   |   random, untrained weights",
        style="Mono.TLabel",
    ).pack(pady=(2, 0))


def _build_top_area(ui: object, parent: ttk.Frame) -> None:
    top = ttk.Frame(parent, style="App.TFrame")
    top.pack(fill="x", pady=(0, 10))

    draw_frame = ttk.LabelFrame(top, text="Draw a Digit (0-9)", padding=12, style="Card.TLabelframe")
    draw_frame.pack(side="left", fill="y", padx=(0, 10))

    ui.draw_canvas = tk.Canvas(
        draw_frame,
        width=DRAW_CANVAS_SIZE,
        height=DRAW_CANVAS_SIZE,
        bg="#ffffff",
        highlightthickness=2,
        highlightbackground=COLOR_EDGE,
        cursor="crosshair",
        takefocus=1,
    )
    ui.draw_canvas.pack()
    ui.draw_canvas.bind("<Button-1>", ui._on_draw)
    ui.draw_canvas.bind("<B1-Motion>", ui._on_draw)
    ui.draw_canvas.bind("<ButtonRelease-1>", ui._on_draw_end)
    ui.draw_canvas.bind("<Leave>", ui._on_draw_end)

    ttk.Button(
        draw_frame,
        text="Clear Canvas",
        command=ui.clear_drawing,
        style="Clear.TButton",
    ).pack(pady=(12, 0))
    ttk.Label(draw_frame, textvariable=ui.prediction_var, style="Section.TLabel").pack(pady=(10, 0))

    chart_frame = ttk.LabelFrame(top, text="Output", padding=12, style="Card.TLabelframe")
    chart_frame.pack(side="left", fill="both", expand=True)

    ui.chart_canvas = tk.Canvas(
        chart_frame,
        width=560,
        height=360,
        bg=COLOR_CARD,
        highlightthickness=0,
    )
    ui.chart_canvas.pack(fill="both", expand=True)


def _build_network_area(ui: object, parent: ttk.Frame) -> None:
    bottom = ttk.Frame(parent, style="App.TFrame")
    bottom.pack(fill="both", expand=True)

    scene_frame = ttk.LabelFrame(
        bottom,
        text="3D Neural Network Visualization",
        padding=8,
        style="Card.TLabelframe",
    )
    scene_frame.pack(side="left", fill="both", expand=True, padx=(0, 10))

    ui.network_canvas = tk.Canvas(
        scene_frame,
        width=900,
        height=380,
        bg=COLOR_SCENE_BG,
        highlightthickness=0,
    )
    ui.network_canvas.pack(fill="both", expand=True)

    settings_frame = ttk.LabelFrame(bottom, text="Advanced Settings", padding=12, style="Card.TLabelframe")
    settings_frame.pack(side="left", fill="y")
    _build_settings_panel(ui, settings_frame)


def _build_settings_panel(ui: object, container: ttk.LabelFrame) -> None:
    ui.setting_vars = {}
    for row, (field, label, minimum, maximum, step, fmt) in enumerate(SLIDER_DEFS):
        current = getattr(ui.settings, field)
        value_var = tk.StringVar(value=fmt.format(current))
        scale_var = tk.DoubleVar(value=float(current))
        ui.setting_vars[field] = (scale_var, value_var)

        ttk.Label(container, text=label, style="Body.TLabel").grid(row=row * 2, column=0, sticky="w", pady=(6, 0))
        ttk.Label(container, textvariable=value_var, style="Section.TLabel").grid(
            row=row * 2, column=1, sticky="e", pady=(6, 0)
        )

        def _on_slide(raw: str, field=field, minimum=minimum, step=step, fmt=fmt) -> None:
            value = snap_to_step(float(raw), minimum, step)
            ui.setting_vars[field][1].set(fmt.format(value))
            ui.on_setting_changed(field, value)

        ttk.Scale(
            container,
            from_=minimum,
            to=maximum,
            variable=scale_var,
            orient="horizontal",
            length=220,
            command=_on_slide,
            style="Card.Horizontal.TScale",
        ).grid(row=row * 2 + 1, column=0, columnspan=2, sticky="we")

    ttk.Label(
        container,
        text="Space: pause/resume rotation\nC / Esc: clear the canvas",
        style="Body.TLabel",
        justify="left",
    ).grid(row=len(SLIDER_DEFS) * 2, column=0, columnspan=2, sticky="w", pady=(14, 0))


def _build_status(ui: object, parent: ttk.Frame) -> None:
    status_frame = ttk.Frame(parent, style="App.TFrame")
    status_frame.pack(fill="x", pady=(8, 0))

    ui.status_label = tk.Label(
        status_frame,
        textvariable=ui.status_var,
        bg=COLOR_STATUS_INFO_BG,
        fg=COLOR_STATUS_INFO_FG,
        font=("Avenir Next", 10, "bold"),
        padx=10,
        pady=8,
        anchor="w",
        relief="flat",
    )
    ui.status_label.pack(fill="x", anchor="w")
