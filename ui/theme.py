"""Shared visual style helpers for the Tk UI (slate and emerald palette)."""

import tkinter as tk

# Palette
BG = "#0f172a"           # slate-900
CARD_BG = "#1e293b"      # slate-800
CELL_BG = "#334155"      # slate-700
CELL_HOVER = "#475569"   # slate-600
BORDER = "#334155"
TEXT = "#f9fafb"
MUTED = "#9ca3af"
ACCENT = "#059669"       # emerald-600
ACCENT_DARK = "#047857"  # emerald-700
DONE = "#10b981"         # emerald-500
NOT_DONE = "#4b5563"     # gray-600
STREAK = "#34d399"       # emerald-400

# Typography
FONT_FAMILY = "Helvetica"
TITLE = (FONT_FAMILY, 20, "bold")
HEADING = (FONT_FAMILY, 14, "bold")
BODY = (FONT_FAMILY, 11)
SMALL = (FONT_FAMILY, 9, "bold")
DAY_NUMBER = (FONT_FAMILY, 16, "bold")
BUTTON = (FONT_FAMILY, 10, "bold")


def card(parent, bg=CARD_BG, **kwargs):
    """Flat panel with a thin border."""
    return tk.Frame(
        parent,
        bg=bg,
        bd=0,
        highlightbackground=BORDER,
        highlightthickness=1,
        **kwargs,
    )


def heading_label(parent, text="", font=TITLE):
    return tk.Label(parent, text=text, bg=parent.cget("bg"), fg=TEXT, font=font)


def muted_label(parent, text, font=BODY, wrap=None):
    return tk.Label(
        parent,
        text=text,
        bg=parent.cget("bg"),
        fg=MUTED,
        font=font,
        justify="left",
        wraplength=wrap,
        anchor="w",
    )


def primary_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=ACCENT,
        fg=TEXT,
        activebackground=ACCENT_DARK,
        activeforeground=TEXT,
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=14,
        pady=8,
        cursor="hand2",
        highlightthickness=0,
    )


def ghost_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=CELL_BG,
        fg=TEXT,
        activebackground=CELL_HOVER,
        activeforeground=TEXT,
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=12,
        pady=7,
        cursor="hand2",
        highlightthickness=0,
    )


def set_active(button: tk.Button, active: bool):
    """Highlight the selected view toggle."""
    if active:
        button.configure(bg=ACCENT, activebackground=ACCENT_DARK)
    else:
        button.configure(bg=CELL_BG, activebackground=CELL_HOVER)


def pill(parent, text, fg=STREAK, bg=CELL_HOVER):
    """Small rounded-looking tag, used for streak counts."""
    return tk.Label(parent, text=text, bg=bg, fg=fg, font=SMALL, padx=8, pady=2)


def dot(parent, done: bool, size: int = 14):
    """Filled circle showing completed / not completed."""
    canvas = tk.Canvas(
        parent,
        width=size,
        height=size,
        bg=parent.cget("bg"),
        highlightthickness=0,
        bd=0,
    )
    canvas.create_oval(1, 1, size - 1, size - 1, fill=DONE if done else NOT_DONE, outline="")
    return canvas
