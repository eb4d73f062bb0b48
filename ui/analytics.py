# ui/analytics.py
import tkinter as tk

from microservice_clients import gather_streak_snapshot
from ui import theme

COLUMNS = ("Habit", "Current", "Longest", "Done", "Source")


def summary_rows(snapshot: dict):
    """One (name, current, longest, total, source) tuple per habit."""
    rows = []
    for entry in snapshot.get("entries") or []:
        source = "service" if entry["source"] == "service" else "computed here"
        rows.append(
            (
                entry["habit"].name,
                str(entry["current"]),
                str(entry["longest"]),
                str(entry["total"]),
                source,
            )
        )
    return rows


def status_text(snapshot: dict) -> str:
    if not snapshot.get("entries"):
        return "No habits yet."
    outage = snapshot.get("outage")
    if outage:
        return f"Streaks service unavailable ({outage}) Showing figures computed locally."
    return "Figures from the streaks service."


class Analytics(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller

        top = tk.Frame(self, bg=theme.BG)
        top.pack(fill="x", padx=16, pady=(14, 6))
        theme.heading_label(top, "Streaks").pack(side="left")
        theme.ghost_button(
            top, "Back to Habits", lambda: controller.show("Dashboard")
        ).pack(side="right")
        theme.primary_button(top, "Refresh", self.refresh).pack(side="right", padx=8)

        self.status = theme.muted_label(self, "", wrap=900)
        self.status.configure(bg=theme.BG)
        self.status.pack(fill="x", padx=16, pady=(0, 8))

        self.table = theme.card(self, padx=12, pady=12)
        self.table.pack(fill="both", expand=True, padx=16, pady=(0, 14))

    def refresh(self):
        snapshot = gather_streak_snapshot(self.controller.tracker)
        self.status.configure(text=status_text(snapshot))
        self._draw_table(summary_rows(snapshot))

    def _draw_table(self, rows):
        for w in self.table.winfo_children():
            w.destroy()
        bg = self.table.cget("bg")
        for col, name in enumerate(COLUMNS):
            self.table.columnconfigure(col, weight=3 if col == 0 else 1)
            tk.Label(self.table, text=name, bg=bg, fg=theme.MUTED, font=theme.SMALL,
                     anchor="w").grid(row=0, column=col, sticky="ew", pady=(0, 6))
        for r, row in enumerate(rows, start=1):
            for col, value in enumerate(row):
                fg = theme.STREAK if col == 1 and value != "0" else theme.TEXT
                tk.Label(self.table, text=value, bg=bg, fg=fg, font=theme.BODY,
                         anchor="w").grid(row=r, column=col, sticky="ew", pady=2)
