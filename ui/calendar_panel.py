# ui/calendar_panel.py
import tkinter as tk

from ui import theme
from views import DayView, MonthView, WeekView

SHORT_DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class CalendarPanel(tk.Frame):
    """Draws whichever view model the tracker currently projects."""

    def __init__(self, parent):
        super().__init__(parent, bg=parent.cget("bg"))
        self.body = None

    def render(self, view_model):
        if self.body is not None:
            self.body.destroy()
        self.body = tk.Frame(self, bg=self.cget("bg"))
        self.body.pack(fill="both", expand=True)

        if isinstance(view_model, MonthView):
            self._render_month(view_model)
        elif isinstance(view_model, WeekView):
            self._render_week(view_model)
        elif isinstance(view_model, DayView):
            self._render_day(view_model)
        else:
            raise TypeError(f"Cannot render {type(view_model).__name__}")

    # ---------- Monthly ----------
    def _render_month(self, month: MonthView):
        grid = self.body
        for col, name in enumerate(SHORT_DAY_NAMES):
            tk.Label(
                grid, text=name, bg=grid.cget("bg"), fg=theme.MUTED, font=theme.SMALL
            ).grid(row=0, column=col, sticky="ew", pady=(0, 6))
            grid.columnconfigure(col, weight=1, uniform="day")

        for i, cell in enumerate(month.cells):
            row, col = divmod(i, 7)
            if cell.is_blank:
                tk.Frame(grid, bg=grid.cget("bg")).grid(row=row + 1, column=col)
                continue
            bg = theme.ACCENT if cell.completed else theme.CELL_BG
            tk.Label(
                grid,
                text=str(cell.day_number),
                bg=bg,
                fg=theme.TEXT,
                font=theme.BODY,
                padx=6,
                pady=10,
            ).grid(row=row + 1, column=col, sticky="nsew", padx=3, pady=3)

    # ---------- Weekly ----------
    def _render_week(self, week: WeekView):
        for col, day in enumerate(week.days):
            self.body.columnconfigure(col, weight=1, uniform="day")
            box = theme.card(self.body, bg=theme.CELL_BG, padx=8, pady=8)
            box.grid(row=0, column=col, sticky="nsew", padx=4)
            tk.Label(box, text=day.weekday_name, bg=box.cget("bg"), fg=theme.MUTED,
                     font=theme.SMALL).pack()
            tk.Label(box, text=str(day.day.day), bg=box.cget("bg"), fg=theme.TEXT,
                     font=theme.DAY_NUMBER).pack(pady=(0, 6))
            for mark in day.habits:
                line = tk.Frame(box, bg=box.cget("bg"))
                line.pack(fill="x", pady=2)
                theme.dot(line, mark.completed, size=12).pack(side="left")
                tk.Label(line, text=mark.name, bg=box.cget("bg"), fg=theme.TEXT,
                         font=theme.BODY, anchor="w").pack(side="left", padx=4)

    # ---------- Daily ----------
    def _render_day(self, day: DayView):
        if not day.rows:
            theme.muted_label(self.body, "No habits to show for this day.").pack(anchor="w")
            return
        for mark in day.rows:
            row = theme.card(self.body, bg=theme.CELL_BG, padx=14, pady=10)
            row.pack(fill="x", pady=4)
            tk.Label(row, text=mark.name, bg=row.cget("bg"), fg=theme.TEXT,
                     font=theme.HEADING).pack(side="left")
            theme.dot(row, mark.completed, size=20).pack(side="right")
