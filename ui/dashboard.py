# ui/dashboard.py
import logging
import tkinter as tk
import tkinter.filedialog as filedialog
import tkinter.messagebox as mbox

import config
from export import write_export
from ui import theme
from ui.calendar_panel import CalendarPanel

logger = logging.getLogger(__name__)


class Dashboard(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller
        self.tracker = controller.tracker

        # Header
        header = tk.Frame(self, bg=theme.BG)
        header.pack(fill="x", padx=16, pady=(14, 6))
        theme.heading_label(header, config.APP_TITLE).pack(side="left")
        theme.ghost_button(header, "Export", self.export).pack(side="right")
        theme.ghost_button(
            header, "Analytics", lambda: controller.show("Analytics")
        ).pack(side="right", padx=8)

        body = tk.Frame(self, bg=theme.BG)
        body.pack(fill="both", expand=True, padx=16, pady=(4, 14))
        body.columnconfigure(0, weight=1, uniform="col")
        body.columnconfigure(1, weight=2, uniform="col")
        body.rowconfigure(0, weight=1)

        # ---------- Habits column ----------
        habits_card = theme.card(body, padx=12, pady=12)
        habits_card.grid(row=0, column=0, sticky="nsew", padx=(0, 8))
        theme.heading_label(habits_card, "My Habits", theme.HEADING).pack(anchor="w")

        form = tk.Frame(habits_card, bg=habits_card.cget("bg"))
        form.pack(fill="x", pady=(8, 10))
        self.name_var = tk.StringVar()
        self.name_entry = tk.Entry(
            form,
            textvariable=self.name_var,
            bg=theme.CELL_BG,
            fg=theme.TEXT,
            insertbackground=theme.TEXT,
            relief="flat",
            font=theme.BODY,
        )
        self.name_entry.pack(side="left", fill="x", expand=True, ipady=6)
        self.name_entry.bind("<Return>", lambda _e: self.add_habit())
        theme.primary_button(form, "Add", self.add_habit).pack(side="left", padx=(8, 0))

        self.habit_list = tk.Frame(habits_card, bg=habits_card.cget("bg"))
        self.habit_list.pack(fill="both", expand=True)

        # ---------- Calendar column ----------
        cal_card = theme.card(body, padx=12, pady=12)
        cal_card.grid(row=0, column=1, sticky="nsew", padx=(8, 0))

        toggles = tk.Frame(cal_card, bg=cal_card.cget("bg"))
        toggles.pack(fill="x")
        self.view_buttons = {}
        for view in config.VIEWS:
            btn = theme.ghost_button(toggles, view.capitalize(), lambda v=view: self.change_view(v))
            btn.pack(side="left", padx=(0, 6))
            self.view_buttons[view] = btn

        nav = tk.Frame(cal_card, bg=cal_card.cget("bg"))
        nav.pack(fill="x", pady=10)
        theme.ghost_button(nav, "<", lambda: self.tracker.navigate(-1)).pack(side="left")
        theme.ghost_button(nav, ">", lambda: self.tracker.navigate(1)).pack(side="right")
        self.title_label = theme.heading_label(nav, font=theme.HEADING)
        self.title_label.pack(side="left", expand=True)

        self.calendar = CalendarPanel(cal_card)
        self.calendar.pack(fill="both", expand=True)

    # ---------- Drawing ----------
    def refresh(self):
        self._render_habits()
        self._render_calendar()

    def _render_habits(self):
        for w in self.habit_list.winfo_children():
            w.destroy()

        if not self.tracker.habits:
            theme.muted_label(
                self.habit_list,
                "No habits added yet. Start forging one!",
                wrap=260,
            ).pack(anchor="w", pady=6)
            return

        for habit in self.tracker.habits:
            row = tk.Frame(self.habit_list, bg=theme.CELL_BG, padx=10, pady=8)
            row.pack(fill="x", pady=4)
            done = tk.BooleanVar(value=self.tracker.is_completed_today(habit))
            tk.Checkbutton(
                row,
                text=habit.name,
                variable=done,
                command=lambda hid=habit.id, var=done: self.set_done_today(hid, var.get()),
                bg=row.cget("bg"),
                fg=theme.TEXT,
                selectcolor=theme.BG,
                activebackground=row.cget("bg"),
                activeforeground=theme.TEXT,
                font=theme.BODY,
                anchor="w",
            ).pack(side="left", fill="x", expand=True)
            theme.pill(row, f"streak {self.tracker.streak(habit)}").pack(side="right")

    def _render_calendar(self):
        current = self.tracker.state.current_view
        for view, btn in self.view_buttons.items():
            theme.set_active(btn, view == current)
        projection = self.tracker.projection()
        self.title_label.configure(text=projection.title)
        self.calendar.render(projection)

    # ---------- Actions ----------
    def add_habit(self):
        if self.tracker.add_habit(self.name_var.get()) is not None:
            self.name_var.set("")

    def set_done_today(self, habit_id, done: bool):
        self.tracker.set_completed(habit_id, self.tracker.today(), done)

    def change_view(self, view: str):
        self.tracker.change_view(view)

    def export(self):
        path = filedialog.asksaveasfilename(
            title="Export habits",
            initialfile=config.EXPORT_FILENAME,
            defaultextension=".json",
            filetypes=[("JSON", "*.json")],
        )
        if not path:
            return
        try:
            write_export(self.tracker.state, path)
        except OSError as exc:
            logger.exception("Export to %s failed", path)
            mbox.showerror("Export failed", f"Could not write {path}:\n{exc}")
