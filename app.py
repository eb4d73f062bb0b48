import logging
import tkinter as tk

import config
from logging_config import setup_logging
from repo_json import JSONRepo
from tracker import HabitTracker
from ui import theme
from ui.analytics import Analytics
from ui.dashboard import Dashboard

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, data_path: str = config.DATA_PATH):
        super().__init__()
        self.title(config.APP_TITLE)
        self.geometry(config.WINDOW_GEOMETRY)
        self.configure(bg=theme.BG)
        self.tracker = HabitTracker(JSONRepo(data_path))

        container = tk.Frame(self, bg=theme.BG)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.frames = {}
        for F in (Dashboard, Analytics):
            frame = F(parent=container, controller=self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

        self.tracker.subscribe(lambda _t: self.frames["Dashboard"].refresh())
        self.show("Dashboard")

    def show(self, name):
        frame = self.frames[name]
        if hasattr(frame, "refresh"):
            frame.refresh()
        frame.tkraise()


def main():
    setup_logging()
    logger.info("Starting %s", config.APP_TITLE)
    App().mainloop()


if __name__ == "__main__":
    main()
