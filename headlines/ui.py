from __future__ import annotations

import tkinter as tk
import webbrowser
from typing import Dict

from .models import ArticleRecord
from .state import PresentationState

PADDING = 5

DARK: Dict[str, str] = {"bg": "#1b1b1b", "fg": "#ffffff", "muted": "#a0a0a0", "link": "#00ffff"}
LIGHT: Dict[str, str] = {"bg": "#f6f6f6", "fg": "#000000", "muted": "#555555", "link": "#ff0000"}


def palette(dark_mode: bool) -> Dict[str, str]:
    return DARK if dark_mode else LIGHT


class ScrollFrame(tk.Frame):
    def __init__(self, master: tk.Misc) -> None:
        super().__init__(master)
        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.scrollbar = tk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.inner = tk.Frame(self.canvas)
        self.inner.bind("<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self._window_id = self.canvas.create_window((0, 0), window=self.inner, anchor="nw")
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(self._window_id, width=e.width))
        self.canvas.configure(yscrollcommand=self.scrollbar.set)
        self.canvas.pack(side="left", fill="both", expand=True)
        self.scrollbar.pack(side="right", fill="y")


class HeadlinesWindow:
    """Tk front end. Reads ``PresentationState`` and forwards user actions."""

    def __init__(self, root: tk.Tk, state: PresentationState, source_label: str, poll_interval_ms: int = 250) -> None:
        self.root = root
        self.state = state
        self._poll_interval_ms = poll_interval_ms
        self._closed = False
        self._source_label = source_label

        root.title("Headlines")
        root.geometry("540x960")

        self.top_bar = tk.Frame(root)
        self.top_bar.pack(fill="x", padx=10, pady=10)
        self.logo = tk.Label(self.top_bar, text="\U0001F4D3", font=("Helvetica", 24))
        self.logo.pack(side="left")
        self.close_btn = tk.Button(self.top_bar, text="❌", command=self.close)
        self.close_btn.pack(side="right", padx=PADDING)
        self.refresh_btn = tk.Button(self.top_bar, text="\U0001F504", command=self.on_refresh)
        self.refresh_btn.pack(side="right", padx=PADDING)
        self.theme_btn = tk.Button(self.top_bar, command=self.on_toggle_theme)
        self.theme_btn.pack(side="right", padx=PADDING)

        self.footer = tk.Label(root, font=("Courier", 10))
        self.footer.pack(fill="x", side="bottom", pady=10)

        self.body = ScrollFrame(root)
        self.body.pack(fill="both", expand=True)

        root.protocol("WM_DELETE_WINDOW", self.close)
        self.render()

    def run(self) -> None:
        self.state.start()
        self.root.after(self._poll_interval_ms, self._tick)
        self.root.mainloop()

    def on_refresh(self) -> None:
        self.state.refresh()
        self.render()

    def on_toggle_theme(self) -> None:
        self.state.toggle_theme()
        self.render()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.root.destroy()

    def _tick(self) -> None:
        if self._closed:
            return
        if self.state.tick():
            self.render()
        self.root.after(self._poll_interval_ms, self._tick)

    def render(self) -> None:
        colors = palette(self.state.dark_mode)
        self.theme_btn.configure(text="\U0001F31E" if self.state.dark_mode else "\U0001F319")
        for widget in (self.root, self.top_bar, self.logo, self.footer, self.body.canvas, self.body.inner):
            widget.configure(bg=colors["bg"])
        for widget in (self.logo, self.footer):
            widget.configure(fg=colors["fg"])
        footer = f"API source: {self._source_label}"
        if self.state.last_error is not None:
            footer += f" (last refresh failed: {self.state.last_error})"
        self.footer.configure(text=footer)

        for child in self.body.inner.winfo_children():
            child.destroy()
        if self.state.is_loading:
            tk.Label(
                self.body.inner,
                text="Loading ⌛",
                font=("Helvetica", 24, "bold"),
                bg=colors["bg"],
                fg=colors["fg"],
            ).pack(pady=40)
            return
        tk.Label(
            self.body.inner, text="Top Headlines", font=("Helvetica", 24, "bold"), bg=colors["bg"], fg=colors["fg"]
        ).pack(pady=(PADDING, 20))
        for article in self.state.articles:
            self._render_card(article, colors)

    def _render_card(self, article: ArticleRecord, colors: Dict[str, str]) -> None:
        card = tk.Frame(self.body.inner, bg=colors["bg"])
        card.pack(fill="x", padx=10, pady=PADDING)
        tk.Label(
            card, text=f"▶ {article.title}", anchor="w", justify="left", wraplength=480,
            font=("Helvetica", 14, "bold"), bg=colors["bg"], fg=colors["fg"],
        ).pack(fill="x", pady=PADDING)
        tk.Label(
            card, text=article.body, anchor="w", justify="left", wraplength=480,
            bg=colors["bg"], fg=colors["fg"],
        ).pack(fill="x", pady=PADDING)
        tk.Label(
            card, text=f"Source: {article.source}", anchor="w", bg=colors["bg"], fg=colors["muted"],
        ).pack(fill="x", pady=PADDING)
        link = tk.Label(card, text="read more ⤴", cursor="hand2", bg=colors["bg"], fg=colors["link"])
        link.pack(anchor="e", pady=PADDING)
        link.bind("<Button-1>", lambda _e, url=article.url: webbrowser.open(url))
        tk.Frame(card, height=1, bg=colors["muted"]).pack(fill="x", pady=PADDING)
