# app.py
# CustomTkinter editor for the Opposites project (dark theme).
# - Ctrl+Space switches the word under the cursor to its opposite.
# - Ctrl+Shift+Space cycles the identifier under the cursor through case types.
# - Options can be loaded from a JSON file; notifications go to the event log pane.

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src)
from src.backend.config import ConfigError, load_options
from src.backend.engine import Engine
from src.backend.models import MatchResult
from src.backend.selection import format_choices, parse_choice


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


class TextboxSource:
    """TextSource over the insert cursor of a CTkTextbox."""

    def __init__(self, box: ctk.CTkTextbox) -> None:
        self.box = box

    def get_cursor(self) -> Tuple[int, int]:
        row, col = self.box.index("insert").split(".")
        return int(row), int(col) + 1   # Tk columns start at 0

    def get_line(self) -> str:
        row, _ = self.get_cursor()
        return self.box.get(f"{row}.0", f"{row}.end")

    def set_line(self, text: str) -> None:
        row, col = self.get_cursor()
        self.box.delete(f"{row}.0", f"{row}.end")
        self.box.insert(f"{row}.0", text)
        self.box.mark_set("insert", f"{row}.{col - 1}")


# -------------------- main app --------------------

class OppositesApp(ctk.CTk):
    """Dark-themed editor wired to the opposites engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Opposites")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine(notifier=self._notify)
        self._config_label: str = "Built-in defaults"
        self._filetype: Optional[str] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # editor
        self.grid_rowconfigure(3, weight=0)  # log

        # Build UI
        self._build_header()
        self._build_options_bar()
        self._build_editor()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Opposites", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

        hint = ctk.CTkLabel(header, text="Ctrl+Space: opposite   Ctrl+Shift+Space: next case",
                            font=self.font_label)
        hint.grid(row=0, column=1, sticky="e", padx=12, pady=10)

    def _build_options_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(3, weight=1)

        btn_config = ctk.CTkButton(bar, text="Load Options", command=self._choose_config)
        btn_config.grid(row=0, column=0, padx=(12, 6), pady=10)

        btn_open = ctk.CTkButton(bar, text="Open File", command=self._choose_file)
        btn_open.grid(row=0, column=1, padx=(0, 6), pady=10)

        self.var_mask = ctk.BooleanVar(value=self._engine.options.use_case_sensitive_mask)
        chk_mask = ctk.CTkCheckBox(bar, text="Case mask", variable=self.var_mask, command=self._on_mask_toggled)
        chk_mask.grid(row=0, column=2, padx=(0, 6), pady=10)

        self.lbl_config = ctk.CTkLabel(bar, text=self._config_label, anchor="w", font=self.font_label)
        self.lbl_config.grid(row=0, column=3, sticky="ew", padx=(6, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_editor(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.txt_editor = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono, undo=True)
        self.txt_editor.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)
        self.txt_editor.insert("end", "enabled = true\nif x <= LIMIT and mode == 'left':\n")
        self.txt_editor.bind("<Control-space>", self._on_switch)
        self.txt_editor.bind("<Control-Shift-space>", self._on_next_case)
        self._source = TextboxSource(self.txt_editor)

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("Editor ready. Put the cursor on a word and press Ctrl+Space.")

    # --------- options / files ---------

    def _choose_config(self) -> None:
        path = fd.askopenfilename(
            title="Choose options JSON",
            filetypes=[("JSON", "*.json"), ("All files", "*.*")]
        )
        if not path:
            return
        try:
            options = load_options(path)
        except (ConfigError, OSError) as exc:
            self._log(f"ERROR: {exc}")
            mb.showerror("Options error", f"Failed to load options.\n{exc}")
            return
        self._engine = Engine(options, notifier=self._notify)
        self.var_mask.set(options.use_case_sensitive_mask)
        self._config_label = f"Options: {shorten_path(path)}"
        self.lbl_config.configure(text=self._config_label)
        self._log(f"Loaded options from {path} ({len(options.opposites)} pairs).")

    def _choose_file(self) -> None:
        path = fd.askopenfilename(title="Open text file")
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._log(f"ERROR: {exc!r}")
            mb.showerror("Open error", "Failed to open file.\nSee event log for details.")
            return
        self.txt_editor.delete("0.0", "end")
        self.txt_editor.insert("end", text)
        self._filetype = Path(path).suffix.lstrip(".") or None
        self._log(f"Opened {shorten_path(path)} (filetype={self._filetype}).")

    def _on_mask_toggled(self) -> None:
        opts = self._engine.options.replace(use_case_sensitive_mask=bool(self.var_mask.get()))
        self._engine = Engine(opts, notifier=self._notify)

    # --------- actions ---------

    def _on_switch(self, _ev=None) -> str:
        out = self._engine.switch(self._source, self._ask_choice, filetype=self._filetype)
        self._set_status(out.status.replace("_", " "))
        return "break"  # keep Tk from inserting the space

    def _on_next_case(self, _ev=None) -> str:
        out = self._engine.next_case(self._source)
        self._set_status(out.status.replace("_", " "))
        return "break"

    def _ask_choice(self, results: Sequence[MatchResult]) -> Optional[int]:
        dialog = ctk.CTkInputDialog(text="\n".join(format_choices(results)), title="Opposites")
        raw = dialog.get_input()
        return parse_choice(raw) if raw else None

    def _notify(self, level: int, msg: str) -> None:
        prefix = "ERROR: " if level >= logging.ERROR else ""
        self._log(prefix + msg)

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self.destroy()


if __name__ == "__main__":
    app = OppositesApp()
    app.mainloop()
