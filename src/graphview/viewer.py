"""
Desktop viewer for graph documents.

A thin tkinter shell around GraphVisualizer: a File menu to load documents
and export snapshots, and a canvas that repaints whenever it is resized.
"""

import logging
import tkinter as tk
from tkinter import filedialog, messagebox
from typing import Optional

from .errors import GraphFormatError
from .png_renderer import DEFAULT_VIEWPORT
from .render import EdgePrimitive, NodePrimitive
from .visualizer import GraphVisualizer

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Graph Visualizer"
FILE_TYPES = [("Text Files", "*.txt"), ("All Files", "*.*")]


class GraphViewerApp:
    """Main window: menu bar plus a canvas showing the loaded graph."""

    def __init__(self, root: tk.Tk, visualizer: Optional[GraphVisualizer] = None) -> None:
        self.root = root
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{DEFAULT_VIEWPORT[0]}x{DEFAULT_VIEWPORT[1]}")

        self.visualizer = visualizer or GraphVisualizer()

        self._build_menu()
        self.canvas = tk.Canvas(self.root, background="white", highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self.on_resize)

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Load Graph...", command=self.load_graph)
        file_menu.add_command(label="Export PNG...", command=self.export_png)
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self.root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.config(menu=menubar)

    def load_graph(self) -> None:
        path = filedialog.askopenfilename(parent=self.root, filetypes=FILE_TYPES)
        if not path:
            return

        try:
            result = self.visualizer.load_file(path)
        except (GraphFormatError, OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to load %s: %s", path, exc)
            messagebox.showerror(
                "Load Error", f"Error loading graph: {exc}", parent=self.root
            )
            return

        self.redraw()
        if result.warnings:
            messagebox.showwarning(
                "Load Warning", "\n".join(result.warnings), parent=self.root
            )
        else:
            messagebox.showinfo(
                "Load Successful", self.visualizer.summary(), parent=self.root
            )

    def export_png(self) -> None:
        if self.visualizer.graph is None:
            messagebox.showinfo("Export", "Load a graph first.", parent=self.root)
            return

        path = filedialog.asksaveasfilename(
            parent=self.root,
            defaultextension=".png",
            filetypes=[("PNG Images", "*.png")],
        )
        if not path:
            return

        try:
            self.visualizer.export_png(path)
        except (OSError, ValueError) as exc:
            logger.error("Failed to export %s: %s", path, exc)
            messagebox.showerror("Export Error", str(exc), parent=self.root)

    def on_resize(self, event: tk.Event) -> None:
        if self.visualizer.resize(event.width, event.height):
            self.redraw()

    def redraw(self) -> None:
        """Repaint the canvas from the visualizer's current primitives."""
        self.canvas.delete("all")
        for primitive in self.visualizer.primitives():
            if isinstance(primitive, EdgePrimitive):
                self.canvas.create_line(
                    *primitive.start, *primitive.end, fill=primitive.color
                )
            elif isinstance(primitive, NodePrimitive):
                self.canvas.create_oval(
                    *primitive.bounds, fill=primitive.fill, outline=primitive.outline
                )
                self.canvas.create_text(
                    *primitive.center, text=primitive.label, fill=primitive.label_color
                )


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    root = tk.Tk()
    GraphViewerApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
