"""CLI demo that exercises the :class:`notekeeper.Notebook` helpers.

Run with the virtual environment activated::

    python examples/demo_notebook.py

Pass ``--choose`` to pick the tag filter interactively (requires InquirerPy).
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from notekeeper import Notebook

logging.basicConfig(level=logging.INFO)

def main() -> None:
    notebook = Notebook()
    home = notebook.tags.add("home")
    work = notebook.tags.add("work")
    notebook.notes.add("Groceries", content="milk, eggs", tag_ids=[home["id"]])
    notebook.notes.add("Work plan", content="ship it", tag_ids=[work["id"]])
    notebook.notes.add("Home office", content="new desk", tag_ids=[home["id"], work["id"]])

    print("All notes:")
    pprint(notebook.notes.visible())

    notebook.set_title("wo")
    print("\nTitle contains 'wo':")
    pprint(notebook.notes.visible())

    notebook.clear_filters()
    if "--choose" in sys.argv:
        selected = notebook.tags.choose()
        if selected is None:
            return
    else:
        selected = [home]
    notebook.set_selected_tags(selected)
    print(f"\nTagged {', '.join(tag['label'] for tag in selected) or '(nothing)'}:")
    pprint(notebook.notes.visible())

    notebook.tags.update(home["id"], "house")
    notebook.tags.delete(work["id"])
    print("\nAfter renaming 'home' and deleting 'work':")
    pprint(notebook.notes.visible())
    print("\nRegistry snapshot to persist:")
    pprint(notebook.tags.list())


if __name__ == "__main__":
    main()
