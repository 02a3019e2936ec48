from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Markdown,
    TabbedContent,
    TabPane,
)

from disavowtui import __version__

HELP_MD = """
# DisavowTUI Help

Paste or load backlink exports and get a tidy `domain:` list for a
disavow file.

## Workflow

1. **Input**: Paste URLs or domains, or load a txt / csv / tsv file.
   Entries can be separated by newlines, commas, semicolons or tabs.
2. **Format**: Every entry is reduced to `domain:<host>`: scheme, path,
   query, fragment and a leading `www.` are dropped, the host is lowercased.
3. **Greenlist**: Load or paste trusted domains; they are removed from the
   output.
4. **Export**: Download a dated `disavow-YYYYMMDD.txt` or copy the preview.

## Toggles

- **Unique only**: Keep only the first occurrence of each domain.
- **Skip non-URLs**: Drop lines without a dot or URL prefix (comments,
  headers).
- **Verify UTF-8**: Reject files that are not valid UTF-8 and block export
  of undecodable characters.
"""

ABOUT_MD = f"""
# About DisavowTUI

**Version**: {__version__}

Everything runs locally: no network calls, nothing stored between sessions
except your settings file.

## Credits
- typer, rich, textual (Textualize)
- PyYAML
"""


class HelpScreen(Screen):
    """Screen for displaying help and documentation."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
    ]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(classes="help-container"):
            with TabbedContent(initial="shortcuts"):
                with TabPane("Keyboard Shortcuts", id="shortcuts"):
                    yield DataTable(cursor_type="row", zebra_stripes=True)

                with TabPane("Documentation", id="docs"):
                    yield Markdown(HELP_MD)

                with TabPane("About", id="about"):
                    yield Markdown(ABOUT_MD)
        yield Footer()

    def on_mount(self) -> None:
        """Initialize the data table."""
        table = self.query_one(DataTable)
        table.add_columns("Key", "Context", "Action")

        shortcuts = [
            ("F1", "Global", "Show Help (this screen)"),
            ("Esc", "Global", "Back"),
            ("Ctrl+Q", "Global", "Quit Application"),
            ("Ctrl+Shift+T", "Global", "Cycle Themes"),
            ("Ctrl+F", "Formatter", "Format Domains"),
            ("Ctrl+D", "Formatter", "Download txt"),
            ("Ctrl+Y", "Formatter", "Copy Preview"),
            ("Ctrl+R", "Formatter", "Reset"),
            ("Tab", "Forms", "Next Field"),
        ]

        table.add_rows(shortcuts)
        table.focus()
