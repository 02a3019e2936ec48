from pathlib import Path
from typing import Optional

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    Collapsible,
    Footer,
    Header,
    Input,
    Label,
    Static,
    Switch,
    TextArea,
)

from disavowtui.core.constants import SOURCE_EXTENSIONS, STATUS_MESSAGES, StatusKind
from disavowtui.core.exceptions import ExportError
from disavowtui.core.models import AppSettings
from disavowtui.orchestrator.session import DisavowSession
from disavowtui.storage.artifacts import write_document


def _plural(count: int) -> str:
    return "domain" if count == 1 else "domains"


class FormatterScreen(Screen):
    """Paste or load URLs, tune the toggles, export the disavow list."""

    BINDINGS = [
        Binding("ctrl+f", "format", "Format"),
        Binding("ctrl+d", "download", "Download"),
        Binding("ctrl+y", "copy", "Copy"),
        Binding("ctrl+r", "reset", "Reset"),
    ]

    CSS = """
    .formatter-container {
        layout: horizontal;
        height: 1fr;
    }

    .input-pane {
        width: 3fr;
        padding: 1 2;
    }

    .output-pane {
        width: 2fr;
        padding: 1 2;
        border-left: solid $primary-background;
    }

    .section-title {
        color: $text-muted;
        text-style: bold;
        margin-bottom: 1;
    }

    #input-raw {
        height: 12;
    }

    #input-greenlist {
        height: 6;
    }

    #preview {
        height: 1fr;
        min-height: 8;
    }

    .row {
        height: auto;
        margin-bottom: 1;
    }

    .row Input {
        width: 1fr;
    }

    .row Button {
        margin-left: 1;
    }

    .toggle {
        width: 1fr;
        height: auto;
    }

    .toggle Label {
        padding: 1 1 0 0;
    }

    .stat {
        color: $text-muted;
    }

    #stat-output {
        text-style: bold;
        color: $text;
    }

    .greenlist-note {
        color: $success;
    }

    #status.error {
        color: $error;
    }

    #status.success {
        color: $success;
    }

    #utf8-warning {
        color: $error;
        display: none;
    }

    #utf8-warning.visible {
        display: block;
    }
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        super().__init__()
        self.session = DisavowSession(settings)

    def compose(self) -> ComposeResult:
        session = self.session
        extensions = " / ".join(ext.lstrip(".") for ext in SOURCE_EXTENSIONS)

        yield Header()

        with Horizontal(classes="formatter-container"):
            # Input side
            with VerticalScroll(classes="input-pane"):
                yield Label("Paste URLs or domains", classes="section-title")
                yield TextArea(id="input-raw")

                with Horizontal(classes="row"):
                    yield Input(placeholder=f"Path to {extensions} file", id="input-path")
                    yield Button("Load file", id="btn-load")
                yield Static("", id="source-name", classes="stat", markup=False)

                with Horizontal(classes="row"):
                    with Horizontal(classes="toggle"):
                        yield Label("Unique only")
                        yield Switch(value=session.dedupe, id="sw-dedupe")
                    with Horizontal(classes="toggle"):
                        yield Label("Skip non-URLs")
                        yield Switch(value=session.skip_non_url, id="sw-skip")
                    with Horizontal(classes="toggle"):
                        yield Label("Verify UTF-8")
                        yield Switch(value=session.utf8_check, id="sw-utf8")

                yield Label("Greenlist", classes="section-title")
                yield Static("Strip safe domains before export.", classes="stat")
                yield Static("", id="greenlist-state", classes="greenlist-note", markup=False)
                with Horizontal(classes="row"):
                    yield Input(placeholder="Path to greenlist file", id="input-greenlist-path")
                    yield Button("Upload greenlist", id="btn-greenlist-load")
                    yield Button("Clear", id="btn-greenlist-clear")
                with Collapsible(title="Paste greenlist", collapsed=True):
                    yield TextArea(id="input-greenlist")
                    with Horizontal(classes="row"):
                        yield Button("Apply paste", variant="success", id="btn-greenlist-apply")
                        yield Button("Clear text", id="btn-greenlist-clear-text")

                with Horizontal(classes="row"):
                    yield Button("Format domains", variant="primary", id="btn-format")
                    yield Button("Reset", id="btn-reset")

            # Output side
            with Vertical(classes="output-pane"):
                yield Label("Output", classes="section-title")
                yield Static("", id="stat-output")
                yield Static("", id="stat-mode", classes="stat")
                yield Static("", id="stat-greenlist", classes="greenlist-note")
                yield Static("", id="stat-counts", classes="stat")
                yield Label("Comment line", classes="section-title")
                yield Input(value=session.comment, placeholder=session.settings.comment, id="input-comment")
                yield TextArea(id="preview", read_only=True)
                with Horizontal(classes="row"):
                    yield Button("Download txt", variant="success", id="btn-download")
                    yield Button("Copy", id="btn-copy")
                yield Static(
                    "UTF-8 check failed. Strip odd characters before exporting.",
                    id="utf8-warning",
                )
                yield Static("", id="status", markup=False)

        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()
        self.query_one("#input-raw", TextArea).focus()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh_view(self) -> None:
        """Push session state into the widgets."""
        session = self.session
        result = session.result

        self.query_one("#stat-output", Static).update(f"{result.output_count} domains")
        self.query_one("#stat-mode", Static).update(
            "Unique only" if session.dedupe else "Duplicates kept"
        )

        if result.excluded_count > 0:
            greenlist_hits = (
                f"Filtered {result.excluded_count} {_plural(result.excluded_count)} via greenlist."
            )
        else:
            greenlist_hits = "Awaiting greenlist hits."
        self.query_one("#stat-greenlist", Static).update(greenlist_hits)

        output_label = "Unique" if session.dedupe else "Output"
        if session.utf8_check:
            utf8_label = "Ready" if session.utf8_safe else "Invalid chars"
        else:
            utf8_label = "Off"
        self.query_one("#stat-counts", Static).update(
            f"Input: {result.total}   {output_label}: {result.output_count}   UTF-8: {utf8_label}"
        )

        count = len(session.greenlist)
        if count:
            state = f"Greenlist enabled for {count} {_plural(count)}."
        else:
            state = "Greenlist idle."
        if session.greenlist_label:
            state = f"{state}  {session.greenlist_label} • {count} domains"
        self.query_one("#greenlist-state", Static).update(state)

        self.query_one("#source-name", Static).update(session.source_name or "")
        self.query_one("#preview", TextArea).text = session.preview

        can_export = session.can_export
        self.query_one("#btn-download", Button).disabled = not can_export
        self.query_one("#btn-copy", Button).disabled = not can_export

        warning = self.query_one("#utf8-warning", Static)
        warning.set_class(session.utf8_check and not session.utf8_safe, "visible")

        status = self.query_one("#status", Static)
        status.update(session.status)
        status.set_class(session.status_kind == StatusKind.ERROR, "error")
        status.set_class(session.status_kind == StatusKind.SUCCESS, "success")

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @on(TextArea.Changed, "#input-raw")
    def on_raw_changed(self, event: TextArea.Changed) -> None:
        self.session.raw_input = event.text_area.text

    @on(Input.Changed, "#input-comment")
    def on_comment_changed(self, event: Input.Changed) -> None:
        self.session.comment = event.value
        self.refresh_view()

    @on(Switch.Changed, "#sw-dedupe")
    def on_dedupe_changed(self, event: Switch.Changed) -> None:
        if event.value == self.session.dedupe:
            return
        self.session.set_dedupe(event.value)
        self.refresh_view()

    @on(Switch.Changed, "#sw-skip")
    def on_skip_changed(self, event: Switch.Changed) -> None:
        if event.value == self.session.skip_non_url:
            return
        self.session.set_skip_non_url(event.value)
        self.refresh_view()

    @on(Switch.Changed, "#sw-utf8")
    def on_utf8_changed(self, event: Switch.Changed) -> None:
        self.session.utf8_check = event.value
        self.refresh_view()

    @on(Button.Pressed, "#btn-load")
    @on(Input.Submitted, "#input-path")
    def action_load_file(self) -> None:
        path_input = self.query_one("#input-path", Input)
        raw_path = path_input.value.strip()
        if not raw_path:
            self.notify("Enter a file path first.", severity="warning")
            return

        if self.session.load_input_file(Path(raw_path).expanduser()):
            self.query_one("#input-raw", TextArea).text = self.session.raw_input
            path_input.value = ""
        self.refresh_view()

    # ------------------------------------------------------------------
    # Greenlist
    # ------------------------------------------------------------------

    @on(Button.Pressed, "#btn-greenlist-load")
    @on(Input.Submitted, "#input-greenlist-path")
    def action_load_greenlist(self) -> None:
        path_input = self.query_one("#input-greenlist-path", Input)
        raw_path = path_input.value.strip()
        if not raw_path:
            self.notify("Enter a greenlist path first.", severity="warning")
            return

        if self.session.load_greenlist_file(Path(raw_path).expanduser()):
            path_input.value = ""
        self.refresh_view()

    @on(Button.Pressed, "#btn-greenlist-apply")
    def action_apply_greenlist_paste(self) -> None:
        paste = self.query_one("#input-greenlist", TextArea)
        text = paste.text
        self.session.apply_greenlist_paste(text)
        if text.strip():
            paste.text = ""
        self.refresh_view()

    @on(Button.Pressed, "#btn-greenlist-clear-text")
    def action_clear_greenlist_text(self) -> None:
        self.query_one("#input-greenlist", TextArea).text = ""

    @on(Button.Pressed, "#btn-greenlist-clear")
    def action_clear_greenlist(self) -> None:
        self.query_one("#input-greenlist", TextArea).text = ""
        self.session.clear_greenlist()
        self.refresh_view()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @on(Button.Pressed, "#btn-format")
    def action_format(self) -> None:
        self.session.format()
        self.refresh_view()

    @on(Button.Pressed, "#btn-download")
    def action_download(self) -> None:
        if not self.session.can_export:
            return

        try:
            written = write_document(self.session.preview, self.session.settings.download_dir)
        except ExportError as e:
            self.notify(str(e), severity="error")
            return

        self.session.set_status(STATUS_MESSAGES["saved"].format(path=written), StatusKind.SUCCESS)
        self.notify(self.session.status)
        self.refresh_view()

    @on(Button.Pressed, "#btn-copy")
    def action_copy(self) -> None:
        if not self.session.can_export:
            return

        self.app.copy_to_clipboard(self.session.preview)
        self.session.set_status(STATUS_MESSAGES["copied"], StatusKind.SUCCESS)
        self.refresh_view()

    @on(Button.Pressed, "#btn-reset")
    def action_reset(self) -> None:
        session = self.session
        session.reset()

        self.query_one("#input-raw", TextArea).text = ""
        self.query_one("#input-greenlist", TextArea).text = ""
        self.query_one("#input-path", Input).value = ""
        self.query_one("#input-greenlist-path", Input).value = ""
        self.query_one("#input-comment", Input).value = session.comment
        self.query_one("#sw-dedupe", Switch).value = session.dedupe
        self.query_one("#sw-skip", Switch).value = session.skip_non_url
        self.query_one("#sw-utf8", Switch).value = session.utf8_check
        self.query_one(Collapsible).collapsed = True
        self.refresh_view()
