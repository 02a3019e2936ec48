from typing import Optional, Type

from textual.app import App
from textual.driver import Driver

from disavowtui.core.models import AppSettings
from disavowtui.ui.screens.formatter import FormatterScreen
from disavowtui.ui.screens.help import HelpScreen
from disavowtui.ui.themes import DEFAULT_THEME, DISAVOW_THEMES


class DisavowApp(App):

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+shift+t", "cycle_themes", "Cycle Themes"),
        ("f1", "push_screen('help')", "Help"),
    ]

    SCREENS = {
        "help": HelpScreen,
    }

    def __init__(
        self,
        driver_class: Type[Driver] | None = None,
        css_path: str | None = None,
        watch_css: bool = False,
        settings: Optional[AppSettings] = None,
    ):
        super().__init__(driver_class, css_path, watch_css)
        self.settings = settings or AppSettings()
        self._theme_names = list(DISAVOW_THEMES.keys())

    def on_mount(self) -> None:
        self.title = "DisavowTUI"
        self.sub_title = "Clean bad backlinks fast"

        for theme in DISAVOW_THEMES.values():
            self.register_theme(theme)

        self.theme = self._resolve_theme(self.settings.theme)
        self.push_screen(FormatterScreen(settings=self.settings))

    def _resolve_theme(self, name: str) -> str:
        if name in DISAVOW_THEMES:
            return name
        return DEFAULT_THEME

    def action_cycle_themes(self) -> None:
        try:
            current_idx = self._theme_names.index(self.theme)
            next_idx = (current_idx + 1) % len(self._theme_names)
            new_theme = self._theme_names[next_idx]

            self.theme = new_theme
            self.notify(f"Theme: {new_theme.title()}")
        except (ValueError, IndexError):
            self.theme = self._theme_names[0]
            self.notify(f"Theme: {self._theme_names[0].title()}")


if __name__ == "__main__":
    app = DisavowApp()
    app.run()
