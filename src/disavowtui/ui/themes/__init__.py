from disavowtui.ui.themes.builtin import DISAVOW_THEMES, DEFAULT_THEME

__all__ = ["DISAVOW_THEMES", "DEFAULT_THEME"]
