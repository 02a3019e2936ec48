from textual.theme import Theme

# 1. Slate (Default)
SLATE = Theme(
    name="slate",
    primary="#06b6d4",  # Cyan
    secondary="#10b981",  # Emerald
    accent="#22d3ee",
    foreground="#f1f5f9",
    background="#020617",
    surface="#0f172a",
    panel="#1e293b",
    success="#34d399",
    warning="#fbbf24",
    error="#fb7185",
    variables={
        "border": "#1e293b",
        "border-blurred": "#1e293b",
    },
    luminosity_spread=0.15,
)

# 2. Greenlist (Emerald)
GREENLIST = Theme(
    name="greenlist",
    primary="#10b981",
    secondary="#06b6d4",
    accent="#6ee7b7",
    foreground="#ecfdf5",
    background="#022c22",
    surface="#064e3b",
    panel="#065f46",
    success="#34d399",
    warning="#fbbf24",
    error="#fb7185",
    variables={
        "border": "#047857",
        "border-blurred": "#047857",
    },
    luminosity_spread=0.15,
)

# 3. Paper (Light)
PAPER = Theme(
    name="paper",
    primary="#0e7490",
    secondary="#047857",
    accent="#0891b2",
    foreground="#0f172a",
    background="#f8fafc",
    surface="#f1f5f9",
    panel="#e2e8f0",
    success="#047857",
    warning="#b45309",
    error="#be123c",
    dark=False,
    variables={
        "border": "#cbd5e1",
        "border-blurred": "#cbd5e1",
    },
    luminosity_spread=0.15,
)

DEFAULT_THEME = "slate"

DISAVOW_THEMES = {
    "slate": SLATE,
    "greenlist": GREENLIST,
    "paper": PAPER,
}
