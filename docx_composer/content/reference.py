"""Reference chapters: motion tokens, sport palettes and the copy-paste CSS variable sheet."""
from __future__ import annotations

from docx_composer.builder.content_builders import (
    build_body,
    build_bullet,
    build_code,
    build_header,
    build_sub_header,
    build_table,
)
from docx_composer.model.document_model import Section
from docx_composer.model.style_model import StyleRegistry

LIST_STAGGER_CSS = [
    "/* Each item delays by index * 50ms */",
    ".list-item {",
    "  animation: fadeSlideIn 300ms ease-out;",
    "  animation-delay: calc(var(--index) * 50ms);",
    "}",
    "",
    "@keyframes fadeSlideIn {",
    "  from { opacity: 0; transform: translateX(-10px); }",
    "  to { opacity: 1; transform: translateX(0); }",
    "}",
]

CSS_VARIABLES = [
    ":root {",
    "  /* ===== COLORS ===== */",
    "  --color-primary-blue: #0066FF;",
    "  --color-glow-blue: #00A3FF;",
    "  --color-accent-cyan: #00D4FF;",
    "  --color-deep-blue: #0A1628;",
    "  --color-glass-blue: #1E3A5F;",
    "  --color-soft-blue: #1A3A5C;",
    "  --color-ice-blue: #E0F4FF;",
    "  --color-success: #00FF7F;",
    "  --color-error: #FF3B30;",
    "  --color-warning: #FFD700;",
    "  --color-live: #FF416C;",
    "",
    "  /* ===== TEXT ===== */",
    "  --text-primary: rgba(255, 255, 255, 0.95);",
    "  --text-secondary: rgba(255, 255, 255, 0.70);",
    "  --text-muted: rgba(255, 255, 255, 0.50);",
    "  --text-disabled: rgba(255, 255, 255, 0.30);",
    "",
    "  /* ===== TYPOGRAPHY ===== */",
    "  --font-family: 'Loar', 'Public Sans', Arial, sans-serif;",
    "  --font-weight-bold: 600;",
    "",
    "  /* ===== SPACING ===== */",
    "  --space-xxs: 2px;  --space-xs: 4px;",
    "  --space-sm: 8px;   --space-md: 12px;",
    "  --space-lg: 16px;  --space-xl: 20px;",
    "  --space-xxl: 24px; --space-xxxl: 32px;",
    "",
    "  /* ===== BORDER RADIUS ===== */",
    "  --radius-xs: 4px;   --radius-sm: 8px;",
    "  --radius-md: 12px;  --radius-lg: 16px;",
    "  --radius-xl: 20px;  --radius-xxl: 24px;",
    "  --radius-xxxl: 32px; --radius-round: 9999px;",
    "",
    "  /* ===== GLASS EFFECT ===== */",
    "  --glass-bg: rgba(30, 58, 95, 0.6);",
    "  --glass-blur: 20px;",
    "  --glass-border: rgba(0, 163, 255, 0.3);",
    "",
    "  /* ===== SHADOWS ===== */",
    "  --shadow-sm: 0 2px 4px rgba(0, 0, 0, 0.2);",
    "  --shadow-md: 0 4px 8px rgba(0, 0, 0, 0.25);",
    "  --shadow-lg: 0 8px 16px rgba(0, 0, 0, 0.3);",
    "",
    "  /* ===== GLOWS ===== */",
    "  --glow-primary: 0 0 20px rgba(0, 102, 255, 0.4);",
    "  --glow-cyan: 0 0 30px rgba(0, 212, 255, 0.3);",
    "  --glow-success: 0 0 25px rgba(0, 255, 127, 0.35);",
    "  --glow-gold: 0 0 30px rgba(255, 215, 0, 0.4);",
    "",
    "  /* ===== GRADIENTS ===== */",
    "  --gradient-primary: linear-gradient(135deg, #0066FF, #00A3FF);",
    "  --gradient-cyan: linear-gradient(135deg, #00A3FF, #00D4FF);",
    "  --gradient-gold: linear-gradient(135deg, #FFD700, #FFA500);",
    "  --gradient-success: linear-gradient(135deg, #00FF7F, #00D68F);",
    "  --gradient-live: linear-gradient(135deg, #FF416C, #FF4B2B);",
    "",
    "  /* ===== ANIMATION ===== */",
    "  --ease-smooth: cubic-bezier(0.4, 0, 0.2, 1);",
    "  --ease-bounce: cubic-bezier(0.68, -0.55, 0.265, 1.55);",
    "  --duration-fast: 150ms;",
    "  --duration-normal: 250ms;",
    "  --duration-slow: 400ms;",
    "}",
]


def animations(registry: StyleRegistry) -> Section:
    return Section(
        title="Animations",
        nodes=(
            build_header("18. ANIMATIONS & TRANSITIONS", registry),
            build_sub_header("Timing Functions", registry),
            build_table(
                ["NAME", "CSS VALUE", "USE CASE"],
                [
                    ["ease-smooth", "cubic-bezier(0.4,0,0.2,1)", "General transitions"],
                    ["ease-bounce", "cubic-bezier(0.68,-0.55,0.265,1.55)", "Playful elements"],
                    ["ease-in", "cubic-bezier(0.4,0,1,1)", "Exit animations"],
                    ["ease-out", "cubic-bezier(0,0,0.2,1)", "Enter animations"],
                    ["linear", "linear", "Continuous animations"],
                ],
                registry,
            ),
            build_sub_header("Duration Scale", registry),
            build_table(
                ["TOKEN", "VALUE", "USE CASE"],
                [
                    ["instant", "50ms", "Micro-interactions"],
                    ["fast", "150ms", "Button feedback"],
                    ["normal", "250ms", "Standard transitions"],
                    ["slow", "400ms", "Page transitions"],
                    ["slower", "600ms", "Complex animations"],
                ],
                registry,
            ),
            build_sub_header("Common Animations", registry),
            build_table(
                ["ANIMATION", "PROPERTIES", "DURATION", "EASING"],
                [
                    ["Fade In", "opacity: 0 → 1", "250ms", "ease-out"],
                    ["Slide Up", "translateY: 20px → 0", "300ms", "ease-out"],
                    ["Scale In", "scale: 0.95 → 1", "200ms", "ease-bounce"],
                    ["Glow Pulse", "box-shadow opacity", "1500ms", "ease-in-out"],
                    ["Shake Error", "translateX: ±5px", "400ms", "ease-smooth"],
                    ["Bounce", "scale: 1 → 1.1 → 1", "300ms", "ease-bounce"],
                ],
                registry,
            ),
            build_sub_header("List Stagger Animation", registry),
            build_code(LIST_STAGGER_CSS, registry),
        ),
    )


def sport_colors(registry: StyleRegistry) -> Section:
    return Section(
        title="Sport Colors",
        nodes=(
            build_header("19. SPORT-SPECIFIC COLORS", registry),
            build_table(
                ["SPORT", "PRIMARY COLOR", "HEX", "EMOJI"],
                [
                    ["NFL", "Navy Blue", "#013369", "🏈"],
                    ["NBA", "Orange/Red", "#C8102E", "🏀"],
                    ["Soccer (EPL)", "Purple", "#38003C", "⚽"],
                    ["Soccer (La Liga)", "Orange", "#FF4B44", "⚽"],
                    ["Soccer (Champions)", "Navy", "#0D1541", "⚽"],
                    ["Soccer (MLS)", "Blue", "#0033A0", "⚽"],
                    ["NHL", "Black/Silver", "#000000", "🏒"],
                    ["MLB", "Red/Blue", "#002D72", "⚾"],
                    ["NCAA Football", "Brown", "#8B4513", "🏈"],
                    ["NCAA Basketball", "Orange", "#FF6B00", "🏀"],
                ],
                registry,
            ),
            build_sub_header("Sport Color Usage", registry),
            build_bullet("Sport Filter Chips", "Selected state uses sport color as background at 80% opacity.", registry),
            build_bullet("Game Cards", "Sport icon badge uses sport color. Subtle tint on card hover.", registry),
            build_bullet("Tab Headers", "Active sport tab in Live screen uses sport color underline.", registry),
        ),
    )


def css_variables(registry: StyleRegistry) -> Section:
    return Section(
        title="CSS Variables",
        nodes=(
            build_header("20. CSS VARIABLES (COPY-PASTE)", registry),
            build_body("Copy this complete CSS variable set to implement the Blue Aura theme:", registry),
            build_code(CSS_VARIABLES, registry),
        ),
    )


REFERENCE_CHAPTERS = (animations, sport_colors, css_variables)
