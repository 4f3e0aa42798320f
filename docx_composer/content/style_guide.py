"""Static content of the HotStreak comprehensive style guide."""
from __future__ import annotations

from typing import List

from docx_composer.builder.content_builders import (
    build_body,
    build_bullet,
    build_code,
    build_header,
    build_spacer,
    build_sub_header,
    build_table,
    build_title,
)
from docx_composer.content.reference import REFERENCE_CHAPTERS
from docx_composer.content.screens import SCREEN_CHAPTERS
from docx_composer.model.document_model import Section
from docx_composer.model.style_model import StyleRegistry

CONTENTS = [
    "1.  Design Philosophy .......................... 3",
    "2.  Color System - Blue Aura Palette ........... 4",
    "3.  Typography - Loar Font System .............. 6",
    "4.  Spacing & Layout Grid ...................... 8",
    "5.  Border Radius - Round & Clean .............. 9",
    "6.  Liquid Glass Design System ................. 10",
    "7.  Shadows, Glows & Effects ................... 12",
    "8.  Component Library .......................... 14",
    "9.  Home Tab Styling ........................... 21",
    "10. Games Tab Styling .......................... 24",
    "11. My Picks Tab Styling ....................... 27",
    "12. Live Tab Styling ........................... 30",
    "13. Profile Tab Styling ........................ 33",
    "14. Bet Slip Styling ........................... 36",
    "15. Wallet Screen .............................. 38",
    "16. Spin Wheel & Gamification .................. 40",
    "17. Navigation & Bottom Bar .................... 42",
    "18. Animations & Transitions ................... 44",
    "19. Sport-Specific Colors ...................... 46",
    "20. CSS Variables (Copy-Paste) ................. 48",
]

DIVIDER = "━" * 30

GLASS_CARD_CSS = [
    ".glass-card {",
    "  background: rgba(30, 58, 95, 0.6);",
    "  backdrop-filter: blur(20px);",
    "  -webkit-backdrop-filter: blur(20px);",
    "  border: 1px solid rgba(0, 163, 255, 0.3);",
    "  border-radius: 24px;",
    "  box-shadow:",
    "    0 0 30px rgba(0, 212, 255, 0.15),",
    "    inset 0 1px 0 rgba(255, 255, 255, 0.1);",
    "}",
]

GAME_CARD_LAYOUT = [
    "┌─────────────────────────────────────────┐",
    "│  [Icon]  League Name           [LIVE]   │",
    "├─────────────────────────────────────────┤",
    "│  [Logo] Team A         2.15      [+]    │",
    "│  [Logo] Team B         1.85      [+]    │",
    "├─────────────────────────────────────────┤",
    "│  Mar 15, 2024 • 7:30 PM EST             │",
    "└─────────────────────────────────────────┘",
]


def cover(registry: StyleRegistry) -> Section:
    return Section(
        title="Cover",
        nodes=(
            build_spacer(registry.size("space-cover-top").size_pt),
            build_title("HOTSTREAK", registry, size_ref="cover-title"),
            build_title("SPORTS BETTING APP", registry, size_ref="cover-subtitle", color_ref="glow", italic=False, space_after_pt=10),
            build_title(DIVIDER, registry, size_ref="bullet", color_ref="accent", italic=False, space_after_pt=30),
            build_title("COMPREHENSIVE STYLE GUIDE", registry, color_ref="accent", space_after_pt=5),
            build_title(
                "Blue Aura Theme • Liquid Glass Design • Round & Clean",
                registry,
                size_ref="title",
                color_ref="light-gray",
                italic=False,
                space_after_pt=20,
            ),
            build_title(
                "Font: Loar Italic Bold 600 (Headers) • Loar Bold 600 (Body)",
                registry,
                size_ref="label",
                color_ref="light-gray",
                italic=False,
            ),
        ),
    )


def table_of_contents(registry: StyleRegistry) -> Section:
    return Section(
        title="Table of Contents",
        nodes=(
            build_title("TABLE OF CONTENTS", registry, size_ref="cover-subtitle", space_after_pt=20),
            *(build_body(line, registry) for line in CONTENTS),
        ),
    )


def design_philosophy(registry: StyleRegistry) -> Section:
    return Section(
        title="Design Philosophy",
        nodes=(
            build_header("1. DESIGN PHILOSOPHY", registry),
            build_body(
                "HotStreak embraces a Blue Aura aesthetic with liquid glass morphism that creates depth, "
                "elegance, and a premium betting experience.",
                registry,
            ),
            build_sub_header("Core Design Pillars", registry),
            build_table(
                ["PILLAR", "DESCRIPTION", "IMPLEMENTATION"],
                [
                    ["Blue Aura Theme", "Glowing blue tones create energy", "Cyan/blue gradients, glow effects"],
                    ["Liquid Glass", "Frosted translucent surfaces", "backdrop-blur, rgba overlays"],
                    ["Round & Clean", "Soft corners, generous padding", "16-32px radius everywhere"],
                    ["Premium Feel", "Casino-quality visual language", "Gold accents, smooth animations"],
                    ["Dark Mode First", "Deep navy backgrounds", "#0A1628 base, white text hierarchy"],
                ],
                registry,
            ),
            build_sub_header("Design Principles", registry),
            build_bullet("Hierarchy Through Light", "Important elements glow brighter. CTAs have strongest blue aura.", registry),
            build_bullet("Consistent Roundness", "Every corner is rounded. No sharp edges. Friendly, approachable feel.", registry),
            build_bullet("Glass Layering", "Cards float on glass surfaces. Modals have frosted backgrounds.", registry),
            build_bullet("Motion with Purpose", "Every animation reinforces action. Wins glow. Losses fade.", registry),
            build_bullet("Typography Weight", "All text uses Loar Bold 600. Headers add italic for emphasis.", registry),
        ),
    )


def color_system(registry: StyleRegistry) -> Section:
    return Section(
        title="Color System",
        nodes=(
            build_header("2. COLOR SYSTEM - BLUE AURA PALETTE", registry),
            build_sub_header("Primary Colors", registry),
            build_table(
                ["COLOR NAME", "HEX CODE", "RGB", "USAGE"],
                [
                    ["Primary Blue", "#0066FF", "rgb(0, 102, 255)", "Main CTAs, links, active states"],
                    ["Glow Blue", "#00A3FF", "rgb(0, 163, 255)", "Highlights, hover states, aura"],
                    ["Accent Cyan", "#00D4FF", "rgb(0, 212, 255)", "Live indicators, winning states"],
                    ["Deep Blue", "#0A1628", "rgb(10, 22, 40)", "Primary background, app base"],
                    ["Glass Blue", "#1E3A5F", "rgb(30, 58, 95)", "Card backgrounds, overlays"],
                    ["Soft Blue", "#1A3A5C", "rgb(26, 58, 92)", "Secondary backgrounds"],
                    ["Ice Blue", "#E0F4FF", "rgb(224, 244, 255)", "Light accents, table alternates"],
                ],
                registry,
            ),
            build_sub_header("Semantic Colors", registry),
            build_table(
                ["COLOR NAME", "HEX CODE", "USAGE"],
                [
                    ["Success Green", "#00FF7F", "Winning bets, confirmations"],
                    ["Error Red", "#FF3B30", "Losing bets, errors"],
                    ["Warning Gold", "#FFD700", "Coins, rewards, premium"],
                    ["Live Red", "#FF416C", "Live game indicators"],
                ],
                registry,
            ),
            build_sub_header("Text Colors", registry),
            build_table(
                ["LEVEL", "COLOR", "OPACITY", "USAGE"],
                [
                    ["Text Primary", "#FFFFFF", "95%", "Headlines, important content"],
                    ["Text Secondary", "#FFFFFF", "70%", "Body text, descriptions"],
                    ["Text Muted", "#FFFFFF", "50%", "Captions, timestamps"],
                    ["Text Disabled", "#FFFFFF", "30%", "Disabled states, placeholders"],
                ],
                registry,
            ),
            build_sub_header("Border Colors", registry),
            build_table(
                ["TYPE", "COLOR", "OPACITY", "USAGE"],
                [
                    ["Subtle Border", "#FFFFFF", "5%", "Card separators, dividers"],
                    ["Default Border", "#FFFFFF", "10%", "Input fields, card borders"],
                    ["Active Border", "#00A3FF", "100%", "Focus states, selected items"],
                    ["Glow Border", "#00D4FF", "30%", "Glass effect borders"],
                ],
                registry,
            ),
        ),
    )


def typography(registry: StyleRegistry) -> Section:
    return Section(
        title="Typography",
        nodes=(
            build_header("3. TYPOGRAPHY - LOAR FONT SYSTEM", registry),
            build_body("Primary Font: Loar (Fallback: Public Sans, Arial, system-ui)", registry),
            build_sub_header("Font Weights", registry),
            build_table(
                ["STYLE NAME", "WEIGHT", "ITALIC", "CSS"],
                [
                    ["Loar Bold", "600", "No", "font-weight: 600; font-style: normal;"],
                    ["Loar Italic Bold", "600", "Yes", "font-weight: 600; font-style: italic;"],
                ],
                registry,
            ),
            build_sub_header("Typography Scale", registry),
            build_table(
                ["STYLE", "SIZE", "WEIGHT", "LINE HEIGHT", "USE CASE"],
                [
                    ["Display Large", "48px", "600 Italic", "1.1", "Hero headlines"],
                    ["Display Medium", "40px", "600 Italic", "1.15", "Page titles"],
                    ["Headline Large", "32px", "600 Italic", "1.2", "Card titles"],
                    ["Headline Medium", "24px", "600", "1.25", "Subsection headers"],
                    ["Title Large", "20px", "600", "1.3", "List item titles"],
                    ["Title Medium", "18px", "600", "1.35", "Buttons, labels"],
                    ["Body Large", "16px", "600", "1.5", "Primary body text"],
                    ["Body Medium", "14px", "600", "1.5", "Secondary body text"],
                    ["Body Small", "12px", "600", "1.4", "Captions, timestamps"],
                    ["Label", "11px", "600", "1.3", "Chips, badges, tags"],
                ],
                registry,
            ),
            build_sub_header("Typography Rules", registry),
            build_bullet("Headers", "Always use Loar Italic Bold 600. Page titles, section headers, modal titles.", registry),
            build_bullet("Body Text", "Always use Loar Bold 600 (non-italic). Maintains readability.", registry),
            build_bullet("Numbers & Odds", "Use tabular figures. Monospace for live scores.", registry),
            build_bullet("Button Text", "Title Medium (18px) for primary, Body Medium (14px) for secondary.", registry),
        ),
    )


def spacing(registry: StyleRegistry) -> Section:
    return Section(
        title="Spacing",
        nodes=(
            build_header("4. SPACING & LAYOUT GRID", registry),
            build_sub_header("Spacing Scale", registry),
            build_table(
                ["TOKEN", "VALUE", "REM", "USE CASE"],
                [
                    ["space-xxs", "2px", "0.125rem", "Icon padding"],
                    ["space-xs", "4px", "0.25rem", "Inline spacing"],
                    ["space-sm", "8px", "0.5rem", "Tight groupings"],
                    ["space-md", "12px", "0.75rem", "Default spacing"],
                    ["space-lg", "16px", "1rem", "Card padding"],
                    ["space-xl", "20px", "1.25rem", "Large spacing"],
                    ["space-xxl", "24px", "1.5rem", "Page margins"],
                    ["space-xxxl", "32px", "2rem", "Hero spacing"],
                    ["space-huge", "48px", "3rem", "Page headers"],
                ],
                registry,
            ),
            build_sub_header("Layout Grid", registry),
            build_table(
                ["PROPERTY", "VALUE", "NOTES"],
                [
                    ["Page Margin", "16px (mobile) / 24px (tablet)", "Horizontal padding"],
                    ["Card Gap", "12px", "Space between cards"],
                    ["Section Gap", "24px", "Major sections"],
                    ["Content Max Width", "500px", "Mobile-first container"],
                    ["Bottom Nav Height", "80px", "Fixed navigation"],
                    ["FAB Size", "56px", "Floating action button"],
                ],
                registry,
            ),
        ),
    )


def border_radius(registry: StyleRegistry) -> Section:
    return Section(
        title="Border Radius",
        nodes=(
            build_header("5. BORDER RADIUS - ROUND & CLEAN", registry),
            build_body("Every element uses rounded corners. No sharp edges anywhere.", registry),
            build_sub_header("Radius Scale", registry),
            build_table(
                ["TOKEN", "VALUE", "USE CASE"],
                [
                    ["radius-xs", "4px", "Small badges, inline tags"],
                    ["radius-sm", "8px", "Input fields, chips"],
                    ["radius-md", "12px", "Standard buttons, list items"],
                    ["radius-lg", "16px", "Cards, containers"],
                    ["radius-xl", "20px", "Modal dialogs"],
                    ["radius-xxl", "24px", "Large cards, feature containers"],
                    ["radius-xxxl", "32px", "Hero cards, bet slip"],
                    ["radius-round", "9999px", "Pills, circular buttons"],
                ],
                registry,
            ),
            build_sub_header("Component Radius Mapping", registry),
            build_table(
                ["COMPONENT", "RADIUS", "NOTES"],
                [
                    ["Primary Buttons", "24px", "Pill-shaped CTAs"],
                    ["Secondary Buttons", "20px", "Slightly softer"],
                    ["Game Cards", "24px", "Large, prominent"],
                    ["Bet Slip Cards", "32px", "Extra rounded, premium"],
                    ["Input Fields", "12px", "Standard form radius"],
                    ["Chips/Tags", "9999px", "Fully rounded pills"],
                    ["Modals", "24px (top)", "Rounded top only"],
                    ["Bottom Sheets", "24px (top)", "Matches modals"],
                    ["Avatars", "9999px", "Perfect circles"],
                    ["Sport Icons", "12px", "Soft square icons"],
                ],
                registry,
            ),
        ),
    )


def liquid_glass(registry: StyleRegistry) -> Section:
    return Section(
        title="Liquid Glass",
        nodes=(
            build_header("6. LIQUID GLASS DESIGN SYSTEM", registry),
            build_sub_header("Glass Effect Properties", registry),
            build_table(
                ["PROPERTY", "VALUE", "CSS PROPERTY"],
                [
                    ["Background", "rgba(30, 58, 95, 0.6)", "background-color"],
                    ["Backdrop Blur", "20px", "backdrop-filter: blur(20px)"],
                    ["Border", "1px solid rgba(0, 163, 255, 0.3)", "border"],
                    ["Inner Highlight", "inset 0 1px 0 rgba(255,255,255,0.1)", "box-shadow"],
                    ["Outer Glow", "0 0 30px rgba(0, 212, 255, 0.15)", "box-shadow"],
                ],
                registry,
            ),
            build_sub_header("Glass Layers", registry),
            build_table(
                ["LAYER", "OPACITY", "BLUR", "USE CASE"],
                [
                    ["Base Layer", "N/A", "N/A", "Deep Blue #0A1628 solid"],
                    ["Surface Layer", "70%", "15px", "Card backgrounds"],
                    ["Overlay Layer", "50%", "20px", "Modals, popups"],
                    ["Highlight Layer", "30%", "25px", "Tooltips, dropdowns"],
                ],
                registry,
            ),
            build_sub_header("Glass Card CSS", registry),
            build_code(GLASS_CARD_CSS, registry),
            build_sub_header("Glass Variants", registry),
            build_table(
                ["VARIANT", "BG OPACITY", "BORDER COLOR", "USE CASE"],
                [
                    ["Default Glass", "60%", "rgba(0, 163, 255, 0.3)", "Standard cards"],
                    ["Elevated Glass", "70%", "rgba(0, 212, 255, 0.4)", "Modals"],
                    ["Subtle Glass", "40%", "rgba(255, 255, 255, 0.1)", "Backgrounds"],
                    ["Active Glass", "80%", "rgba(0, 102, 255, 0.5)", "Selected states"],
                    ["Live Glass", "60%", "rgba(255, 65, 108, 0.4)", "Live games"],
                ],
                registry,
            ),
        ),
    )


def shadows(registry: StyleRegistry) -> Section:
    return Section(
        title="Shadows & Effects",
        nodes=(
            build_header("7. SHADOWS, GLOWS & EFFECTS", registry),
            build_sub_header("Shadow Scale", registry),
            build_table(
                ["TOKEN", "VALUE", "USE CASE"],
                [
                    ["shadow-sm", "0 2px 4px rgba(0,0,0,0.2)", "Subtle elevation"],
                    ["shadow-md", "0 4px 8px rgba(0,0,0,0.25)", "Cards, buttons"],
                    ["shadow-lg", "0 8px 16px rgba(0,0,0,0.3)", "Modals, popups"],
                    ["shadow-xl", "0 12px 24px rgba(0,0,0,0.35)", "Floating elements"],
                ],
                registry,
            ),
            build_sub_header("Glow Effects", registry),
            build_table(
                ["GLOW TYPE", "VALUE", "USE CASE"],
                [
                    ["Primary Glow", "0 0 20px rgba(0,102,255,0.4)", "Primary buttons"],
                    ["Cyan Glow", "0 0 30px rgba(0,212,255,0.3)", "Accent elements"],
                    ["Success Glow", "0 0 25px rgba(0,255,127,0.35)", "Win states"],
                    ["Error Glow", "0 0 25px rgba(255,59,48,0.35)", "Loss states"],
                    ["Live Glow", "0 0 20px rgba(255,65,108,0.4)", "Live indicators"],
                    ["Gold Glow", "0 0 30px rgba(255,215,0,0.4)", "Coins, rewards"],
                ],
                registry,
            ),
            build_sub_header("Gradient Effects", registry),
            build_table(
                ["GRADIENT NAME", "START", "END", "USE CASE"],
                [
                    ["Blue Aura", "#0066FF", "#00D4FF", "Primary CTAs"],
                    ["Cyan Shift", "#00A3FF", "#00D4FF", "Hover states"],
                    ["Gold Premium", "#FFD700", "#FFA500", "Coins, rewards"],
                    ["Success Flow", "#00FF7F", "#00D68F", "Win animations"],
                    ["Live Pulse", "#FF416C", "#FF4B2B", "Live indicators"],
                    ["Deep Ocean", "#0A1628", "#1E3A5F", "Backgrounds"],
                ],
                registry,
            ),
        ),
    )


def buttons(registry: StyleRegistry) -> Section:
    return Section(
        title="Component Library: Buttons",
        nodes=(
            build_header("8. COMPONENT LIBRARY", registry),
            build_sub_header("8.1 Buttons", registry),
            build_table(
                ["BUTTON TYPE", "BACKGROUND", "TEXT", "RADIUS", "GLOW"],
                [
                    ["Primary CTA", "Gradient: #0066FF→#00A3FF", "White Bold", "24px", "Primary"],
                    ["Secondary", "rgba(30,58,95,0.6)", "White Bold", "20px", "None"],
                    ["Outline", "Transparent", "Cyan Bold", "20px", "Subtle"],
                    ["Ghost", "Transparent", "White 70%", "12px", "None"],
                    ["Danger", "Gradient: #FF3B30→#D32F2F", "White Bold", "20px", "Error"],
                    ["Success", "Gradient: #00FF7F→#00D68F", "Deep Blue", "20px", "Success"],
                ],
                registry,
            ),
            build_sub_header("Button Sizes", registry),
            build_table(
                ["SIZE", "HEIGHT", "PADDING X", "FONT SIZE", "USE CASE"],
                [
                    ["Small", "36px", "16px", "14px", "Inline actions"],
                    ["Medium", "44px", "20px", "16px", "Secondary actions"],
                    ["Large", "52px", "24px", "18px", "Primary CTAs"],
                    ["XLarge", "60px", "32px", "20px", "Hero buttons"],
                ],
                registry,
            ),
            build_sub_header("Button States", registry),
            build_table(
                ["STATE", "OPACITY", "SCALE", "GLOW", "CURSOR"],
                [
                    ["Default", "100%", "1.0", "100%", "pointer"],
                    ["Hover", "100%", "1.02", "150%", "pointer"],
                    ["Pressed", "90%", "0.98", "80%", "pointer"],
                    ["Disabled", "50%", "1.0", "0%", "not-allowed"],
                    ["Loading", "80%", "1.0", "Pulsing", "wait"],
                ],
                registry,
            ),
        ),
    )


def cards_and_inputs(registry: StyleRegistry) -> Section:
    return Section(
        title="Component Library: Cards & Inputs",
        nodes=(
            build_sub_header("8.2 Cards", registry),
            build_table(
                ["CARD TYPE", "RADIUS", "BACKGROUND", "BORDER", "PADDING"],
                [
                    ["Game Card", "24px", "Glass 60%", "Glow Blue 30%", "16px"],
                    ["Bet Slip Card", "32px", "Glass 70%", "Cyan 40%", "20px"],
                    ["Stats Card", "20px", "Glass 50%", "White 10%", "16px"],
                    ["Profile Card", "24px", "Glass 60%", "None", "20px"],
                    ["Prediction Card", "20px", "Glass 60%", "Status color", "16px"],
                    ["Feature Card", "28px", "Gradient", "None", "24px"],
                ],
                registry,
            ),
            build_sub_header("Card States", registry),
            build_table(
                ["STATE", "BORDER COLOR", "GLOW", "EFFECT"],
                [
                    ["Default", "rgba(0,163,255,0.3)", "None", "—"],
                    ["Hover", "rgba(0,212,255,0.5)", "Subtle Cyan", "Scale 1.01"],
                    ["Selected", "rgba(0,102,255,0.8)", "Primary", "Border 2px"],
                    ["Live", "rgba(255,65,108,0.5)", "Red Pulse", "Animated border"],
                    ["Won", "rgba(0,255,127,0.5)", "Success", "Green tint"],
                    ["Lost", "rgba(255,59,48,0.3)", "None", "Opacity 70%"],
                ],
                registry,
            ),
            build_sub_header("Game Card Layout", registry),
            build_code(GAME_CARD_LAYOUT, registry),
            build_sub_header("8.3 Input Fields", registry),
            build_table(
                ["PROPERTY", "DEFAULT", "FOCUS", "ERROR"],
                [
                    ["Background", "rgba(30,58,95,0.4)", "rgba(30,58,95,0.6)", "rgba(255,59,48,0.1)"],
                    ["Border", "1px White 10%", "2px #00A3FF", "2px #FF3B30"],
                    ["Border Radius", "12px", "12px", "12px"],
                    ["Text Color", "White 95%", "White 100%", "White 95%"],
                    ["Placeholder", "White 40%", "White 50%", "White 40%"],
                    ["Height", "52px", "52px", "52px"],
                ],
                registry,
            ),
            build_sub_header("Input Types", registry),
            build_table(
                ["TYPE", "ICON", "SPECIAL STYLING"],
                [
                    ["Text Input", "Left (optional)", "Standard"],
                    ["Password", "Right (toggle)", "Eye icon"],
                    ["Search", "Left (search)", "Pill radius (9999px)"],
                    ["Number/Stake", "Left (coin)", "Gold accent, larger text"],
                    ["Dropdown", "Right (chevron)", "Arrow indicator"],
                ],
                registry,
            ),
        ),
    )


def chips_and_sheets(registry: StyleRegistry) -> Section:
    return Section(
        title="Component Library: Chips & Sheets",
        nodes=(
            build_sub_header("8.4 Chips & Tags", registry),
            build_table(
                ["CHIP TYPE", "BACKGROUND", "TEXT", "RADIUS", "HEIGHT"],
                [
                    ["Sport Filter", "Glass 40%", "White 70%", "9999px", "36px"],
                    ["Sport (Active)", "Sport Color 80%", "White 100%", "9999px", "36px"],
                    ["Status Tag", "Status Color 20%", "Status Color", "8px", "24px"],
                    ["Odds Chip", "Glass 60%", "Cyan Bold", "12px", "40px"],
                    ["Odds (Selected)", "Primary Gradient", "White Bold", "12px", "40px"],
                ],
                registry,
            ),
            build_sub_header("8.5 Bottom Sheets & Modals", registry),
            build_table(
                ["PROPERTY", "BOTTOM SHEET", "MODAL", "POPUP"],
                [
                    ["Background", "Deep Blue solid", "Glass 80%", "Glass 70%"],
                    ["Border Radius", "24px (top)", "24px (all)", "20px (all)"],
                    ["Backdrop", "Black 50%", "Black 60%", "Black 40%"],
                    ["Max Height", "90% viewport", "80% viewport", "Auto"],
                    ["Animation", "Slide up 300ms", "Scale+fade 250ms", "Scale 200ms"],
                ],
                registry,
            ),
        ),
    )


def closing(registry: StyleRegistry) -> Section:
    return Section(
        title="Closing",
        nodes=(
            build_spacer(registry.size("space-cover-top").size_pt),
            build_title(DIVIDER, registry, size_ref="bullet", color_ref="accent", italic=False),
            build_title("HOTSTREAK", registry, space_before_pt=10),
            build_title("COMPREHENSIVE STYLE GUIDE", registry, size_ref="bullet", color_ref="glow", italic=False),
            build_title(
                "Blue Aura Theme • Liquid Glass • Round & Clean",
                registry,
                size_ref="label",
                color_ref="light-gray",
                space_before_pt=10,
            ),
            build_title(
                "Version 1.0",
                registry,
                size_ref="code",
                color_ref="light-gray",
                italic=False,
                space_before_pt=5,
            ),
        ),
    )


def build_style_guide_sections(registry: StyleRegistry) -> List[Section]:
    """Every section of the guide, in reading order."""
    chapters = (
        cover,
        table_of_contents,
        design_philosophy,
        color_system,
        typography,
        spacing,
        border_radius,
        liquid_glass,
        shadows,
        buttons,
        cards_and_inputs,
        chips_and_sheets,
        *SCREEN_CHAPTERS,
        *REFERENCE_CHAPTERS,
        closing,
    )
    return [chapter(registry) for chapter in chapters]
