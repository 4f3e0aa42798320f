"""Per-screen styling chapters: the app tabs, bet slip, wallet, gamification and navigation."""
from __future__ import annotations

from docx_composer.builder.content_builders import (
    build_body,
    build_code,
    build_header,
    build_sub_header,
    build_table,
)
from docx_composer.model.document_model import Section
from docx_composer.model.style_model import StyleRegistry

PREDICTION_CARD_LAYOUT = [
    "┌─────────────────────────────────────────┐",
    "│ [Bar] │ Team A vs Team B      [Status]  │",
    "│       │ Your Pick: Team A ML +2.15      │",
    "│       │ Stake: 500  →  Payout: 1,075    │",
    "│       │ Mar 15, 2024              [···] │",
    "└─────────────────────────────────────────┘",
]

PROPERTY_VALUE = ["PROPERTY", "VALUE"]
PAGE_ELEMENTS = ["ELEMENT", "STYLING", "SPECIFICATIONS"]


def home_tab(registry: StyleRegistry) -> Section:
    return Section(
        title="Home Tab",
        nodes=(
            build_header("9. HOME TAB STYLING", registry),
            build_body(
                "The Home tab is the primary landing screen featuring featured games, daily bonus wheel, "
                "and personalized suggestions.",
                registry,
            ),
            build_sub_header("Page Elements", registry),
            build_table(
                PAGE_ELEMENTS,
                [
                    ["Page Background", "Deep Blue #0A1628", "Solid, no pattern"],
                    ["Header", "Transparent overlay", "Coin balance + profile icon"],
                    ["Welcome Section", "None (text only)", "Display Large, White 95%"],
                    ["Featured Carousel", "Horizontal scroll", "Card width: 300px, gap: 16px"],
                    ["Daily Spin Banner", "Gold gradient border", "Radius 24px, animated glow"],
                    ["Suggestions", "Standard cards", "Vertical list, 12px gap"],
                    ["Quick Picks", "Horizontal chips", "Pill chips, sport colors"],
                ],
                registry,
            ),
            build_sub_header("Featured Game Card", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Width", "300px (carousel item)"],
                    ["Height", "180px"],
                    ["Background", "Glass 60% + blur 20px"],
                    ["Border", "1px rgba(0,163,255,0.3)"],
                    ["Border Radius", "24px"],
                    ["Padding", "20px"],
                    ["Shadow", "0 8px 32px rgba(0,0,0,0.3)"],
                ],
                registry,
            ),
            build_sub_header("Daily Bonus Section", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Container BG", "Gold gradient at 10% opacity"],
                    ["Border", "2px solid rgba(255,215,0,0.5)"],
                    ["Border Radius", "24px"],
                    ["CTA Button", "Gold gradient, Deep Blue text"],
                    ["Icon", "Spin wheel emoji + glow"],
                    ["Text", "Loar Italic Bold, Gold color"],
                ],
                registry,
            ),
        ),
    )


def games_tab(registry: StyleRegistry) -> Section:
    return Section(
        title="Games Tab",
        nodes=(
            build_header("10. GAMES TAB STYLING", registry),
            build_body(
                "The Games tab displays all available matches with sport filtering and personalized recommendations.",
                registry,
            ),
            build_sub_header("Page Elements", registry),
            build_table(
                PAGE_ELEMENTS,
                [
                    ["Page Header", '"Games" title', "Headline Large, Italic Bold"],
                    ["Sport Filter Bar", "Horizontal scroll", "Pill chips, 8px gap, sticky"],
                    ["For You Section", "Highlighted header", "Cyan accent, star icon"],
                    ["Game List", "Vertical scroll", "12px gap between cards"],
                    ["Empty State", "Centered message", "Illustration + text + CTA"],
                    ["Loading State", "Shimmer effect", "3 placeholder cards"],
                ],
                registry,
            ),
            build_sub_header("Sport Filter Chips", registry),
            build_table(
                ["STATE", "BACKGROUND", "TEXT", "BORDER"],
                [
                    ["Default", "rgba(30,58,95,0.4)", "White 70%", "1px White 10%"],
                    ["Selected", "Sport Color 80%", "White 100%", "2px Sport Color"],
                    ["Hover", "rgba(30,58,95,0.6)", "White 85%", "1px White 20%"],
                ],
                registry,
            ),
            build_sub_header("Game Card (List View)", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Width", "100% - 32px (page margins)"],
                    ["Min Height", "140px"],
                    ["Background", "Glass 60%"],
                    ["Border", "1px rgba(0,163,255,0.25)"],
                    ["Border Radius", "24px"],
                    ["Padding", "16px"],
                    ["Team Logo Size", "40px × 40px, radius 8px"],
                    ["Odds Button", "60px × 40px, radius 12px"],
                ],
                registry,
            ),
            build_sub_header("Odds Button States", registry),
            build_table(
                ["STATE", "BACKGROUND", "TEXT", "EFFECT"],
                [
                    ["Default", "Glass 50%", "Cyan Bold", "None"],
                    ["Hover", "Glass 70%", "White Bold", "Subtle glow"],
                    ["Selected", "Primary Gradient", "White Bold", "Primary glow"],
                    ["Disabled", "Glass 30%", "White 40%", "None"],
                ],
                registry,
            ),
        ),
    )


def my_picks_tab(registry: StyleRegistry) -> Section:
    return Section(
        title="My Picks Tab",
        nodes=(
            build_header("11. MY PICKS TAB STYLING", registry),
            build_body("The My Picks tab shows the user's betting history with filtering by status.", registry),
            build_sub_header("Page Elements", registry),
            build_table(
                PAGE_ELEMENTS,
                [
                    ["Page Header", '"My Picks" title', "Headline Large, Italic Bold"],
                    ["Status Tabs", "Segmented control", "3 tabs: Pending, Won, Lost"],
                    ["Summary Stats", "3-column grid", "Total bets, Win rate, Profit"],
                    ["Prediction List", "Vertical scroll", "12px gap, grouped by date"],
                    ["Date Headers", "Section dividers", "Body Small, White 50%"],
                    ["Empty State", "Centered", '"No picks yet" + CTA'],
                ],
                registry,
            ),
            build_sub_header("Status Tab Styling", registry),
            build_table(
                ["TAB", "INACTIVE BG", "ACTIVE BG", "TEXT COLOR"],
                [
                    ["Pending", "Transparent", "rgba(0,163,255,0.2)", "Cyan"],
                    ["Won", "Transparent", "rgba(0,255,127,0.2)", "Success Green"],
                    ["Lost", "Transparent", "rgba(255,59,48,0.2)", "Error Red"],
                ],
                registry,
            ),
            build_sub_header("Prediction Card", registry),
            build_table(
                ["PROPERTY", "PENDING", "WON", "LOST"],
                [
                    ["Background", "Glass 60%", "Glass 60% + green", "Glass 40%"],
                    ["Border", "1px Cyan 30%", "1px Success 50%", "1px Error 30%"],
                    ["Left Accent", "None", "4px Success bar", "4px Error bar"],
                    ["Opacity", "100%", "100%", "70%"],
                    ["Badge BG", "Cyan 20%", "Success 20%", "Error 20%"],
                ],
                registry,
            ),
            build_sub_header("Prediction Card Layout", registry),
            build_code(PREDICTION_CARD_LAYOUT, registry),
        ),
    )


def live_tab(registry: StyleRegistry) -> Section:
    return Section(
        title="Live Tab",
        nodes=(
            build_header("12. LIVE TAB STYLING", registry),
            build_body("The Live tab displays real-time scores for games currently in progress.", registry),
            build_sub_header("Page Elements", registry),
            build_table(
                PAGE_ELEMENTS,
                [
                    ["Page Header", '"Live" + pulsing dot', "Headline Large + red circle"],
                    ["Sport Tabs", "Horizontal tabs", "Sport icons + names, scrollable"],
                    ["Live Game Cards", "Prominent styling", "Animated border, live glow"],
                    ["Score Display", "Large numerals", "48px, Loar Bold, tabular"],
                    ["Time/Period", "Badge style", "Red background, white text"],
                    ["Auto-Refresh", "Indicator", "Subtle spinning icon"],
                ],
                registry,
            ),
            build_sub_header("Live Game Card", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Glass 60%"],
                    ["Border", "2px animated gradient (Live Pulse)"],
                    ["Border Radius", "24px"],
                    ["Glow", "0 0 30px rgba(255,65,108,0.25)"],
                    ["Animation", "Border gradient rotation 3s"],
                    ["Padding", "20px"],
                ],
                registry,
            ),
            build_sub_header("Score Display", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Font Size", "48px"],
                    ["Font Weight", "600 (Loar Bold)"],
                    ["Color", "White 100%"],
                    ["Font Feature", "tabular-nums (monospace)"],
                    ["Alignment", "Center"],
                    ["Separator", '" - " in White 50%'],
                ],
                registry,
            ),
            build_sub_header("Period/Time Badge", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "rgba(255,65,108,0.8)"],
                    ["Text", "White Bold, 12px"],
                    ["Padding", "4px 12px"],
                    ["Border Radius", "9999px (pill)"],
                    ["Animation", "Subtle pulse every 2s"],
                ],
                registry,
            ),
        ),
    )


def profile_tab(registry: StyleRegistry) -> Section:
    return Section(
        title="Profile Tab",
        nodes=(
            build_header("13. PROFILE TAB STYLING", registry),
            build_body(
                "The Profile tab displays user statistics, XP progression, achievements, and settings.",
                registry,
            ),
            build_sub_header("Page Elements", registry),
            build_table(
                PAGE_ELEMENTS,
                [
                    ["Avatar", "Circular, 80px", "Border: 3px Primary gradient"],
                    ["Username", "Display Medium", "Loar Italic Bold, White"],
                    ["Level Badge", "Pill badge", "Gold gradient BG"],
                    ["XP Progress Bar", "Horizontal bar", "Gradient fill, animated"],
                    ["Stats Grid", "3-column grid", "Glass cards, 16px gap"],
                    ["Achievements", "Horizontal scroll", "Badge cards"],
                    ["Settings Links", "List items", "Chevron right, dividers"],
                ],
                registry,
            ),
            build_sub_header("XP Progress Bar", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Container BG", "rgba(30,58,95,0.4)"],
                    ["Container Height", "12px"],
                    ["Container Radius", "6px"],
                    ["Fill Gradient", "#0066FF → #00D4FF"],
                    ["Fill Animation", "Width 500ms ease-out"],
                    ["Glow Effect", "0 0 10px rgba(0,212,255,0.5)"],
                ],
                registry,
            ),
            build_sub_header("Stats Card", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Glass 50%"],
                    ["Border", "1px White 10%"],
                    ["Border Radius", "16px"],
                    ["Padding", "16px"],
                    ["Stat Value", "Headline Large, Cyan"],
                    ["Stat Label", "Body Small, White 60%"],
                ],
                registry,
            ),
            build_sub_header("Achievement Badge Rarity", registry),
            build_table(
                ["RARITY", "BORDER", "GLOW", "BG TINT"],
                [
                    ["Common", "#AAAAAA", "None", "Gray 10%"],
                    ["Rare", "#00A3FF", "Blue glow", "Blue 10%"],
                    ["Epic", "#9B59B6", "Purple glow", "Purple 10%"],
                    ["Legendary", "#FFD700", "Gold + particles", "Gold 15%"],
                ],
                registry,
            ),
        ),
    )


def bet_slip(registry: StyleRegistry) -> Section:
    return Section(
        title="Bet Slip",
        nodes=(
            build_header("14. BET SLIP STYLING", registry),
            build_sub_header("Bet Slip Container", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Type", "Bottom Sheet (full height modal)"],
                    ["Background", "Deep Blue #0A1628 solid"],
                    ["Border Radius", "32px (top corners only)"],
                    ["Handle Bar", "40px × 4px, White 30%, centered"],
                    ["Header Height", "60px"],
                    ["Padding", "24px horizontal, 16px vertical"],
                ],
                registry,
            ),
            build_sub_header("Bet Slip Item Card", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Glass 60%"],
                    ["Border", "1px rgba(0,163,255,0.3)"],
                    ["Border Radius", "20px"],
                    ["Padding", "16px"],
                    ["Delete Button", "Red ghost button, right"],
                    ["Odds Display", "Cyan Bold, 20px"],
                    ["Team Names", "White Bold, 16px"],
                ],
                registry,
            ),
            build_sub_header("Stake Input Field", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Glass 40%"],
                    ["Border", "2px rgba(255,215,0,0.5)"],
                    ["Border Radius", "16px"],
                    ["Height", "60px"],
                    ["Font Size", "24px, Loar Bold"],
                    ["Icon", "Coin icon, left, gold"],
                    ["Focus Border", "2px solid #FFD700"],
                ],
                registry,
            ),
            build_sub_header("Quick Stake Buttons", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Layout", "4 buttons, horizontal row"],
                    ["Values", "+100, +250, +500, MAX"],
                    ["Background", "Glass 50%"],
                    ["Border", "1px White 20%"],
                    ["Border Radius", "12px"],
                    ["Text", "Body Medium, White Bold"],
                ],
                registry,
            ),
            build_sub_header("Place Bet Button", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Gradient: #0066FF → #00A3FF"],
                    ["Text", '"PLACE BET" 20px Loar Bold White'],
                    ["Height", "60px"],
                    ["Border Radius", "24px"],
                    ["Glow", "0 0 30px rgba(0,102,255,0.4)"],
                    ["Disabled", "Gray gradient, no glow, 50%"],
                ],
                registry,
            ),
        ),
    )


def wallet(registry: StyleRegistry) -> Section:
    return Section(
        title="Wallet",
        nodes=(
            build_header("15. WALLET SCREEN STYLING", registry),
            build_sub_header("Wallet Header", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Deep Blue with subtle gradient"],
                    ["Balance Display", "64px, Italic Bold, Gold gradient"],
                    ["Coin Icon", "48px, animated subtle rotation"],
                    ["Glow Effect", "0 0 60px rgba(255,215,0,0.3)"],
                    ["Label", '"Your Balance" Body Medium, White 70%'],
                ],
                registry,
            ),
            build_sub_header("Daily Bonus Card", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Gold gradient at 10% opacity"],
                    ["Border", "2px dashed rgba(255,215,0,0.5)"],
                    ["Border Radius", "24px"],
                    ["Icon", "Gift/Spin emoji, 32px"],
                    ["CTA", '"Claim Bonus" Gold style'],
                    ["Timer", "Countdown, Body Small"],
                ],
                registry,
            ),
            build_sub_header("Transaction Types", registry),
            build_table(
                ["TYPE", "ICON", "AMOUNT COLOR", "PREFIX"],
                [
                    ["Bet Placed", "Arrow down", "Error Red", "-"],
                    ["Bet Won", "Trophy", "Success Green", "+"],
                    ["Bet Lost", "X mark", "White 50%", "—"],
                    ["Daily Bonus", "Gift", "Gold", "+"],
                    ["Spin Win", "Star", "Gold", "+"],
                    ["Level Up", "Arrow up", "Cyan", "+"],
                ],
                registry,
            ),
            build_sub_header("Transaction Item", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Transparent"],
                    ["Border Bottom", "1px White 5%"],
                    ["Padding", "16px 0"],
                    ["Icon Size", "24px, in colored circle"],
                    ["Description", "Body Medium, White 80%"],
                    ["Timestamp", "Body Small, White 50%"],
                    ["Amount", "Title Large, transaction color"],
                ],
                registry,
            ),
        ),
    )


def spin_wheel(registry: StyleRegistry) -> Section:
    return Section(
        title="Spin Wheel",
        nodes=(
            build_header("16. SPIN WHEEL & GAMIFICATION", registry),
            build_sub_header("Spin Wheel Modal", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Backdrop", "Black 80% + heavy blur"],
                    ["Container", "Centered, max-width 400px"],
                    ["Background", "Deep Blue solid"],
                    ["Border Radius", "32px"],
                    ["Padding", "32px"],
                ],
                registry,
            ),
            build_sub_header("Wheel Design", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Size", "300px × 300px"],
                    ["Segments", "8-12 prize segments"],
                    ["Border", "8px metallic gold gradient"],
                    ["Center Hub", "60px circle, gold, logo"],
                    ["Pointer", "Triangle at top, gold with glow"],
                    ["Lights", "24 LEDs around rim, animated"],
                ],
                registry,
            ),
            build_sub_header("Wheel Segment Colors", registry),
            build_table(
                ["PRIZE TIER", "BACKGROUND", "TEXT"],
                [
                    ["50 Coins", "#1A3A5C (Soft Blue)", "White"],
                    ["100 Coins", "#0066FF (Primary)", "White"],
                    ["250 Coins", "#00A3FF (Glow Blue)", "White"],
                    ["500 Coins", "#00D4FF (Cyan)", "Deep Blue"],
                    ["1000 Coins", "#00FF7F (Success)", "Deep Blue"],
                    ["JACKPOT", "#FFD700 (Gold)", "Deep Blue"],
                ],
                registry,
            ),
            build_sub_header("Spin Animation", registry),
            build_table(
                ["PHASE", "DURATION", "EASING", "ROTATIONS"],
                [
                    ["Acceleration", "1000ms", "ease-in", "1-2"],
                    ["Full Speed", "3000ms", "linear", "4-5"],
                    ["Deceleration", "1500ms", "ease-out", "1"],
                    ["Settle", "500ms", "ease-out", "Minor"],
                ],
                registry,
            ),
            build_sub_header("Win Celebration", registry),
            build_table(
                ["ELEMENT", "SPECIFICATION"],
                [
                    ["Confetti", "100+ particles, gold/cyan, 3s"],
                    ["Coin Rain", "20 coins falling, gold glow"],
                    ["Prize Display", "Scale in, 48px gold text"],
                    ["Sound", "Coin jingle + celebration"],
                    ["Haptics", "Heavy impact on win"],
                ],
                registry,
            ),
        ),
    )


def navigation(registry: StyleRegistry) -> Section:
    return Section(
        title="Navigation",
        nodes=(
            build_header("17. NAVIGATION & BOTTOM BAR", registry),
            build_sub_header("Bottom Navigation Bar", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Background", "Deep Blue #0A1628"],
                    ["Top Border", "1px rgba(255,255,255,0.1)"],
                    ["Height", "80px (including safe area)"],
                    ["Padding", "8px 16px 24px (safe area)"],
                    ["Items", "4 tabs + centered FAB"],
                ],
                registry,
            ),
            build_sub_header("Navigation Items", registry),
            build_table(
                ["STATE", "ICON COLOR", "LABEL", "BACKGROUND"],
                [
                    ["Inactive", "White 50%", "White 40%", "Transparent"],
                    ["Active", "Cyan 100%", "Cyan 100%", "Cyan 10% pill"],
                    ["Pressed", "Cyan 80%", "Cyan 80%", "Cyan 15%"],
                ],
                registry,
            ),
            build_sub_header("Floating Action Button", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Size", "56px × 56px"],
                    ["Position", "Centered, elevated above nav"],
                    ["Background", "Gradient: #0066FF → #00A3FF"],
                    ["Icon", "Bet slip icon, 24px, white"],
                    ["Border Radius", "28px (circle)"],
                    ["Shadow", "0 4px 20px rgba(0,102,255,0.4)"],
                    ["Badge", "Red circle, item count, top-right"],
                ],
                registry,
            ),
            build_sub_header("FAB Badge", registry),
            build_table(
                PROPERTY_VALUE,
                [
                    ["Size", "20px × 20px minimum"],
                    ["Position", "Top right, offset -4px"],
                    ["Background", "#FF3B30 (Error Red)"],
                    ["Text", "12px, White Bold, centered"],
                    ["Border", "2px Deep Blue"],
                    ["Border Radius", "9999px"],
                ],
                registry,
            ),
        ),
    )


SCREEN_CHAPTERS = (
    home_tab,
    games_tab,
    my_picks_tab,
    live_tab,
    profile_tab,
    bet_slip,
    wallet,
    spin_wheel,
    navigation,
)
