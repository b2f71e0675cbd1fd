"""
Design tokens (light slate).

Pages use the C_* aliases; keep long class strings here.
"""

STYLE_BG = "bg-slate-50 text-slate-900 min-h-screen"
STYLE_CONTAINER = "w-full max-w-2xl mx-auto px-6 py-6 gap-6"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_HEADING = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_PAGE_TITLE = STYLE_HEADING
STYLE_SECTION_TITLE = "text-sm font-semibold text-slate-900"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"
STYLE_TEXT_HINT = "text-xs text-slate-400"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_DANGER = (
    "bg-rose-600 text-white hover:bg-rose-700 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-rose-500/30"
)

STYLE_INPUT = "w-full text-sm"
STYLE_LIST_ROW = "w-full items-center justify-between border-b border-slate-100 py-2 gap-2 no-wrap"

C_BG = STYLE_BG
C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_SECTION_TITLE = STYLE_SECTION_TITLE
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_SEC = STYLE_BTN_SECONDARY
C_BTN_DANGER = STYLE_BTN_DANGER
C_INPUT = STYLE_INPUT
