"""
Fichier unique de définition des couleurs.
Tout changement ici se répercute sur l'ensemble du visualiseur.
"""

# =============================================================================
# 1. PALETTE BRUTE (Raw Definitions)
# =============================================================================
_WHITE      = (240, 240, 240)
_GREY_LIGHT = (171, 178, 191)
_CODE_BG    = (28, 31, 38)

_DEEP_BLUE  = (20, 25, 40)    # Fond principal
_SOFT_BLUE  = (50, 60, 80)    # Fond widgets
_NEON_BLUE  = (97, 175, 239)  # Info / Primary
_NEON_GREEN = (152, 195, 121) # Création
_NEON_GOLD  = (229, 192, 123) # Structure
_NEON_PURPLE= (198, 120, 221) # Comportement / Accent

# =============================================================================
# 2. COULEURS SÉMANTIQUES (Usage Contextuel)
# Utilisez UNIQUEMENT celles-ci dans le code des écrans/widgets
# =============================================================================

# --- GÉNÉRAL ---
BG_COLOR       = _DEEP_BLUE
TEXT_PRIMARY   = _WHITE
TEXT_SECONDARY = _GREY_LIGHT
ACCENT         = _NEON_PURPLE
CONSOLE_BG     = _CODE_BG
CONSOLE_TEXT   = _NEON_GREEN

# --- BOUTONS (États) ---
BTN_SURFACE  = _SOFT_BLUE
BTN_HOVER    = _NEON_BLUE
BTN_BORDER   = _WHITE

# --- BOUTONS (Types) ---
BTN_COMPARE  = (60, 90, 140)
BTN_SUCCESS  = (60, 100, 60)
BTN_DANGER   = (100, 50, 50)

# --- FAMILLES DE PATTERNS ---
FAMILY_COLORS = {
    "CREATION": _NEON_GREEN,
    "STRUCTURE": _NEON_GOLD,
    "COMPORTEMENT": _NEON_PURPLE,
}
