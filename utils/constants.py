# =========================
# HAND LANDMARK INDICES (MediaPipe Hands topology)
# =========================
NUM_LANDMARKS = 21

WRIST      = 0
THUMB_IP   = 3
THUMB_TIP  = 4
INDEX_MCP  = 5
INDEX_PIP  = 6
INDEX_TIP  = 8
MIDDLE_PIP = 10
MIDDLE_TIP = 12
RING_PIP   = 14
RING_TIP   = 16
PINKY_PIP  = 18
PINKY_TIP  = 20

# (tip, pip) pairs used for curl / extension checks
INDEX  = (INDEX_TIP, INDEX_PIP)
MIDDLE = (MIDDLE_TIP, MIDDLE_PIP)
RING   = (RING_TIP, RING_PIP)
PINKY  = (PINKY_TIP, PINKY_PIP)

# =========================
# GESTURE THRESHOLDS (normalised image units)
# =========================
PINCH_THRESHOLD      = 0.045
THUMB_TUCK_THRESHOLD = 0.08

# =========================
# COOLDOWNS (ms)
# =========================
PLACE_COOLDOWN_MS = 35
ERASE_COOLDOWN_MS = 50      # deliberately coarser than place
CLEAR_COOLDOWN_MS = 900     # destructive, needs a deliberate hold

# =========================
# GRID
# =========================
GRID_W  = 34
GRID_H  = 22
INSET_X = 0.18
INSET_Y = 0.14
