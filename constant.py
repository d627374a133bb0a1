# Gate types
INV = 0

# Device roadmap
HP = 1      # high performance
LP = 2      # low power (LSTP)

# AreaModify options
NONE = 0
MAGIC = 1
OVERRIDE = 2

# Layout rules, in units of feature size
MIN_NMOS_SIZE = 2
MAX_TRANSISTOR_HEIGHT = 28
MIN_GAP_BET_P_AND_N_DIFFS = 3.5
MIN_GAP_BET_GATE_POLY = 2.8
MIN_POLY_EXT_DIFF = 1.0
MIN_GAP_BET_FIELD_POLY = 1.6
POLY_WIDTH = 1.0
