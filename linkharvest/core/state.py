from enum import Enum

class HarvestState(Enum):
    INIT = "INIT"
    EXTRACTING = "EXTRACTING"
    SCROLLING = "SCROLLING"
    WAITING_GROWTH = "WAITING_GROWTH"
    STALLED_FAIL = "STALLED_FAIL"
    DONE = "DONE"

# Allowed transitions of the harvest loop
TRANSITIONS = {
    HarvestState.INIT: {HarvestState.EXTRACTING, HarvestState.DONE},
    HarvestState.EXTRACTING: {HarvestState.SCROLLING, HarvestState.DONE},
    HarvestState.SCROLLING: {HarvestState.WAITING_GROWTH},
    HarvestState.WAITING_GROWTH: {HarvestState.EXTRACTING, HarvestState.STALLED_FAIL},
    HarvestState.STALLED_FAIL: set(),
    HarvestState.DONE: set(),
}

class TransitionError(Exception):
    pass
