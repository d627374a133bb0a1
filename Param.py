from constant import *


class Param:
    """Process and device parameters shared by every circuit module.

    Defaults follow the NeuroSim RRAM configuration. The object is read-only
    once a simulation starts.
    """
    def __init__(self):
        self.technode = 32              # nm
        self.deviceroadmap = LP         # 1: HP, 2: LP

        self.numRowSubArray = 128
        self.resistanceOn = 6e3         # Ron resistance at Vr in the reported measurement data
        self.resistanceOff = 6e3*17     # Roff resistance at Vr in the reported measurement data
