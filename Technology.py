from constant import *

# node (nm) -> pnSizeRatio
TECH_TABLE = {
    HP: {
        130: 2.41,
        90: 2.45,
        65: 2.44,
        45: 2.41,
        32: 2.41,
        22: 2.0,
        14: 1.0,
        10: 1.0,
        7: 1.0,
    },
    LP: {
        130: 2.28,
        90: 2.44,
        65: 2.23,
        45: 2.28,
        32: 2.28,
        22: 2.0,
        14: 1.0,
        10: 1.0,
        7: 1.0,
    },
}


class Technology:
    def __init__(self):
        self.initialized = False

    def Initialize(self, featureSizeInNano, deviceRoadmap):
        if deviceRoadmap not in TECH_TABLE:
            raise ValueError(f"Unknown device roadmap: {deviceRoadmap}")
        if featureSizeInNano not in TECH_TABLE[deviceRoadmap]:
            raise ValueError(f"Unsupported technology node: {featureSizeInNano}nm")

        self.featureSizeInNano = featureSizeInNano
        self.featureSize = featureSizeInNano * 1e-9
        self.deviceRoadmap = deviceRoadmap
        self.pnSizeRatio = TECH_TABLE[deviceRoadmap][featureSizeInNano]
        self.initialized = True
